"""Input contracts supplied by the trace collaborators.

Timelines:
- TraceTimestamps: absolute milliseconds on the trace clock
- LongTask / main-thread events: milliseconds relative to navigation start
- NetworkRequestRecord: seconds relative to navigation start
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from pydantic import Field, model_validator

from .intervals import CamelModel, TimeInterval


class NetworkRequestRecord(CamelModel):
    """One network request lifetime as captured by the network recorder."""

    url: str = ""
    start_time: float = Field(description="Request start (s since navigation start)")
    end_time: float = Field(description="Request end (s since navigation start)")
    scheme: str = Field(default="", description="URL scheme, e.g. https, data, ws")

    @model_validator(mode="before")
    @classmethod
    def derive_scheme(cls, data: Any) -> Any:
        """Fill ``scheme`` from ``parsedURL.scheme`` or the URL when not given."""
        if not isinstance(data, dict) or data.get("scheme"):
            return data
        data = dict(data)
        parsed = data.pop("parsedURL", None)
        if isinstance(parsed, dict) and parsed.get("scheme"):
            data["scheme"] = parsed["scheme"]
        else:
            data["scheme"] = urlsplit(data.get("url", "")).scheme
        return data


class LongTask(TimeInterval):
    """A main-thread task of at least 50ms, relative to navigation start."""


class TraceTimestamps(CamelModel):
    navigation_start: float
    first_meaningful_paint: float | None = None
    dom_content_loaded: float
    trace_end: float


class TraceOfTab(CamelModel):
    """The slice of the trace model this metric needs."""

    timestamps: TraceTimestamps


class AuditArtifacts(CamelModel):
    """Everything an audit run consumes, as serialized by the gatherer.

    Either ``long_tasks`` (already filtered and sorted) or the raw
    ``main_thread_events`` may be supplied.
    """

    trace_of_tab: TraceOfTab
    network_records: list[NetworkRequestRecord] = []
    long_tasks: list[LongTask] | None = None
    main_thread_events: list[TimeInterval] = []
