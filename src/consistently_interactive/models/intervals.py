"""Interval models — time spans on the trace timeline and the quiet periods built from them."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for models exchanged with trace collaborators (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuietPeriodSource(StrEnum):
    """Which monitored resource a quiet period was derived from."""

    NETWORK = "network"
    CPU = "cpu"


class TimeInterval(CamelModel):
    """A bounded span in milliseconds. ``end`` is never before ``start``."""

    model_config = ConfigDict(frozen=True)

    start: float = Field(description="Start of the span (ms)")
    end: float = Field(description="End of the span (ms)")

    @model_validator(mode="after")
    def validate_ordering(self) -> TimeInterval:
        if self.end < self.start:
            raise ValueError(f"interval end ({self.end}) precedes start ({self.start})")
        return self

    @property
    def duration(self) -> float:
        return self.end - self.start


class QuietPeriod(TimeInterval):
    """A window where network concurrency or CPU activity stayed under its threshold."""

    source: QuietPeriodSource
