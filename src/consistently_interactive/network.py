"""Network quiet periods — windows where in-flight requests stay at or below the allowance.

Request lifetimes are flattened into start/end boundaries and swept in time
order while tracking concurrency. A quiet period opens the first time
concurrency drops to the allowance and closes when a request starts while
already at the allowance. The trace opens quiet at t=0.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from consistently_interactive.config import QuietWindowThresholds
from consistently_interactive.models import QuietPeriod, QuietPeriodSource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from consistently_interactive.models import NetworkRequestRecord, TraceTimestamps

logger = logging.getLogger(__name__)

# Requests on these schemes never hit the network.
IGNORED_SCHEMES = frozenset({"data", "ws"})


class _Boundary(NamedTuple):
    time: float
    is_start: bool


def _time_boundaries(records: Iterable[NetworkRequestRecord]) -> list[_Boundary]:
    """Convert record lifetimes (seconds) into boundaries on the ms timeline."""
    boundaries: list[_Boundary] = []
    for record in records:
        if record.scheme in IGNORED_SCHEMES:
            continue
        boundaries.append(_Boundary(record.start_time * 1000, True))
        boundaries.append(_Boundary(record.end_time * 1000, False))
    boundaries.sort(key=lambda b: b.time)
    return boundaries


def find_network_quiet_periods(
    records: Iterable[NetworkRequestRecord],
    timestamps: TraceTimestamps,
    thresholds: QuietWindowThresholds | None = None,
) -> list[QuietPeriod]:
    """Return network quiet periods in ascending start order.

    Args:
        records: Network request records, times in seconds since navigation start.
        timestamps: Trace timestamps; ``trace_end`` closes a trailing quiet period.
        thresholds: Supplies the allowed concurrency (default 2).

    Returns:
        Quiet periods. With no eligible records this is ``[0, trace_end]``.
        No trailing period is emitted when the last quiet start falls after
        ``trace_end``.
    """
    if thresholds is None:
        thresholds = QuietWindowThresholds()
    allowed = thresholds.allowed_concurrent_requests

    inflight = 0
    quiet_start: float | None = 0
    periods: list[QuietPeriod] = []

    for boundary in _time_boundaries(records):
        if boundary.is_start:
            # Leaving a quiet period
            if inflight == allowed and quiet_start is not None:
                periods.append(_period(quiet_start, boundary.time))
                quiet_start = None
            inflight += 1
        else:
            inflight -= 1
            # Entering (or staying in) a quiet period; keep the earliest start
            if inflight <= allowed:
                if quiet_start is None or boundary.time < quiet_start:
                    quiet_start = boundary.time

    # Requests still in flight at trace end leave no trailing window
    if quiet_start is not None and quiet_start <= timestamps.trace_end:
        periods.append(_period(quiet_start, timestamps.trace_end))

    logger.debug("Found %d network quiet periods", len(periods))
    return periods


def _period(start: float, end: float) -> QuietPeriod:
    return QuietPeriod(start=start, end=end, source=QuietPeriodSource.NETWORK)
