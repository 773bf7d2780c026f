"""CPU quiet periods — the idle gaps around main-thread long tasks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from consistently_interactive.config import QuietWindowThresholds
from consistently_interactive.models import LongTask, QuietPeriod, QuietPeriodSource

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from consistently_interactive.models import TimeInterval, TraceTimestamps

logger = logging.getLogger(__name__)


def select_long_tasks(
    events: Iterable[TimeInterval],
    thresholds: QuietWindowThresholds | None = None,
) -> list[LongTask]:
    """Keep main-thread top-level events long enough to block input, ordered by start."""
    if thresholds is None:
        thresholds = QuietWindowThresholds()
    tasks = [
        LongTask(start=event.start, end=event.end)
        for event in events
        if event.end - event.start >= thresholds.long_task_threshold_ms
    ]
    tasks.sort(key=lambda t: t.start)
    return tasks


def find_cpu_quiet_periods(
    long_tasks: Sequence[LongTask],
    timestamps: TraceTimestamps,
) -> list[QuietPeriod]:
    """Return the CPU quiet periods between long tasks, in task order.

    Long tasks are relative to navigation start and are shifted onto the
    absolute trace timeline. The leading window runs from 0 to the *end* of
    the first task; scoring is calibrated against that boundary. A task still
    running at ``trace_end`` leaves no trailing window.
    """
    nav_start = timestamps.navigation_start
    trace_end = timestamps.trace_end

    if not long_tasks:
        return [_period(0, trace_end)]

    periods = [_period(0, long_tasks[0].end + nav_start)]
    for task, next_task in zip(long_tasks, long_tasks[1:], strict=False):
        periods.append(_period(task.end + nav_start, next_task.start + nav_start))
    last_end = long_tasks[-1].end + nav_start
    if last_end <= trace_end:
        periods.append(_period(last_end, trace_end))

    logger.debug("Found %d CPU quiet periods around %d long tasks", len(periods), len(long_tasks))
    return periods


def _period(start: float, end: float) -> QuietPeriod:
    return QuietPeriod(start=start, end=end, source=QuietPeriodSource.CPU)
