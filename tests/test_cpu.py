"""Unit tests for CPU quiet-period extraction and long-task selection."""

from consistently_interactive.config import QuietWindowThresholds
from consistently_interactive.cpu import find_cpu_quiet_periods, select_long_tasks
from consistently_interactive.models import (
    LongTask,
    QuietPeriodSource,
    TimeInterval,
    TraceTimestamps,
)


def _timestamps(navigation_start=0, trace_end=20000):
    return TraceTimestamps(
        navigation_start=navigation_start,
        first_meaningful_paint=navigation_start + 1000,
        dom_content_loaded=navigation_start,
        trace_end=trace_end,
    )


def _spans(periods):
    return [(p.start, p.end) for p in periods]


class TestFindCpuQuietPeriods:
    def test_no_tasks_is_whole_trace(self):
        assert _spans(find_cpu_quiet_periods([], _timestamps())) == [(0, 20000)]

    def test_single_task(self):
        tasks = [LongTask(start=1000, end=1200)]
        assert _spans(find_cpu_quiet_periods(tasks, _timestamps())) == [
            (0, 1200),
            (1200, 20000),
        ]

    def test_gaps_between_tasks(self):
        tasks = [
            LongTask(start=1000, end=1200),
            LongTask(start=3000, end=3500),
            LongTask(start=9000, end=9100),
        ]
        assert _spans(find_cpu_quiet_periods(tasks, _timestamps())) == [
            (0, 1200),
            (1200, 3000),
            (3500, 9000),
            (9100, 20000),
        ]

    def test_tasks_are_shifted_by_navigation_start(self):
        tasks = [LongTask(start=1000, end=1200), LongTask(start=2000, end=2100)]
        periods = find_cpu_quiet_periods(tasks, _timestamps(navigation_start=500, trace_end=30000))
        assert _spans(periods) == [(0, 1700), (1700, 2500), (2600, 30000)]

    def test_task_outliving_trace_leaves_no_trailing_window(self):
        tasks = [LongTask(start=19000, end=21000)]
        assert _spans(find_cpu_quiet_periods(tasks, _timestamps())) == [(0, 21000)]

    def test_windows_before_an_overrunning_task_are_kept(self):
        tasks = [LongTask(start=1000, end=1200), LongTask(start=19000, end=21000)]
        assert _spans(find_cpu_quiet_periods(tasks, _timestamps())) == [
            (0, 1200),
            (1200, 19000),
        ]

    def test_overrun_is_measured_after_navigation_start_shift(self):
        tasks = [LongTask(start=1000, end=19800)]
        periods = find_cpu_quiet_periods(tasks, _timestamps(navigation_start=500))
        assert _spans(periods) == [(0, 20300)]

    def test_periods_are_tagged_cpu(self):
        periods = find_cpu_quiet_periods([LongTask(start=10, end=100)], _timestamps())
        assert all(p.source == QuietPeriodSource.CPU for p in periods)


class TestSelectLongTasks:
    def test_drops_short_events(self):
        events = [TimeInterval(start=0, end=49), TimeInterval(start=100, end=150)]
        assert select_long_tasks(events) == [LongTask(start=100, end=150)]

    def test_sorts_by_start(self):
        events = [TimeInterval(start=500, end=600), TimeInterval(start=100, end=200)]
        assert [t.start for t in select_long_tasks(events)] == [100, 500]

    def test_threshold_is_configurable(self):
        events = [TimeInterval(start=0, end=60), TimeInterval(start=100, end=300)]
        thresholds = QuietWindowThresholds(long_task_threshold_ms=100)
        assert select_long_tasks(events, thresholds) == [LongTask(start=100, end=300)]
