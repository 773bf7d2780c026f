"""Consistently Interactive audit — composes extractors, matcher and scorer.

Pipeline:
1. Require a first meaningful paint marker
2. Extract network and CPU quiet periods (independent of each other)
3. Match the earliest mutually quiet pair after FMP
4. Score elapsed time from navigation start to the interactive point
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from consistently_interactive.config import InteractivityConfig
from consistently_interactive.cpu import find_cpu_quiet_periods, select_long_tasks
from consistently_interactive.errors import MissingPaintMarkerError, NoMutualQuietWindowError
from consistently_interactive.matcher import find_overlapping_quiet_periods
from consistently_interactive.models import (
    AuditMeta,
    AuditResult,
    ExtendedInfo,
    QuietWindowNotFound,
)
from consistently_interactive.network import find_network_quiet_periods
from consistently_interactive.scoring import (
    LogNormalDistribution,
    format_display_value,
    format_optimal_value,
    interactive_timestamp,
    score_elapsed_time,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from consistently_interactive.models import (
        AuditArtifacts,
        LongTask,
        MatchResult,
        NetworkRequestRecord,
        TraceOfTab,
    )

logger = logging.getLogger(__name__)


class ConsistentlyInteractiveAudit:
    """Computes the point where network and CPU both stay quiet after first meaningful paint."""

    def __init__(self, config: InteractivityConfig | None = None) -> None:
        self.config = config or InteractivityConfig()
        self.distribution = LogNormalDistribution.from_parameters(self.config.scoring)

    @property
    def meta(self) -> AuditMeta:
        return AuditMeta(
            category="Performance",
            name="consistently-interactive",
            description="Consistently Interactive (beta)",
            help_text=(
                "The point at which most network resources have finished loading and the "
                "CPU is idle for a prolonged period."
            ),
            optimal_value=format_optimal_value(self.config.scoring.target_ms),
            scoring_mode="numeric",
            required_artifacts=["traces", "networkRecords"],
        )

    def find_quiet_periods(
        self,
        trace_of_tab: TraceOfTab,
        long_tasks: Sequence[LongTask],
        network_records: Sequence[NetworkRequestRecord],
    ) -> MatchResult | QuietWindowNotFound:
        """Run both extractors and the matcher without scoring."""
        timestamps = trace_of_tab.timestamps
        if not timestamps.first_meaningful_paint:
            raise MissingPaintMarkerError()

        thresholds = self.config.thresholds
        network_periods = find_network_quiet_periods(network_records, timestamps, thresholds)
        cpu_periods = find_cpu_quiet_periods(long_tasks, timestamps)
        return find_overlapping_quiet_periods(
            cpu_periods,
            network_periods,
            timestamps.first_meaningful_paint,
            thresholds,
        )

    def audit(
        self,
        trace_of_tab: TraceOfTab,
        long_tasks: Sequence[LongTask],
        network_records: Sequence[NetworkRequestRecord],
    ) -> AuditResult:
        """Compute the consistently-interactive result.

        Raises:
            MissingPaintMarkerError: The trace has no first meaningful paint.
            NoMutualQuietWindowError: Network and CPU never quieted together.
        """
        quiet_period_info = self.find_quiet_periods(trace_of_tab, long_tasks, network_records)
        if isinstance(quiet_period_info, QuietWindowNotFound):
            logger.warning("Consistently interactive not reached: %s", quiet_period_info.message)
            raise NoMutualQuietWindowError(quiet_period_info)

        timestamps = trace_of_tab.timestamps
        timestamp = interactive_timestamp(quiet_period_info.cpu_quiet_period, timestamps)
        time_in_ms = timestamp - timestamps.navigation_start
        score = score_elapsed_time(time_in_ms, self.distribution)

        logger.info("Consistently interactive at %.0fms (score %d)", time_in_ms, score)
        return AuditResult(
            score=score,
            raw_value=time_in_ms,
            display_value=format_display_value(time_in_ms),
            optimal_value=self.meta.optimal_value,
            extended_info=ExtendedInfo(
                **quiet_period_info.model_dump(),
                timestamp=timestamp,
                time_in_ms=time_in_ms,
            ),
        )

    def audit_artifacts(self, artifacts: AuditArtifacts) -> AuditResult:
        """Audit a gathered artifact bundle, selecting long tasks from raw events if needed."""
        return self.audit(
            artifacts.trace_of_tab,
            self.long_tasks_for(artifacts),
            artifacts.network_records,
        )

    def long_tasks_for(self, artifacts: AuditArtifacts) -> list[LongTask]:
        if artifacts.long_tasks is not None:
            return list(artifacts.long_tasks)
        return select_long_tasks(artifacts.main_thread_events, self.config.thresholds)
