"""Consistently Interactive — time until network and CPU stay quiet after first meaningful paint.

Key Principle: deterministic interval algebra over an already-collected trace.
- Network quiet periods: at most 2 requests in flight
- CPU quiet periods: gaps between main-thread long tasks
- Interactive point: earliest pair quiet together for 5s after FMP
- Score: log-normal complementary CDF (median 10s)
"""

from consistently_interactive.audit import ConsistentlyInteractiveAudit
from consistently_interactive.config import (
    ALLOWED_CONCURRENT_REQUESTS,
    REQUIRED_QUIET_WINDOW,
    SCORING_MEDIAN,
    SCORING_POINT_OF_DIMINISHING_RETURNS,
    InteractivityConfig,
    QuietWindowThresholds,
    ScoringParameters,
)
from consistently_interactive.cpu import find_cpu_quiet_periods, select_long_tasks
from consistently_interactive.errors import (
    ArtifactLoadError,
    AuditError,
    MissingPaintMarkerError,
    NoMutualQuietWindowError,
)
from consistently_interactive.matcher import find_overlapping_quiet_periods
from consistently_interactive.network import find_network_quiet_periods
from consistently_interactive.scoring import LogNormalDistribution, score_elapsed_time

__all__ = [
    "ALLOWED_CONCURRENT_REQUESTS",
    "REQUIRED_QUIET_WINDOW",
    "SCORING_MEDIAN",
    "SCORING_POINT_OF_DIMINISHING_RETURNS",
    "ArtifactLoadError",
    "AuditError",
    "ConsistentlyInteractiveAudit",
    "InteractivityConfig",
    "LogNormalDistribution",
    "MissingPaintMarkerError",
    "NoMutualQuietWindowError",
    "QuietWindowThresholds",
    "ScoringParameters",
    "find_cpu_quiet_periods",
    "find_network_quiet_periods",
    "find_overlapping_quiet_periods",
    "score_elapsed_time",
    "select_long_tasks",
]
