"""Pydantic models for the consistently-interactive metric.

Data flow:
- Inputs: NetworkRequestRecord, LongTask, TraceOfTab (collected upstream)
- Intermediate: QuietPeriod sequences per domain (network, CPU)
- Matching: MatchResult on success, QuietWindowNotFound on failure
- Output: AuditResult with the score and diagnostic ExtendedInfo
"""

from .inputs import (
    AuditArtifacts,
    LongTask,
    NetworkRequestRecord,
    TraceOfTab,
    TraceTimestamps,
)
from .intervals import CamelModel, QuietPeriod, QuietPeriodSource, TimeInterval
from .results import (
    AuditMeta,
    AuditResult,
    Culprit,
    ExtendedInfo,
    MatchResult,
    QuietWindowNotFound,
)

__all__ = [
    # Intervals
    "CamelModel",
    "QuietPeriod",
    "QuietPeriodSource",
    "TimeInterval",
    # Inputs
    "AuditArtifacts",
    "LongTask",
    "NetworkRequestRecord",
    "TraceOfTab",
    "TraceTimestamps",
    # Results
    "AuditMeta",
    "AuditResult",
    "Culprit",
    "ExtendedInfo",
    "MatchResult",
    "QuietWindowNotFound",
]
