"""Fatal audit errors. None of these are retryable: the trace cannot support the metric."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from consistently_interactive.models import QuietWindowNotFound


class AuditError(Exception):
    """Base class for errors that abort the consistently-interactive audit."""


class MissingPaintMarkerError(AuditError):
    def __init__(self) -> None:
        super().__init__("No firstMeaningfulPaint found in trace.")


class NoMutualQuietWindowError(AuditError):
    """Raised when no CPU/network pair stays quiet together for the required window."""

    def __init__(self, failure: QuietWindowNotFound) -> None:
        self.failure = failure
        self.culprit = failure.culprit
        super().__init__(failure.message)


class ArtifactLoadError(AuditError):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Could not load artifacts from {source}: {reason}")
