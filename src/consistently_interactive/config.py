"""Configuration models for the consistently-interactive metric.

Quiet-window thresholds decide which spans count as quiet; scoring parameters
shape the log-normal curve that turns elapsed time into a 0-100 score.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings

# Parameters (in ms) for log-normal CDF scoring.
SCORING_POINT_OF_DIMINISHING_RETURNS = 1700
SCORING_MEDIAN = 10000
SCORING_TARGET = 5000

REQUIRED_QUIET_WINDOW = 5000
ALLOWED_CONCURRENT_REQUESTS = 2
LONG_TASK_THRESHOLD_MS = 50


class QuietWindowThresholds(BaseModel):
    """Thresholds that decide when network and CPU count as quiet."""

    required_quiet_window_ms: float = Field(
        default=REQUIRED_QUIET_WINDOW,
        gt=0,
        description="Both domains must stay quiet at least this long",
    )
    allowed_concurrent_requests: int = Field(
        default=ALLOWED_CONCURRENT_REQUESTS,
        ge=0,
        description="Network is quiet at or below this many in-flight requests",
    )
    long_task_threshold_ms: float = Field(
        default=LONG_TASK_THRESHOLD_MS,
        ge=0,
        description="Main-thread events at least this long are CPU-busy",
    )


class ScoringParameters(BaseModel):
    """Log-normal curve parameters."""

    median_ms: float = Field(
        default=SCORING_MEDIAN,
        gt=0,
        description="Elapsed time that scores 50",
    )
    point_of_diminishing_returns_ms: float = Field(
        default=SCORING_POINT_OF_DIMINISHING_RETURNS,
        gt=0,
        description="Below this, further improvements barely move the score",
    )
    target_ms: float = Field(
        default=SCORING_TARGET,
        gt=0,
        description="Optimal value reported alongside the score",
    )

    @model_validator(mode="after")
    def validate_curve(self) -> ScoringParameters:
        if self.point_of_diminishing_returns_ms >= self.median_ms:
            raise ValueError(
                f"point_of_diminishing_returns_ms ({self.point_of_diminishing_returns_ms}) "
                f"must be below median_ms ({self.median_ms})"
            )
        return self


class InteractivityConfig(BaseSettings):
    """Main configuration, overridable through CONSISTENTLY_INTERACTIVE_* env vars."""

    thresholds: QuietWindowThresholds = Field(default_factory=QuietWindowThresholds)
    scoring: ScoringParameters = Field(default_factory=ScoringParameters)

    log_level: str = Field(default="WARNING", description="Log level used by the CLI")

    model_config = {"env_prefix": "CONSISTENTLY_INTERACTIVE_", "env_nested_delimiter": "__"}
