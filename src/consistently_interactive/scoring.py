"""Log-normal scoring for time-to-interactive.

The curve is a log-normal complementary CDF: elapsed time at the median
scores 50, times well under the point of diminishing returns score close to
100, and long delays decay smoothly toward 0.
"""

from __future__ import annotations

import math
from statistics import NormalDist
from typing import TYPE_CHECKING

from consistently_interactive.config import ScoringParameters

if TYPE_CHECKING:
    from consistently_interactive.models import QuietPeriod, TraceTimestamps

_STANDARD_NORMAL = NormalDist()


class LogNormalDistribution:
    """Log-normal distribution parameterized by its median and falloff point."""

    def __init__(self, median: float, point_of_diminishing_returns: float) -> None:
        self.median = median
        self.point_of_diminishing_returns = point_of_diminishing_returns
        self.location = math.log(median)
        # The falloff point is the smaller positive root of the third
        # derivative of the log-normal CDF; solve for the shape from it.
        log_ratio = math.log(point_of_diminishing_returns / median)
        self.shape = math.sqrt(1 - 3 * log_ratio - math.sqrt((log_ratio - 3) ** 2 - 8)) / 2

    @classmethod
    def from_parameters(cls, params: ScoringParameters) -> LogNormalDistribution:
        return cls(params.median_ms, params.point_of_diminishing_returns_ms)

    def complementary_percentile(self, x: float) -> float:
        """Probability that a sample exceeds ``x``. 1.0 for non-positive ``x``."""
        if x <= 0:
            return 1.0
        standardized = (math.log(x) - self.location) / self.shape
        return 1 - _STANDARD_NORMAL.cdf(standardized)


DEFAULT_DISTRIBUTION = LogNormalDistribution.from_parameters(ScoringParameters())


def score_elapsed_time(
    time_in_ms: float,
    distribution: LogNormalDistribution = DEFAULT_DISTRIBUTION,
) -> int:
    """Map elapsed time to an integer score in [0, 100]."""
    score = 100 * distribution.complementary_percentile(time_in_ms)
    score = min(100.0, max(0.0, score))
    return _round_half_up(score)


def interactive_timestamp(cpu_quiet_period: QuietPeriod, timestamps: TraceTimestamps) -> float:
    """The interactive point never precedes first meaningful paint or DOMContentLoaded."""
    candidates = [cpu_quiet_period.start, timestamps.dom_content_loaded]
    if timestamps.first_meaningful_paint is not None:
        candidates.append(timestamps.first_meaningful_paint)
    return max(candidates)


def format_display_value(time_in_ms: float) -> str:
    """Render elapsed time rounded to the nearest 10ms, e.g. ``12,350ms``."""
    rounded = _round_half_up(time_in_ms / 10) * 10
    return f"{rounded:,}ms"


def format_optimal_value(target_ms: float) -> str:
    return f"{_round_half_up(target_ms):,}ms"


def _round_half_up(value: float) -> int:
    """Round halves toward positive infinity; ``round`` would round them to even."""
    return math.floor(value + 0.5)
