"""Tests for configuration defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from consistently_interactive.config import (
    ALLOWED_CONCURRENT_REQUESTS,
    REQUIRED_QUIET_WINDOW,
    SCORING_MEDIAN,
    SCORING_POINT_OF_DIMINISHING_RETURNS,
    InteractivityConfig,
    ScoringParameters,
)
from consistently_interactive.scoring import LogNormalDistribution


def test_defaults_match_constants():
    config = InteractivityConfig()
    assert config.thresholds.required_quiet_window_ms == REQUIRED_QUIET_WINDOW == 5000
    assert config.thresholds.allowed_concurrent_requests == ALLOWED_CONCURRENT_REQUESTS == 2
    assert config.thresholds.long_task_threshold_ms == 50
    assert config.scoring.median_ms == SCORING_MEDIAN == 10000
    assert config.scoring.point_of_diminishing_returns_ms == 1700


def test_env_overrides_nested_values(monkeypatch):
    monkeypatch.setenv("CONSISTENTLY_INTERACTIVE_THRESHOLDS__ALLOWED_CONCURRENT_REQUESTS", "4")
    monkeypatch.setenv("CONSISTENTLY_INTERACTIVE_SCORING__MEDIAN_MS", "8000")
    config = InteractivityConfig()
    assert config.thresholds.allowed_concurrent_requests == 4
    assert config.scoring.median_ms == 8000
    assert config.thresholds.required_quiet_window_ms == REQUIRED_QUIET_WINDOW


def test_distribution_shape():
    distribution = LogNormalDistribution(SCORING_MEDIAN, SCORING_POINT_OF_DIMINISHING_RETURNS)
    assert abs(distribution.shape - 0.7862) < 1e-3
    assert distribution.complementary_percentile(1000) > 0.99
    assert distribution.complementary_percentile(30000) < 0.1


@pytest.mark.parametrize("point_of_diminishing_returns_ms", [10000, 12000])
def test_point_of_diminishing_returns_must_be_below_median(point_of_diminishing_returns_ms):
    with pytest.raises(ValidationError, match="must be below median_ms"):
        ScoringParameters(
            median_ms=10000, point_of_diminishing_returns_ms=point_of_diminishing_returns_ms
        )


def test_env_cannot_invert_scoring_curve(monkeypatch):
    monkeypatch.setenv("CONSISTENTLY_INTERACTIVE_SCORING__MEDIAN_MS", "1000")
    monkeypatch.setenv("CONSISTENTLY_INTERACTIVE_SCORING__POINT_OF_DIMINISHING_RETURNS_MS", "5000")
    with pytest.raises(ValidationError, match="must be below median_ms"):
        InteractivityConfig()


def test_valid_custom_curve_builds_distribution():
    params = ScoringParameters(median_ms=4000, point_of_diminishing_returns_ms=1000)
    distribution = LogNormalDistribution.from_parameters(params)
    assert distribution.shape > 0
    assert abs(distribution.complementary_percentile(4000) - 0.5) < 1e-9
