"""Property tests for the log-normal interactivity score."""

from hypothesis import given, settings
from hypothesis import strategies as st

from consistently_interactive.config import SCORING_MEDIAN
from consistently_interactive.scoring import DEFAULT_DISTRIBUTION, score_elapsed_time

elapsed_times = st.floats(min_value=-1e6, max_value=1e9, allow_nan=False, allow_infinity=False)


@given(elapsed=elapsed_times)
@settings(max_examples=500)
def test_score_is_bounded(elapsed: float):
    """Property: Score is always an integer in [0, 100]."""
    score = score_elapsed_time(elapsed)
    assert isinstance(score, int)
    assert 0 <= score <= 100


@given(a=elapsed_times, b=elapsed_times)
@settings(max_examples=300)
def test_score_is_monotonic(a: float, b: float):
    """Property: Becoming interactive later never scores higher."""
    early, late = sorted((a, b))
    assert score_elapsed_time(early) >= score_elapsed_time(late)


def test_median_scores_fifty():
    assert DEFAULT_DISTRIBUTION.complementary_percentile(SCORING_MEDIAN) == 0.5
    assert score_elapsed_time(SCORING_MEDIAN) == 50


def test_zero_elapsed_scores_hundred():
    assert score_elapsed_time(0) == 100


def test_long_delay_scores_zero():
    assert score_elapsed_time(10_000_000) == 0
