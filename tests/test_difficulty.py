"""Unit tests for the difficulty scoring service."""
import pytest

from swim_practice_parser import parse
from swim_practice_parser.services.difficulty import (
    intensity_score,
    interval_score,
    interval_tightness,
    reference_interval,
    score_difficulty,
    yardage_score,
)


class TestYardageComponent:
    """Linear ramp capped at 60."""

    def test_linear(self):
        assert yardage_score(0) == 0
        assert yardage_score(5000) == pytest.approx(30.0)

    def test_saturates_at_ten_thousand(self):
        assert yardage_score(10000) == pytest.approx(60.0)
        assert yardage_score(25000) == 60.0


class TestIntervalComponent:
    """Send-off tightness against the moderate reference table."""

    def test_reference_lookup(self):
        assert reference_interval("Free", 100) == 75
        assert reference_interval("Breast", 200) == 230
        assert reference_interval("Drill", 100) == 75  # non-competitive strokes use Free
        assert reference_interval("IM", 50) is None
        assert reference_interval("Free", 75) is None

    def test_tightness_bounds(self):
        assert interval_tightness("Free", 100, 50) == 1.0  # ratio 1.5
        assert interval_tightness("Free", 100, 120) == 0.0  # ratio 0.625
        assert interval_tightness("Free", 100, 75) == pytest.approx(0.2 / 0.7)

    def test_untabled_pair_scores_zero(self):
        assert interval_tightness("IM", 50, 20) == 0.0

    def test_score_is_yardage_weighted(self):
        # 400 yds at full tightness, 400 yds at zero
        practice = parse("4x100 free 0:50\n4x100 free 2:00")
        assert interval_score(practice) == pytest.approx(12.5)

    def test_multiplier_weights_the_set(self):
        practice = parse("3x\n4x100 free 0:50\n\n4x100 free 2:00")
        # 1200 tight yards vs 400 easy yards
        assert interval_score(practice) == pytest.approx(25 * 1200 / 1600)

    def test_no_intervals(self):
        assert interval_score(parse("4x100 free")) == 0.0


class TestIntensityComponent:
    """Keyword tiers in the raw text."""

    def test_high_tier_capped_at_three(self):
        assert intensity_score("fast") == 3.0
        assert intensity_score("sprint sprint sprint sprint") == 9.0

    def test_gap_tolerant_phrases(self):
        assert intensity_score("all   out") == 3.0
        # race pace hits the high tier and the medium "pace" keyword
        assert intensity_score("race pace") == 4.5

    def test_medium_tier_capped_at_two(self):
        assert intensity_score("build") == 1.5
        assert intensity_score("build tempo threshold") == 3.0
        assert intensity_score("neg split") == 1.5

    def test_format_tier_is_presence_only(self):
        assert intensity_score("pyramid") == 3.0
        assert intensity_score("ladder pyramid broken") == 3.0
        assert intensity_score("negative split") == 3.0

    def test_case_insensitive(self):
        assert intensity_score("SPRINT") == 3.0

    def test_capped_at_fifteen(self):
        assert intensity_score("sprint max fast, tempo build, ladder, all out") == 15.0


class TestScoreDifficulty:
    """Composite score."""

    def test_empty(self):
        assert parse("").difficulty == 0

    def test_yardage_only(self):
        assert parse("10x1000 free").difficulty == 60

    def test_tight_intervals(self):
        # 2.4 (yardage) + 25 (interval)
        assert parse("4x100 free 0:50").difficulty == 27

    def test_maximum(self):
        text = "10x1000 free\n20x100 free 0:50 sprint max fast\npyramid tempo build"
        assert parse(text).difficulty == 100

    def test_always_in_range(self):
        text = "sprint " * 500 + "\n100x1000 free 0:10\n" + "ladder " * 50
        practice = parse(text)
        assert 0 <= practice.difficulty <= 100
        assert score_difficulty(practice, text) == practice.difficulty

    def test_full_practice(self, full_practice):
        assert parse(full_practice).difficulty == 18
