"""Unit tests for practice metrics."""
import pytest

from swim_practice_parser import difficulty_label, metrics_for, parse, summarize
from swim_practice_parser.models import PracticeMetrics


class TestDifficultyLabel:
    """Display bands for the 0-100 score."""

    @pytest.mark.parametrize("score,label", [
        (0, "Very Easy"),
        (19, "Very Easy"),
        (20, "Easy"),
        (39, "Easy"),
        (40, "Moderate"),
        (60, "Hard"),
        (79, "Hard"),
        (80, "Extreme"),
        (100, "Extreme"),
    ])
    def test_bands(self, score, label):
        assert difficulty_label(score) == label


class TestSummarize:
    """The numbers persisted with a saved practice."""

    def test_summarize_matches_parse(self, full_practice):
        practice = parse(full_practice)
        metrics = summarize(full_practice)

        assert metrics == PracticeMetrics(
            total_yardage=practice.total_yardage,
            estimated_time=practice.estimated_time,
            difficulty=practice.difficulty,
            difficulty_label="Very Easy",
        )

    def test_summarize_empty(self):
        metrics = summarize(None)

        assert metrics.total_yardage == 0
        assert metrics.estimated_time == 0
        assert metrics.difficulty == 0
        assert metrics.difficulty_label == "Very Easy"

    def test_metrics_for_hard_practice(self):
        metrics = metrics_for(parse("10x1000 free"))

        assert metrics.difficulty == 60
        assert metrics.difficulty_label == "Hard"

    def test_metrics_serialize(self, two_set_practice):
        data = summarize(two_set_practice).model_dump()
        assert data == {
            "total_yardage": 600,
            "estimated_time": 780,
            "difficulty": data["difficulty"],
            "difficulty_label": difficulty_label(data["difficulty"]),
        }
