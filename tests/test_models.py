"""Unit tests for data models."""
import pytest
from pydantic import ValidationError

from swim_practice_parser import parse
from swim_practice_parser.models import Comment, Exercise, ParsedPractice, Rest, SwimSet


class TestModels:
    """Test cases for data models."""

    def test_exercise_defaults(self):
        exercise = Exercise(distance=50, total_yardage=50, estimated_time=38)

        assert exercise.type == "exercise"
        assert exercise.reps == 1
        assert exercise.stroke == "Free"
        assert exercise.specifications is None
        assert exercise.pace == ""
        assert exercise.interval == 0

    def test_rest_default_duration(self):
        assert Rest().duration == 60

    def test_models_are_frozen(self):
        rest = Rest(duration=30)
        with pytest.raises(ValidationError):
            rest.duration = 45

    def test_set_requires_an_item(self):
        with pytest.raises(ValidationError):
            SwimSet(multiplier=2, items=[])

    def test_set_multiplier_must_be_positive(self):
        with pytest.raises(ValidationError):
            SwimSet(multiplier=0, items=[Comment(text="kick on back")])

    def test_set_totals_apply_multiplier(self):
        swim_set = SwimSet(multiplier=3, items=[Rest(duration=30)], yardage=400, estimated_time=540)

        assert swim_set.total_yardage == 1200
        assert swim_set.total_time == 1620

    def test_items_dispatch_on_type_tag(self):
        swim_set = SwimSet(items=[
            {"type": "rest", "duration": 30},
            {"type": "comment", "text": "easy"},
        ])

        assert isinstance(swim_set.items[0], Rest)
        assert isinstance(swim_set.items[1], Comment)

    def test_difficulty_range(self):
        with pytest.raises(ValidationError):
            ParsedPractice(difficulty=101)

    def test_practice_survives_serialization(self, full_practice):
        practice = parse(full_practice)
        restored = ParsedPractice.model_validate(practice.model_dump())

        assert restored == practice

    def test_empty_practice(self):
        practice = ParsedPractice.empty()

        assert practice.sets == []
        assert practice.comments == []
        assert practice.total_yardage == 0
        assert practice.estimated_time == 0
        assert practice.difficulty == 0
