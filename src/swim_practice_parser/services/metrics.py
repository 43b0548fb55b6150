"""Practice metrics: the numbers a saved practice carries alongside its text."""
from typing import Any

from swim_practice_parser.models import ParsedPractice, PracticeMetrics
from swim_practice_parser.services.practice_parser import parse
from swim_practice_parser.tables import DIFFICULTY_BANDS


def difficulty_label(score: int) -> str:
    """Display band for a 0-100 difficulty score."""
    for lower_bound, label in DIFFICULTY_BANDS:
        if score >= lower_bound:
            return label
    return DIFFICULTY_BANDS[-1][1]


def metrics_for(parsed: ParsedPractice) -> PracticeMetrics:
    return PracticeMetrics(
        total_yardage=parsed.total_yardage,
        estimated_time=parsed.estimated_time,
        difficulty=parsed.difficulty,
        difficulty_label=difficulty_label(parsed.difficulty),
    )


def summarize(raw_text: Any) -> PracticeMetrics:
    """Parse practice text and return only its derived metrics."""
    return metrics_for(parse(raw_text))
