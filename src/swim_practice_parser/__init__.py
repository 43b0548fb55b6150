"""Swim practice text parsing, scoring and formatting."""
from .models import (
    Comment,
    Exercise,
    LineItem,
    ParsedPractice,
    PracticeMetrics,
    Rest,
    SwimSet,
)
from .services.formatter import format_practice
from .services.metrics import difficulty_label, metrics_for, summarize
from .services.practice_parser import estimated_time, parse, total_yardage
from .utils import format_duration

__all__ = [
    "Comment",
    "Exercise",
    "LineItem",
    "ParsedPractice",
    "PracticeMetrics",
    "Rest",
    "SwimSet",
    "difficulty_label",
    "estimated_time",
    "format_duration",
    "format_practice",
    "metrics_for",
    "parse",
    "summarize",
    "total_yardage",
]
