"""
Exercise Parser

Turns a line already classified as an exercise ("4x50 Free fast @1:00",
"200 back easy", "4x25 fly 25 left arm 25 right arm") into an Exercise.

Each field is pulled out by an ordered list of rules; the first rule that
matches wins. Anything that cannot be read falls back to a default
(reps 1, distance 50, stroke Free, no pace, no interval).
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from swim_practice_parser.models import Exercise
from swim_practice_parser.tables import (
    BASE_PACE_PER_100,
    DEFAULT_STROKE,
    PACE_KEYWORDS,
    PACE_MULTIPLIERS,
    PRIMARY_STROKES,
    STROKE_DISPLAY_NAMES,
    TRANSITION_SECONDS,
)
from swim_practice_parser.utils import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_REPS = 1
DEFAULT_DISTANCE = 50

_PACE_ALTERNATION = "|".join(PACE_KEYWORDS)


class ExerciseParser:
    """Field extraction for exercise lines"""

    # Reps / distance, in precedence order
    REPS_WITH_X_PATTERN = re.compile(r'^(\d+)\s*x\s*(\d+)s?', re.IGNORECASE)  # "4x50", "4 x 50", "4x50s"
    SINGLE_DISTANCE_PATTERN = re.compile(r'^(\d+)s?\s+[a-z]', re.IGNORECASE)  # "200 Free", "200s Free"
    FALLBACK_REPS_PATTERN = re.compile(r'^(\d+)\s*x', re.IGNORECASE)
    FALLBACK_DISTANCE_PATTERNS = (
        re.compile(r'x?\s*(\d+)\s', re.IGNORECASE),
        re.compile(r'\s(\d+)\s'),
    )

    # Intervals, in precedence order
    CLOCK_INTERVAL_PATTERN = re.compile(r'(@|on\s+)?(\d+):(\d+)', re.IGNORECASE)  # "@1:30", "on 1:30", "1:30"
    MINUTES_INTERVAL_PATTERN = re.compile(r'on\s+(\d+)\s+minutes?', re.IGNORECASE)  # "on 2 minutes"
    SPACED_CLOCK_INTERVAL_PATTERN = re.compile(r'on\s+(\d+)\s*:\s*(\d+)', re.IGNORECASE)  # "on 1 : 30"

    PACE_PATTERN = re.compile(r'(' + _PACE_ALTERNATION + r')', re.IGNORECASE)

    # Residual cleanup before the stroke search
    LEADING_DISTANCE_PATTERN = re.compile(r'^\d+\s*x?\s*\d+s?\s*')
    CLOCK_PATTERN = re.compile(r'\d+:\d+')
    ON_MINUTES_PATTERN = re.compile(r'\bon\s+\d+\s+minutes?\b')
    SENDOFF_TOKEN_PATTERN = re.compile(r'@|\bon\b')
    PACE_WORD_PATTERN = re.compile(r'\b(' + _PACE_ALTERNATION + r')\b')

    STROKE_TOKEN_PATTERNS = tuple(
        (token, re.compile(r'\b' + re.escape(token) + r'\b', re.IGNORECASE))
        for token in PRIMARY_STROKES
    )

    @classmethod
    def parse_reps_and_distance(cls, line: str) -> Tuple[int, int]:
        reps_with_x = cls.REPS_WITH_X_PATTERN.search(line)
        if reps_with_x:
            return int(reps_with_x.group(1)), int(reps_with_x.group(2))

        single_distance = cls.SINGLE_DISTANCE_PATTERN.search(line)
        if single_distance:
            return 1, int(single_distance.group(1))

        reps_match = cls.FALLBACK_REPS_PATTERN.search(line)
        reps = int(reps_match.group(1)) if reps_match else DEFAULT_REPS

        distance = DEFAULT_DISTANCE
        for pattern in cls.FALLBACK_DISTANCE_PATTERNS:
            distance_match = pattern.search(line)
            if distance_match:
                distance = int(distance_match.group(1))
                break
        return reps, distance

    @classmethod
    def interval_rules(cls) -> List[Tuple[re.Pattern, Callable[[re.Match], int]]]:
        return [
            (cls.CLOCK_INTERVAL_PATTERN, lambda m: int(m.group(2)) * 60 + int(m.group(3))),
            (cls.MINUTES_INTERVAL_PATTERN, lambda m: int(m.group(1)) * 60),
            (cls.SPACED_CLOCK_INTERVAL_PATTERN, lambda m: int(m.group(1)) * 60 + int(m.group(2))),
        ]

    @classmethod
    def parse_interval(cls, line: str) -> int:
        """Send-off in seconds, 0 when the line has none."""
        for pattern, to_seconds in cls.interval_rules():
            match = pattern.search(line)
            if match:
                return to_seconds(match)
        return 0

    @classmethod
    def parse_pace(cls, line: str) -> str:
        match = cls.PACE_PATTERN.search(line)
        return match.group(1).lower() if match else ""

    @classmethod
    def residual_text(cls, line: str) -> str:
        """The line with distances, clock times, send-off markers and pace words removed."""
        clean = line.lower()
        clean = cls.LEADING_DISTANCE_PATTERN.sub("", clean)
        clean = cls.CLOCK_PATTERN.sub("", clean)
        clean = cls.ON_MINUTES_PATTERN.sub("", clean)
        clean = cls.SENDOFF_TOKEN_PATTERN.sub("", clean)
        clean = cls.PACE_WORD_PATTERN.sub("", clean)
        return clean.strip()

    @classmethod
    def parse_stroke_with_specifications(cls, line: str) -> Tuple[str, Optional[str]]:
        """
        Find the stroke and whatever text qualifies it.

        Returns:
            Tuple of (stroke, specifications)
        """
        residual = cls.residual_text(line)

        for token, pattern in cls.STROKE_TOKEN_PATTERNS:
            if pattern.search(residual):
                stroke = normalize_stroke(token)
                spec_text = " ".join(pattern.sub("", residual).split())
                return stroke, spec_text or None

        words = residual.split()
        if not words:
            return DEFAULT_STROKE, None
        return " ".join(word[:1].upper() + word[1:] for word in words), None

    @classmethod
    def parse(cls, line: str) -> Exercise:
        """
        Build an Exercise from a classified line.

        Raises:
            ValueError: (pydantic ValidationError) when reps or distance is zero
        """
        reps, distance = cls.parse_reps_and_distance(line)
        interval = cls.parse_interval(line)
        pace = cls.parse_pace(line)
        stroke, specifications = cls.parse_stroke_with_specifications(line)

        if interval > 0:
            estimated = reps * interval
        else:
            estimated = estimate_swim_time(reps, distance, stroke, pace)
            logger.debug(f"No interval on {line!r}, estimated {estimated}s from pace table")

        return Exercise(
            reps=reps,
            distance=distance,
            stroke=stroke,
            specifications=specifications,
            pace=pace,
            interval=interval,
            total_yardage=reps * distance,
            estimated_time=estimated,
            original_text=line,
        )


def normalize_stroke(token: str) -> str:
    """Map a stroke token to its display name; unknown tokens pass through."""
    return STROKE_DISPLAY_NAMES.get(token.lower(), token)


def estimate_swim_time(reps: int, distance: int, stroke: str, pace: str) -> int:
    """Seconds for reps x distance from the per-100 base pace, plus 10s between reps."""
    base = BASE_PACE_PER_100.get(stroke, BASE_PACE_PER_100[DEFAULT_STROKE])
    multiplier = PACE_MULTIPLIERS.get(pace.lower(), 1.0)
    per_rep = (distance / 100) * base * multiplier
    return round_half_up(reps * per_rep + (reps - 1) * TRANSITION_SECONDS)


def parse_exercise(line: str) -> Exercise:
    return ExerciseParser.parse(line)
