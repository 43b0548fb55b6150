"""
Line Classifier

Sorts one trimmed line of practice text into a LineKind. Rules are tried in
a fixed order and the first match wins:

    blank -> multiplier -> exercise -> rest -> comment

Exercise is checked before rest so that "4x50 Free 1:30" keeps its 1:30 as
an interval, while a bare "1:30" (no distance pattern) falls through to rest.
"""

import logging
import re
from enum import Enum
from typing import Optional

from swim_practice_parser.config import settings
from swim_practice_parser.tables import EXERCISE_SHORTHAND_TOKENS, EXERCISE_STROKE_TOKENS

logger = logging.getLogger(__name__)


def _token_alternation(tokens) -> str:
    # "individual medley" also matches "individualmedley"
    return "|".join(re.escape(t).replace(r"\ ", r"\s*") for t in tokens)


class LineKind(str, Enum):
    """Classification of a single line"""
    BLANK = "blank"
    MULTIPLIER = "multiplier"
    EXERCISE = "exercise"
    REST = "rest"
    COMMENT = "comment"


class LineClassifier:
    """Ordered regex rules for classifying practice lines"""

    MULTIPLIER_PATTERNS = (
        re.compile(r'^\d+x\s*$', re.IGNORECASE),  # "3x"
        re.compile(r'^\d+\s*(rounds?|sets?)\s*$', re.IGNORECASE),  # "2 rounds", "3 sets"
    )
    MULTIPLIER_VALUE_PATTERN = re.compile(r'^(\d+)')

    EXERCISE_PATTERNS = (
        # "4x50 free", "200 Free", "200s back", "100 choice"
        re.compile(
            r'\d+x?\s*\d+s?\s*(?:(?:' + _token_alternation(EXERCISE_STROKE_TOKENS) + r')'
            r'|(?:' + _token_alternation(EXERCISE_SHORTHAND_TOKENS) + r')\b)',
            re.IGNORECASE,
        ),
        re.compile(r'\d+\s*x\s*\d+', re.IGNORECASE),  # "4x50"
    )

    REST_PATTERNS = (
        re.compile(r'rest', re.IGNORECASE),
        re.compile(r'\d+\s*(min|minutes?|sec|seconds?)', re.IGNORECASE),  # "1 min", "30 seconds"
        re.compile(r'^\d+:\d+'),  # "1:30"
    )

    @classmethod
    def is_blank(cls, line: str) -> bool:
        return line == ""

    @classmethod
    def multiplier_value(cls, line: str) -> Optional[int]:
        """Multiplier carried by a '3x' / '2 rounds' line, None if the line is not one."""
        if not any(p.search(line) for p in cls.MULTIPLIER_PATTERNS):
            return None
        match = cls.MULTIPLIER_VALUE_PATTERN.match(line)
        value = int(match.group(1)) if match else 1
        return value if value >= 1 else None

    @classmethod
    def is_set_multiplier(cls, line: str) -> bool:
        return cls.multiplier_value(line) is not None

    @classmethod
    def is_exercise(cls, line: str) -> bool:
        return any(p.search(line) for p in cls.EXERCISE_PATTERNS)

    @classmethod
    def is_rest(cls, line: str) -> bool:
        return any(p.search(line) for p in cls.REST_PATTERNS)

    @classmethod
    def classify(cls, line: str) -> LineKind:
        """Classify an already-trimmed line."""
        if cls.is_blank(line):
            return LineKind.BLANK

        max_length = settings.MAX_LINE_LENGTH
        if max_length and len(line) > max_length:
            logger.warning(f"Line of {len(line)} chars exceeds {max_length}, treating as comment")
            return LineKind.COMMENT

        if cls.is_set_multiplier(line):
            kind = LineKind.MULTIPLIER
        elif cls.is_exercise(line):
            kind = LineKind.EXERCISE
        elif cls.is_rest(line):
            kind = LineKind.REST
        else:
            kind = LineKind.COMMENT
        logger.debug(f"{kind.value}: {line!r}")
        return kind


def classify_line(line: str) -> LineKind:
    """Classify a single trimmed line."""
    return LineClassifier.classify(line)
