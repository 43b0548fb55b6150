"""
Difficulty scoring service.

Rates a practice from 0 to 100 with three capped components:

- yardage (0-60): 10,000 yards alone saturates it
- interval tightness (0-25): yardage-weighted average of how far each
  send-off is under a "moderate" reference for its stroke and distance
- intensity language (0-15): keyword tiers counted in the raw text

A practice of 10k yards with lots of fast work lands at 100.
"""
import logging
import re
from typing import Iterable, Optional

from swim_practice_parser.models import ParsedPractice
from swim_practice_parser.tables import (
    DEFAULT_STROKE,
    FORMAT_PATTERNS,
    HIGH_INTENSITY_PATTERNS,
    MEDIUM_INTENSITY_PATTERNS,
    REFERENCE_INTERVALS,
)
from swim_practice_parser.utils import round_half_up

logger = logging.getLogger(__name__)

YARDAGE_CAP = 60.0
YARDAGE_SATURATION = 10000
INTERVAL_CAP = 25.0
INTENSITY_CAP = 15.0

HARD_RATIO = 1.5
EASY_RATIO = 0.8

HIGH_TIER_MAX_COUNT = 3
HIGH_TIER_POINTS = 3.0
MEDIUM_TIER_MAX_COUNT = 2
MEDIUM_TIER_POINTS = 1.5
FORMAT_TIER_POINTS = 3.0

_HIGH_INTENSITY = tuple(re.compile(p, re.IGNORECASE) for p in HIGH_INTENSITY_PATTERNS)
_MEDIUM_INTENSITY = tuple(re.compile(p, re.IGNORECASE) for p in MEDIUM_INTENSITY_PATTERNS)
_FORMATS = tuple(re.compile(p, re.IGNORECASE) for p in FORMAT_PATTERNS)


def yardage_score(total_yardage: int) -> float:
    return min(YARDAGE_CAP, total_yardage / YARDAGE_SATURATION * YARDAGE_CAP)


def reference_interval(stroke: str, distance: int) -> Optional[int]:
    """Moderate send-off for the stroke/distance, None when the pair is not tabled."""
    table = REFERENCE_INTERVALS.get(stroke, REFERENCE_INTERVALS[DEFAULT_STROKE])
    return table.get(distance)


def interval_tightness(stroke: str, distance: int, interval: int) -> float:
    """0.0 (easy send-off) to 1.0 (very tight); 0.0 for untabled pairs."""
    moderate = reference_interval(stroke, distance)
    if not moderate or interval <= 0:
        return 0.0
    ratio = moderate / interval
    if ratio >= HARD_RATIO:
        return 1.0
    if ratio <= EASY_RATIO:
        return 0.0
    return (ratio - EASY_RATIO) / (HARD_RATIO - EASY_RATIO)


def interval_score(parsed: ParsedPractice) -> float:
    weighted_difficulty = 0.0
    weighted_yardage = 0

    for swim_set in parsed.sets:
        for item in swim_set.items:
            if item.type != "exercise" or item.interval <= 0:
                continue
            yardage = item.total_yardage * swim_set.multiplier
            weighted_difficulty += interval_tightness(item.stroke, item.distance, item.interval) * yardage
            weighted_yardage += yardage

    if weighted_yardage == 0:
        return 0.0
    return min(INTERVAL_CAP, weighted_difficulty / weighted_yardage * INTERVAL_CAP)


def _count_matches(patterns: Iterable[re.Pattern], text: str) -> int:
    return sum(len(p.findall(text)) for p in patterns)


def intensity_score(raw_text: str) -> float:
    text = raw_text.lower()

    high = min(HIGH_TIER_MAX_COUNT, _count_matches(_HIGH_INTENSITY, text))
    medium = min(MEDIUM_TIER_MAX_COUNT, _count_matches(_MEDIUM_INTENSITY, text))
    has_format = any(p.search(text) for p in _FORMATS)

    bonus = high * HIGH_TIER_POINTS + medium * MEDIUM_TIER_POINTS
    if has_format:
        bonus += FORMAT_TIER_POINTS
    return min(INTENSITY_CAP, bonus)


def score_difficulty(parsed: ParsedPractice, raw_text: str) -> int:
    """Composite difficulty for a parsed practice and the text it came from."""
    yardage_part = yardage_score(parsed.total_yardage)
    interval_part = interval_score(parsed)
    intensity_part = intensity_score(raw_text or "")
    logger.debug(
        f"Difficulty parts: yardage={yardage_part:.1f} interval={interval_part:.1f} "
        f"intensity={intensity_part:.1f}"
    )
    total = min(100.0, yardage_part + interval_part + intensity_part)
    return max(0, round_half_up(total))
