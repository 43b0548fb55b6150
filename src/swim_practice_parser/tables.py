"""
Lookup tables

Read-only constants shared by the parsers, the difficulty scorer and the
formatter. Everything here is built once at import time.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# Stroke tokens searched (whole word) in the residual of an exercise line.
# Order matters: the first token found wins.
PRIMARY_STROKES: Tuple[str, ...] = (
    "free",
    "freestyle",
    "fr",
    "back",
    "backstroke",
    "bk",
    "breast",
    "breaststroke",
    "br",
    "fly",
    "butterfly",
    "bf",
    "im",
    "individual medley",
    "choice",
    "stroke",
    "nf",
    "nonfree",
    "non-free",
    "free-im",
    "freeim",
)

# Tokens that make a "<n> <distance> <token>" line count as an exercise.
# These match as a prefix ("200 freestyle", "100 kicking").
EXERCISE_STROKE_TOKENS: Tuple[str, ...] = (
    "fr",
    "free",
    "freestyle",
    "back",
    "backstroke",
    "breast",
    "breaststroke",
    "fly",
    "butterfly",
    "im",
    "individual medley",
    "drill",
    "kick",
)

# Shorthand that only counts as a whole word, so "20 breaths" stays a comment.
# "stroke" is left out: "50 stroke count" is a note, not 50 yards.
EXERCISE_SHORTHAND_TOKENS: Tuple[str, ...] = (
    "bk",
    "br",
    "bf",
    "choice",
    "nf",
    "nonfree",
    "non-free",
)

STROKE_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType({
    "fr": "Free",
    "free": "Free",
    "freestyle": "Free",
    "back": "Back",
    "backstroke": "Back",
    "breast": "Breast",
    "breaststroke": "Breast",
    "fly": "Fly",
    "butterfly": "Fly",
    "im": "IM",
    "individual medley": "IM",
    "drill": "Drill",
    "kick": "Kick",
    "choice": "Choice",
})

DEFAULT_STROKE = "Free"

PACE_KEYWORDS: Tuple[str, ...] = ("fast", "easy", "moderate", "build", "descend", "desc")

# Seconds per 100 yards
BASE_PACE_PER_100: Mapping[str, int] = MappingProxyType({
    "Free": 75,
    "Back": 85,
    "Breast": 95,
    "Fly": 90,
    "IM": 90,
    "Drill": 120,
    "Kick": 150,
})

PACE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "fast": 0.85,
    "moderate": 1.0,
    "easy": 1.15,
    "build": 1.0,
    "desc": 1.0,
    "descend": 1.0,
})

TRANSITION_SECONDS = 10

# "Moderate" send-off per stroke and distance, in seconds
REFERENCE_INTERVALS: Mapping[str, Mapping[int, int]] = MappingProxyType({
    "Free": MappingProxyType({25: 25, 50: 50, 100: 75, 200: 160, 400: 340, 500: 430}),
    "Back": MappingProxyType({25: 30, 50: 60, 100: 90, 200: 190, 400: 400}),
    "Breast": MappingProxyType({25: 35, 50: 70, 100: 110, 200: 230, 400: 480}),
    "Fly": MappingProxyType({25: 30, 50: 65, 100: 100, 200: 220, 400: 460}),
    "IM": MappingProxyType({100: 100, 200: 220, 400: 460}),
})

HIGH_INTENSITY_PATTERNS: Tuple[str, ...] = (
    r"sprint",
    r"fast",
    r"afap",
    r"all.{0,5}out",
    r"race.{0,5}pace",
    r"max",
    r"explosive",
)

MEDIUM_INTENSITY_PATTERNS: Tuple[str, ...] = (
    r"pace",
    r"tempo",
    r"threshold",
    r"build",
    r"neg.{0,5}split",
    r"descend",
)

FORMAT_PATTERNS: Tuple[str, ...] = (
    r"ladder",
    r"pyramid",
    r"broken",
    r"negative.{0,5}split",
    r"time.{0,5}trial",
)

# (lower bound, label), checked top down
DIFFICULTY_BANDS: Tuple[Tuple[int, str], ...] = (
    (80, "Extreme"),
    (60, "Hard"),
    (40, "Moderate"),
    (20, "Easy"),
    (0, "Very Easy"),
)
