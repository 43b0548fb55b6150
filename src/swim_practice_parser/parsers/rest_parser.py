"""Rest line parser ("Rest 2:00", "1 min rest", "rest")."""
import re

from swim_practice_parser.models import Rest

DEFAULT_REST_SECONDS = 60

CLOCK_PATTERN = re.compile(r'(\d+):(\d+)')
MINUTES_PATTERN = re.compile(r'(\d+)\s*(min|minutes?)', re.IGNORECASE)


def parse_rest_duration(line: str) -> int:
    """Seconds of rest on the line; 60 when no duration can be read."""
    clock = CLOCK_PATTERN.search(line)
    if clock:
        return int(clock.group(1)) * 60 + int(clock.group(2))

    minutes = MINUTES_PATTERN.search(line)
    if minutes:
        return int(minutes.group(1)) * 60

    return DEFAULT_REST_SECONDS


def parse_rest(line: str) -> Rest:
    """
    Build a Rest from a classified line.

    Raises:
        ValueError: (pydantic ValidationError) for a zero duration such as "0:00 rest"
    """
    return Rest(duration=parse_rest_duration(line), original_text=line)
