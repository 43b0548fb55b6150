"""
Practice parser service.

Walks practice text line by line and groups the parsed items into sets:

- a blank line closes the open set (only if it already has items)
- a multiplier line ("3x", "2 rounds") closes the open set and opens a new
  one with that multiplier
- exercise, rest and comment lines are appended to the open set, opening a
  multiplier-1 set first when none is open

Parsing never fails on text input; lines that cannot be read become comments.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from swim_practice_parser.models import Comment, LineItem, ParsedPractice, SwimSet
from swim_practice_parser.parsers.exercise_parser import parse_exercise
from swim_practice_parser.parsers.lexer import LineClassifier, LineKind
from swim_practice_parser.parsers.rest_parser import parse_rest
from swim_practice_parser.services.difficulty import score_difficulty

logger = logging.getLogger(__name__)


@dataclass
class SetBuilder:
    """The currently open set while lines are being read."""
    multiplier: int = 1
    items: List[LineItem] = field(default_factory=list)
    yardage: int = 0
    estimated_time: int = 0

    def add(self, item: LineItem) -> None:
        self.items.append(item)
        if item.type == "exercise":
            self.yardage += item.total_yardage
            self.estimated_time += item.estimated_time
        elif item.type == "rest":
            self.estimated_time += item.duration

    def build(self) -> SwimSet:
        return SwimSet(
            multiplier=self.multiplier,
            items=list(self.items),
            yardage=self.yardage,
            estimated_time=self.estimated_time,
        )


class PracticeParser:
    """Service for parsing swim practice text into sets."""

    @staticmethod
    def parse_item(kind: LineKind, line: str) -> LineItem:
        """Parse a non-blank, non-multiplier line, degrading to a comment on bad values."""
        try:
            if kind == LineKind.EXERCISE:
                return parse_exercise(line)
            if kind == LineKind.REST:
                return parse_rest(line)
        except ValueError as e:
            logger.warning(f"Keeping unreadable {kind.value} line as comment: {line!r} ({e})")
        return Comment(text=line)

    @staticmethod
    def group_sets(text: str) -> List[SwimSet]:
        sets: List[SwimSet] = []
        current: Optional[SetBuilder] = None

        def commit() -> None:
            if current is not None and current.items:
                built = current.build()
                logger.debug(
                    f"Set {len(sets) + 1}: {built.multiplier}x, {len(built.items)} items, "
                    f"{built.yardage} yds, {built.estimated_time}s"
                )
                sets.append(built)

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            kind = LineClassifier.classify(line)

            if kind == LineKind.BLANK:
                # An empty multiplier set stays open across blank lines
                if current is not None and current.items:
                    commit()
                    current = None
                continue

            if kind == LineKind.MULTIPLIER:
                commit()
                current = SetBuilder(multiplier=LineClassifier.multiplier_value(line) or 1)
                continue

            if current is None:
                current = SetBuilder()
            current.add(PracticeParser.parse_item(kind, line))

        commit()
        return sets

    @staticmethod
    def parse(raw_text: Any) -> ParsedPractice:
        """
        Parse free-form practice text.

        Args:
            raw_text: Practice text; anything that is not a non-empty string
                yields an empty practice

        Returns:
            ParsedPractice with totals and difficulty filled in
        """
        if not isinstance(raw_text, str):
            if raw_text is not None:
                logger.warning(f"Expected practice text as str, got {type(raw_text).__name__}")
            return ParsedPractice.empty()
        if not raw_text:
            return ParsedPractice.empty()

        sets = PracticeParser.group_sets(raw_text)
        total_yardage = sum(s.total_yardage for s in sets)
        estimated_time = sum(s.total_time for s in sets)

        unscored = ParsedPractice(sets=sets, total_yardage=total_yardage, estimated_time=estimated_time)
        difficulty = score_difficulty(unscored, raw_text)

        return ParsedPractice(
            sets=sets,
            total_yardage=total_yardage,
            estimated_time=estimated_time,
            difficulty=difficulty,
        )


def parse(raw_text: Any) -> ParsedPractice:
    """Parse practice text into a ParsedPractice."""
    return PracticeParser.parse(raw_text)


def total_yardage(parsed: ParsedPractice) -> int:
    return parsed.total_yardage


def estimated_time(parsed: ParsedPractice) -> int:
    return parsed.estimated_time
