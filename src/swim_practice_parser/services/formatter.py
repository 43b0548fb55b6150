"""Formatter for rendering a parsed practice back to canonical text."""
from typing import List, Optional

from swim_practice_parser.config import settings
from swim_practice_parser.models import Exercise, LineItem, ParsedPractice, SwimSet
from swim_practice_parser.utils import format_duration


class PracticeFormatter:
    """Service for rendering parsed practices as aligned plain text."""

    @staticmethod
    def render_exercise(item: Exercise) -> str:
        stroke = f"{item.stroke} ({item.specifications})" if item.specifications else item.stroke
        pace = f" {item.pace}" if item.pace else ""
        interval = f" {format_duration(item.interval)}" if item.interval > 0 else ""
        if item.reps > 1:
            return f"{item.reps} x {item.distance} {stroke}{pace}{interval}"
        return f"{item.distance} {stroke}{pace}{interval}"

    @staticmethod
    def render_item(item: LineItem) -> str:
        if item.type == "comment":
            return item.text
        if item.type == "rest":
            return f"Rest {format_duration(item.duration)}"
        return PracticeFormatter.render_exercise(item)

    @staticmethod
    def render_set(swim_set: SwimSet) -> List[str]:
        lines = []
        indent = ""
        if swim_set.multiplier > 1:
            lines.append(f"{swim_set.multiplier}x")
            indent = "\t"
        for item in swim_set.items:
            lines.append(indent + PracticeFormatter.render_item(item))
        return lines

    @staticmethod
    def render_text(parsed: ParsedPractice, column_width: Optional[int] = None) -> str:
        """
        Render a practice as canonical text.

        Sets are separated by a cumulative "N yards" line right-aligned to
        column_width (FORMAT_COLUMN_WIDTH by default), with a blank line on
        either side.

        Args:
            parsed: Practice to render
            column_width: Column the running total ends at

        Returns:
            Formatted text, trimmed
        """
        width = column_width if column_width is not None else settings.FORMAT_COLUMN_WIDTH
        lines: List[str] = []
        cumulative = 0
        last_index = len(parsed.sets) - 1

        for index, swim_set in enumerate(parsed.sets):
            lines.extend(PracticeFormatter.render_set(swim_set))
            cumulative += swim_set.total_yardage
            if index < last_index:
                lines.append("")
                lines.append(f"{cumulative} yards".rjust(width))
                lines.append("")

        return "\n".join(lines).strip()


def format_practice(parsed: ParsedPractice) -> str:
    """Canonical text for a parsed practice."""
    return PracticeFormatter.render_text(parsed)
