"""Configuration settings for the swim practice parser."""
import logging
import os
from typing import Literal

from swim_practice_parser.utils import to_int


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_MAX_LINE_LENGTH = 500
DEFAULT_FORMAT_COLUMN_WIDTH = 190


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "WARNING"

    # Parsing
    MAX_LINE_LENGTH: int = DEFAULT_MAX_LINE_LENGTH  # 0 disables the guard

    # Formatting
    FORMAT_COLUMN_WIDTH: int = DEFAULT_FORMAT_COLUMN_WIDTH

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

        max_line = to_int(os.getenv("MAX_LINE_LENGTH"))
        self.MAX_LINE_LENGTH = max_line if max_line is not None and max_line >= 0 else DEFAULT_MAX_LINE_LENGTH

        width = to_int(os.getenv("FORMAT_COLUMN_WIDTH"))
        self.FORMAT_COLUMN_WIDTH = width if width is not None and width > 0 else DEFAULT_FORMAT_COLUMN_WIDTH


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL to the package logger. Handlers are left to the host."""
    name = (level or settings.LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.getLogger("swim_practice_parser").setLevel(resolved)
