"""
Test fixtures for swim-practice-parser.

Provides sample practice texts and a settings reset so tests can tweak
configuration without leaking it between tests.
"""

import sys
from pathlib import Path

import pytest

# Repo root: .../swim-practice-parser
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import swim_practice_parser...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from swim_practice_parser.config import settings


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin parser settings to their defaults for every test."""
    monkeypatch.setattr(settings, "MAX_LINE_LENGTH", 500)
    monkeypatch.setattr(settings, "FORMAT_COLUMN_WIDTH", 190)
    return settings


# ---------------------------------------------------------------------------
# Sample Practices
# ---------------------------------------------------------------------------


@pytest.fixture
def two_set_practice() -> str:
    """Two single sets split by a blank line."""
    return "4x100 Free easy 2:00\n\n4x50 Back easy 1:15"


@pytest.fixture
def multiplier_practice() -> str:
    """One 3x round containing two exercises."""
    return "3x\n4x50 Free fast 1:00\n2x100 IM moderate 2:30"


@pytest.fixture
def full_practice() -> str:
    """A realistic practice with comments, rests and a multiplier round."""
    return (
        "Warm up\n"
        "400 free easy\n"
        "8x25 kick build\n"
        "\n"
        "3x\n"
        "4x50 Free fast 1:00\n"
        "2x100 IM moderate 2:30\n"
        "Rest 1:00\n"
        "\n"
        "Cool down\n"
        "200 back 3:00"
    )
