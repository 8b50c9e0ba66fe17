# tests/conftest.py
"""
Shared fixtures for the moderator tests.
"""

import os
import sys

import pytest

# Add the project root to sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from moderator.constants import DEFAULT_RELATIONSHIPS, SAMPLE_BANNED_WORDS  # noqa: E402
from moderator.engine import ModerationEngine  # noqa: E402


@pytest.fixture
def data_dir(tmp_path):
    """Empty data directory for one test."""
    return str(tmp_path / "data")


@pytest.fixture
def engine(data_dir):
    """Engine with the sample banned words and default relationships."""
    eng = ModerationEngine(data_dir)
    for word in SAMPLE_BANNED_WORDS:
        eng.add_banned_word(word)
    for a, b in DEFAULT_RELATIONSHIPS:
        eng.add_term_relationship(a, b)
    return eng


@pytest.fixture
def words_file(tmp_path):
    """Banned words file with mixed case, padding and blank lines."""
    path = tmp_path / "words.txt"
    path.write_text("Scam\n  fraud  \n\nHATE\nbad word\n", encoding="utf-8")
    return str(path)
