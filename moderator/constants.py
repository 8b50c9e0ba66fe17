"""Defaults shared by the engine, the storage helpers and the CLI."""

from __future__ import annotations

DEFAULT_DATA_DIR = "./data"

BANNED_WORDS_FILE = "banned_words.txt"
GRAPH_FILE = "term_graph.txt"
STATISTICS_FILE = "statistics.txt"

# BFS hops used when collecting related terms for a match
DEFAULT_MAX_DEPTH = 2

# How many terms the statistics screen lists
DEFAULT_TOP_N = 5

SAMPLE_BANNED_WORDS: tuple[str, ...] = (
    "hate",
    "scam",
    "fraud",
    "racism",
    "abuse",
    "violence",
    "bullying",
    "discrimination",
)

DEFAULT_RELATIONSHIPS: tuple[tuple[str, str], ...] = (
    ("hate", "racism"),
    ("hate", "discrimination"),
    ("racism", "discrimination"),
    ("scam", "fraud"),
    ("abuse", "violence"),
    ("abuse", "bullying"),
)
