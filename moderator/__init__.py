"""Content Moderator — trie-backed banned-word matching with a term graph."""

from moderator.engine import ModerationEngine
from moderator.graph import TermGraph
from moderator.report import AnalysisReport, FlaggedContent, TermMatch
from moderator.storage import StorageError
from moderator.trie import Trie, TrieNode

__all__ = [
    "AnalysisReport",
    "FlaggedContent",
    "ModerationEngine",
    "StorageError",
    "TermGraph",
    "TermMatch",
    "Trie",
    "TrieNode",
]
