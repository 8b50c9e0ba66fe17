"""Moderation engine — trie matching, frequency counts and related terms."""

from __future__ import annotations

import logging
import os
import string

from moderator import storage
from moderator.constants import (
    BANNED_WORDS_FILE,
    DEFAULT_DATA_DIR,
    DEFAULT_MAX_DEPTH,
    DEFAULT_TOP_N,
    GRAPH_FILE,
    STATISTICS_FILE,
)
from moderator.graph import TermGraph
from moderator.report import AnalysisReport, FlaggedContent, TermMatch
from moderator.storage import StorageError
from moderator.trie import Trie

log = logging.getLogger("moderator")

_PUNCT_TABLE = str.maketrans("", "", string.punctuation)


class ModerationEngine:
    """Flags text containing banned words and reports related terms.

    Owns the banned-word trie, the term graph, the per-term frequency
    table, the flagged-content log and the reviewer feedback log.
    Persistence failures are logged and never raised; the engine keeps
    whatever state it already had.
    """

    def __init__(self, data_dir: str = DEFAULT_DATA_DIR, max_depth: int = DEFAULT_MAX_DEPTH):
        self.data_dir = data_dir
        self.max_depth = max_depth
        self.trie = Trie()
        self.graph = TermGraph()
        self.frequency: dict[str, int] = {}
        self.flagged: list[FlaggedContent] = []
        self.feedback: list[tuple[str, bool]] = []

    # banned words

    def load_banned_words(self, path: str) -> bool:
        """Insert every word listed in *path*; False if the file can't be read."""
        try:
            words = storage.read_banned_words(path)
        except StorageError as exc:
            log.error("Error opening banned words file: %s", exc)
            return False
        for word in words:
            self.trie.insert(word)
        log.info("Loaded %d banned words from %s", len(words), path)
        return True

    def save_banned_words(self, path: str) -> bool:
        try:
            storage.write_banned_words(path, self.trie.enumerate_all())
        except StorageError as exc:
            log.error("Banned words not saved: %s", exc)
            return False
        log.info("Banned words saved to %s", path)
        return True

    def add_banned_word(self, word: str) -> bool:
        word = storage.normalize_word(word)
        if not word:
            log.warning("Ignoring empty banned word.")
            return False
        self.trie.insert(word)
        log.debug("Added %r to banned words list.", word)
        return True

    def is_banned(self, word: str) -> bool:
        return self.trie.contains(word)

    # term relationships

    def add_term_relationship(self, term_a: str, term_b: str) -> bool:
        """Link two terms as given; False if either term is empty."""
        if not term_a or not term_b:
            log.warning("Ignoring relationship with an empty term: %r, %r", term_a, term_b)
            return False
        self.graph.add_edge(term_a, term_b)
        return True

    def related_terms(self, term: str) -> list[str]:
        return self.graph.related_terms(term, self.max_depth)

    def describe_term_graph(self) -> list[str]:
        """Connection summary for every term that has been flagged so far."""
        return [self.graph.describe_connections(term) for term in self.frequency]

    def load_graph(self, path: str) -> bool:
        try:
            lines = storage.read_lines(path)
        except StorageError as exc:
            log.error("Graph relationship file not loaded: %s", exc)
            return False
        self.graph.deserialize(lines)
        log.info("Graph relationships loaded from %s", path)
        return True

    def save_graph(self, path: str) -> bool:
        try:
            storage.write_lines(path, self.graph.serialize())
        except StorageError as exc:
            log.error("Graph relationships not saved: %s", exc)
            return False
        log.info("Graph relationships saved to %s", path)
        return True

    # analysis

    @staticmethod
    def tokenize(text: str) -> list[str]:
        """Lowercased whitespace-separated tokens with punctuation removed."""
        return [tok.translate(_PUNCT_TABLE) for tok in text.lower().split()]

    def tokenize_and_match(self, text: str) -> list[str]:
        """Banned words in *text*, left to right, counting every occurrence."""
        matched: list[str] = []
        for token in self.tokenize(text):
            if self.trie.contains(token):
                matched.append(token)
                self.frequency[token] = self.frequency.get(token, 0) + 1
        return matched

    def flag_content(self, text: str) -> bool:
        matched = self.tokenize_and_match(text)
        if not matched:
            return False
        self.flagged.append(FlaggedContent(text, matched))
        log.debug("Flagged %r: %s", text, matched)
        return True

    def analyze(self, text: str) -> AnalysisReport:
        if not self.flag_content(text):
            return AnalysisReport(text, False)
        entry = self.flagged[-1]
        matches = [
            TermMatch(term, self.frequency[term], self.related_terms(term))
            for term in entry.words
        ]
        return AnalysisReport(text, True, matches)

    # statistics

    @property
    def flagged_count(self) -> int:
        return len(self.flagged)

    def top_flagged_terms(self, limit: int = DEFAULT_TOP_N) -> list[tuple[str, int]]:
        """The *limit* most frequent terms; ties go to the alphabetically first."""
        ranked = sorted(self.frequency.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[:max(limit, 0)]

    def load_statistics(self, path: str) -> bool:
        try:
            table = storage.read_statistics(path)
        except StorageError as exc:
            log.error("Statistics file not loaded: %s", exc)
            return False
        self.frequency = table
        log.info("Statistics loaded from %s", path)
        return True

    def save_statistics(self, path: str) -> bool:
        try:
            storage.write_statistics(path, self.frequency)
        except StorageError as exc:
            log.error("Statistics not saved: %s", exc)
            return False
        log.info("Statistics saved to %s", path)
        return True

    # feedback

    def last_flagged(self) -> FlaggedContent | None:
        return self.flagged[-1] if self.flagged else None

    def record_feedback(self, correct: bool) -> FlaggedContent | None:
        """Attach a reviewer verdict to the most recent flagged entry."""
        entry = self.last_flagged()
        if entry is None:
            return None
        self.feedback.append((entry.text, correct))
        if not correct:
            log.info("False positive reported for %r", entry.text)
        return entry

    # data directory

    def data_path(self, name: str) -> str:
        return os.path.join(self.data_dir, name)

    def save_state(self) -> bool:
        """Write banned words, graph and statistics into the data directory."""
        try:
            storage.ensure_dir(self.data_dir)
        except StorageError as exc:
            log.error("Data not saved: %s", exc)
            return False
        ok = self.save_banned_words(self.data_path(BANNED_WORDS_FILE))
        ok = self.save_graph(self.data_path(GRAPH_FILE)) and ok
        ok = self.save_statistics(self.data_path(STATISTICS_FILE)) and ok
        return ok

    def load_state(self) -> dict[str, bool]:
        """Load whichever data files exist; returns what was loaded, per file."""
        loaders = (
            (BANNED_WORDS_FILE, self.load_banned_words),
            (GRAPH_FILE, self.load_graph),
            (STATISTICS_FILE, self.load_statistics),
        )
        loaded: dict[str, bool] = {}
        for name, loader in loaders:
            path = self.data_path(name)
            if os.path.exists(path):
                loaded[name] = loader(path)
            else:
                log.warning("%s not found in %s", name, self.data_dir)
                loaded[name] = False
        return loaded
