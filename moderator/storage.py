"""Flat line-oriented files for banned words, graph edges and statistics.

All three formats are UTF-8, one record per line:

  banned words   ``word``
  graph edges    ``term,neighbor1,neighbor2,...``
  statistics     ``term,frequency``

Readers and writers raise :class:`StorageError` when a file cannot be
opened; callers decide how to degrade.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

from moderator.constants import DEFAULT_RELATIONSHIPS, SAMPLE_BANNED_WORDS
from moderator.graph import TermGraph

log = logging.getLogger("moderator.storage")


class StorageError(OSError):
    """A persistence file is missing, unreadable or unwritable."""


def read_lines(path: str) -> list[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f]
    except FileNotFoundError as exc:
        raise StorageError(f"File not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Cannot read {path}: {exc}") from exc


def write_lines(path: str, lines: Iterable[str]) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as exc:
        raise StorageError(f"Cannot write {path}: {exc}") from exc


def normalize_word(raw: str) -> str:
    """Drop every whitespace character and lowercase."""
    return "".join(raw.split()).lower()


def read_banned_words(path: str) -> list[str]:
    words: list[str] = []
    for line in read_lines(path):
        word = normalize_word(line)
        if word:
            words.append(word)
    return words


def write_banned_words(path: str, words: Iterable[str]) -> None:
    write_lines(path, words)


def read_statistics(path: str) -> dict[str, int]:
    """Parse ``term,frequency`` lines; malformed lines are skipped."""
    table: dict[str, int] = {}
    for lineno, line in enumerate(read_lines(path), 1):
        if not line.strip():
            continue
        term, sep, count = line.rpartition(",")
        if not sep or not term:
            log.warning("%s:%d: expected 'term,frequency', got %r", path, lineno, line)
            continue
        try:
            freq = int(count.strip())
        except ValueError:
            log.warning("%s:%d: bad frequency %r for %r", path, lineno, count, term)
            continue
        if freq < 0:
            log.warning("%s:%d: negative frequency for %r ignored", path, lineno, term)
            continue
        table[term] = freq
    return table


def write_statistics(path: str, table: dict[str, int]) -> None:
    write_lines(path, (f"{term},{freq}" for term, freq in table.items()))


def ensure_dir(path: str) -> None:
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"Cannot create directory {path}: {exc}") from exc


def write_sample_banned_words(path: str) -> None:
    write_banned_words(path, SAMPLE_BANNED_WORDS)
    log.info("Sample banned words file created: %s", path)


def write_sample_relationships(path: str) -> None:
    """Default edges in the graph-file format."""
    graph = TermGraph()
    for a, b in DEFAULT_RELATIONSHIPS:
        graph.add_edge(a, b)
    write_lines(path, graph.serialize())
    log.info("Sample relationships file created: %s", path)
