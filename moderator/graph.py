"""Undirected term-relationship graph with bounded-depth BFS lookup."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from moderator.constants import DEFAULT_MAX_DEPTH


class TermGraph:
    """Adjacency lists keyed by term.

    Neighbor lists keep insertion order and may hold duplicates when the
    same edge is added twice.  Terms are used exactly as given.
    """

    def __init__(self):
        self.adjacency: dict[str, list[str]] = {}

    def add_edge(self, a: str, b: str) -> None:
        self.adjacency.setdefault(a, []).append(b)
        self.adjacency.setdefault(b, []).append(a)

    def neighbors(self, term: str) -> list[str]:
        return list(self.adjacency.get(term, ()))

    def related_terms(self, start: str, max_depth: int = DEFAULT_MAX_DEPTH) -> list[str]:
        """Terms reachable from *start* within *max_depth* hops.

        Breadth-first, first discovery wins, *start* itself is never
        included.  An unknown *start* yields an empty list.
        """
        visited = {start}
        queue: deque[tuple[str, int]] = deque([(start, 0)])
        related: list[str] = []

        while queue:
            term, depth = queue.popleft()
            if depth > 0:
                related.append(term)
            if depth >= max_depth:
                continue
            for neighbor in self.adjacency.get(term, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append((neighbor, depth + 1))
        return related

    def describe_connections(self, term: str) -> str:
        """Human-readable list of the direct neighbors of *term*."""
        if term not in self.adjacency:
            return f"No connections found for word: {term}"
        return f"Connections for '{term}':\n{term} -> {', '.join(self.adjacency[term])}"

    # persistence

    def serialize(self) -> list[str]:
        """One ``term,neighbor1,neighbor2,...`` line per term."""
        return [",".join([term, *neighbors]) for term, neighbors in self.adjacency.items()]

    def deserialize(self, lines: Iterable[str]) -> None:
        """Replace the adjacency mapping with the records in *lines*.

        Each line is taken as written: the reverse edges are not re-added.
        Empty fields are skipped, so an empty-string neighbor does not
        survive a save and load.
        """
        self.adjacency.clear()
        for line in lines:
            line = line.rstrip("\r\n")
            if not line:
                continue
            term, *fields = line.split(",")
            neighbors = self.adjacency.setdefault(term, [])
            neighbors.extend(f for f in fields if f)

    def terms(self) -> list[str]:
        return list(self.adjacency)

    def __contains__(self, term: str) -> bool:
        return term in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)
