"""Prefix trie used as an exact whole-word matcher."""

from __future__ import annotations


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal", "word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False
        self.word: str | None = None  # set on terminal nodes only


class Trie:
    """Set of banned words stored as a prefix tree.

    The trie never normalizes its input; callers lowercase and strip
    words before inserting or looking them up.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        node.word = word

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def enumerate_all(self) -> list[str]:
        """Every inserted word, collected depth-first in child insertion order."""
        words: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_terminal:
                words.append(prefix)
            # reversed so children pop in insertion order
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, prefix + ch))
        return words

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._size
