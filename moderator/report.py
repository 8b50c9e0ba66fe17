"""Result objects produced by the moderation engine."""

from __future__ import annotations


class TermMatch:
    """A banned term found in analyzed text."""

    __slots__ = ("term", "frequency", "related")

    def __init__(self, term: str, frequency: int, related: list[str] | None = None):
        self.term = term
        self.frequency = frequency  # cumulative count across all analyses
        self.related = related or []

    def __repr__(self) -> str:
        rel = f"  related={', '.join(self.related)}" if self.related else ""
        return f"{self.term} x{self.frequency}{rel}"


class FlaggedContent:
    """Entry in the flagged-content log."""

    __slots__ = ("text", "words")

    def __init__(self, text: str, words: list[str]):
        self.text = text
        self.words = words

    def __repr__(self) -> str:
        return f"FlaggedContent({self.text!r}, {self.words!r})"


class AnalysisReport:
    """Outcome of analyzing one piece of text."""

    __slots__ = ("text", "flagged", "matches")

    def __init__(self, text: str, flagged: bool, matches: list[TermMatch] | None = None):
        self.text = text
        self.flagged = flagged
        self.matches = matches or []

    @property
    def terms(self) -> list[str]:
        return [m.term for m in self.matches]

    def __repr__(self) -> str:
        status = "FLAGGED" if self.flagged else "APPROVED"
        return f"{status}: {self.text!r} {self.matches!r}"
