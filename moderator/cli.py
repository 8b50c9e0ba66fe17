"""Interactive terminal menu for the content moderator."""

from __future__ import annotations

import logging
import os

from moderator.constants import (
    BANNED_WORDS_FILE,
    DEFAULT_MAX_DEPTH,
    DEFAULT_RELATIONSHIPS,
    DEFAULT_TOP_N,
    GRAPH_FILE,
    STATISTICS_FILE,
)
from moderator import storage
from moderator.engine import ModerationEngine
from moderator.report import AnalysisReport
from moderator.storage import StorageError

log = logging.getLogger("moderator")

MENU = """
Menu:
  1. Analyze content
  2. View term relationships
  3. Add banned word
  4. Add term relationship
  5. Show statistics
  6. Save data
  7. Exit"""


def build_engine(
    data_dir: str,
    words_path: str | None = None,
    create_sample: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ModerationEngine:
    """Engine loaded from *data_dir*, seeded with sample data where files are missing."""
    engine = ModerationEngine(data_dir, max_depth)
    words_path = words_path or engine.data_path(BANNED_WORDS_FILE)

    if create_sample and not os.path.exists(words_path):
        try:
            storage.ensure_dir(os.path.dirname(words_path) or ".")
            storage.write_sample_banned_words(words_path)
        except StorageError as exc:
            log.error("Could not create sample banned words: %s", exc)
    engine.load_banned_words(words_path)

    graph_path = engine.data_path(GRAPH_FILE)
    if not (os.path.exists(graph_path) and engine.load_graph(graph_path)):
        for a, b in DEFAULT_RELATIONSHIPS:
            engine.add_term_relationship(a, b)

    stats_path = engine.data_path(STATISTICS_FILE)
    if os.path.exists(stats_path):
        engine.load_statistics(stats_path)
    return engine


def render_report(report: AnalysisReport) -> str:
    lines = [
        "",
        "====== CONTENT ANALYSIS ======",
        f'Content: "{report.text}"',
    ]
    if report.flagged:
        lines.append("STATUS: FLAGGED")
        lines.append("Flagged terms:")
        for m in report.matches:
            lines.append(f'- "{m.term}" (Occurrence frequency: {m.frequency})')
            if m.related:
                lines.append(f"  Related terms: {', '.join(m.related)}")
    else:
        lines.append("STATUS: APPROVED (No banned words detected)")
    lines.append("=" * 29)
    return "\n".join(lines)


def render_statistics(engine: ModerationEngine, limit: int = DEFAULT_TOP_N) -> str:
    lines = [
        "",
        "====== MODERATION STATISTICS ======",
        f"Total flagged content: {engine.flagged_count}",
        "Top flagged terms:",
    ]
    for term, freq in engine.top_flagged_terms(limit):
        lines.append(f'- "{term}": {freq} times')
    lines.append("=" * 33)
    return "\n".join(lines)


def render_term_graph(engine: ModerationEngine) -> str:
    lines = ["", "====== TERM RELATIONSHIPS ======"]
    lines.extend(engine.describe_term_graph())
    lines.append("=" * 31)
    return "\n".join(lines)


def _prompt(text: str) -> str | None:
    try:
        return input(text)
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def collect_feedback(engine: ModerationEngine) -> None:
    """Ask the reviewer whether the latest flag was correct."""
    entry = engine.last_flagged()
    if entry is None:
        print("No flagged content to review.")
        return

    print("\n====== FEEDBACK REQUEST ======")
    print(f'Is the flagging correct for: "{entry.text}"?')
    print("1. Yes, correct flagging")
    print("2. No, this is a false positive")
    choice = _prompt("> ")
    if choice is None:
        return
    if choice.strip() == "2":
        engine.record_feedback(False)
        print("Thank you for your feedback. This will help improve the system.")
    else:
        engine.record_feedback(True)
        print("Thank you for confirming.")


def run_cli(engine: ModerationEngine) -> None:
    """Run the menu loop until the user exits."""
    print("==== Content Moderation System ====")

    while True:
        print(MENU)
        choice = _prompt("Choose an option: ")
        if choice is None:
            break
        choice = choice.strip()

        if choice == "1":
            text = _prompt("Enter content to analyze: ")
            if text is None:
                break
            report = engine.analyze(text)
            print(render_report(report))
            if report.flagged:
                collect_feedback(engine)
        elif choice == "2":
            print(render_term_graph(engine))
        elif choice == "3":
            word = _prompt("Enter new banned word: ")
            if word is None:
                break
            if engine.add_banned_word(word):
                print(f'Added "{storage.normalize_word(word)}" to banned words list.')
            else:
                print("Nothing added.")
        elif choice == "4":
            pair = _prompt("Enter two related terms (e.g. scam fraud): ")
            if pair is None:
                break
            parts = pair.split()
            if len(parts) != 2:
                print("  Format: TERM TERM")
                continue
            engine.add_term_relationship(parts[0], parts[1])
            print(f"Linked '{parts[0]}' <-> '{parts[1]}'")
        elif choice == "5":
            print(render_statistics(engine))
        elif choice == "6":
            if engine.save_state():
                print(f"Data saved to {engine.data_dir}")
            else:
                print("Some data could not be saved; see the log.")
        elif choice == "7":
            break
        else:
            print("Invalid option. Please try again.")

    print("Exiting program. Goodbye!")
