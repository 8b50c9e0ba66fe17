#!/usr/bin/env python3
"""
Content Moderator

Flags text that contains banned words, keeps per-term frequency
statistics and shows loosely related terms from a curated term graph.
Banned words, graph edges and statistics live as flat text files in a
data directory (``./data`` by default).
"""

from __future__ import annotations

import argparse
import logging

from moderator.cli import build_engine, run_cli
from moderator.constants import DEFAULT_DATA_DIR, DEFAULT_MAX_DEPTH


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("moderator")


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Content Moderator -- flags banned words and shows related terms",
    )
    parser.add_argument("--data-dir", type=str, default=DEFAULT_DATA_DIR,
                        help="Directory holding banned words, graph and statistics files")
    parser.add_argument("--words", type=str, default=None,
                        help="Path to a banned words file (one word per line)")
    parser.add_argument("--no-sample", action="store_true",
                        help="Don't create a sample banned words file when none exists")
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                        help="Graph hops searched for related terms")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    engine = build_engine(
        args.data_dir,
        words_path=args.words,
        create_sample=not args.no_sample,
        max_depth=args.max_depth,
    )
    log.debug("Engine ready: %d banned words, %d graph terms", len(engine.trie), len(engine.graph))
    run_cli(engine)


if __name__ == "__main__":
    main()
