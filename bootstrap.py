#!/usr/bin/env python3
"""
Setup script for Content Moderator.
Creates a data directory with a sample banned words list and the
default term relationships.
"""

import argparse
import os

from moderator import storage
from moderator.constants import BANNED_WORDS_FILE, DEFAULT_DATA_DIR, GRAPH_FILE
from moderator.storage import StorageError


def create_banned_words(data_dir, force=False):
    """Write the sample banned words file unless one already exists."""
    path = os.path.join(data_dir, BANNED_WORDS_FILE)

    if os.path.exists(path) and not force:
        count = len(storage.read_banned_words(path))
        print(f"Banned words already exist: {path} ({count:,} words)")
        return False

    storage.write_sample_banned_words(path)
    print(f"✓ Sample banned words file created: {path}")
    return True


def create_relationships(data_dir, force=False):
    """Write the default term graph unless one already exists."""
    path = os.path.join(data_dir, GRAPH_FILE)

    if os.path.exists(path) and not force:
        print(f"Term graph already exists: {path}")
        return False

    storage.write_sample_relationships(path)
    print(f"✓ Default term relationships written: {path}")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create sample Content Moderator data files")
    parser.add_argument("--data-dir", default=DEFAULT_DATA_DIR)
    parser.add_argument("--force", action="store_true",
                        help="Overwrite existing files")
    args = parser.parse_args(argv)

    print("=" * 50)
    print("  Content Moderator — Setup")
    print("=" * 50)
    print()

    try:
        storage.ensure_dir(args.data_dir)
        create_banned_words(args.data_dir, args.force)
        create_relationships(args.data_dir, args.force)
    except StorageError as exc:
        print(f"✗ {exc}")
        return 1

    print()
    print("=" * 50)
    print("  Setup complete! Run the moderator:")
    print()
    print(f"    python moderator_cli.py --data-dir {args.data_dir}")
    print("=" * 50)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
