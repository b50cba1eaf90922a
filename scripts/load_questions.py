#!/usr/bin/env python3
"""Load quiz questions from JSON into the SQLite database.

Usage:
    python scripts/load_questions.py [data/questions.json] [--db PATH] [--force]

Options:
    --force     Overwrite existing database
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storage import DEFAULT_DB_PATH, load_questions_file

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_DATA_FILE = PROJECT_ROOT / "data" / "questions.json"


def main():
    parser = argparse.ArgumentParser(description="Load quiz questions into SQLite")
    parser.add_argument(
        "data", nargs="?", type=Path, default=DEFAULT_DATA_FILE, help="JSON data file"
    )
    parser.add_argument("--db", type=Path, default=DEFAULT_DB_PATH)
    parser.add_argument(
        "--force", action="store_true", help="Overwrite existing database"
    )
    args = parser.parse_args()

    if not args.data.exists():
        print(f"Error: {args.data} not found.")
        sys.exit(1)

    if args.db.exists():
        if not args.force:
            print(f"Database already exists at {args.db}")
            print("Use --force to overwrite")
            sys.exit(1)
        print(f"Removing existing database: {args.db}")
        args.db.unlink()

    print(f"Loading {args.data.name} into {args.db}")
    counts = load_questions_file(args.data, args.db)
    for table, count in counts.items():
        print(f"  {table}: {count}")
    print("Done.")


if __name__ == "__main__":
    main()
