#!/usr/bin/env python3
"""Regenerate emojify's alias data file from GitHub's gemoji database."""

import argparse
import asyncio
import sys
from pathlib import Path

from emojify.core.logging import setup_logging, shutdown_logging
from emojify.exceptions import AliasTableError
from emojify.table.scraper import GEMOJI_URL, update_data_file

DEFAULT_OUT = Path(__file__).resolve().parents[1] / "src" / "emojify" / "table" / "data" / "emoji.json"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch gemoji data and rewrite the embedded alias table.")
    parser.add_argument("--url", default=GEMOJI_URL, help="gemoji db/emoji.json URL")
    parser.add_argument("--out", default=str(DEFAULT_OUT), help="Data file to write")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    # Importing emojify already set up quiet logging; switch to stderr output
    shutdown_logging()
    logger = setup_logging("emojify.scraper", include_console=True, include_file=False)
    try:
        count = asyncio.run(update_data_file(args.out, args.url))
    except AliasTableError as e:
        logger.error(f"Data update failed: {e}")
        return 1
    print(f"Wrote {count} emoji to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
