"""
Fetch a single surah live and print it as JSON.

The surah can be given by number or by Arabic name.

Usage:
    python fetch_surah.py يونس
    python fetch_surah.py 9 --convention mid_stream
"""

import argparse
import json
import logging
import sys

from mushaf.config import get_settings
from mushaf.core import MarkerConvention, build_surah, check_verse_count
from mushaf.exceptions import MushafError
from mushaf.models import Surah
from mushaf.sources import GhaziSource


def resolve_surah(value: str) -> Surah:
    if value.isdigit():
        return Surah.from_id(int(value))
    return Surah.from_name(value)


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Fetch one surah as numbered verses")
    parser.add_argument("surah", nargs="?", default="يونس", help="Surah number or Arabic name")
    parser.add_argument(
        "--convention",
        choices=[c.value for c in MarkerConvention],
        default=settings.convention.value,
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        surah = resolve_surah(args.surah)
    except ValueError as e:
        print(json.dumps({"error": str(e)}, ensure_ascii=False))
        sys.exit(2)

    try:
        with GhaziSource(settings=settings) as source:
            payload = source.fetch_surah(surah.source_slug)
    except MushafError as e:
        print(json.dumps({"error": "Failed to scrape data", "details": str(e)}, ensure_ascii=False))
        sys.exit(1)

    surah_text = build_surah(payload, surah.id, args.convention)
    check_verse_count(surah_text)

    print(surah_text.model_dump_json(indent=2, exclude_none=True))


if __name__ == "__main__":
    main()
