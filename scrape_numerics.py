"""
Attach numeric statistics (word count, letter count, abjad value) to the
verses of selected surahs in the saved Quran dataset.

Usage:
    python scrape_numerics.py
    python scrape_numerics.py --surahs 1 57 104
"""

import argparse
import logging
from pathlib import Path

from mushaf.config import get_settings
from mushaf.core.enrich import EnrichStats, enrich_surah
from mushaf.data import load_quran, save_quran
from mushaf.models import VerseNumerics
from mushaf.sources import GhaziSource


def print_progress(label: str, numerics: VerseNumerics | None) -> None:
    if numerics is None:
        print(f"  {label}: ERROR")
    else:
        print(
            f"  {label}: words={numerics.num_words}, "
            f"chars={numerics.num_chars}, abjad={numerics.abjad_value}"
        )


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Fetch per-verse numerics")
    parser.add_argument(
        "--surahs", type=int, nargs="+", default=settings.numerics_surahs,
        help="Surah numbers to enrich",
    )
    parser.add_argument("--dataset", type=Path, default=settings.output_path, help="Dataset path")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print(f"Loading {args.dataset}...")
    surahs = load_quran(args.dataset)
    targets = set(args.surahs)

    total = EnrichStats()
    updated = []

    with GhaziSource(settings=settings) as source:
        for surah in surahs:
            if surah.surah_number not in targets:
                updated.append(surah)
                continue

            print(
                f"\n=== Processing Surah {surah.surah_number}: {surah.name} "
                f"({surah.verse_count} verses) ==="
            )
            enriched, stats = enrich_surah(
                surah,
                source,
                delay=settings.numerics_delay,
                progress_callback=print_progress,
            )
            updated.append(enriched)
            total.merge(stats)

    missing = targets - {s.surah_number for s in surahs}
    if missing:
        print(f"\nNot in dataset: {sorted(missing)}")

    print("\n=== Summary ===")
    print(f"Total requests: {total.requests}")
    print(f"Success: {total.succeeded}")
    print(f"Errors: {total.failed}")

    save_quran(updated, args.dataset)
    print(f"\nSaved {args.dataset}")


if __name__ == "__main__":
    main()
