"""
Batch scraper for Quran text.

Fetches every surah from the upstream source in order, splits each one into
numbered verses and saves the result as a single JSON dataset.

Features:
    - Sequential requests with a fixed delay to spare the upstream server
    - Verse counts checked against known metadata
    - Surahs already saved are kept; resume mode skips complete ones
    - Per-surah errors are collected and reported, never fatal

Usage:
    python scrape_quran.py
    python scrape_quran.py --surahs 1 9 10 --output data/quran.json
    python scrape_quran.py --convention mid_stream --resume
"""

import argparse
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from mushaf.config import get_settings
from mushaf.core import MarkerConvention, build_surah, check_verse_count
from mushaf.data import load_quran, save_quran
from mushaf.exceptions import DatasetNotFoundError, MushafError
from mushaf.models import Surah, SurahText
from mushaf.sources import GhaziSource


@dataclass
class ProcessingResult:
    """Result of scraping a single surah."""
    surah_id: int
    surah_name: str
    success: bool
    verse_count: int = 0
    expected_count: int = 0
    count_ok: bool = False
    error_message: str = ""
    skipped: bool = False


@dataclass
class BatchProgress:
    """Track batch scraping progress."""
    total_surahs: int = 0
    processed: int = 0
    skipped: int = 0
    failed: int = 0
    mismatched: int = 0
    results: list = field(default_factory=list)

    def add_result(self, result: ProcessingResult):
        self.results.append(result)
        if result.skipped:
            self.skipped += 1
        elif result.success:
            self.processed += 1
            if not result.count_ok:
                self.mismatched += 1
        else:
            self.failed += 1

    def summary(self) -> str:
        lines = [
            "",
            "=" * 60,
            "BATCH SCRAPING SUMMARY",
            "=" * 60,
            f"Total surahs: {self.total_surahs}",
            f"Successfully scraped: {self.processed}",
            f"Skipped (already saved): {self.skipped}",
            f"Verse count mismatches: {self.mismatched}",
            f"Failed: {self.failed}",
            "-" * 60,
        ]

        # Only surahs needing attention are listed
        for result in self.results:
            if result.skipped or (result.success and result.count_ok):
                continue
            if result.success:
                lines.append(
                    f"Surah {result.surah_id:03d} ({result.surah_name}): "
                    f"{result.verse_count}/{result.expected_count} verses"
                )
            else:
                lines.append(
                    f"Surah {result.surah_id:03d} ({result.surah_name}): {result.error_message}"
                )

        lines.append("=" * 60)
        return "\n".join(lines)


def load_saved(output_path: Path) -> dict[int, SurahText]:
    """Load every surah already in the dataset, keyed by number."""
    try:
        saved = load_quran(output_path)
    except DatasetNotFoundError:
        return {}
    return {surah.surah_number: surah for surah in saved}


def complete_surahs(saved: dict[int, SurahText]) -> dict[int, SurahText]:
    """Keep only surahs with a complete, contiguous verse list."""
    return {
        number: surah
        for number, surah in saved.items()
        if surah.verse_count == Surah.from_id(number).total_ayahs
        and surah.is_contiguous
    }


def scrape_surah(
    source: GhaziSource,
    surah: Surah,
    convention: MarkerConvention,
) -> tuple[ProcessingResult, SurahText | None]:
    """Fetch and assemble one surah."""
    try:
        payload = source.fetch_surah(surah.source_slug)
    except MushafError as e:
        return ProcessingResult(
            surah_id=surah.id,
            surah_name=surah.name_arabic,
            success=False,
            error_message=str(e),
        ), None

    surah_text = build_surah(payload, surah.id, convention)
    result = ProcessingResult(
        surah_id=surah.id,
        surah_name=surah.name_arabic,
        success=True,
        verse_count=surah_text.verse_count,
        expected_count=surah.total_ayahs,
        count_ok=check_verse_count(surah_text),
    )
    return result, surah_text


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Scrape Quran text into numbered verses")
    parser.add_argument("--surahs", type=int, nargs="+", help="Surah numbers (default: all 114)")
    parser.add_argument("--output", type=Path, default=settings.output_path, help="Dataset path")
    parser.add_argument(
        "--convention",
        choices=[c.value for c in MarkerConvention],
        default=settings.convention.value,
        help="Verse marker placement",
    )
    parser.add_argument("--resume", action="store_true", help="Keep complete surahs already saved")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    surah_ids = args.surahs or list(range(1, 115))
    convention = MarkerConvention(args.convention)
    # Surahs not fetched in this run are written back unchanged
    collected = load_saved(args.output)
    existing = complete_surahs(collected) if args.resume else {}

    print(f"Starting to scrape {len(surah_ids)} surahs ({convention.value})...")

    progress = BatchProgress(total_surahs=len(surah_ids))
    batch_start = time.time()

    with GhaziSource(settings=settings) as source:
        for i, surah_id in enumerate(surah_ids, 1):
            surah = Surah.from_id(surah_id)
            print(f"[{i}/{len(surah_ids)}] Fetching {surah.name_arabic}... ", end="", flush=True)

            if surah_id in existing:
                print("skipped (already saved)")
                progress.add_result(ProcessingResult(
                    surah_id=surah_id,
                    surah_name=surah.name_arabic,
                    success=True,
                    skipped=True,
                ))
                continue

            result, surah_text = scrape_surah(source, surah, convention)
            progress.add_result(result)

            if surah_text is None:
                print(f"ERROR: {result.error_message}")
            else:
                collected[surah_id] = surah_text
                marker = "ok" if result.count_ok else f"expected {result.expected_count}"
                print(f"{result.verse_count} verses ({marker})")

            time.sleep(settings.request_delay)

    path = save_quran(list(collected.values()), args.output)

    print(progress.summary())
    print(f"\nData saved to {path} ({path.stat().st_size / 1024:.1f} KB)")
    print(f"[TIME] Total batch time: {time.time() - batch_start:.1f}s")


if __name__ == "__main__":
    main()
