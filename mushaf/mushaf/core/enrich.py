"""
Numeric enrichment of assembled surahs.

Attaches word, letter and abjad counts, fetched one text at a time from a
source, to the Bismillah and every verse of a surah. Verse numbers and
texts are left untouched; a new SurahText is returned.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from mushaf.exceptions import SourceError
from mushaf.models import SurahText, Verse, VerseNumerics
from mushaf.sources.base import BaseSource

logger = logging.getLogger(__name__)


@dataclass
class EnrichStats:
    """Request counts from one enrichment pass."""
    requests: int = 0
    succeeded: int = 0
    failed: int = 0

    def merge(self, other: "EnrichStats") -> None:
        self.requests += other.requests
        self.succeeded += other.succeeded
        self.failed += other.failed


def enrich_surah(
    surah: SurahText,
    source: BaseSource,
    delay: float = 0.8,
    progress_callback: Callable[[str, VerseNumerics | None], None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> tuple[SurahText, EnrichStats]:
    """
    Fetch numerics for the Bismillah and each verse of a surah.

    Requests are sent sequentially with ``delay`` seconds before each one.
    A failed request is logged and counted; the item keeps whatever
    numerics it already had.

    Args:
        surah: Surah to enrich
        source: Open source to query
        delay: Pause before each request in seconds
        progress_callback: Optional callback(label, numerics) after each request
        sleep: Sleep function, replaceable in tests

    Returns:
        Tuple of (enriched surah, stats)
    """
    stats = EnrichStats()

    def fetch(label: str, text: str) -> VerseNumerics | None:
        stats.requests += 1
        sleep(delay)
        try:
            numerics = source.fetch_numerics(text)
        except SourceError as e:
            stats.failed += 1
            logger.error("Surah %d %s: %s", surah.surah_number, label, e)
            numerics = None
        else:
            stats.succeeded += 1
        if progress_callback:
            progress_callback(label, numerics)
        return numerics

    bismillah_numerics = surah.bismillah_numerics
    if surah.bismillah.strip():
        numerics = fetch("bismillah", surah.bismillah)
        if numerics is not None:
            bismillah_numerics = numerics

    verses: list[Verse] = []
    for verse in surah.verses:
        numerics = fetch(f"verse {verse.number}", verse.text)
        if numerics is None:
            verses.append(verse)
        else:
            verses.append(verse.model_copy(update={"numerics": numerics}))

    enriched = surah.model_copy(
        update={"verses": verses, "bismillah_numerics": bismillah_numerics}
    )
    return enriched, stats
