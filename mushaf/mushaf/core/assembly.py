"""
Assembly of a SurahText from the source's text fragments.

Decides what the third fragment is (Bismillah, first verse, or ordinary
text when a surah has no Bismillah), hands the remaining text to the
segmenter, and checks the verse count against known metadata.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from mushaf.core.arabic import is_basmala
from mushaf.core.segmenter import MarkerConvention, find_markers, segment
from mushaf.models.payload import SurahPayload
from mushaf.models.surah import SURAH_AYAH_COUNTS, SurahText

logger = logging.getLogger(__name__)

# Index of the fragment holding the Bismillah (after the title and a blank line)
PREAMBLE_INDEX = 2


class PreambleKind(str, Enum):
    """What the preamble fragment of a surah turned out to be."""

    BASMALA = "basmala"  # un-numbered Bismillah
    VERSE = "verse"  # Bismillah numbered as verse 1 (Al-Fatihah)
    ABSENT = "absent"  # no Bismillah (At-Tawbah)


@dataclass
class SplitPayload:
    """Source fragments separated into Bismillah, verse content and raw text."""

    bismillah: str
    content: str
    raw_text: str
    preamble: PreambleKind


def classify_preamble(fragment: str) -> PreambleKind:
    """
    Classify the fragment that normally carries the Bismillah.

    A fragment ending in a marker worth 1 is the surah's first verse. A
    fragment reading as the Basmala is the un-numbered Bismillah. Anything
    else means the surah starts directly with its verses.

    Examples:
        >>> classify_preamble("بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ ١")
        <PreambleKind.VERSE: 'verse'>
        >>> classify_preamble("بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ")
        <PreambleKind.BASMALA: 'basmala'>
    """
    text = fragment.strip()
    if not text:
        return PreambleKind.ABSENT

    markers = find_markers(text, MarkerConvention.END_OF_UNIT)
    if markers and markers[-1].end == len(text) and markers[-1].value == 1:
        return PreambleKind.VERSE

    if is_basmala(text):
        return PreambleKind.BASMALA

    return PreambleKind.ABSENT


def split_payload(fragments: Sequence[str]) -> SplitPayload:
    """
    Separate the source fragments of one surah.

    The title line and the blank line before the preamble are dropped. The
    verse content is the remaining fragments joined with spaces; the raw
    text keeps every fragment exactly as received.

    Args:
        fragments: ``TextofSura`` list from the source

    Returns:
        SplitPayload with the Bismillah (possibly empty) and verse content
    """
    raw_text = "".join(fragments).strip()

    if len(fragments) <= PREAMBLE_INDEX:
        return SplitPayload(
            bismillah="", content="", raw_text=raw_text, preamble=PreambleKind.ABSENT
        )

    preamble = classify_preamble(fragments[PREAMBLE_INDEX])
    if preamble == PreambleKind.BASMALA:
        bismillah = fragments[PREAMBLE_INDEX].strip()
        body = fragments[PREAMBLE_INDEX + 1:]
    else:
        bismillah = ""
        body = fragments[PREAMBLE_INDEX:]

    content = " ".join(part.strip() for part in body if part.strip())
    return SplitPayload(
        bismillah=bismillah, content=content, raw_text=raw_text, preamble=preamble
    )


def build_surah(
    payload: SurahPayload,
    surah_number: int,
    convention: MarkerConvention | str = MarkerConvention.END_OF_UNIT,
) -> SurahText:
    """
    Build a SurahText from a source payload.

    Args:
        payload: Parsed ``GET /surat/<name>`` response
        surah_number: Surah number (1-114)
        convention: Marker placement used by the source

    Returns:
        Assembled SurahText
    """
    split = split_payload(payload.fragments)
    verses = segment(split.content, convention)

    logger.debug(
        "Surah %d: preamble=%s, %d verses",
        surah_number,
        split.preamble.value,
        len(verses),
    )

    return SurahText(
        surah_number=surah_number,
        name=payload.name,
        bismillah=split.bismillah,
        verses=verses,
        raw_text=split.raw_text,
    )


def check_verse_count(surah: SurahText) -> bool:
    """
    Compare a surah's verses against its known verse count.

    Segmentation never fails loudly, so this is where a skipped or
    duplicated verse number in the source shows up.

    Returns:
        True if the count matches and numbering has no gaps
    """
    expected = SURAH_AYAH_COUNTS[surah.surah_number]

    if surah.verse_count != expected:
        logger.warning(
            "Surah %d (%s): expected %d verses, got %d",
            surah.surah_number,
            surah.name,
            expected,
            surah.verse_count,
        )
        return False

    if not surah.is_contiguous:
        logger.warning(
            "Surah %d (%s): verse numbers are not contiguous",
            surah.surah_number,
            surah.name,
        )
        return False

    return True
