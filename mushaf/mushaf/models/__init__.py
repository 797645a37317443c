"""
Pydantic data models for Mushaf.

These models represent the core data structures used throughout the library:
- Verse: A single numbered verse recovered from source text
- VerseNumerics: Word, letter and abjad counts for a verse
- Surah: Surah metadata
- SurahText: An assembled surah (Bismillah, verses, raw text)
- SurahPayload / NumericsPayload: Raw upstream responses
"""

from mushaf.models.verse import Verse, VerseNumerics
from mushaf.models.surah import (
    SOURCE_SLUGS,
    SURAH_AYAH_COUNTS,
    SURAH_NAMES,
    Surah,
    SurahText,
)
from mushaf.models.payload import NumericsPayload, SurahPayload

__all__ = [
    "Verse",
    "VerseNumerics",
    "Surah",
    "SurahText",
    "SurahPayload",
    "NumericsPayload",
    "SURAH_NAMES",
    "SURAH_AYAH_COUNTS",
    "SOURCE_SLUGS",
]
