"""
Core modules for Mushaf.

This package contains the core logic for:
- Decoding Arabic-Indic verse numbers
- Segmenting a surah's text into numbered verses
- Assembling SurahText records from source payloads

Primary API:
    from mushaf.core import segment, MarkerConvention

    verses = segment("Hello ١ World ٢", MarkerConvention.END_OF_UNIT)
"""

# Primary API - what most users need
from mushaf.core.numerals import decode_numeral, encode_numeral
from mushaf.core.segmenter import MarkerConvention, NumeralToken, find_markers, join_verses, segment

# Collection assembly
from mushaf.core.assembly import PreambleKind, build_surah, check_verse_count, split_payload

# Text utilities
from mushaf.core.arabic import is_basmala, normalize_arabic

__all__ = [
    # Primary API
    "decode_numeral",
    "encode_numeral",
    "segment",
    "MarkerConvention",
    "NumeralToken",
    "find_markers",
    "join_verses",
    # Assembly
    "PreambleKind",
    "build_surah",
    "check_verse_count",
    "split_payload",
    # Text utilities
    "is_basmala",
    "normalize_arabic",
]
