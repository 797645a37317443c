"""
Mushaf: numbered Quran verses from a scraped text source.
"""

from mushaf.core import MarkerConvention, build_surah, decode_numeral, segment
from mushaf.models import Surah, SurahText, Verse, VerseNumerics

__version__ = "0.1.0"

__all__ = [
    "MarkerConvention",
    "build_surah",
    "decode_numeral",
    "segment",
    "Surah",
    "SurahText",
    "Verse",
    "VerseNumerics",
    "__version__",
]
