"""
Surah metadata and the assembled surah text model.
"""

from typing import Optional

from pydantic import BaseModel, Field

from mushaf.models.verse import Verse, VerseNumerics

# Surah names in Arabic
SURAH_NAMES: dict[int, str] = {
    1: "الفاتحة",
    2: "البقرة",
    3: "آل عمران",
    4: "النساء",
    5: "المائدة",
    6: "الأنعام",
    7: "الأعراف",
    8: "الأنفال",
    9: "التوبة",
    10: "يونس",
    11: "هود",
    12: "يوسف",
    13: "الرعد",
    14: "إبراهيم",
    15: "الحجر",
    16: "النحل",
    17: "الإسراء",
    18: "الكهف",
    19: "مريم",
    20: "طه",
    21: "الأنبياء",
    22: "الحج",
    23: "المؤمنون",
    24: "النور",
    25: "الفرقان",
    26: "الشعراء",
    27: "النمل",
    28: "القصص",
    29: "العنكبوت",
    30: "الروم",
    31: "لقمان",
    32: "السجدة",
    33: "الأحزاب",
    34: "سبأ",
    35: "فاطر",
    36: "يس",
    37: "الصافات",
    38: "ص",
    39: "الزمر",
    40: "غافر",
    41: "فصلت",
    42: "الشورى",
    43: "الزخرف",
    44: "الدخان",
    45: "الجاثية",
    46: "الأحقاف",
    47: "محمد",
    48: "الفتح",
    49: "الحجرات",
    50: "ق",
    51: "الذاريات",
    52: "الطور",
    53: "النجم",
    54: "القمر",
    55: "الرحمن",
    56: "الواقعة",
    57: "الحديد",
    58: "المجادلة",
    59: "الحشر",
    60: "الممتحنة",
    61: "الصف",
    62: "الجمعة",
    63: "المنافقون",
    64: "التغابن",
    65: "الطلاق",
    66: "التحريم",
    67: "الملك",
    68: "القلم",
    69: "الحاقة",
    70: "المعارج",
    71: "نوح",
    72: "الجن",
    73: "المزمل",
    74: "المدثر",
    75: "القيامة",
    76: "الإنسان",
    77: "المر\u200fسلات",
    78: "النبأ",
    79: "النازعات",
    80: "عبس",
    81: "التكوير",
    82: "الانفطار",
    83: "المطففين",
    84: "الانشقاق",
    85: "البروج",
    86: "الطارق",
    87: "الأعلى",
    88: "الغاشية",
    89: "الفجر",
    90: "البلد",
    91: "الشمس",
    92: "الليل",
    93: "الضحى",
    94: "الشرح",
    95: "التين",
    96: "العلق",
    97: "القدر",
    98: "البينة",
    99: "الزلزلة",
    100: "العاديات",
    101: "القارعة",
    102: "التكاثر",
    103: "العصر",
    104: "الهمزة",
    105: "الفيل",
    106: "قريش",
    107: "الماعون",
    108: "الكوثر",
    109: "الكافرون",
    110: "النصر",
    111: "المسد",
    112: "الإخلاص",
    113: "الفلق",
    114: "الناس",
}

# Names under which the upstream source publishes a surah, where they
# differ from SURAH_NAMES. The slug for 77 carries a right-to-left mark.
SOURCE_SLUGS: dict[int, str] = {
    3: "آل_عمران",
    77: "المر\u200fسلات",
    82: "الإنفطار",
    84: "الإنشقاق",
}

# Total verse count per surah (Hafs numbering, 6236 verses)
SURAH_AYAH_COUNTS: dict[int, int] = {
    1: 7, 2: 286, 3: 200, 4: 176, 5: 120, 6: 165, 7: 206, 8: 75, 9: 129, 10: 109,
    11: 123, 12: 111, 13: 43, 14: 52, 15: 99, 16: 128, 17: 111, 18: 110, 19: 98, 20: 135,
    21: 112, 22: 78, 23: 118, 24: 64, 25: 77, 26: 227, 27: 93, 28: 88, 29: 69, 30: 60,
    31: 34, 32: 30, 33: 73, 34: 54, 35: 45, 36: 83, 37: 182, 38: 88, 39: 75, 40: 85,
    41: 54, 42: 53, 43: 89, 44: 59, 45: 37, 46: 35, 47: 38, 48: 29, 49: 18, 50: 45,
    51: 60, 52: 49, 53: 62, 54: 55, 55: 78, 56: 96, 57: 29, 58: 22, 59: 24, 60: 13,
    61: 14, 62: 11, 63: 11, 64: 18, 65: 12, 66: 12, 67: 30, 68: 52, 69: 52, 70: 44,
    71: 28, 72: 28, 73: 20, 74: 56, 75: 40, 76: 31, 77: 50, 78: 40, 79: 46, 80: 42,
    81: 29, 82: 19, 83: 36, 84: 25, 85: 22, 86: 17, 87: 19, 88: 26, 89: 30, 90: 20,
    91: 15, 92: 21, 93: 11, 94: 8, 95: 8, 96: 19, 97: 5, 98: 8, 99: 8, 100: 11,
    101: 11, 102: 8, 103: 3, 104: 9, 105: 5, 106: 4, 107: 7, 108: 3, 109: 6, 110: 3,
    111: 5, 112: 4, 113: 5, 114: 6,
}


class Surah(BaseModel):
    """
    Represents a Surah (chapter) of the Quran.

    Attributes:
        id: Surah number (1-114)
        name_arabic: Arabic name of the surah
        source_slug: Name used by the upstream text source
        total_ayahs: Total number of verses in this surah
    """

    id: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    name_arabic: str = Field(
        ...,
        description="Arabic name of the surah",
    )
    source_slug: str = Field(
        ...,
        description="Name used in the upstream source URL",
    )
    total_ayahs: int = Field(
        ...,
        description="Total number of verses in this surah",
        ge=1,
    )

    @classmethod
    def from_id(cls, surah_id: int) -> "Surah":
        """
        Create a Surah instance from its ID using built-in metadata.

        Args:
            surah_id: Surah number (1-114)

        Returns:
            Surah instance with metadata
        """
        if surah_id < 1 or surah_id > 114:
            raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-114.")

        name = SURAH_NAMES[surah_id]
        return cls(
            id=surah_id,
            name_arabic=name,
            source_slug=SOURCE_SLUGS.get(surah_id, name.replace(" ", "_")),
            total_ayahs=SURAH_AYAH_COUNTS[surah_id],
        )

    @classmethod
    def from_name(cls, name: str) -> "Surah":
        """
        Look up a surah by its Arabic name or source slug.

        Raises:
            ValueError: If no surah carries that name
        """
        wanted = name.strip().replace("_", " ")
        for surah_id, surah_name in SURAH_NAMES.items():
            slug = SOURCE_SLUGS.get(surah_id, "").replace("_", " ")
            if wanted in (surah_name, slug):
                return cls.from_id(surah_id)
        raise ValueError(f"Unknown surah name: {name!r}")

    def __str__(self) -> str:
        return f"Surah {self.id}: {self.name_arabic}"


class SurahText(BaseModel):
    """
    A surah reconstructed from the upstream text source.

    Built once per fetch and not mutated afterwards; the enrichment pass
    returns a copy with numerics attached.

    Attributes:
        surah_number: Surah number (1-114)
        name: Display name as returned by the source
        bismillah: Un-numbered opening line, empty when the surah has none
            or when it is counted as verse 1
        verses: Numbered verses in order
        raw_text: Concatenation of all source fragments, kept for provenance
        bismillah_numerics: Optional statistics for the Bismillah
    """

    surah_number: int = Field(..., ge=1, le=114)
    name: str
    bismillah: str = ""
    verses: list[Verse] = Field(default_factory=list)
    raw_text: str = ""
    bismillah_numerics: Optional[VerseNumerics] = None

    model_config = {"frozen": True}

    @property
    def verse_count(self) -> int:
        return len(self.verses)

    @property
    def is_contiguous(self) -> bool:
        """Whether verse numbers run 1..n with no gaps."""
        return all(verse.number == i + 1 for i, verse in enumerate(self.verses))

    def get_verse(self, number: int) -> Verse:
        for verse in self.verses:
            if verse.number == number:
                return verse
        raise KeyError(f"Surah {self.surah_number} has no verse {number}")

    def __str__(self) -> str:
        return f"SurahText({self.surah_number}: {self.name}, {self.verse_count} verses)"
