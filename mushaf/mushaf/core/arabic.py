"""
Arabic text normalization utilities.

Used to recognise fixed phrases (the Basmala) in Uthmani script, where
diacritics, Quranic annotation marks and alef variants would otherwise
defeat a plain string comparison.
"""

import re


# Basmala pattern: بسم الله الرحمن الرحيم with variations
BASMALA_PATTERN = re.compile(r"(?:ب\s*س?م?\s*)?الله\s*الرحمن\s*الرحيم")


def normalize_arabic(text: str) -> str:
    """
    Normalize Arabic text for comparison.

    Performs the following normalizations:
    - Replace all alef variants (أ إ آ ا ٱ) with plain alef (ا)
    - Replace alef maqsura (ى) with ya (ي)
    - Replace ta marbuta (ة) with ha (ه)
    - Remove diacritics and Quranic annotation marks
    - Remove punctuation
    - Collapse multiple spaces

    Args:
        text: Arabic text to normalize

    Returns:
        Normalized text string

    Examples:
        >>> normalize_arabic("بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ")
        'بسم الله الرحمن الرحيم'
        >>> normalize_arabic("أَعُوذُ")
        'اعوذ'
    """
    if not text:
        return ""

    # Normalize alef variants (including alef wasla ٱ U+0671)
    text = re.sub(r"[أإآاٱ]", "ا", text)

    # Normalize alef maqsura to ya
    text = re.sub(r"ى", "ي", text)

    # Normalize ta marbuta to ha
    text = re.sub(r"ة", "ه", text)

    # Normalize hamza carriers: ؤ → و, ئ → ي
    text = re.sub(r"ؤ", "و", text)
    text = re.sub(r"ئ", "ي", text)

    # Remove tashkeel (U+064B-U+065F, U+0670) and Quranic marks (U+06D6-U+06ED)
    text = re.sub(r"[\u064B-\u065F\u0670\u06D6-\u06ED]", "", text)

    # Remove punctuation (keeping letters and spaces)
    text = re.sub(r"[^\w\s]", "", text)

    # Collapse multiple spaces and strip
    text = re.sub(r"\s+", " ", text).strip()

    return text


def is_basmala(text: str) -> bool:
    """
    Check whether text reads as the Basmala.

    Examples:
        >>> is_basmala("بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ")
        True
    """
    return BASMALA_PATTERN.search(normalize_arabic(text)) is not None
