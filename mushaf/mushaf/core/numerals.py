"""
Decimal numeral alphabets used in Quran text.

Verse numbers in the scraped text are written with Arabic-Indic digits
(U+0660-U+0669) or Extended Arabic-Indic digits (U+06F0-U+06F9). This
module converts between those digit runs and integers.
"""

from types import MappingProxyType
from typing import Literal

ASCII_DIGITS = "0123456789"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
EXTENDED_ARABIC_INDIC_DIGITS = "۰۱۲۳۴۵۶۷۸۹"

# Regex character class covering both non-Latin alphabets
INDIC_DIGIT_CLASS = "[٠-٩۰-۹]"

NumeralAlphabet = Literal["ascii", "arabic_indic", "extended_arabic_indic"]

ALPHABETS: MappingProxyType[str, str] = MappingProxyType(
    {
        "ascii": ASCII_DIGITS,
        "arabic_indic": ARABIC_INDIC_DIGITS,
        "extended_arabic_indic": EXTENDED_ARABIC_INDIC_DIGITS,
    }
)

DIGIT_VALUES: MappingProxyType[str, int] = MappingProxyType(
    {char: value for digits in ALPHABETS.values() for value, char in enumerate(digits)}
)


def decode_numeral(text: str) -> int:
    """
    Convert a run of decimal digits to an integer.

    Each character may come from any of the three alphabets, so mixed runs
    decode as well. The leftmost digit is the most significant.

    Args:
        text: Digit run, e.g. "١٠٢" or "۱۰۲"

    Returns:
        Non-negative integer value

    Raises:
        ValueError: If text is empty or contains a non-digit character

    Examples:
        >>> decode_numeral("١٠٢")
        102
        >>> decode_numeral("۴۲")
        42
    """
    if not text:
        raise ValueError("Cannot decode an empty numeral")

    value = 0
    for char in text:
        digit = DIGIT_VALUES.get(char)
        if digit is None:
            raise ValueError(f"Not a decimal digit: {char!r} in {text!r}")
        value = value * 10 + digit
    return value


def encode_numeral(value: int, alphabet: NumeralAlphabet = "arabic_indic") -> str:
    """
    Write a non-negative integer using the digits of one alphabet.

    Examples:
        >>> encode_numeral(19)
        '١٩'
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value: {value}")

    digits = ALPHABETS[alphabet]
    return "".join(digits[int(d)] for d in str(value))
