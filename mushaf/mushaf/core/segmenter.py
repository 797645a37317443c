"""
Sequential verse segmentation.

The upstream source delivers a surah as one block of text in which every
verse is followed by its number in Arabic-Indic digits:

    "الٓرۚ تِلۡكَ ءَايَٰتُ ٱلۡكِتَٰبِ ٱلۡحَكِيمِ ١ أَكَانَ لِلنَّاسِ عَجَبًا ... ٢"

Digit runs can also appear inside the text itself, so a run only counts as a
verse boundary when its value is the next expected verse number. Any other
run is kept as ordinary text.
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable

from mushaf.core.numerals import INDIC_DIGIT_CLASS, NumeralAlphabet, decode_numeral, encode_numeral
from mushaf.models.verse import Verse


class MarkerConvention(str, Enum):
    """Where verse number markers sit relative to the surrounding text."""

    MID_STREAM = "mid_stream"  # whitespace on both sides
    END_OF_UNIT = "end_of_unit"  # trailing whitespace only


_MARKER_PATTERNS = MappingProxyType(
    {
        MarkerConvention.MID_STREAM: re.compile(
            rf"(?<=\s){INDIC_DIGIT_CLASS}+(?=\s|$)"
        ),
        MarkerConvention.END_OF_UNIT: re.compile(
            rf"(?<!{INDIC_DIGIT_CLASS}){INDIC_DIGIT_CLASS}+(?=\s|$)"
        ),
    }
)

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class NumeralToken:
    """A digit run found while scanning, not yet accepted as a boundary."""

    text: str
    value: int
    start: int
    end: int


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space."""
    return _WHITESPACE.sub(" ", text)


def find_markers(
    content: str,
    convention: MarkerConvention | str = MarkerConvention.END_OF_UNIT,
) -> list[NumeralToken]:
    """
    Locate candidate verse markers in document order.

    Both Arabic-Indic and Extended Arabic-Indic digits are matched in the
    same scan.

    Args:
        content: Text to scan
        convention: Boundary rule a digit run must satisfy

    Returns:
        Candidate markers with their decoded values and positions
    """
    pattern = _MARKER_PATTERNS[MarkerConvention(convention)]
    return [
        NumeralToken(
            text=match.group(),
            value=decode_numeral(match.group()),
            start=match.start(),
            end=match.end(),
        )
        for match in pattern.finditer(content)
    ]


def segment(
    content: str,
    convention: MarkerConvention | str = MarkerConvention.END_OF_UNIT,
) -> list[Verse]:
    """
    Split a surah's text into numbered verses.

    Walks the candidate markers left to right with the next expected verse
    number starting at 1. A marker equal to that number closes the text
    gathered so far as a verse; any other marker stays in the text. Text
    left over after the last accepted marker becomes one final verse.

    Never raises on malformed text: content without sequential markers
    yields a single verse (or none, if it is blank). Callers that know the
    expected verse count should compare it against the result.

    Args:
        content: Verse text with the header and Bismillah already removed
        convention: Marker placement used by the source

    Returns:
        Verses in order

    Examples:
        >>> [v.as_tuple() for v in segment("Hello ١ World ٢")]
        [(1, 'Hello'), (2, 'World')]
    """
    text = normalize_whitespace(content)

    verses: list[Verse] = []
    buffer: list[str] = []
    expected = 1
    cursor = 0

    for token in find_markers(text, convention):
        buffer.append(text[cursor:token.start])
        cursor = token.end

        if token.value != expected:
            buffer.append(token.text)
            continue

        verse_text = "".join(buffer).strip()
        if verse_text:
            verses.append(Verse(number=expected, text=verse_text))
        buffer = []
        expected += 1

    buffer.append(text[cursor:])
    remaining = "".join(buffer).strip()
    if remaining:
        verses.append(Verse(number=expected, text=remaining))

    return verses


def join_verses(
    verses: Iterable[Verse],
    alphabet: NumeralAlphabet = "arabic_indic",
) -> str:
    """
    Rebuild marked-up text from verses, each followed by its number.

    The result uses a space on both sides of every marker, so it segments
    back to the same verses under either convention.
    """
    return " ".join(
        f"{verse.text} {encode_numeral(verse.number, alphabet)}" for verse in verses
    )
