"""
Verse (ayah) data model.
"""

from typing import Optional

from pydantic import BaseModel, Field


class VerseNumerics(BaseModel):
    """
    Numeric statistics attached to a verse or to the Bismillah.

    Values are computed by the upstream source, not locally.
    """

    num_words: int = Field(..., description="Number of words", ge=0)
    num_chars: int = Field(..., description="Number of letters", ge=0)
    abjad_value: int = Field(..., description="Sum of abjad letter values", ge=0)

    model_config = {"frozen": True}


class Verse(BaseModel):
    """
    A single numbered verse recovered from a surah's text.

    Attributes:
        number: Verse number within the surah (1-based)
        text: The Arabic text of the verse, without its number marker
        numerics: Optional statistics attached by the enrichment pass
    """

    number: int = Field(
        ...,
        description="Verse number within the surah (1-based)",
        ge=1,
    )
    text: str = Field(
        ...,
        description="The Arabic text of the verse",
        min_length=1,
    )
    numerics: Optional[VerseNumerics] = Field(
        default=None,
        description="Word, letter and abjad counts for the verse",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "number": 1,
                    "text": "الٓرۚ تِلۡكَ ءَايَٰتُ ٱلۡكِتَٰبِ ٱلۡحَكِيمِ",
                }
            ]
        },
    }

    def as_tuple(self) -> tuple[int, str]:
        return self.number, self.text

    def __str__(self) -> str:
        return f"Verse({self.number})"

    def __repr__(self) -> str:
        return f"Verse(number={self.number}, text={self.text[:20]!r})"
