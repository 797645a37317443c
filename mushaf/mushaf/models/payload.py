"""
Raw payloads returned by the upstream text source.
"""

from pydantic import BaseModel, ConfigDict, Field


class SurahPayload(BaseModel):
    """
    JSON body of ``GET /surat/<name>``.

    ``fragments[0]`` is the title line, ``fragments[1]`` is blank,
    ``fragments[2]`` is the Bismillah (or the first verse) and the rest is
    verse text with numbers at the end of each verse.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., alias="NameofSura", min_length=1)
    fragments: list[str] = Field(..., alias="TextofSura")


class NumericsPayload(BaseModel):
    """JSON body of ``POST /nineteen``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    num_words: int = Field(..., alias="val_numOFwords")
    num_chars: int = Field(..., alias="val_numChar")
    abjad_value: int = Field(..., alias="val_totalnum")
