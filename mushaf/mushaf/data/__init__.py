"""
Saved Quran dataset.

The dataset is a single JSON file holding a list of SurahText records, as
written by ``scrape_quran.py``. Surah metadata (names, verse counts) is
built in and needs no file.
"""

import json
from pathlib import Path

from pydantic import TypeAdapter

from mushaf.exceptions import DatasetNotFoundError
from mushaf.models import SURAH_AYAH_COUNTS, SURAH_NAMES, Surah, SurahText

_SURAH_LIST = TypeAdapter(list[SurahText])


def _check_surah_id(surah_id: int) -> None:
    if surah_id not in SURAH_NAMES:
        raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-114.")


def save_quran(surahs: list[SurahText], path: str | Path) -> Path:
    """
    Write surahs to a JSON dataset, ordered by surah number.

    Args:
        surahs: Surahs to save
        path: Output file; parent directories are created

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    ordered = sorted(surahs, key=lambda s: s.surah_number)
    data = _SURAH_LIST.dump_python(ordered, mode="json", exclude_none=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return path


def load_quran(path: str | Path) -> list[SurahText]:
    """
    Load every surah from a JSON dataset.

    Raises:
        DatasetNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise DatasetNotFoundError(path)

    with open(path, encoding="utf-8") as f:
        return _SURAH_LIST.validate_python(json.load(f))


def load_surah(surah_id: int, path: str | Path) -> SurahText:
    """
    Load one surah from a JSON dataset.

    Raises:
        ValueError: If surah_id is out of range
        KeyError: If the dataset does not contain the surah
    """
    _check_surah_id(surah_id)
    for surah in load_quran(path):
        if surah.surah_number == surah_id:
            return surah
    raise KeyError(f"Surah {surah_id} is not in dataset {path}")


def get_surah_name(surah_id: int) -> str:
    """Arabic name of a surah."""
    _check_surah_id(surah_id)
    return SURAH_NAMES[surah_id]


def get_ayah_count(surah_id: int) -> int:
    """Number of verses in a surah."""
    _check_surah_id(surah_id)
    return SURAH_AYAH_COUNTS[surah_id]


def get_all_surahs() -> list[Surah]:
    """Metadata for all 114 surahs in order."""
    return [Surah.from_id(surah_id) for surah_id in sorted(SURAH_NAMES)]


__all__ = [
    "save_quran",
    "load_quran",
    "load_surah",
    "get_surah_name",
    "get_ayah_count",
    "get_all_surahs",
]
