"""
Abstract interface for Quran text sources.
"""

from abc import ABC, abstractmethod

from mushaf.models import SurahPayload, VerseNumerics


class BaseSource(ABC):
    """
    A remote source of surah text and per-verse numerics.

    Implementations hold a network session between ``open`` and ``close``
    and can be used as context managers.
    """

    @abstractmethod
    def open(self) -> None:
        """Prepare the connection to the source."""

    @abstractmethod
    def close(self) -> None:
        """Release the connection to the source."""

    @abstractmethod
    def fetch_surah(self, name: str) -> SurahPayload:
        """
        Fetch the raw text fragments of one surah.

        Args:
            name: Surah name as published by the source

        Returns:
            SurahPayload with the surah name and text fragments
        """

    @abstractmethod
    def fetch_numerics(self, text: str) -> VerseNumerics:
        """
        Fetch word, letter and abjad counts for a piece of text.

        Args:
            text: Verse (or Bismillah) text

        Returns:
            VerseNumerics for the text
        """

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
