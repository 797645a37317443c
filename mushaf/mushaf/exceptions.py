"""
Exceptions raised by Mushaf.

The segmentation core never raises; these cover the source client and the
on-disk dataset.
"""


class MushafError(Exception):
    """Base class for all Mushaf errors."""


class SourceError(MushafError):
    """The upstream text source could not be reached or answered with an error."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Request to {url} failed{status}: {reason}")


class InvalidPayloadError(SourceError):
    """The source answered, but not with the expected data format."""


class DatasetNotFoundError(MushafError):
    """No saved Quran dataset exists at the given path."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Quran dataset not found: {path}. Run scrape_quran.py first.")
