"""
Client for the ghazi369.pythonanywhere.com Quran text service.

Endpoints used:
- ``GET /surat/<name>``: surah text as ``{"NameofSura", "TextofSura"}``
- ``POST /nineteen``: word, letter and abjad counts for a piece of text
"""

import logging
from urllib.parse import quote

import requests
from pydantic import ValidationError

from mushaf.config import MushafSettings, get_settings
from mushaf.core.segmenter import normalize_whitespace
from mushaf.exceptions import InvalidPayloadError, SourceError
from mushaf.models import NumericsPayload, SurahPayload, VerseNumerics
from mushaf.sources.base import BaseSource

logger = logging.getLogger(__name__)


class GhaziSource(BaseSource):
    """
    Fetches surahs and verse numerics over HTTP.

    Example:
        with GhaziSource() as source:
            payload = source.fetch_surah("يونس")
            numerics = source.fetch_numerics(payload.fragments[3])
    """

    def __init__(
        self,
        base_url: str | None = None,
        settings: MushafSettings | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Service root URL (overrides settings)
            settings: Settings instance to use
            session: Pre-built session, mainly for tests
        """
        self._settings = settings or get_settings()
        self._base_url = (base_url or self._settings.base_url).rstrip("/")
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def open(self) -> None:
        if self._session is not None:
            return
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": self._settings.user_agent})
        self._owns_session = True

    def close(self) -> None:
        # An injected session belongs to the caller and stays usable
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def fetch_surah(self, name: str) -> SurahPayload:
        url = f"{self._base_url}/surat/{quote(name, safe='')}"
        data = self._request("GET", url, headers={"Accept": "application/json"})

        try:
            return SurahPayload.model_validate(data)
        except ValidationError as e:
            raise InvalidPayloadError(url, "Invalid data format from source API") from e

    def fetch_numerics(self, text: str) -> VerseNumerics:
        url = f"{self._base_url}/nineteen"
        form = {
            "txt": normalize_whitespace(text).strip(),
            "searchChars": "",
            "searchFwords": "",
        }
        headers = {
            "X-Requested-With": "XMLHttpRequest",
            "Referer": f"{self._base_url}/number-ayat",
        }
        data = self._request("POST", url, data=form, headers=headers)

        try:
            payload = NumericsPayload.model_validate(data)
        except ValidationError as e:
            raise InvalidPayloadError(url, "Invalid numerics format from source API") from e

        return VerseNumerics(
            num_words=payload.num_words,
            num_chars=payload.num_chars,
            abjad_value=payload.abjad_value,
        )

    def _request(self, method: str, url: str, **kwargs) -> dict:
        """
        Send a request and decode its JSON body.

        Network failures are retried up to ``max_retries`` times; HTTP error
        statuses are not.
        """
        if self._session is None:
            self.open()

        last_error: Exception | None = None
        for attempt in range(1, self._settings.max_retries + 1):
            try:
                response = self._session.request(
                    method, url, timeout=self._settings.request_timeout, **kwargs
                )
            except (requests.ConnectionError, requests.Timeout) as e:
                last_error = e
                logger.warning(
                    "Attempt %d/%d for %s failed: %s",
                    attempt,
                    self._settings.max_retries,
                    url,
                    e,
                )
                continue

            if not response.ok:
                raise SourceError(url, response.reason or "HTTP error", response.status_code)

            try:
                data = response.json()
            except ValueError as e:
                raise InvalidPayloadError(url, "Response is not valid JSON") from e

            if not isinstance(data, dict):
                raise InvalidPayloadError(url, "Expected a JSON object")
            return data

        raise SourceError(url, str(last_error))
