"""
Shared fixtures and test configuration for Mushaf tests.
"""

import pytest
import requests

from mushaf.config import MushafSettings
from mushaf.models import SurahPayload, SurahText, Verse


BISMILLAH = "بِسۡمِ ٱللَّهِ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ"


@pytest.fixture
def bismillah():
    return BISMILLAH


@pytest.fixture
def fatiha_fragments():
    """Al-Fatihah as the source sends it: the Bismillah is verse 1."""
    return [
        "ﵧ سُورَةُ ٱلۡفَاتِحَةِ ﵦ",
        "\n",
        f"{BISMILLAH} ١",
        " ٱلۡحَمۡدُ لِلَّهِ رَبِّ ٱلۡعَٰلَمِينَ ٢ ٱلرَّحۡمَٰنِ ٱلرَّحِيمِ ٣",
        " مَٰلِكِ يَوۡمِ ٱلدِّينِ ٤",
    ]


@pytest.fixture
def tawbah_fragments():
    """At-Tawbah: no Bismillah, verses start right after the title."""
    return [
        "ﵧ سُورَةُ التَّوۡبَةِ ﵦ",
        "\n",
        "بَرَآءَةٞ مِّنَ ٱللَّهِ وَرَسُولِهِۦٓ إِلَى ٱلَّذِينَ عَٰهَدتُّم مِّنَ ٱلۡمُشۡرِكِينَ ١",
        " فَسِيحُواْ فِي ٱلۡأَرۡضِ أَرۡبَعَةَ أَشۡهُرٖ ٢",
    ]


@pytest.fixture
def yunus_fragments():
    """Yunus: un-numbered Bismillah followed by numbered verses."""
    return [
        "ﵧ سُورَةُ يُونُسَ ﵦ",
        "\n",
        BISMILLAH,
        "الٓرۚ تِلۡكَ ءَايَٰتُ ٱلۡكِتَٰبِ ٱلۡحَكِيمِ ١",
        " أَكَانَ لِلنَّاسِ عَجَبًا أَنۡ أَوۡحَيۡنَآ ٢",
        " إِنَّ رَبَّكُمُ ٱللَّهُ ٱلَّذِي خَلَقَ ٱلسَّمَٰوَٰتِ وَٱلۡأَرۡضَ فِي سِتَّةِ أَيَّامٖ ٣",
    ]


@pytest.fixture
def yunus_payload(yunus_fragments):
    return SurahPayload(name="يونس", fragments=yunus_fragments)


@pytest.fixture
def sample_surah():
    """A small assembled surah (Al-Asr)."""
    return SurahText(
        surah_number=103,
        name="العصر",
        bismillah=BISMILLAH,
        verses=[
            Verse(number=1, text="وَٱلۡعَصۡرِ"),
            Verse(number=2, text="إِنَّ ٱلۡإِنسَٰنَ لَفِي خُسۡرٍ"),
            Verse(number=3, text="إِلَّا ٱلَّذِينَ ءَامَنُواْ وَعَمِلُواْ ٱلصَّٰلِحَٰتِ"),
        ],
        raw_text="...",
    )


@pytest.fixture
def test_settings():
    """Settings that never wait and never retry more than twice."""
    return MushafSettings(
        base_url="https://example.test/",
        request_delay=0.0,
        numerics_delay=0.0,
        max_retries=2,
        request_timeout=5.0,
    )


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, data=None, status_code=200, reason="OK", text=None):
        self._data = data
        self.status_code = status_code
        self.reason = reason
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._data is None:
            raise ValueError("No JSON object could be decoded")
        return self._data


class FakeSession:
    """Records requests and replays queued responses or exceptions."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.headers = {}
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""
    return FakeResponse
