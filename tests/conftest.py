"""Shared test fixtures and dummy classes."""

from __future__ import annotations

from typing import Any

import pytest

from movie_browser.cache import TrendingCache
from movie_browser.config import Settings


class DummyResponse:
    """Dummy HTTP response for testing."""

    def __init__(
        self,
        data: object = None,
        status: int = 200,
        text: str = "",
        invalid_json: bool = False,
    ) -> None:
        self._data = data
        self._invalid_json = invalid_json
        self.status_code = status
        self.text = text or str(data)
        self.ok = 200 <= status < 300

    def json(self) -> object:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._data


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class RecordingGet:
    """Stand-in for requests.get that records calls and replays responses."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def __call__(self, url: str, **kwargs: Any) -> Any:
        self.calls.append({"url": url, **kwargs})
        result = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(result, Exception):
            raise result
        return result


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "TMDB_API_KEY": "test-api-key",
        "TMDB_BASE_URL": "https://tmdb.test/3",
        "TMDB_TIMEOUT_S": 5.0,
        "TRENDING_CACHE_TTL_S": 3600.0,
        "CORS_ORIGINS": ["http://localhost:3000"],
        "HOST": "127.0.0.1",
        "PORT": 8000,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> TrendingCache:
    return TrendingCache(ttl_s=3600, clock=clock)
