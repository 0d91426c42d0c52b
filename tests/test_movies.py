import pytest
import requests

from conftest import DummyResponse, RecordingGet
from movie_browser import movies, tmdb
from movie_browser.errors import (
    ClientInputError,
    ConfigurationError,
    UpstreamError,
    UpstreamShapeError,
)

BASE_URL = "https://tmdb.test/3"
MOVIE = {
    "id": 123,
    "title": "Test Movie",
    "runtime": 120,
    "genres": [{"id": 28, "name": "Action"}],
    "tagline": "An epic test",
}


@pytest.mark.parametrize("movie_id", ["", None])
def test_missing_id(movie_id) -> None:
    with pytest.raises(ClientInputError) as exc_info:
        movies.fetch_by_id(movie_id, "", BASE_URL)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Movie ID is required"


def test_missing_api_key() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        movies.fetch_by_id("123", "", BASE_URL)
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "API key is required"


def test_returns_payload_verbatim(monkeypatch) -> None:
    fake_get = RecordingGet(DummyResponse(MOVIE))
    monkeypatch.setattr(tmdb.requests, "get", fake_get)

    assert movies.fetch_by_id("123", "test-key", BASE_URL) is MOVIE
    call = fake_get.calls[0]
    assert call["url"] == f"{BASE_URL}/movie/123"
    assert call["params"] is None
    assert call["headers"]["Authorization"] == "Bearer test-key"


def test_lookup_is_never_cached(monkeypatch) -> None:
    fake_get = RecordingGet(DummyResponse(MOVIE))
    monkeypatch.setattr(tmdb.requests, "get", fake_get)

    movies.fetch_by_id("123", "test-key", BASE_URL)
    movies.fetch_by_id("123", "test-key", BASE_URL)
    assert len(fake_get.calls) == 2


@pytest.mark.parametrize("status", [401, 404, 500])
def test_upstream_status_is_not_propagated(monkeypatch, status) -> None:
    monkeypatch.setattr(
        tmdb.requests,
        "get",
        RecordingGet(DummyResponse({"status_message": "secret"}, status=status)),
    )

    with pytest.raises(UpstreamError) as exc_info:
        movies.fetch_by_id("123", "test-key", BASE_URL)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to fetch movie"


def test_transport_failure(monkeypatch) -> None:
    monkeypatch.setattr(
        tmdb.requests, "get", RecordingGet(requests.ConnectionError("dns failure"))
    )

    with pytest.raises(UpstreamError) as exc_info:
        movies.fetch_by_id("123", "test-key", BASE_URL)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to fetch movie"


def test_invalid_json_body(monkeypatch) -> None:
    monkeypatch.setattr(
        tmdb.requests, "get", RecordingGet(DummyResponse(None, invalid_json=True))
    )

    with pytest.raises(UpstreamError) as exc_info:
        movies.fetch_by_id("123", "test-key", BASE_URL)
    assert exc_info.value.status_code == 500


@pytest.mark.parametrize("body", [None, False, 0, ""])
def test_empty_scalar_payload_is_bad_gateway(monkeypatch, body) -> None:
    monkeypatch.setattr(tmdb.requests, "get", RecordingGet(DummyResponse(body)))

    with pytest.raises(UpstreamShapeError) as exc_info:
        movies.fetch_by_id("123", "test-key", BASE_URL)

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Invalid data format from TMDB"


@pytest.mark.parametrize("body", [{}, [], 1, "x", True])
def test_truthy_or_container_payload_is_passed_through(monkeypatch, body) -> None:
    monkeypatch.setattr(tmdb.requests, "get", RecordingGet(DummyResponse(body)))

    assert movies.fetch_by_id("123", "test-key", BASE_URL) == body
