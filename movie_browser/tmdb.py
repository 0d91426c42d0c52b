"""TMDB API helpers."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 12.0


def _headers(api_key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key}", "accept": "application/json"}


def _fetch(
    base_url: str,
    path: str,
    api_key: str,
    params: dict[str, Any] | None = None,
    timeout: float = DEFAULT_TIMEOUT_S,
) -> requests.Response:
    """Issue one GET against TMDB; no retries.

    Raises:
        TransportError: the request itself failed (DNS, reset, timeout).
    """
    url = f"{base_url.rstrip('/')}{path}"
    try:
        return requests.get(url, params=params, headers=_headers(api_key), timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("TMDB request to %s failed: %s", path, exc)
        raise TransportError(f"TMDB request failed: {exc}") from exc


def trending_movies(
    base_url: str,
    api_key: str,
    category: str,
    page: int,
    timeout: float = DEFAULT_TIMEOUT_S,
) -> requests.Response:
    return _fetch(
        base_url, f"/trending/movie/{category}", api_key, {"page": page}, timeout
    )


def movie_details(
    base_url: str, api_key: str, movie_id: str, timeout: float = DEFAULT_TIMEOUT_S
) -> requests.Response:
    # Keep the id inside one path segment.
    path = f"/movie/{quote(movie_id, safe='')}"
    return _fetch(base_url, path, api_key, timeout=timeout)


def is_success(resp: requests.Response) -> bool:
    # 2xx only; requests' ``ok`` also accepts 3xx.
    return 200 <= resp.status_code < 300


def error_message(resp: requests.Response, default: str) -> str:
    """Return TMDB's ``status_message`` from an error body, else ``default``."""
    try:
        body = resp.json()
    except ValueError:
        snippet = (resp.text or "")[:200].replace("\n", " ")
        logger.debug("TMDB HTTP %s with non-JSON body: %s", resp.status_code, snippet)
        return default
    if isinstance(body, dict):
        message = body.get("status_message")
        if isinstance(message, str) and message:
            return message
    return default
