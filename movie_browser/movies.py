"""Single-movie lookup. Never cached."""

from __future__ import annotations

import logging

from . import tmdb
from .errors import (
    ClientInputError,
    ConfigurationError,
    TransportError,
    UpstreamError,
    UpstreamShapeError,
)
from .models.movie import MovieDetails

logger = logging.getLogger(__name__)

MISSING_ID_ERROR = "Movie ID is required"
MISSING_KEY_ERROR = "API key is required"
FETCH_ERROR = "Failed to fetch movie"
SHAPE_ERROR = "Invalid data format from TMDB"


def fetch_by_id(
    id_raw: str | None,
    api_key: str | None,
    base_url: str,
    timeout: float = tmdb.DEFAULT_TIMEOUT_S,
) -> MovieDetails:
    """Return TMDB's details payload for one movie, verbatim.

    Unlike the trending path, every upstream failure collapses into a
    plain 500 with a fixed message; TMDB's status and body are not exposed.
    """
    if not id_raw:
        raise ClientInputError(MISSING_ID_ERROR)
    if not api_key:
        raise ConfigurationError(MISSING_KEY_ERROR)

    try:
        resp = tmdb.movie_details(base_url, api_key, id_raw, timeout)
    except TransportError as exc:
        raise UpstreamError(FETCH_ERROR) from exc

    if not tmdb.is_success(resp):
        logger.warning("TMDB movie %s returned HTTP %s", id_raw, resp.status_code)
        raise UpstreamError(FETCH_ERROR)

    try:
        data = resp.json()
    except ValueError as exc:
        logger.warning("TMDB movie %s returned invalid JSON: %s", id_raw, exc)
        raise UpstreamError(FETCH_ERROR) from exc

    # null, false, 0 and "" are rejected; empty objects and lists pass.
    if data is None or (not data and not isinstance(data, (dict, list))):
        raise UpstreamShapeError(SHAPE_ERROR)
    return data
