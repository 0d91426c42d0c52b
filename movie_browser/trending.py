"""Trending movies: validation, cache lookup and the upstream fetch.

``fetch_trending`` validates the raw request values, answers from the cache
when it can and otherwise calls TMDB once. A response is cached only after
it passed the shape check, so failures never overwrite or create entries.
"""

from __future__ import annotations

import logging
import re

from . import tmdb
from .cache import TrendingCache
from .errors import (
    ClientInputError,
    ConfigurationError,
    TransportError,
    UpstreamError,
    UpstreamShapeError,
)
from .models.cache import TrendingCategory
from .models.movie import TrendingPage

logger = logging.getLogger(__name__)

CATEGORY_ERROR = 'Query param "type" is required and must be "day" or "week"'
PAGE_ERROR = 'Query param "page" must be a positive integer'
MISSING_KEY_ERROR = "Missing TMDB API key"
UPSTREAM_ERROR = "TMDB API error"
SHAPE_ERROR = "Invalid data format from TMDB"
FETCH_ERROR = "Failed to fetch trending movies"

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
_STRICT_INT_RE = re.compile(r"([+-]?[0-9]+)")


def parse_category(category_raw: str | None) -> TrendingCategory:
    # Exact, case-sensitive match; no trimming.
    for category in TrendingCategory:
        if category_raw == category.value:
            return category
    raise ClientInputError(CATEGORY_ERROR)


def parse_page(page_raw: str | None, strict: bool = False) -> int:
    """Parse the ``page`` query value into a positive integer.

    By default only a leading integer is read, so ``"3abc"`` is page 3 and
    ``" 2"`` is page 2. With ``strict=True`` the whole string must be an
    integer.

    Raises:
        ClientInputError: missing, unparseable, or less than 1.
    """
    if page_raw is None:
        raise ClientInputError(PAGE_ERROR)
    if strict:
        match = _STRICT_INT_RE.fullmatch(page_raw)
    else:
        match = _LEADING_INT_RE.match(page_raw)
    if match is None:
        raise ClientInputError(PAGE_ERROR)
    try:
        page = int(match.group(1))
    except ValueError:
        # Digit run past the interpreter's int-string limit.
        raise ClientInputError(PAGE_ERROR) from None
    if page < 1:
        raise ClientInputError(PAGE_ERROR)
    return page


def _is_valid_page(data: object) -> bool:
    return isinstance(data, dict) and isinstance(data.get("results"), list)


def fetch_trending(
    category_raw: str | None,
    page_raw: str | None,
    api_key: str | None,
    base_url: str,
    cache: TrendingCache,
    timeout: float = tmdb.DEFAULT_TIMEOUT_S,
    strict_page: bool = False,
) -> TrendingPage:
    """Return one page of trending movies, from the cache when fresh.

    Checks run in order and the first failure wins: category, page, then
    the API key. A cache hit makes no upstream call and does not rewrite
    the entry.

    Raises:
        ClientInputError: bad category or page (400).
        ConfigurationError: no API key configured (500).
        UpstreamError: TMDB answered non-2xx; carries TMDB's status.
        UpstreamShapeError: 2xx without a ``results`` list (502).
        TransportError: the call failed or the body was not JSON (500).
    """
    category = parse_category(category_raw)
    page = parse_page(page_raw, strict=strict_page)
    if not api_key:
        raise ConfigurationError(MISSING_KEY_ERROR)

    cached = cache.get(category, page)
    if cached is not None:
        logger.debug("Trending cache hit: %s page %d", category.value, page)
        return cached

    logger.debug("Trending cache miss: %s page %d", category.value, page)
    try:
        resp = tmdb.trending_movies(base_url, api_key, category.value, page, timeout)
    except TransportError as exc:
        raise TransportError(FETCH_ERROR) from exc

    if not tmdb.is_success(resp):
        message = tmdb.error_message(resp, UPSTREAM_ERROR)
        logger.warning(
            "TMDB trending %s page %d returned HTTP %s: %s",
            category.value,
            page,
            resp.status_code,
            message,
        )
        raise UpstreamError(message, status_code=resp.status_code)

    try:
        data = resp.json()
    except ValueError as exc:
        logger.warning("TMDB trending returned invalid JSON: %s", exc)
        raise TransportError(FETCH_ERROR) from exc

    if not _is_valid_page(data):
        logger.warning("TMDB trending %s page %d has no results list", category.value, page)
        raise UpstreamShapeError(SHAPE_ERROR)

    cache.put(category, page, data)
    return data
