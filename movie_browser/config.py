"""Central configuration for movie_browser."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_TMDB_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_TMDB_TIMEOUT_S = 12.0
DEFAULT_CACHE_TTL_S = 60 * 60
DEFAULT_PORT = 8000


def _split_origins(s: str) -> List[str]:
    """Parse comma-separated string into a list of CORS origins.

    Args:
        s: Comma-separated origins. Defaults to "*" if empty.

    Returns:
        List of non-empty origin strings.

    Example:
        >>> _split_origins("http://localhost:3000, https://example.com")
        ['http://localhost:3000', 'https://example.com']
    """
    return [p.strip() for p in (s or "*").split(",") if p.strip()]


def _read_float(name: str, default: float) -> float:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Non-positive %s=%r; using %s", name, raw, default)
        return default
    return value


@dataclass
class Settings:
    """Configuration settings for movie_browser.

    All settings are loaded from environment variables with sensible defaults.
    """

    TMDB_API_KEY: str
    TMDB_BASE_URL: str
    TMDB_TIMEOUT_S: float
    TRENDING_CACHE_TTL_S: float
    CORS_ORIGINS: List[str]
    HOST: str
    PORT: int


def _read_settings() -> Settings:
    """Read all configuration from environment variables.

    Returns:
        Settings object with all configuration values.

    Note:
        Invalid numeric values fall back to sensible defaults.
        The API key is read from TMDB_API_KEY, then from the legacy
        lowercase ``api_key`` variable.
    """
    api_key = os.environ.get("TMDB_API_KEY") or os.environ.get("api_key") or ""
    base_url = (
        os.environ.get("TMDB_BASE_URL") or DEFAULT_TMDB_BASE_URL
    ).rstrip("/")
    timeout = _read_float("TMDB_TIMEOUT_S", DEFAULT_TMDB_TIMEOUT_S)
    cache_ttl = _read_float("TRENDING_CACHE_TTL_S", float(DEFAULT_CACHE_TTL_S))
    origins = _split_origins(os.environ.get("CORS_ORIGINS", "*"))

    host = os.environ.get("HOST") or "0.0.0.0"
    port_raw = (os.environ.get("PORT") or str(DEFAULT_PORT)).strip()
    try:
        port = int(port_raw) if port_raw else DEFAULT_PORT
    except ValueError:
        port = DEFAULT_PORT

    return Settings(
        TMDB_API_KEY=api_key,
        TMDB_BASE_URL=base_url,
        TMDB_TIMEOUT_S=timeout,
        TRENDING_CACHE_TTL_S=cache_ttl,
        CORS_ORIGINS=origins,
        HOST=host,
        PORT=port,
    )


def get_settings() -> Settings:
    """Return a fresh Settings snapshot of the current environment."""
    return _read_settings()


def validate_settings(settings: Settings) -> None:
    """Log errors and warnings for configuration that will break requests.

    Missing credentials do not stop the server: the endpoints answer with
    a configuration error instead.
    """
    if not settings.TMDB_API_KEY:
        logger.error("TMDB_API_KEY environment variable is not set")
    if not settings.TMDB_BASE_URL.startswith(("http://", "https://")):
        logger.warning("TMDB_BASE_URL does not look like a URL: %s", settings.TMDB_BASE_URL)
    if "*" in settings.CORS_ORIGINS:
        logger.warning("CORS_ORIGINS allows any origin")
