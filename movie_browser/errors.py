"""Error types for the movie proxy.

Every failure path ends in one of these; the HTTP layer turns them into a
``{"message": ...}`` body with the carried status code.
"""

from __future__ import annotations


class MovieBrowserError(RuntimeError):
    """Base error carrying an HTTP status code and a client-facing message."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}


class ClientInputError(MovieBrowserError):
    """Malformed category, page or movie id."""

    status_code = 400


class ConfigurationError(MovieBrowserError):
    """Missing credential; a deployment problem, never retryable."""

    status_code = 500


class UpstreamError(MovieBrowserError):
    """TMDB rejected or failed the request."""

    status_code = 500


class UpstreamShapeError(MovieBrowserError):
    """TMDB answered 2xx with a body that does not match the contract."""

    status_code = 502


class TransportError(MovieBrowserError):
    """The upstream call itself failed (DNS, reset, timeout, bad JSON)."""

    status_code = 500


__all__ = [
    "ClientInputError",
    "ConfigurationError",
    "MovieBrowserError",
    "TransportError",
    "UpstreamError",
    "UpstreamShapeError",
]
