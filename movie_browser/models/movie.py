"""TMDB payload shapes.

These only describe what TMDB sends back; the proxy passes payloads
through untouched.
"""

from __future__ import annotations

from typing import Any, TypedDict


class Movie(TypedDict, total=False):
    """Movie entry of a trending list."""

    adult: bool
    backdrop_path: str
    id: int
    title: str
    original_language: str
    original_title: str
    overview: str
    poster_path: str
    media_type: str
    genre_ids: list[int]
    popularity: float
    release_date: str
    video: bool
    vote_average: float
    vote_count: int


class TrendingPage(TypedDict, total=False):
    """One page of /trending/movie/{window}."""

    page: int
    results: list[Movie]
    total_pages: int
    total_results: int


class Genre(TypedDict):
    id: int
    name: str


class MovieDetails(TypedDict, total=False):
    """Response of /movie/{id} (partial)."""

    adult: bool
    backdrop_path: str
    belongs_to_collection: dict[str, Any] | None
    budget: int
    genres: list[Genre]
    homepage: str
    id: int
    imdb_id: str | None
    original_language: str
    original_title: str
    overview: str
    popularity: float
    poster_path: str
    production_companies: list[dict[str, Any]]
    production_countries: list[dict[str, str]]
    release_date: str
    revenue: int
    runtime: int
    spoken_languages: list[dict[str, str]]
    status: str
    tagline: str | None
    title: str
    video: bool
    vote_average: float
    vote_count: int
