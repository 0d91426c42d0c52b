"""Async entry points for the route handlers.

The TMDB calls are blocking (`requests`), so they run in worker threads.
"""

from __future__ import annotations

import asyncio

from . import movies, trending
from .cache import TrendingCache
from .config import Settings
from .models.movie import MovieDetails, TrendingPage


async def trending_movies(
    settings: Settings,
    cache: TrendingCache,
    category: str | None,
    page: str | None,
) -> TrendingPage:
    return await asyncio.to_thread(
        trending.fetch_trending,
        category,
        page,
        settings.TMDB_API_KEY,
        settings.TMDB_BASE_URL,
        cache,
        settings.TMDB_TIMEOUT_S,
    )


async def movie_by_id(settings: Settings, movie_id: str | None) -> MovieDetails:
    return await asyncio.to_thread(
        movies.fetch_by_id,
        movie_id,
        settings.TMDB_API_KEY,
        settings.TMDB_BASE_URL,
        settings.TMDB_TIMEOUT_S,
    )
