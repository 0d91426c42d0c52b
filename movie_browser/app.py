"""FastAPI application exposing the trending and movie endpoints.

``create_app`` owns the process-wide TrendingCache; tests build a fresh app
(or inject a cache) per case.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import services
from .cache import TrendingCache
from .config import Settings, get_settings, validate_settings
from .errors import MovieBrowserError

logger = logging.getLogger(__name__)


async def _purge_loop(cache: TrendingCache, interval_s: float) -> None:
    while True:
        await asyncio.sleep(interval_s)
        cache.purge_expired()


def create_app(
    settings: Settings | None = None, cache: TrendingCache | None = None
) -> FastAPI:
    settings = settings or get_settings()
    validate_settings(settings)
    trending_cache = (
        cache
        if cache is not None
        else TrendingCache(ttl_s=settings.TRENDING_CACHE_TTL_S)
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = asyncio.create_task(
            _purge_loop(trending_cache, trending_cache.ttl_s)
        )
        try:
            yield
        finally:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    app = FastAPI(title="Movie Browser API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.trending_cache = trending_cache

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(MovieBrowserError)
    async def movie_browser_error_handler(request: Request, exc: MovieBrowserError):
        if exc.status_code >= 500:
            logger.warning(
                "%s %s -> %s: %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc.message,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.get("/")
    async def root():
        return {"message": "Welcome to the backend!"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/trending/{category}")
    async def trending(category: str, page: str | None = None):
        return await services.trending_movies(settings, trending_cache, category, page)

    @app.get("/trending")
    async def trending_without_category(page: str | None = None):
        return await services.trending_movies(settings, trending_cache, None, page)

    @app.get("/movie/{movie_id}")
    async def movie(movie_id: str):
        return await services.movie_by_id(settings, movie_id)

    @app.get("/movie")
    async def movie_without_id():
        return await services.movie_by_id(settings, None)

    return app
