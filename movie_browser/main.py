"""Entrypoint for serving the movie API from the package.

Loads ``.env``, configures logging and runs the app under uvicorn.
"""

from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from .app import create_app
from .config import get_settings
from .logger import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    load_dotenv()
    setup_logging()
    settings = get_settings()
    logger.info("Starting movie_browser on %s:%d", settings.HOST, settings.PORT)
    app = create_app(settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
