"""MoodTunes API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MoodTunesError → {"error": message} JSON
    - CORS configured from settings; open to every origin by default
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - run() wraps uvicorn so PORT/HOST come from Settings, not CLI flags
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moodtunes import __version__
from moodtunes.api.error_handlers import register_error_handlers
from moodtunes.api.routes import health, index, moods, recommend, songs
from moodtunes.config import get_settings
from moodtunes.core.catalog import default_catalog
from moodtunes.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    catalog = default_catalog()
    logger.info(
        f"MoodTunes API started with {len(catalog.songs)} songs "
        f"across {len(catalog.moods)} moods",
    )
    yield
    logger.info("MoodTunes API shutting down")


app = FastAPI(
    title="MoodTunes API", version=__version__, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(index.router)
app.include_router(health.router)
app.include_router(moods.router)
app.include_router(recommend.router)
app.include_router(songs.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
