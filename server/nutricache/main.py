"""nutricache FastAPI Application Entry Point."""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, get_settings
from .logging import get_logger, setup_logging
from .routers import stats_router, cache_router, children_router
from .services.backend import BackendClient
from .services.cache import ResponseCache
from .services.nutrition import NutritionService

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    http: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The app owns the one ResponseCache of the process; handlers reach it
    through the dependencies in ``nutricache.dependencies``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        cache = ResponseCache(ttl=settings.cache_ttl)
        client = BackendClient(settings, http=http)
        app.state.cache = cache
        app.state.nutrition = NutritionService(cache, client, settings)
        logger.info("serving %s through cache (ttl=%ss)", settings.api_root, settings.cache_ttl)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title="nutricache",
        description="Response cache in front of the pediatric nutrition backend",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings

    # Include routers with /api prefix
    app.include_router(stats_router, prefix="/api")
    app.include_router(cache_router, prefix="/api")
    app.include_router(children_router, prefix="/api")

    return app


def run():
    """Run the server."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("nutricache running at http://localhost:%s", settings.port)
    uvicorn.run(
        "nutricache.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
