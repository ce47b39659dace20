"""
Demo FastAPI application wired with LanguageMiddleware.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from langmiddleware.api.language import router as language_router
from langmiddleware.config import settings
from langmiddleware.middleware import LanguageExtractor, LanguageMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler for startup and shutdown.
    """
    extractor = app.state.language_extractor
    logger.info(f"Starting Language API (source: {extractor.source.value})")

    yield

    logger.info("Shutting down Language API")


def create_app(extractor: Optional[LanguageExtractor] = None) -> FastAPI:
    """
    Build the application.

    Args:
        extractor: Language extractor to install (defaults to one built from settings)

    Returns:
        Configured FastAPI application
    """
    if extractor is None:
        extractor = LanguageExtractor.from_settings(settings)

    app = FastAPI(
        title="Language API",
        description="Request language negotiation from cookies and Accept-Language",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.language_extractor = extractor

    app.add_middleware(LanguageMiddleware, extractor=extractor)

    app.include_router(language_router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Language API",
            "version": "0.1.0",
            "status": "running",
            "docs": "/docs",
        }

    return app


app = create_app()
