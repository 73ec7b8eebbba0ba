"""
PromptVEO Scene Proxy

Main application entry point with ASGI server.
"""

import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend import __version__
from backend.api import health, scenes
from backend.core.config import Settings, get_settings
from backend.core.exceptions import ConfigurationError
from backend.core.logging import get_logger, setup_logging
from backend.core.provider import GeminiProvider, TextCompletionProvider
from backend.services.scenes import SceneService

logger = get_logger("main")

MISSING_KEY_MESSAGE = "FATAL ERROR: GEMINI_API_KEY environment variable is not set."


def build_provider(settings: Settings) -> GeminiProvider:
    """Create the Gemini provider, failing if no API key is configured."""
    if not settings.has_api_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE)
    return GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        temperature=settings.temperature,
        timeout=settings.request_timeout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting PromptVEO scene API (model: {app.state.settings.gemini_model})...")
    yield
    logger.info("Shutting down PromptVEO scene API...")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Answer undecodable bodies with the same {error} shape as the routes."""
    logger.info(f"Rejected {request.url.path}: malformed request body")
    return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON."})


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[TextCompletionProvider] = None,
) -> FastAPI:
    """Build the FastAPI app.

    Settings and the provider are created once here and shared, read-only,
    by every request.
    """
    settings = settings or get_settings()
    provider = provider or build_provider(settings)

    app = FastAPI(
        title="PromptVEO Scene API",
        description="Transcript to scene-list generation backed by Gemini",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.scene_service = SceneService(provider)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(scenes.router, prefix="/api", tags=["Scenes"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "PromptVEO Scene API",
            "version": __version__,
            "status": "running"
        }

    return app


def run():
    """Run the server. Exits immediately when no API key is configured."""
    settings = get_settings()
    setup_logging(settings.log_level)

    if not settings.has_api_key:
        logger.critical(MISSING_KEY_MESSAGE)
        sys.exit(1)

    logger.info(f"PromptVEO backend listening on port {settings.port}")
    uvicorn.run(
        "backend.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info"
    )


if __name__ == "__main__":
    run()
