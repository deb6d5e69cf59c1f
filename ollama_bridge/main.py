"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from ollama_bridge import __version__
from ollama_bridge.core.config import get_settings
from ollama_bridge.core.logging import setup_logging
from ollama_bridge.routers import files, health, translate
from ollama_bridge.routers.common import validation_error_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    logger.info(
        "🚀 Ollama bridge v%s started (default endpoint %s, model %s)",
        __version__,
        settings.ollama_endpoint,
        settings.ollama_model,
    )

    yield

    # Shutdown
    logger.info("🛑 Ollama bridge shutting down")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Ollama Bridge",
        description="Translate text and check model availability on an Ollama server",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, validation_error_handler)

    # Include routers
    application.include_router(health.router, tags=["Health"])
    application.include_router(translate.router, tags=["Translation"])
    application.include_router(files.router, tags=["Files"])

    return application


app = create_app()
