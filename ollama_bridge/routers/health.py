"""Health and status endpoints."""

import time

from fastapi import APIRouter, Depends

from ollama_bridge import __version__
from ollama_bridge.core.config import get_settings
from ollama_bridge.core.errors import BridgeError
from ollama_bridge.core.models import HealthCheckRequest, HealthCheckResult, ServiceHealth
from ollama_bridge.routers.common import get_ollama_client, http_error
from ollama_bridge.services.ollama_client import OllamaClient

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint with service information."""
    settings = get_settings()

    return {
        "message": "Ollama bridge for the desktop translator",
        "status": "active",
        "version": __version__,
        "endpoints": {
            "translate": "/ollama/translate",
            "translate_text": "/translate/text",
            "ollama_health": "/ollama/health",
            "save_binary": "/files/binary",
            "health": "/health",
        },
        "default_endpoint": settings.ollama_endpoint,
        "default_model": settings.ollama_model,
    }


@router.get("/health", response_model=ServiceHealth)
async def health():
    """Liveness of this backend (not of the Ollama server)."""
    return ServiceHealth(status="healthy", timestamp=time.time(), version=__version__)


@router.post("/ollama/health", response_model=HealthCheckResult)
async def check_ollama_health(
    payload: HealthCheckRequest,
    client: OllamaClient = Depends(get_ollama_client),
):
    """Report whether the Ollama server is reachable and has the model installed."""
    try:
        return await client.check_health(payload)
    except BridgeError as e:
        raise http_error(e) from e
