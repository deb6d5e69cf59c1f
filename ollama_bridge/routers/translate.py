"""Translation API endpoints."""

from fastapi import APIRouter, Depends

from ollama_bridge.core.errors import BridgeError
from ollama_bridge.core.models import (
    TextTranslationRequest,
    TextTranslationResult,
    TranslateRequest,
    TranslateResult,
)
from ollama_bridge.routers.common import get_ollama_client, http_error
from ollama_bridge.services.ollama_client import OllamaClient
from ollama_bridge.services.translation_service import TranslationService

router = APIRouter()


@router.post("/ollama/translate", response_model=TranslateResult)
async def translate(
    payload: TranslateRequest,
    client: OllamaClient = Depends(get_ollama_client),
):
    try:
        return await client.translate(payload)
    except BridgeError as e:
        raise http_error(e) from e


@router.post("/translate/text", response_model=TextTranslationResult)
async def translate_text(
    payload: TextTranslationRequest,
    client: OllamaClient = Depends(get_ollama_client),
):
    """Build the translation prompt for the language pair and run it."""
    service = TranslationService(client)

    try:
        return await service.translate_text(payload)
    except BridgeError as e:
        raise http_error(e) from e
