"""High-level text translation on top of OllamaClient."""

import logging

from ollama_bridge.core.models import (
    TextTranslationRequest,
    TextTranslationResult,
    TranslateRequest,
)
from ollama_bridge.services.ollama_client import OllamaClient
from ollama_bridge.services.prompt import build_translation_prompt

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Builds the translation prompt and forwards it to the Ollama server.

    Usage:
        service = TranslationService(OllamaClient(settings))
        result = await service.translate_text(request)
    """

    def __init__(self, client: OllamaClient):
        self.client = client

    async def translate_text(self, request: TextTranslationRequest) -> TextTranslationResult:
        prompt = build_translation_prompt(
            request.source_language,
            request.target_language,
            request.input_markdown,
        )
        logger.debug(
            "translate_text %s -> %s chars=%d",
            request.source_language,
            request.target_language,
            len(request.input_markdown),
        )

        result = await self.client.translate(
            TranslateRequest(
                endpoint=request.endpoint,
                model=request.model,
                prompt=prompt,
                api_token=request.api_token,
                username=request.username,
                password=request.password,
            )
        )

        return TextTranslationResult(
            output_markdown=result.text.strip(),
            used_prompt=prompt,
        )
