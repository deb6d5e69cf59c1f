"""
Ollama HTTP Client

Thin async wrapper around the two Ollama routes the desktop shell needs:

- ``POST /api/generate`` for one-shot, non-streaming generation
- ``GET /api/tags`` to list installed models

Every call opens its own ``httpx.AsyncClient`` with the timeout of its flow,
issues exactly one request and maps failures onto the errors in
``ollama_bridge.core.errors``. Nothing is retried here.
"""

import logging
import time
from typing import Any, List, Optional

import httpx

from ollama_bridge.core.config import Settings
from ollama_bridge.core.errors import (
    CredentialConflictError,
    OllamaConnectionError,
    OllamaDecodeError,
    OllamaStatusError,
)
from ollama_bridge.core.models import (
    HealthCheckRequest,
    HealthCheckResult,
    TranslateRequest,
    TranslateResult,
)

logger = logging.getLogger(__name__)

GENERATE_ROUTE = "/api/generate"
TAGS_ROUTE = "/api/tags"
LOG_BODY_LIMIT = 500


def build_url(endpoint: str, route: str) -> str:
    """Join ``endpoint`` and ``route`` with exactly one slash between them."""
    return f"{endpoint.rstrip('/')}{route}"


def is_model_installed(requested: str, installed: List[str]) -> bool:
    """True if ``requested`` is installed exactly or under some ``:tag``."""
    prefix = f"{requested}:"
    return any(name == requested or name.startswith(prefix) for name in installed)


def health_message(model: str, installed: bool) -> str:
    if installed:
        return f"Check passed: model '{model}' is installed"
    return f"Ollama is reachable, but model '{model}' is not installed"


class OllamaClient:
    """
    Client for an Ollama-compatible inference server.

    Attributes:
        settings (Settings): Supplies the per-flow timeouts.
        transport (httpx.AsyncBaseTransport | None): Optional transport handed
            to httpx, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout, transport=self.transport)

    async def translate(self, request: TranslateRequest) -> TranslateResult:
        """
        Run one non-streaming generation and return the generated text.

        Args:
            request (TranslateRequest): Endpoint, model, prompt and optional
                credentials (bearer token OR username/password).

        Returns:
            TranslateResult: The ``response`` field of the server reply.

        Raises:
            CredentialConflictError: Both a token and basic credentials given.
            OllamaConnectionError: The endpoint could not be reached.
            OllamaStatusError: The server answered with a non-2xx status.
            OllamaDecodeError: The body is not ``{"response": <string>}``.
        """
        if request.uses_token and request.uses_basic_auth:
            raise CredentialConflictError()

        url = build_url(request.endpoint, GENERATE_ROUTE)
        started_at = time.perf_counter()
        logger.info(
            "translate start endpoint=%s model=%s prompt_chars=%d",
            request.endpoint,
            request.model,
            len(request.prompt),
        )

        headers = {}
        auth = None
        if request.uses_token:
            headers["Authorization"] = f"Bearer {request.api_token}"
        elif request.uses_basic_auth:
            auth = httpx.BasicAuth(request.username or "", request.password or "")

        payload = {
            "model": request.model,
            "prompt": request.prompt,
            "stream": False,
        }

        try:
            async with self._client(self.settings.generate_timeout) as client:
                response = await client.post(url, json=payload, headers=headers, auth=auth)
        except httpx.TransportError as e:
            logger.error("translate request error endpoint=%s error=%r", url, e)
            raise OllamaConnectionError(url, e) from e

        if not response.is_success:
            logger.error(
                "translate bad status endpoint=%s status=%d body=%s",
                url,
                response.status_code,
                response.text[:LOG_BODY_LIMIT],
            )
            raise OllamaStatusError(
                response.status_code, response.text, response.reason_phrase
            )

        text = self._parse_generate(response)

        logger.info(
            "translate done endpoint=%s model=%s elapsed_ms=%d",
            request.endpoint,
            request.model,
            (time.perf_counter() - started_at) * 1000,
        )
        return TranslateResult(text=text)

    async def check_health(self, request: HealthCheckRequest) -> HealthCheckResult:
        """
        Probe ``/api/tags`` and report whether ``request.model`` is installed.

        A reachable server answering with an error status is NOT an error:
        it comes back as ``reachable=False`` with the status in the message.
        Only a failed connection or an unparseable model list raises.

        Raises:
            OllamaConnectionError: The endpoint could not be reached.
            OllamaDecodeError: The body is not ``{"models": [{"name": ...}]}``.
        """
        url = build_url(request.endpoint, TAGS_ROUTE)

        try:
            async with self._client(self.settings.health_timeout) as client:
                response = await client.get(url)
        except httpx.TransportError as e:
            logger.warning("health check cannot reach endpoint=%s error=%r", url, e)
            raise OllamaConnectionError(url, e) from e

        if not response.is_success:
            logger.warning(
                "health check bad status endpoint=%s status=%d", url, response.status_code
            )
            return HealthCheckResult(
                reachable=False,
                model_installed=False,
                models=[],
                message=(
                    f"Ollama responded with error status "
                    f"{response.status_code} {response.reason_phrase}".rstrip()
                ),
            )

        models = self._parse_tags(response)
        installed = is_model_installed(request.model, models)
        logger.info(
            "health check endpoint=%s model=%s installed=%s models=%d",
            url,
            request.model,
            installed,
            len(models),
        )
        return HealthCheckResult(
            reachable=True,
            model_installed=installed,
            models=models,
            message=health_message(request.model, installed),
        )

    @staticmethod
    def _json(response: httpx.Response, what: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise OllamaDecodeError(what, e) from e

    def _parse_generate(self, response: httpx.Response) -> str:
        data = self._json(response, "response")
        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            logger.error("translate parse error body=%s", response.text[:LOG_BODY_LIMIT])
            raise OllamaDecodeError("response", "missing string field 'response'")
        return text

    def _parse_tags(self, response: httpx.Response) -> List[str]:
        data = self._json(response, "model list")
        entries = data.get("models") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise OllamaDecodeError("model list", "missing list field 'models'")

        names = []
        for entry in entries:
            name = entry.get("name") if isinstance(entry, dict) else None
            if not isinstance(name, str):
                raise OllamaDecodeError("model list", f"invalid model entry {entry!r}")
            names.append(name)
        return names
