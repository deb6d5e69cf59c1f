"""Pydantic models for request/response schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, conint, model_validator
from pydantic.alias_generators import to_camel

from ollama_bridge.core.errors import CredentialConflictError


class CamelModel(BaseModel):
    """Base model speaking camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class EngineConfig(CamelModel):
    """Where to send a generation request and how to authenticate."""

    endpoint: str
    model: str
    api_token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def uses_token(self) -> bool:
        return bool(self.api_token)

    @property
    def uses_basic_auth(self) -> bool:
        return bool(self.username) or bool(self.password)

    @model_validator(mode="after")
    def check_single_credential(self):
        if self.uses_token and self.uses_basic_auth:
            raise CredentialConflictError()
        return self


class TranslateRequest(EngineConfig):
    """Raw prompt forwarded to ``/api/generate``."""

    prompt: str


class TranslateResult(CamelModel):
    text: str


class HealthCheckRequest(CamelModel):
    endpoint: str
    model: str


class HealthCheckResult(CamelModel):
    """Reachability of the Ollama server and presence of the requested model."""

    reachable: bool
    model_installed: bool
    models: List[str] = Field(default_factory=list)
    message: str


class TextTranslationRequest(EngineConfig):
    """Text to translate; the prompt is built server-side."""

    source_language: str
    target_language: str
    input_markdown: str


class TextTranslationResult(CamelModel):
    output_markdown: str
    used_prompt: str


class SaveBinaryRequest(CamelModel):
    path: str
    data: List[conint(ge=0, le=255)] = Field(alias="bytes")


class ServiceHealth(BaseModel):
    """Health check response."""

    status: str
    timestamp: float
    version: str
