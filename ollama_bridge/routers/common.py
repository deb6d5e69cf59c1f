"""Shared router dependencies and error mapping."""

from fastapi import Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ollama_bridge.core.config import Settings, get_settings
from ollama_bridge.core.errors import (
    BridgeError,
    CredentialConflictError,
    OllamaConnectionError,
    OllamaError,
)
from ollama_bridge.services.ollama_client import OllamaClient


def get_ollama_client(settings: Settings = Depends(get_settings)) -> OllamaClient:
    return OllamaClient(settings)


def http_error(error: BridgeError) -> HTTPException:
    """Map a bridge error onto an HTTP status; the detail is the plain message."""
    if isinstance(error, OllamaConnectionError):
        code = 503
    elif isinstance(error, OllamaError):
        code = 502
    elif isinstance(error, CredentialConflictError):
        code = 422
    else:
        code = 500
    return HTTPException(status_code=code, detail=str(error))


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error['msg']}" if location else error["msg"]


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Report invalid payloads as one plain message.

    A bridge error raised inside a model validator keeps its own status and
    message. The submitted input is never echoed back since it may carry
    credentials.
    """
    errors = exc.errors()
    for error in errors:
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, BridgeError):
            http_exc = http_error(cause)
            return JSONResponse(
                status_code=http_exc.status_code, content={"detail": http_exc.detail}
            )

    message = "; ".join(_describe(error) for error in errors) or "Invalid request"
    return JSONResponse(status_code=422, content={"detail": message})
