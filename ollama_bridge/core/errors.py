"""Exceptions raised by the bridge services.

Every error carries a human-readable message; routers hand ``str(error)``
back to the shell as-is.
"""

from typing import Optional


class BridgeError(Exception):
    """Base class for all bridge errors."""


class OllamaError(BridgeError):
    """Base class for failures talking to the Ollama server."""


class OllamaConnectionError(OllamaError):
    """The endpoint could not be reached at all (DNS, refusal, timeout)."""

    def __init__(self, endpoint: str, cause: Exception):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"Failed to connect to Ollama at {endpoint}: {cause}")


class OllamaStatusError(OllamaError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str, reason: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"Ollama returned error status {status}: {body}")


class OllamaDecodeError(OllamaError):
    """The response body did not have the expected shape."""

    def __init__(self, what: str, cause: object):
        self.cause = cause
        super().__init__(f"Failed to parse Ollama {what}: {cause}")


class CredentialConflictError(BridgeError, ValueError):
    def __init__(self):
        super().__init__(
            "Provide either an API token or a username/password pair, not both"
        )


class FileWriteError(BridgeError):
    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write file {path}: {cause}")
