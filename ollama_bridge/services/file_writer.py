import asyncio
import logging
from pathlib import Path

from ollama_bridge.core.errors import FileWriteError
from ollama_bridge.core.models import SaveBinaryRequest

logger = logging.getLogger(__name__)


def _write(path: str, data: bytes) -> None:
    Path(path).write_bytes(data)


async def save_binary_file(request: SaveBinaryRequest) -> None:
    """Write ``request.data`` to ``request.path``, replacing any existing file."""
    data = bytes(request.data)
    try:
        await asyncio.to_thread(_write, request.path, data)
    except OSError as e:
        logger.error("save_binary_file failed path=%s error=%s", request.path, e)
        raise FileWriteError(request.path, e) from e

    logger.info("save_binary_file wrote path=%s bytes=%d", request.path, len(data))
