"""Local file helpers for the shell."""

from fastapi import APIRouter, Response

from ollama_bridge.core.errors import FileWriteError
from ollama_bridge.core.models import SaveBinaryRequest
from ollama_bridge.routers.common import http_error
from ollama_bridge.services.file_writer import save_binary_file

router = APIRouter()


@router.post("/files/binary", status_code=204)
async def save_binary(payload: SaveBinaryRequest):
    try:
        await save_binary_file(payload)
    except FileWriteError as e:
        raise http_error(e) from e
    return Response(status_code=204)
