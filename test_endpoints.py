"""
Tests for the HTTP command surface with the Ollama server mocked out.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from ollama_bridge import __version__
from ollama_bridge.core.config import Settings
from ollama_bridge.main import app
from ollama_bridge.routers.common import get_ollama_client
from ollama_bridge.services.ollama_client import OllamaClient

ENGINE = {"endpoint": "http://ollama.local:11434/", "model": "translategemma"}


@pytest.fixture
def mock_ollama():
    """Route the app's Ollama client through a swappable handler."""
    state = {"handler": lambda request: httpx.Response(404)}

    def handler(request: httpx.Request) -> httpx.Response:
        return state["handler"](request)

    app.dependency_overrides[get_ollama_client] = lambda: OllamaClient(
        Settings(), transport=httpx.MockTransport(handler)
    )
    yield state
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "active"
    assert data["version"] == __version__
    assert data["endpoints"]["translate"] == "/ollama/translate"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_translate(client, mock_ollama):
    mock_ollama["handler"] = lambda request: httpx.Response(200, json={"response": "hola"})

    response = client.post("/ollama/translate", json={**ENGINE, "prompt": "hello"})

    assert response.status_code == 200
    assert response.json() == {"text": "hola"}


def test_translate_upstream_error(client, mock_ollama):
    mock_ollama["handler"] = lambda request: httpx.Response(500, text="oops")

    response = client.post("/ollama/translate", json={**ENGINE, "prompt": "hello"})

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert "500" in detail
    assert "oops" in detail


def test_translate_decode_error(client, mock_ollama):
    mock_ollama["handler"] = lambda request: httpx.Response(200, json={"text": "hola"})

    response = client.post("/ollama/translate", json={**ENGINE, "prompt": "hello"})

    assert response.status_code == 502
    assert "parse" in response.json()["detail"]


def test_translate_connection_error(client, mock_ollama):
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    mock_ollama["handler"] = refuse

    response = client.post("/ollama/translate", json={**ENGINE, "prompt": "hello"})

    assert response.status_code == 503
    assert "Failed to connect" in response.json()["detail"]


def test_translate_rejects_token_with_basic_auth(client, mock_ollama):
    payload = {**ENGINE, "prompt": "hello", "apiToken": "t", "username": "u", "password": "p"}

    response = client.post("/ollama/translate", json=payload)

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert isinstance(detail, str)
    assert "either an API token or a username/password" in detail
    assert "Value error" not in detail
    assert "\"t\"" not in response.text
    assert "apiToken" not in response.text


def test_validation_error_is_plain_message(client):
    payload = {"endpoint": "http://ollama.local:11434", "apiToken": "secret-token"}

    response = client.post("/ollama/translate", json=payload)

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert isinstance(detail, str)
    assert "model" in detail
    assert "prompt" in detail
    assert "secret-token" not in response.text


def test_preflight_from_foreign_origin_is_refused(client):
    response = client.options(
        "/files/binary",
        headers={
            "Origin": "https://evil.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert "access-control-allow-origin" not in response.headers
    assert "access-control-allow-credentials" not in response.headers


def test_preflight_from_shell_origin_is_allowed(client):
    response = client.options(
        "/files/binary",
        headers={
            "Origin": "tauri://localhost",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "tauri://localhost"


def test_ollama_health_camel_case_result(client, mock_ollama):
    mock_ollama["handler"] = lambda request: httpx.Response(
        200, json={"models": [{"name": "llama3:8b"}]}
    )

    response = client.post("/ollama/health", json={**ENGINE, "model": "llama3"})

    assert response.status_code == 200
    data = response.json()
    assert data["reachable"] is True
    assert data["modelInstalled"] is True
    assert data["models"] == ["llama3:8b"]


def test_ollama_health_soft_failure(client, mock_ollama):
    mock_ollama["handler"] = lambda request: httpx.Response(503)

    response = client.post("/ollama/health", json=ENGINE)

    assert response.status_code == 200
    data = response.json()
    assert data["reachable"] is False
    assert data["modelInstalled"] is False
    assert data["models"] == []
    assert "503" in data["message"]


def test_ollama_health_connection_error(client, mock_ollama):
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    mock_ollama["handler"] = refuse

    response = client.post("/ollama/health", json=ENGINE)

    assert response.status_code == 503


def test_translate_text_builds_prompt(client, mock_ollama):
    seen = {}

    def handler(request):
        seen["body"] = request.content
        return httpx.Response(200, json={"response": "  你好\n"})

    mock_ollama["handler"] = handler
    payload = {
        **ENGINE,
        "sourceLanguage": "English",
        "targetLanguage": "Simplified Chinese",
        "inputMarkdown": "Hello",
    }

    response = client.post("/translate/text", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["outputMarkdown"] == "你好"
    assert data["usedPrompt"].startswith(
        "You are a professional English (en) to Simplified Chinese (zh-CN) translator."
    )
    assert b"translategemma" in seen["body"]


def test_save_binary(client, tmp_path):
    target = tmp_path / "book.epub"

    response = client.post("/files/binary", json={"path": str(target), "bytes": [80, 75, 3, 4]})

    assert response.status_code == 204
    assert target.read_bytes() == b"PK\x03\x04"


def test_save_binary_failure(client, tmp_path):
    target = tmp_path / "missing" / "book.epub"

    response = client.post("/files/binary", json={"path": str(target), "bytes": [1]})

    assert response.status_code == 500
    assert str(target) in response.json()["detail"]


def test_save_binary_rejects_out_of_range_bytes(client, tmp_path):
    response = client.post(
        "/files/binary", json={"path": str(tmp_path / "x"), "bytes": [256]}
    )

    assert response.status_code == 422
