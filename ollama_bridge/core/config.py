from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ollama
    ollama_endpoint: str = "http://127.0.0.1:11434"
    ollama_model: str = "translategemma"

    # Timeouts (seconds); generation is slow, the tags probe is not
    generate_timeout: float = 180.0
    health_timeout: float = 15.0

    # Server
    host: str = "127.0.0.1"
    port: int = 8765
    # Origins of the desktop shell webview only
    cors_origins: List[str] = [
        "tauri://localhost",
        "http://tauri.localhost",
        "http://localhost:1420",
    ]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
