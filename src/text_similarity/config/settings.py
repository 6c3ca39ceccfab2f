from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


REPO_ROOT = Path(__file__).resolve().parents[3]

EMBED_BACKENDS = ("ollama", "local", "stub")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=REPO_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ollama_base_url: str = Field(
        default="http://localhost:11434",
        description="Base URL of the Ollama server exposing /api/embeddings.",
    )
    ollama_embed_model: str = Field(default="qwen3-embedding:0.6b")
    request_timeout: float = Field(
        default=60.0,
        ge=0.0,
        description="Per-request timeout in seconds; 0 waits indefinitely.",
    )

    embed_backend: str = Field(default="ollama")
    local_embed_model: str = Field(default="all-MiniLM-L6-v2")
    stub_dims: int = Field(default=384, gt=0)

    log_level: str = Field(default="WARNING")

    @field_validator("embed_backend")
    @classmethod
    def check_embed_backend(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in EMBED_BACKENDS:
            raise ValueError(f"Invalid embed_backend '{v}'. Must be one of {list(EMBED_BACKENDS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid LOG_LEVEL '{v}'. Must be one of {valid_levels}")
        return v.upper()

    @property
    def embeddings_url(self) -> str:
        return f"{self.ollama_base_url.rstrip('/')}/api/embeddings"

    @property
    def timeout_or_none(self) -> float | None:
        return self.request_timeout or None
