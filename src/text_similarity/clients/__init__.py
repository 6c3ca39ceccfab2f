from __future__ import annotations

import os
from typing import Any, Protocol

from text_similarity.config.settings import Settings
from text_similarity.core.results import EmbeddingResult
from text_similarity.exceptions import EmbeddingBackendError

from .ollama_client import OllamaEmbeddingClient, fetch_embedding_or_none
from .stub_embedder import StubEmbedder

_TRUTHY = {"1", "true", "yes", "on"}


class EmbedderProtocol(Protocol):
    model: str

    async def fetch_embedding(self, text: str) -> EmbeddingResult:
        ...

    async def aclose(self) -> None:
        ...

    async def __aenter__(self) -> Any:
        ...

    async def __aexit__(self, *exc_info: Any) -> None:
        ...


def _stub_forced() -> bool:
    flag = os.environ.get("USE_EMBED_STUB")
    return flag is not None and str(flag).lower() in _TRUTHY


def build_embedder(
    settings: Settings,
    model: str | None = None,
    base_url: str | None = None,
) -> EmbedderProtocol:
    """
    Pick the embedding backend from settings.
    USE_EMBED_STUB forces the deterministic stub for offline runs.
    `base_url` only applies to the Ollama backend.
    """
    if _stub_forced() or settings.embed_backend == "stub":
        return StubEmbedder(dims=settings.stub_dims)
    if settings.embed_backend == "local":
        # Imported lazily: sentence-transformers is an optional extra
        try:
            from .local_embedder import LocalEmbedder
        except ImportError as exc:
            raise EmbeddingBackendError(
                "The local backend requires sentence-transformers (pip install textsim[local])",
                str(exc),
            ) from exc

        return LocalEmbedder(model or settings.local_embed_model)
    return OllamaEmbeddingClient(settings, model=model, base_url=base_url)


__all__ = [
    "EmbedderProtocol",
    "OllamaEmbeddingClient",
    "StubEmbedder",
    "build_embedder",
    "fetch_embedding_or_none",
]
