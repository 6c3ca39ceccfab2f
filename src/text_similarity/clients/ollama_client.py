from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from text_similarity.config.settings import Settings
from text_similarity.core.results import EmbeddingFailure, EmbeddingResult, EmbeddingSuccess

logger = logging.getLogger(__name__)

EMBEDDINGS_PATH = "/api/embeddings"


class OllamaEmbeddingClient:
    """
    Async client for the Ollama embeddings endpoint.

    One POST per text, no retries. Every outcome comes back as a value:
    `EmbeddingSuccess` when the server answers 200 with an `embedding` list,
    `EmbeddingFailure` for any other status, a malformed body or a transport
    error (the latter is logged).
    """

    def __init__(
        self,
        settings: Settings,
        model: str | None = None,
        base_url: str | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.model = model or settings.ollama_embed_model
        self.base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.timeout_or_none,
            transport=transport,
        )

    async def __aenter__(self) -> "OllamaEmbeddingClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()
        logger.debug("Ollama client for %s closed.", self.base_url)

    async def fetch_embedding(self, text: str) -> EmbeddingResult:
        payload = {"model": self.model, "prompt": text}
        logger.debug("Requesting embedding from %s (model=%s, chars=%d)", self.base_url, self.model, len(text))
        try:
            response = await self.client.post(
                EMBEDDINGS_PATH,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.RequestError as exc:
            message = str(exc) or type(exc).__name__
            logger.error("Request to %s%s failed: %s", self.base_url, EMBEDDINGS_PATH, message)
            return EmbeddingFailure(text=text, reason=message)

        if response.status_code != httpx.codes.OK:
            reason = response.reason_phrase or f"HTTP {response.status_code}"
            logger.warning("Embedding service answered %d %s", response.status_code, reason)
            return EmbeddingFailure(text=text, reason=reason, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError:
            logger.warning("Embedding service returned a non-JSON body.")
            return EmbeddingFailure(text=text, reason="Malformed JSON response", status_code=response.status_code)

        embedding = body.get("embedding") if isinstance(body, dict) else None
        if not isinstance(embedding, list):
            logger.warning("Embedding service response has no 'embedding' list: keys=%s", _keys(body))
            return EmbeddingFailure(text=text, reason="Response missing 'embedding'", status_code=response.status_code)

        try:
            vector = [float(x) for x in embedding]
        except (TypeError, ValueError):
            logger.warning("Embedding service returned non-numeric components.")
            return EmbeddingFailure(text=text, reason="Non-numeric 'embedding'", status_code=response.status_code)
        logger.info("Received embedding (dims: %d) from model %s", len(vector), self.model)
        return EmbeddingSuccess(text=text, vector=vector, model=self.model)


def _keys(body: Any) -> list[str]:
    return sorted(body.keys()) if isinstance(body, dict) else []


async def fetch_embedding_or_none(client: OllamaEmbeddingClient, text: str) -> list[float] | None:
    """Return the bare vector, or None when the text could not be embedded."""
    result = await client.fetch_embedding(text)
    return result.vector if isinstance(result, EmbeddingSuccess) else None
