from __future__ import annotations
import asyncio
import logging
from typing import Any

from sentence_transformers import SentenceTransformer

from text_similarity.core.results import EmbeddingFailure, EmbeddingResult, EmbeddingSuccess
from text_similarity.exceptions import EmbeddingBackendError

logger = logging.getLogger(__name__)


class LocalEmbedder:
    """
    A wrapper class to handle loading and using a local
    sentence-transformer model for generating embeddings.
    """

    def __init__(self, model_name: str = "all-MiniLM-L6-v2"):
        """
        Loads the model from Hugging Face. This may take a moment the first
        time it's run as it downloads the model.
        """
        self.model = model_name
        logger.debug("Loading local embedding model: %s...", model_name)
        try:
            self._model = SentenceTransformer(model_name)
        except Exception as exc:
            logger.error("Failed to load local embedding model %s: %s", model_name, exc)
            raise EmbeddingBackendError(f"Could not load local model '{model_name}'", str(exc)) from exc
        self.dims = self._model.get_sentence_embedding_dimension()
        logger.debug("Local embedder initialized (dims: %s).", self.dims)

    async def __aenter__(self) -> "LocalEmbedder":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        return None

    async def fetch_embedding(self, text: str) -> EmbeddingResult:
        # encode() is CPU bound; keep the event loop free for the sibling fetch
        try:
            embedding = await asyncio.to_thread(self._model.encode, text)
        except Exception as exc:
            logger.error("Local model %s failed to embed text: %s", self.model, exc)
            return EmbeddingFailure(text=text, reason=str(exc))

        if hasattr(embedding, "tolist"):
            embedding = embedding.tolist()
        return EmbeddingSuccess(text=text, vector=[float(x) for x in embedding], model=self.model)
