from __future__ import annotations

import hashlib
import math
import random
from typing import Any, List

from text_similarity.core.results import EmbeddingResult, EmbeddingSuccess


class StubEmbedder:
    """
    Lightweight, deterministic embedder for offline runs and tests.
    Produces normalized vectors derived from a stable hash of the input text.
    """

    model = "stub"

    def __init__(self, dims: int = 384):
        self.dims = dims

    async def __aenter__(self) -> "StubEmbedder":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        return None

    def embed(self, text: str) -> List[float]:
        seed = int(hashlib.sha256((text or "").encode("utf-8")).hexdigest(), 16)
        rng = random.Random(seed)
        vec = [rng.random() - 0.5 for _ in range(self.dims)]
        norm = math.sqrt(sum(v * v for v in vec)) or 1.0
        return [v / norm for v in vec]

    async def fetch_embedding(self, text: str) -> EmbeddingResult:
        return EmbeddingSuccess(text=text, vector=self.embed(text), model=self.model)
