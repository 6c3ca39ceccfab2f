from __future__ import annotations

import asyncio
import logging
from typing import Tuple

from text_similarity.clients import EmbedderProtocol, build_embedder
from text_similarity.config.settings import Settings
from text_similarity.core.results import EmbeddingFailure, EmbeddingResult, SimilarityResult
from text_similarity.exceptions import EmbeddingUnavailableError
from text_similarity.utils.vector import checked_cosine_similarity, cosine_similarity

logger = logging.getLogger(__name__)


async def _fetch_pair(
    text1: str,
    text2: str,
    client: EmbedderProtocol,
    concurrent: bool,
) -> Tuple[EmbeddingResult, EmbeddingResult]:
    if concurrent:
        first, second = await asyncio.gather(
            client.fetch_embedding(text1),
            client.fetch_embedding(text2),
        )
        return first, second
    first = await client.fetch_embedding(text1)
    second = await client.fetch_embedding(text2)
    return first, second


async def compute_similarity(
    text1: str,
    text2: str,
    client: EmbedderProtocol,
    *,
    strict: bool = True,
    concurrent: bool = True,
) -> SimilarityResult:
    """
    Embed both texts and return their cosine similarity.

    Args:
        text1: First text.
        text2: Second text.
        client: Any embedder exposing `fetch_embedding`.
        strict: Reject mismatched or zero-norm vectors instead of returning NaN.
        concurrent: Fetch both embeddings at once rather than one after the other.

    Raises:
        EmbeddingUnavailableError: If either text could not be embedded.
        DimensionMismatchError, DegenerateVectorError: In strict mode only.
    """
    first, second = await _fetch_pair(text1, text2, client, concurrent)
    for result in (first, second):
        if isinstance(result, EmbeddingFailure):
            raise EmbeddingUnavailableError(result)

    calculate = checked_cosine_similarity if strict else cosine_similarity
    score = calculate(first.vector, second.vector)
    logger.info("Cosine similarity %.6f over %d dims (model=%s)", score, first.dimensions, first.model)
    return SimilarityResult(score=score, model=first.model, dimensions=first.dimensions)


async def run_comparison(
    text1: str,
    text2: str,
    settings: Settings,
    *,
    model: str | None = None,
    base_url: str | None = None,
    strict: bool = True,
    concurrent: bool = True,
) -> SimilarityResult:
    """Build an embedder from settings, compare the two texts, then close it."""
    async with build_embedder(settings, model=model, base_url=base_url) as client:
        return await compute_similarity(text1, text2, client, strict=strict, concurrent=concurrent)
