from .results import (
    EmbeddingFailure,
    EmbeddingResult,
    EmbeddingSuccess,
    SimilarityResult,
    format_similarity,
)

__all__ = [
    "EmbeddingFailure",
    "EmbeddingResult",
    "EmbeddingSuccess",
    "SimilarityResult",
    "format_similarity",
]
