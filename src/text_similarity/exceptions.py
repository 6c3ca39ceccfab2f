"""Exception types raised by the similarity pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from text_similarity.core.results import EmbeddingFailure


class TextSimilarityError(Exception):
    """Base exception for similarity errors."""

    def __init__(self, message: str, code: str, detail: str | None = None):
        self.message = message
        self.code = code
        self.detail = detail
        super().__init__(message)


class EmbeddingUnavailableError(TextSimilarityError):
    """Raised when one of the input texts could not be embedded."""

    def __init__(self, failure: "EmbeddingFailure"):
        self.failure = failure
        detail = f"HTTP {failure.status_code}" if failure.status_code is not None else None
        super().__init__(
            f"Could not embed text: {failure.reason}",
            "EMBEDDING_UNAVAILABLE",
            detail,
        )


class DimensionMismatchError(TextSimilarityError):
    """Raised when two vectors of different length are compared."""

    def __init__(self, len_a: int, len_b: int):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(
            f"Vector dimensions differ: {len_a} != {len_b}",
            "DIMENSION_MISMATCH",
        )


class DegenerateVectorError(TextSimilarityError):
    """Raised when a vector is empty or has zero norm."""

    def __init__(self, message: str = "Cannot compare a zero-norm vector"):
        super().__init__(message, "DEGENERATE_VECTOR")


class EmbeddingBackendError(TextSimilarityError):
    """Raised when an embedding backend cannot be initialized."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message, "EMBEDDING_BACKEND_UNAVAILABLE", detail)
