from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class EmbeddingSuccess:
    text: str
    vector: List[float] = field(repr=False)
    model: str = ""

    @property
    def ok(self) -> bool:
        return True

    @property
    def dimensions(self) -> int:
        return len(self.vector)


@dataclass(frozen=True)
class EmbeddingFailure:
    """A text that could not be embedded, with the reason reported by the backend."""

    text: str
    reason: str
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False


EmbeddingResult = Union[EmbeddingSuccess, EmbeddingFailure]


def format_similarity(score: float) -> str:
    """Render a cosine score as the `Similarity: 12.34%` output line."""
    if math.isnan(score):
        return "Similarity: NaN%"
    return f"Similarity: {score * 100:.2f}%"


@dataclass(frozen=True)
class SimilarityResult:
    score: float
    model: str
    dimensions: int

    @property
    def percentage(self) -> float:
        return self.score * 100

    def to_line(self) -> str:
        return format_similarity(self.score)

    def to_dict(self) -> dict:
        score = None if math.isnan(self.score) else self.score
        return {
            "score": score,
            "percentage": None if score is None else round(self.percentage, 2),
            "model": self.model,
            "dimensions": self.dimensions,
        }
