from __future__ import annotations
import math
from typing import Sequence

from text_similarity.exceptions import DegenerateVectorError, DimensionMismatchError


def vector_norm(v: Sequence[float]) -> float:
    return math.sqrt(sum(x * x for x in v))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine of the angle between `a` and `b`, in [-1, 1].

    Iteration follows `a`: trailing components of a longer `b` are ignored and
    a shorter `b` yields NaN. A zero-norm input also yields NaN.
    """
    if len(b) < len(a):
        return math.nan
    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for i in range(len(a)):
        dot += a[i] * b[i]
        norm_a += a[i] ** 2
        norm_b += b[i] ** 2
    denom = math.sqrt(norm_a) * math.sqrt(norm_b)
    if denom == 0.0:
        return math.nan
    return dot / denom


def checked_cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))
    if not a:
        raise DegenerateVectorError("Cannot compare empty vectors")
    norm_a, norm_b = vector_norm(a), vector_norm(b)
    if not (math.isfinite(norm_a) and math.isfinite(norm_b)):
        raise DegenerateVectorError("Cannot compare vectors with non-finite components")
    if norm_a == 0.0 or norm_b == 0.0:
        raise DegenerateVectorError()
    return cosine_similarity(a, b)
