from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

import click

from text_similarity.exceptions import TextSimilarityError

T = TypeVar("T")


def run_async(coro: Awaitable[T]) -> T:
    """Drive a coroutine to completion, surfacing pipeline errors as CLI errors."""
    try:
        return asyncio.run(coro)
    except TextSimilarityError as exc:
        message = f"{exc.code}: {exc.message}"
        if exc.detail:
            message += f" ({exc.detail})"
        raise click.ClickException(message) from exc


def preview_vector(vector: list[float], limit: int = 5) -> str:
    head = ", ".join(f"{v:.4f}" for v in vector[:limit])
    more = ", ..." if len(vector) > limit else ""
    return f"[{head}{more}]"
