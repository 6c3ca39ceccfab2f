from __future__ import annotations

import json
import logging

import click

from text_similarity.cli.context import CLIContext
from text_similarity.cli.shared import preview_vector, run_async
from text_similarity.clients import build_embedder
from text_similarity.core.results import EmbeddingFailure
from text_similarity.exceptions import EmbeddingUnavailableError
from text_similarity.samples import SAMPLE_TEXT_1, SAMPLE_TEXT_2
from text_similarity.similarity import run_comparison


def register(cli: click.Group) -> None:
    @cli.command("compare")
    @click.argument("text1", required=False)
    @click.argument("text2", required=False)
    @click.option("--model", type=str, default=None, help="Override embedding model, e.g. qwen3-embedding:0.6b")
    @click.option("--base-url", type=str, default=None, help="Override Ollama base URL (ignored by the stub and local backends).")
    @click.option("--sequential", is_flag=True, default=False, help="Fetch the two embeddings one after the other.")
    @click.option("--lenient", is_flag=True, default=False, help="Do not validate vectors; degenerate input prints NaN%.")
    @click.option("--json", "as_json", is_flag=True, default=False, help="Emit a JSON object instead of the text line. Logging is limited to WARNING and above so stdout stays parseable.")
    @click.pass_obj
    def compare_cmd(
        ctx: CLIContext,
        text1: str | None,
        text2: str | None,
        model: str | None,
        base_url: str | None,
        sequential: bool,
        lenient: bool,
        as_json: bool,
    ) -> None:
        """Print the cosine similarity of TEXT1 and TEXT2 as a percentage.

        Without arguments the two built-in sample posts are compared.
        """
        if (text1 is None) != (text2 is None):
            raise click.UsageError("Provide both TEXT1 and TEXT2, or neither.")
        if text1 is None:
            text1, text2 = SAMPLE_TEXT_1, SAMPLE_TEXT_2
        if as_json:
            # log records share stdout with the JSON payload
            root = logging.getLogger()
            root.setLevel(max(root.level, logging.WARNING))

        result = run_async(
            run_comparison(
                text1,
                text2,
                ctx.settings,
                model=model,
                base_url=base_url,
                strict=not lenient,
                concurrent=not sequential,
            )
        )
        if as_json:
            click.echo(json.dumps(result.to_dict()))
        else:
            click.echo(result.to_line())

    @cli.command("embed")
    @click.argument("text")
    @click.option("--model", type=str, default=None, help="Override embedding model.")
    @click.option("--base-url", type=str, default=None, help="Override Ollama base URL (ignored by the stub and local backends).")
    @click.pass_obj
    def embed_cmd(ctx: CLIContext, text: str, model: str | None, base_url: str | None) -> None:
        """Embed a single TEXT and show a preview of the vector."""

        async def _embed():
            async with build_embedder(ctx.settings, model=model, base_url=base_url) as client:
                result = await client.fetch_embedding(text)
            if isinstance(result, EmbeddingFailure):
                raise EmbeddingUnavailableError(result)
            return result

        result = run_async(_embed())
        click.echo(f"Model:      {result.model}")
        click.echo(f"Dimensions: {result.dimensions}")
        click.echo(f"Embedding:  {preview_vector(result.vector)}")
