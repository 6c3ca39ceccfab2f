from __future__ import annotations

import click

from text_similarity.cli.context import CLIContext


def register(cli: click.Group) -> None:
    @cli.command("env-info")
    @click.pass_obj
    def env_info_cmd(ctx: CLIContext) -> None:
        """Print the effective settings."""
        settings = ctx.settings

        click.echo("--- Loaded from Settings ---")
        click.echo(f"EMBED_BACKEND:      {settings.embed_backend}")
        click.echo(f"OLLAMA_BASE_URL:    {settings.ollama_base_url}")
        click.echo(f"OLLAMA_EMBED_MODEL: {settings.ollama_embed_model}")
        click.echo(f"EMBEDDINGS_URL:     {settings.embeddings_url}")
        timeout = f"{settings.request_timeout:g}s" if settings.timeout_or_none else "(none)"
        click.echo(f"REQUEST_TIMEOUT:    {timeout}")
        click.echo(f"LOCAL_EMBED_MODEL:  {settings.local_embed_model}")
        click.echo(f"LOG_LEVEL:          {settings.log_level}")
