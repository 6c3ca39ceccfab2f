from __future__ import annotations

import click

from text_similarity.cli.context import CLIContext, build_context


def _register_commands(cli_group: click.Group) -> None:
    from text_similarity.cli.commands import compare, diagnostics

    for module in (diagnostics, compare):
        module.register(cli_group)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL for this session.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """textsim CLI: cosine similarity of text embeddings."""
    ctx.obj = build_context(log_level)


_register_commands(cli)


def main() -> None:
    cli()


__all__ = ["CLIContext", "cli", "main"]
