"""Save command for the fmkit CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..editor import DocumentError, open_document
from ._common import FmkitCliError, TerminalHost, get_config, save as run_save


@click.command(name="save")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_context
def save(ctx: click.Context, path: Path) -> None:
    """Save a document, running the on-save hooks (created/modified dates)."""

    config = get_config(ctx)
    try:
        document = open_document(path)
    except DocumentError as exc:
        raise FmkitCliError(str(exc)) from exc

    run_save(TerminalHost(document), config)
    click.echo(f"Saved {path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(save)
