"""Draft command for the fmkit CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..article import toggle_draft
from ._common import run_on_document


@click.command(name="draft")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_context
def draft(ctx: click.Context, path: Path) -> None:
    """Toggle the ``draft`` flag of a document."""

    run_on_document(ctx, path, toggle_draft)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(draft)
