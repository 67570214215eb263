"""Slug command for the fmkit CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..article import generate_slug
from ._common import run_on_document


@click.command(name="slug")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_context
def slug(ctx: click.Context, path: Path) -> None:
    """Generate the ``slug`` field from the document title."""

    run_on_document(ctx, path, generate_slug)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(slug)
