"""Date command for the fmkit CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..article import set_date
from ._common import run_on_document


@click.command(name="date")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_context
def date(ctx: click.Context, path: Path) -> None:
    """Set the ``date`` field to the current time."""

    run_on_document(ctx, path, set_date)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(date)
