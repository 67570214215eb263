"""Tags and categories commands for the fmkit CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..article import insert_taxonomy
from ..taxonomy import TaxonomyType
from ._common import run_on_document


@click.command(name="tags")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_context
def tags(ctx: click.Context, path: Path) -> None:
    """Pick the tags of a document from its own and the configured tags."""

    run_on_document(
        ctx, path, lambda host, config: insert_taxonomy(host, config, TaxonomyType.TAG)
    )


@click.command(name="categories")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_context
def categories(ctx: click.Context, path: Path) -> None:
    """Pick the categories of a document."""

    run_on_document(
        ctx,
        path,
        lambda host, config: insert_taxonomy(host, config, TaxonomyType.CATEGORY),
    )


def register(cli: click.Group) -> None:
    """Register the commands with the root CLI group."""

    cli.add_command(tags)
    cli.add_command(categories)
