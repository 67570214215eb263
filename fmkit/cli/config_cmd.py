"""Config command for the fmkit CLI."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

import click

from ..config import (
    CONFIG_KEY,
    DEFAULT_CONFIG_PATH,
    TAXONOMY_SECTION,
    bootstrap_config_file,
)
from ._common import FmkitCliError, get_config


@click.command(name="config")
@click.option(
    "--show",
    is_flag=True,
    help="Print the effective taxonomy settings instead of opening the editor.",
)
@click.pass_context
def config(ctx: click.Context, show: bool) -> None:
    """Create the configuration file if needed and open it in $EDITOR."""

    config_path: Path = ctx.obj.get("config_path") or DEFAULT_CONFIG_PATH

    if show:
        _echo_settings(ctx)
        return

    if bootstrap_config_file(config_path):
        click.echo(f"Created configuration at {config_path}")

    try:
        click.edit(filename=str(config_path))
    except click.ClickException as exc:  # pragma: no cover - editor launch failure rare
        raise FmkitCliError(f"Failed to launch editor: {exc}") from exc

    # Reload so a broken edit is reported right away.
    get_config(ctx)
    click.echo(f"Configuration at {config_path} is valid")


def _echo_settings(ctx: click.Context) -> None:
    settings = asdict(get_config(ctx))
    source = settings.pop("source_path")
    click.echo(f"# {source or 'built-in defaults'}")
    click.echo(f"[{CONFIG_KEY}.{TAXONOMY_SECTION}]")
    for key, value in settings.items():
        if isinstance(value, tuple):
            rendered = "[" + ", ".join(f'"{item}"' for item in value) + "]"
        elif isinstance(value, bool):
            rendered = "true" if value else "false"
        else:
            rendered = f'"{value}"'
        click.echo(f"{key} = {rendered}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
