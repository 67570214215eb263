"""fmkit CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from ..log import configure_logging
from . import config_cmd, date, draft, save, slug, taxonomy
from ._common import CONTEXT_SETTINGS, FmkitCliError

__all__ = ["cli", "main", "FmkitCliError"]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines.")
@click.pass_context
def cli(
    ctx: click.Context, config_path_opt: Path | None, verbose: bool, log_json: bool
) -> None:
    """Edit the YAML front matter of text documents."""

    ctx.ensure_object(dict)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    configure_logging(verbose=verbose, log_json=log_json)
    ctx.obj["config_path"] = config_path_opt


for register_command in (
    taxonomy.register,
    date.register,
    slug.register,
    draft.register,
    save.register,
    config_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="fm", standalone_mode=False) or 0
    except click.ClickException as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
