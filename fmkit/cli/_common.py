"""Shared helpers for fmkit CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Sequence

import click

from ..config import ConfigError, FmkitConfig, load_config
from ..editor import Document, DocumentError, EditorHost, PickItem, open_document
from ..services.documents import save_document

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}

Operation = Callable[[EditorHost, FmkitConfig], None]


class FmkitCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


class TerminalHost:
    """Editor host backed by the terminal: one open file, prompts via Click."""

    def __init__(self, document: Document | None = None) -> None:
        self._document = document

    @property
    def active_document(self) -> Document | None:
        return self._document

    def pick_many(
        self, items: Sequence[PickItem], *, placeholder: str
    ) -> list[PickItem] | None:
        click.echo(placeholder)
        for index, item in enumerate(items, start=1):
            mark = "x" if item.picked else " "
            click.echo(f"  [{mark}] {index}. {item.label}")

        default = ",".join(
            str(index) for index, item in enumerate(items, start=1) if item.picked
        )
        while True:
            try:
                raw = click.prompt(
                    "Numbers separated by commas ('-' for none, 'q' to cancel)",
                    default=default,
                    show_default=bool(default),
                )
            except click.Abort:
                return None

            answer = raw.strip()
            if answer.lower() == "q":
                return None
            if answer in ("", "-"):
                return []

            try:
                chosen = _parse_selection(answer, len(items))
            except ValueError as exc:
                click.echo(str(exc), err=True)
                continue
            return [item for index, item in enumerate(items, start=1) if index in chosen]

    def show_info(self, message: str) -> None:
        click.echo(message)

    def show_error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)


def _parse_selection(answer: str, count: int) -> set[int]:
    chosen: set[int] = set()
    for part in answer.split(","):
        token = part.strip()
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise ValueError(f"Invalid choice: {token!r} (expected 1-{count})")
        chosen.add(int(token))
    return chosen


def get_config(ctx: click.Context) -> FmkitConfig:
    """Return a cached configuration for the current CLI invocation."""

    config: FmkitConfig | None = ctx.obj.get("config")
    if config is not None:
        return config

    config_path_opt: Path | None = ctx.obj.get("config_path")
    try:
        config = load_config(config_path_opt)
    except ConfigError as exc:
        raise FmkitCliError(str(exc)) from exc

    ctx.obj["config"] = config
    return config


def run_on_document(ctx: click.Context, path: Path, operation: Operation) -> None:
    """Open ``path`` as the active document, apply ``operation`` and save changes.

    Saving goes through the save pipeline, so ``will_save`` hooks run as they
    would on an editor save.
    """

    config = get_config(ctx)
    try:
        document = open_document(path)
    except DocumentError as exc:
        raise FmkitCliError(str(exc)) from exc

    host = TerminalHost(document)
    operation(host, config)

    if not document.dirty:
        click.echo(f"No changes to {path}")
        return

    save(host, config)
    click.echo(f"Updated {path}")


def save(host: TerminalHost, config: FmkitConfig) -> None:
    """Run the save pipeline and report hook failures as warnings."""

    try:
        result = save_document(host, config)
    except DocumentError as exc:
        raise FmkitCliError(str(exc)) from exc

    if result is None:
        return
    for error in result.errors:
        click.echo(f"Warning: save hook failed: {error}", err=True)
