"""Built-in plugin stamping ``created`` and ``modified`` on save."""

from __future__ import annotations

from ...article import add_created_date, update_modified_date
from ...config import FmkitConfig
from ...editor import EditorHost, SaveEvent
from .._markers import hookimpl


@hookimpl
def will_save(event: SaveEvent, host: EditorHost, config: FmkitConfig) -> None:
    add_created_date(event, host, config)
    update_modified_date(event, host, config)
