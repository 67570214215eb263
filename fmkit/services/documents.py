"""Save pipeline for documents opened in an editor host."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pluggy

from ..config import FmkitConfig
from ..editor import EditorHost, SaveEvent
from ..plugins import get_plugin_manager, run_will_save_hooks

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SaveResult:
    """Outcome of a save: updates applied by hooks and hook failures."""

    updates: int
    errors: tuple[Exception, ...]


def save_document(
    host: EditorHost,
    config: FmkitConfig,
    *,
    manager: pluggy.PluginManager | None = None,
) -> SaveResult | None:
    """Run ``will_save`` hooks on the active document, then write it to disk.

    Returns ``None`` when there is no active document.
    """

    document = host.active_document
    if document is None:
        return None

    event = SaveEvent(document=document)
    errors = run_will_save_hooks(manager or get_plugin_manager(), event, host, config)

    document.save()
    logger.debug(
        "Saved %s with %d pending update(s)", document.path, len(event.pending)
    )
    return SaveResult(updates=len(event.pending), errors=tuple(errors))
