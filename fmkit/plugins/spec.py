"""Hook specifications for fmkit plugins."""

from __future__ import annotations

from fmkit.config import FmkitConfig
from fmkit.editor import EditorHost, SaveEvent

from ._markers import hookspec


class FmkitHookSpec:
    """Collection of pluggy hook specifications."""

    @hookspec
    def will_save(
        self, event: SaveEvent, host: EditorHost, config: FmkitConfig
    ) -> None:
        """Adjust the document before it is written; register edits on ``event``."""
