from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Sequence

import pytest
from fmkit.editor import Document, PickItem


class FakeHost:
    """In-memory editor host recording picks and notifications."""

    def __init__(
        self,
        text: str | None = None,
        *,
        picks: Sequence[str] | None = None,
        path: Path = Path("doc.md"),
    ) -> None:
        self.document = (
            Document(path=path, text=text, saved_text=text) if text is not None else None
        )
        self.picks = picks
        self.pick_calls: list[tuple[list[PickItem], str]] = []
        self.infos: list[str] = []
        self.errors: list[str] = []

    @property
    def active_document(self) -> Document | None:
        return self.document

    def pick_many(
        self, items: Sequence[PickItem], *, placeholder: str
    ) -> list[PickItem] | None:
        self.pick_calls.append((list(items), placeholder))
        if self.picks is None:
            return None
        return [item for item in items if item.label in self.picks]

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def make_host():
    return FakeHost


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Keep CLI logging setup from leaking handlers between tests."""

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fmkit_logger = logging.getLogger("fmkit")
    fmkit_level = fmkit_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fmkit_logger.setLevel(fmkit_level)
