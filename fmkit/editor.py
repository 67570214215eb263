"""Document model and host contracts used by the front matter operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, Sequence


class DocumentError(RuntimeError):
    """Raised when a document cannot be read from or written to disk."""


@dataclass(slots=True)
class Document:
    """Text document opened in the host, tracking unsaved changes."""

    path: Path
    text: str
    saved_text: str = ""

    @property
    def dirty(self) -> bool:
        return self.text != self.saved_text

    def replace_text(self, text: str) -> None:
        self.text = text

    def save(self) -> None:
        try:
            with self.path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(self.text)
        except OSError as exc:
            raise DocumentError(f"Failed to write {self.path}: {exc}") from exc
        self.saved_text = self.text


def open_document(path: Path) -> Document:
    """Read ``path`` into a clean :class:`Document`, keeping its line endings."""

    try:
        with path.open(encoding="utf-8", newline="") as fh:
            text = fh.read()
    except FileNotFoundError as exc:
        raise DocumentError(f"Document not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Failed to read {path}: {exc}") from exc
    return Document(path=path, text=text, saved_text=text)


@dataclass(slots=True)
class PickItem:
    """Entry shown in a multi-select picker."""

    label: str
    picked: bool = False


class EditorHost(Protocol):
    """User-facing surface the operations talk to."""

    @property
    def active_document(self) -> Document | None:  # pragma: no cover - Protocol
        """Return the document currently in focus, if any."""

    def pick_many(
        self, items: Sequence[PickItem], *, placeholder: str
    ) -> list[PickItem] | None:  # pragma: no cover - Protocol
        """Let the user choose items; ``None`` means the pick was cancelled."""

    def show_info(self, message: str) -> None:  # pragma: no cover - Protocol
        """Display an informational notice."""

    def show_error(self, message: str) -> None:  # pragma: no cover - Protocol
        """Display an error notice."""


@dataclass(slots=True)
class SaveEvent:
    """Pending save of ``document``; hooks register their updates here.

    Updates registered through :meth:`wait_until` are flushed as part of the
    same save.
    """

    document: Document
    pending: list[str] = field(default_factory=list)

    def wait_until(self, update: str) -> None:
        self.pending.append(update)
