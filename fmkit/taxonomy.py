"""Taxonomy kinds and pick-list construction."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from .config import FmkitConfig
from .editor import PickItem


class TaxonomyType(Enum):
    TAG = "tags"
    CATEGORY = "categories"

    @property
    def field_name(self) -> str:
        return self.value

    def configured(self, config: FmkitConfig) -> tuple[str, ...]:
        if self is TaxonomyType.TAG:
            return config.tags
        return config.categories


def build_options(current: Any, known: Iterable[str]) -> list[PickItem]:
    """Return picker options: current values (picked) then unused known values.

    - Values already on the document come first, in document order.
    - Configured values follow, skipping labels already present.
    - Duplicates are dropped while preserving the first occurrence order.
    """

    options: list[PickItem] = []
    seen: set[str] = set()

    if isinstance(current, str):
        current = [current]
    if isinstance(current, Iterable):
        for value in current:
            label = str(value)
            if label not in seen:
                options.append(PickItem(label=label, picked=True))
                seen.add(label)

    for label in known:
        if label not in seen:
            options.append(PickItem(label=label))
            seen.add(label)

    return options
