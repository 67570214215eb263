"""Slug generation from article titles."""

from __future__ import annotations

import re
import unicodedata

STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "but",
        "by",
        "for",
        "from",
        "if",
        "in",
        "into",
        "is",
        "it",
        "of",
        "on",
        "or",
        "so",
        "that",
        "the",
        "to",
        "was",
        "with",
    }
)

_PUNCTUATION_RE = re.compile(r"[^\w\s-]")
_SEPARATOR_RE = re.compile(r"[\s_-]+")


def slugify(title: str | None) -> str | None:
    """Return a URL slug for ``title`` or ``None`` when nothing usable remains.

    Rules:
    - Accents are folded to ASCII and the text is lowercased.
    - Punctuation is dropped; whitespace, underscores and dashes separate words.
    - Common English stop words are removed.
    """

    if not isinstance(title, str) or not title.strip():
        return None

    text = unicodedata.normalize("NFKD", title)
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = _PUNCTUATION_RE.sub("", text)
    words = [word for word in _SEPARATOR_RE.split(text) if word]
    words = [word for word in words if word not in STOP_WORDS]
    return "-".join(words) or None
