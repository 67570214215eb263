"""Datetime helpers for stamping front matter fields."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]

# strftime directives that behave the same on every platform libc.
_PORTABLE_DIRECTIVES = frozenset("aAbBcdfGHIjmMpSuUVwWxXyYzZ%")
_DIRECTIVE_RE = re.compile(r"%(.?)", flags=re.S)


class DateFormatError(ValueError):
    """Raised when a configured date format cannot be applied."""


def utc_now() -> datetime:
    """Return the current UTC time truncated to whole seconds."""

    return datetime.now(tz=timezone.utc).replace(microsecond=0)


def validate_date_format(date_format: str) -> None:
    """Reject formats carrying unknown or dangling ``%`` directives."""

    for match in _DIRECTIVE_RE.finditer(date_format):
        directive = match.group(1)
        if not directive:
            raise DateFormatError(f"Dangling '%' at the end of {date_format!r}")
        if directive not in _PORTABLE_DIRECTIVES:
            raise DateFormatError(
                f"Unsupported directive '%{directive}' in {date_format!r}"
            )


def stamp(date_format: str | None, *, clock: Clock = utc_now) -> datetime | str:
    """Return the current time, formatted with ``date_format`` when provided.

    Without a format the native ``datetime`` is returned so YAML serializes it
    as a timestamp.
    """

    now = clock()
    if not date_format:
        return now

    validate_date_format(date_format)
    try:
        return now.strftime(date_format)
    except ValueError as exc:
        raise DateFormatError(str(exc)) from exc
