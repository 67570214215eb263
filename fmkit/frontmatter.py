"""Front matter parsing and rendering for editor documents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable

import yaml

FRONTMATTER_DELIM = "---"
BOM = "\ufeff"


@dataclass(slots=True)
class Article:
    """Front matter data paired with the document body.

    ``has_block`` records whether the source text carried a delimited block;
    rendering always emits one. ``newline`` and ``bom`` capture the source
    line ending and byte order mark so they survive a rewrite.
    """

    data: dict[str, Any] = field(default_factory=dict)
    content: str = ""
    has_block: bool = False
    newline: str = "\n"
    bom: bool = False


class _IndentedSafeDumper(yaml.SafeDumper):
    """Safe dumper that indents block sequences under their parent key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def parse_article(raw: str) -> Article | None:
    """Split ``raw`` into front matter data and body.

    Returns ``None`` when a delimited block exists but is not a YAML mapping.
    An opening ``---`` without a closing one makes the rest of the text the
    block, leaving an empty body. Text without an opening delimiter parses to
    empty data with the whole text as body.
    """

    bom = raw.startswith(BOM)
    text = raw[len(BOM) :] if bom else raw

    lines = text.splitlines(keepends=True)
    newline = _detect_newline(lines)
    if not lines or lines[0].rstrip("\r\n").strip() != FRONTMATTER_DELIM:
        return Article(data={}, content=text, newline=newline, bom=bom)

    closing_index = len(lines)
    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n").strip() == FRONTMATTER_DELIM:
            closing_index = index
            break

    metadata_block = "".join(lines[1:closing_index])
    body = "".join(lines[closing_index + 1 :])

    try:
        loaded = yaml.safe_load(metadata_block)
    except yaml.YAMLError:
        return None

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        return None

    return Article(data=loaded, content=body, has_block=True, newline=newline, bom=bom)


def _detect_newline(lines: list[str]) -> str:
    if lines and lines[0].endswith("\r\n"):
        return "\r\n"
    return "\n"


def render_article(
    article: Article,
    *,
    indent_arrays: bool = True,
    unquoted_keys: Iterable[str] = (),
) -> str:
    """Serialize ``article`` back into a document with a leading YAML block."""

    dumper = _IndentedSafeDumper if indent_arrays else yaml.SafeDumper
    if article.data:
        payload = yaml.dump(
            article.data,
            Dumper=dumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        ).rstrip("\n")
    else:
        payload = ""
    payload = _strip_value_quotes(payload, unquoted_keys)

    header = f"{FRONTMATTER_DELIM}\n{payload}\n" if payload else f"{FRONTMATTER_DELIM}\n"
    header = f"{header}{FRONTMATTER_DELIM}\n".replace("\n", article.newline)
    body = article.content
    if not article.has_block and body and not body.startswith(("\n", "\r\n")):
        body = article.newline + body
    prefix = BOM if article.bom else ""
    return f"{prefix}{header}{body}"


def _strip_value_quotes(payload: str, keys: Iterable[str]) -> str:
    for key in keys:
        pattern = re.compile(
            rf"^({re.escape(key)}): (?:'(.*)'|\"(.*)\")$", flags=re.MULTILINE
        )
        payload = pattern.sub(_unquoted, payload)
    return payload


def _unquoted(match: re.Match[str]) -> str:
    single, double = match.group(2), match.group(3)
    value = single.replace("''", "'") if single is not None else double
    return f"{match.group(1)}: {value}"
