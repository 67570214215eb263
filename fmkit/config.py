"""Configuration management for fmkit."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/fmkit").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"

EXTENSION_NAME = "Front Matter"
CONFIG_KEY = "frontmatter"
TAXONOMY_SECTION = "taxonomy"

SETTING_DATE_FORMAT = "taxonomy.date_format"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when an explicitly requested configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True)
class FmkitConfig:
    """In-memory representation of the ``[frontmatter.taxonomy]`` settings."""

    tags: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    add_created_if_empty_on_save: bool = False
    update_modified_on_save: bool = False
    date_format: str = ""
    slug_prefix: str = ""
    slug_suffix: str = ""
    indent_arrays: bool = True
    no_property_value_quotes: tuple[str, ...] = ()
    source_path: Path | None = None


def load_config(path: Path | None = None) -> FmkitConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/fmkit/config.toml``) is used, and a missing default
        file simply yields the built-in defaults.

    Raises
    ------
    MissingConfigError
        If an explicitly provided file cannot be found.
    InvalidConfigError
        If settings are malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        if path is not None:
            raise MissingConfigError(config_path)
        return FmkitConfig()

    with config_path.open("rb") as fh:
        try:
            raw = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get(CONFIG_KEY, {})
    if not isinstance(section, dict):
        raise InvalidConfigError(f"'{CONFIG_KEY}' must be a table when provided")
    taxonomy = section.get(TAXONOMY_SECTION, {})
    if not isinstance(taxonomy, dict):
        raise InvalidConfigError(
            f"'{CONFIG_KEY}.{TAXONOMY_SECTION}' must be a table when provided"
        )

    return FmkitConfig(
        tags=_string_list(taxonomy, "tags"),
        categories=_string_list(taxonomy, "categories"),
        add_created_if_empty_on_save=_flag(
            taxonomy, "add_created_if_empty_on_save", False
        ),
        update_modified_on_save=_flag(taxonomy, "update_modified_on_save", False),
        date_format=_string(taxonomy, "date_format"),
        slug_prefix=_string(taxonomy, "slug_prefix"),
        slug_suffix=_string(taxonomy, "slug_suffix"),
        indent_arrays=_flag(taxonomy, "indent_arrays", True),
        no_property_value_quotes=_string_list(taxonomy, "no_property_value_quotes"),
        source_path=config_path,
    )


def _string_list(table: dict[str, Any], key: str) -> tuple[str, ...]:
    value = table.get(key, [])
    if not isinstance(value, list):
        raise InvalidConfigError(f"'{key}' must be a list of strings")

    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise InvalidConfigError(f"'{key}' entries must be strings")
        cleaned = item.strip()
        if not cleaned:
            raise InvalidConfigError(f"'{key}' entries must be non-empty strings")
        if cleaned not in items:
            items.append(cleaned)
    return tuple(items)


def _flag(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise InvalidConfigError(f"'{key}' must be a boolean")
    return value


def _string(table: dict[str, Any], key: str) -> str:
    value = table.get(key, "")
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    return value


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    config_dir = path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    default_content = (
        f"[{CONFIG_KEY}.{TAXONOMY_SECTION}]\n"
        "tags = []\n"
        "categories = []\n"
        "add_created_if_empty_on_save = false\n"
        "update_modified_on_save = false\n"
        'date_format = ""\n'
        'slug_prefix = ""\n'
        'slug_suffix = ""\n'
        "indent_arrays = true\n"
        "no_property_value_quotes = []\n"
    )
    path.write_text(default_content, encoding="utf-8")
    return True
