from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from fmkit import config as config_module
from fmkit.config import (
    ConfigError,
    FmkitConfig,
    InvalidConfigError,
    MissingConfigError,
    bootstrap_config_file,
    load_config,
)


def write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.toml"
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


def test_load_config_success(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [frontmatter.taxonomy]
        tags = ["python", "til"]
        categories = ["blog"]
        add_created_if_empty_on_save = true
        update_modified_on_save = true
        date_format = "%Y-%m-%d"
        slug_prefix = "/posts/"
        slug_suffix = "/"
        indent_arrays = false
        no_property_value_quotes = ["date"]
        """,
    )

    config = load_config(config_path)
    assert isinstance(config, FmkitConfig)
    assert config.tags == ("python", "til")
    assert config.categories == ("blog",)
    assert config.add_created_if_empty_on_save is True
    assert config.update_modified_on_save is True
    assert config.date_format == "%Y-%m-%d"
    assert config.slug_prefix == "/posts/"
    assert config.slug_suffix == "/"
    assert config.indent_arrays is False
    assert config.no_property_value_quotes == ("date",)
    assert config.source_path == config_path


def test_missing_sections_use_defaults(tmp_path: Path) -> None:
    config_path = write_config(tmp_path, "")

    config = load_config(config_path)
    assert config.tags == ()
    assert config.date_format == ""
    assert config.indent_arrays is True
    assert config.add_created_if_empty_on_save is False


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    with pytest.raises(MissingConfigError):
        load_config(missing)


def test_missing_default_file_yields_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "none.toml")

    assert load_config() == FmkitConfig()


def test_rejects_blank_tags(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [frontmatter.taxonomy]
        tags = ["python", "  "]
        """,
    )

    with pytest.raises(InvalidConfigError):
        load_config(config_path)


def test_rejects_wrong_types(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [frontmatter.taxonomy]
        update_modified_on_save = "yes"
        """,
    )
    with pytest.raises(InvalidConfigError):
        load_config(config_path)

    config_path = write_config(
        tmp_path,
        """
        [frontmatter.taxonomy]
        date_format = 12
        """,
    )
    with pytest.raises(InvalidConfigError):
        load_config(config_path)


def test_invalid_toml_is_config_error(tmp_path: Path) -> None:
    config_path = write_config(tmp_path, "[frontmatter\n")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_tags_are_deduplicated(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [frontmatter.taxonomy]
        tags = ["python", " python ", "til"]
        """,
    )

    assert load_config(config_path).tags == ("python", "til")


def test_bootstrap_config_file_creates_loadable_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.toml"

    assert bootstrap_config_file(config_path) is True
    assert bootstrap_config_file(config_path) is False

    config = load_config(config_path)
    assert config.tags == ()
    assert config.indent_arrays is True
