"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from locale_sync.config import (
    CheckerConfig,
    ConfigError,
    build_config,
    load_config_file,
    merge_settings,
)


def test_defaults() -> None:
    config = build_config()
    assert config == CheckerConfig()
    assert config.reference_path == Path(".") / "en.json"
    assert config.strict_extra is False


def test_yaml_file_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "locale-sync.yaml"
    path.write_text(
        "locales_dir: locales\nreference: pt.json\nexclude: package.json\n"
        "strict_extra: true\n",
        encoding="utf-8",
    )
    config = build_config(path, {"reference": None, "color": False})
    assert config.locales_dir == Path("locales")
    assert config.reference == "pt.json"
    assert config.exclude == ["package.json"]
    assert config.strict_extra is True
    assert config.color is False


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(path) == {}
    assert build_config(path) == CheckerConfig()


@pytest.mark.parametrize(
    "content",
    ["- a\n- b\n", "unknown_option: 1\n", "reference: sub/en.json\n", "a: [\n"],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        build_config(path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        build_config(tmp_path / "nope.yaml")


def test_merge_settings_is_deep_and_pure() -> None:
    base = {"a": {"x": 1}, "b": 2}
    merged = merge_settings(base, {"a": {"y": 3}, "b": None})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 2}
    assert base == {"a": {"x": 1}, "b": 2}
