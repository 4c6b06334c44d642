"""Configuration loading for locale checks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

SettingsDict = Dict[str, Any]


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


class CheckerConfig(BaseModel):
    """Settings for one validation run."""

    locales_dir: Path = Path(".")
    reference: str = "en.json"
    pattern: str = "*.json"
    exclude: list[str] = Field(default_factory=list)
    strict_extra: bool = False
    color: bool | None = None
    json_report: Path | None = None
    csv_report: Path | None = None
    html_report: Path | None = None
    markdown_report: Path | None = None
    events_log: Path | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("reference")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError("must be a file name inside locales_dir")
        return value

    @field_validator("exclude", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def reference_path(self) -> Path:
        return self.locales_dir / self.reference


def load_config_file(path: Path) -> SettingsDict:
    """Load raw settings from a YAML file.

    An empty file yields an empty dictionary.
    """

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping at the top level")
    return data


def merge_settings(base: SettingsDict, override: SettingsDict) -> SettingsDict:
    """Deep-merge two settings dictionaries.

    ``override`` wins; ``None`` values in ``override`` are ignored so unset
    CLI flags do not mask file settings.
    """

    def _merge(a: Any, b: Any) -> Any:
        if isinstance(a, dict) and isinstance(b, dict):
            result = dict(a)
            for key, value in b.items():
                if value is None:
                    continue
                result[key] = _merge(a[key], value) if key in a else value
            return result
        return b

    return _merge(dict(base), dict(override or {}))


def build_config(
    config_path: Path | None = None, overrides: SettingsDict | None = None
) -> CheckerConfig:
    """Combine defaults, an optional YAML file and explicit overrides."""

    settings: SettingsDict = {}
    if config_path is not None:
        settings = load_config_file(config_path)
    settings = merge_settings(settings, overrides or {})
    try:
        return CheckerConfig.model_validate(settings)
    except ValidationError as exc:
        problems = []
        for error in exc.errors():
            location = "->".join(str(piece) for piece in error.get("loc", ()))
            problems.append(f"{location}: {error.get('msg')}")
        raise ConfigError("Invalid configuration: " + "; ".join(problems)) from exc


__all__ = [
    "CheckerConfig",
    "ConfigError",
    "build_config",
    "load_config_file",
    "merge_settings",
]
