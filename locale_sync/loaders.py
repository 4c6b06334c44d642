"""Discovery and parsing helpers for locale files."""

from __future__ import annotations

import fnmatch
import json
from pathlib import Path
from typing import Any, Iterable


class LocaleParseError(ValueError):
    """Raised when a locale file cannot be read as a JSON object."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.message = message


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_locale_text(text: str) -> dict[str, Any]:
    """Parse *text* as strict JSON (no ``NaN``/``Infinity``, no BOM)."""

    return json.loads(text, parse_constant=_reject_constant)


def load_locale(path: Path) -> Any:
    """Read and parse the locale file at *path*.

    Any failure (missing file, undecodable bytes, malformed or too deeply
    nested JSON) is raised as :class:`LocaleParseError`. The top-level shape
    is not checked here.
    """

    path = Path(path)
    try:
        text = path.read_bytes().decode("utf-8")
    except OSError as exc:
        raise LocaleParseError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise LocaleParseError(path, f"invalid UTF-8: {exc.reason}") from exc
    try:
        return parse_locale_text(text)
    except ValueError as exc:
        raise LocaleParseError(path, str(exc)) from exc
    except RecursionError as exc:
        raise LocaleParseError(path, "maximum nesting depth exceeded") from exc


def _excluded(name: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)


def discover_locales(
    directory: Path,
    *,
    reference: str = "en.json",
    pattern: str = "*.json",
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Return candidate locale files inside *directory*, sorted by name.

    Only direct children are considered; the reference file and names
    matching any *exclude* glob are skipped.
    """

    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Locales directory not found: {directory}")
    exclude = tuple(exclude)
    candidates = [
        path
        for path in directory.glob(pattern)
        if path.is_file()
        and path.name != reference
        and not _excluded(path.name, exclude)
    ]
    return sorted(candidates, key=lambda item: item.name)


__all__ = [
    "LocaleParseError",
    "discover_locales",
    "load_locale",
    "parse_locale_text",
]
