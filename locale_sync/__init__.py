"""Locale file synchronisation checks."""

from .checker import (
    FileResult,
    ValidationReport,
    check_file,
    check_locales,
    load_keys,
)
from .config import CheckerConfig, ConfigError, build_config
from .diff_core import KeyDiff, diff_keys
from .keys import extract_keys
from .loaders import LocaleParseError, discover_locales, load_locale
from .reporters import ConsoleStyle, render_console, render_markdown

__all__ = [
    "CheckerConfig",
    "ConfigError",
    "ConsoleStyle",
    "FileResult",
    "KeyDiff",
    "LocaleParseError",
    "ValidationReport",
    "build_config",
    "check_file",
    "check_locales",
    "diff_keys",
    "discover_locales",
    "extract_keys",
    "load_keys",
    "load_locale",
    "render_console",
    "render_markdown",
]
