"""Validate candidate locale files against a reference locale."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from . import telemetry
from .config import CheckerConfig
from .diff_core import diff_keys
from .keys import extract_keys
from .loaders import LocaleParseError, discover_locales, load_locale


@dataclass(slots=True)
class FileResult:
    """Outcome for a single candidate file."""

    name: str
    path: Path
    valid: bool
    error: str | None = None
    missing: list[str] = field(default_factory=list)
    extra: list[str] = field(default_factory=list)
    key_count: int = 0

    @property
    def has_issues(self) -> bool:
        return not self.valid or bool(self.missing) or bool(self.extra)

    def is_fatal(self, *, strict: bool = False) -> bool:
        if not self.valid or self.missing:
            return True
        return strict and bool(self.extra)

    @property
    def status(self) -> str:
        if not self.valid:
            return "invalid"
        if self.missing:
            return "missing"
        if self.extra:
            return "extra"
        return "ok"

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.name,
            "path": str(self.path),
            "valid": self.valid,
            "status": self.status,
            "error": self.error,
            "key_count": self.key_count,
            "missing": list(self.missing),
            "extra": list(self.extra),
        }


@dataclass(slots=True)
class ValidationReport:
    """Aggregate result of one run over a reference and its candidates."""

    reference: Path
    reference_valid: bool
    reference_error: str | None = None
    reference_key_count: int = 0
    results: list[FileResult] = field(default_factory=list)
    strict: bool = False

    @property
    def total_files(self) -> int:
        return len(self.results) + 1

    @property
    def files_with_issues(self) -> list[FileResult]:
        return [result for result in self.results if result.has_issues]

    @property
    def passed(self) -> bool:
        if not self.reference_valid:
            return False
        return not any(result.is_fatal(strict=self.strict) for result in self.results)

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "reference": {
                "path": str(self.reference),
                "valid": self.reference_valid,
                "error": self.reference_error,
                "key_count": self.reference_key_count,
            },
            "strict": self.strict,
            "total_files": self.total_files,
            "files_with_issues": len(self.files_with_issues),
            "passed": self.passed,
            "results": [result.to_dict() for result in self.results],
        }


def load_keys(path: Path) -> list[str]:
    """Parse *path* and extract its key paths.

    Raises :class:`LocaleParseError` for unreadable files, malformed JSON and
    documents whose top level is not an object.
    """

    document = load_locale(path)
    try:
        return extract_keys(document)
    except TypeError as exc:
        raise LocaleParseError(path, str(exc)) from exc


def check_file(reference_keys: Sequence[str], path: Path) -> FileResult:
    """Compare one candidate file with the reference key set."""

    path = Path(path)
    try:
        keys = load_keys(path)
    except LocaleParseError as exc:
        result = FileResult(name=path.name, path=path, valid=False, error=exc.message)
    else:
        diff = diff_keys(reference_keys, keys)
        result = FileResult(
            name=path.name,
            path=path,
            valid=True,
            missing=diff.missing,
            extra=diff.extra,
            key_count=len(keys),
        )
    telemetry.log_event(
        "check.candidate",
        {
            "file": result.name,
            "status": result.status,
            "missing": len(result.missing),
            "extra": len(result.extra),
        },
    )
    return result


def check_locales(
    config: CheckerConfig | None = None,
    *,
    candidates: Iterable[Path] | None = None,
) -> ValidationReport:
    """Run the full validation described by *config*.

    When *candidates* is omitted they are discovered inside
    ``config.locales_dir``. An invalid reference stops the run before any
    candidate is read.
    """

    config = config or CheckerConfig()
    reference_path = config.reference_path
    telemetry.log_event(
        "check.start",
        {"reference": str(reference_path), "strict": config.strict_extra},
    )

    try:
        reference_keys = load_keys(reference_path)
    except LocaleParseError as exc:
        telemetry.log_event("check.reference", {"valid": False, "error": exc.message})
        return ValidationReport(
            reference=reference_path,
            reference_valid=False,
            reference_error=exc.message,
            strict=config.strict_extra,
        )
    telemetry.log_event(
        "check.reference", {"valid": True, "key_count": len(reference_keys)}
    )

    if candidates is None:
        candidates = discover_locales(
            config.locales_dir,
            reference=config.reference,
            pattern=config.pattern,
            exclude=config.exclude,
        )
    else:
        resolved_reference = reference_path.resolve()
        candidates = [
            Path(path)
            for path in candidates
            if Path(path).resolve() != resolved_reference
        ]

    report = ValidationReport(
        reference=reference_path,
        reference_valid=True,
        reference_key_count=len(reference_keys),
        strict=config.strict_extra,
    )
    for path in candidates:
        report.results.append(check_file(reference_keys, path))

    telemetry.log_event(
        "check.summary",
        {
            "total_files": report.total_files,
            "files_with_issues": len(report.files_with_issues),
            "passed": report.passed,
        },
    )
    return report


__all__ = [
    "FileResult",
    "ValidationReport",
    "check_file",
    "check_locales",
    "load_keys",
]
