"""Report generation helpers for locale validation results."""

from __future__ import annotations

import html
import json
from dataclasses import dataclass
from pathlib import Path
from typing import IO

import pandas as pd

from .checker import FileResult, ValidationReport

SUMMARY_COLUMNS = ["file", "status", "valid", "missing", "extra", "key_count", "error"]


@dataclass(frozen=True, slots=True)
class ConsoleStyle:
    """Escape sequences used by :func:`render_console`."""

    reset: str = ""
    red: str = ""
    green: str = ""
    yellow: str = ""
    blue: str = ""

    @classmethod
    def plain(cls) -> "ConsoleStyle":
        return cls()

    @classmethod
    def ansi(cls) -> "ConsoleStyle":
        return cls(
            reset="\x1b[0m",
            red="\x1b[31m",
            green="\x1b[32m",
            yellow="\x1b[33m",
            blue="\x1b[34m",
        )

    def paint(self, text: str, color: str) -> str:
        code = getattr(self, color)
        if not code:
            return text
        return f"{code}{text}{self.reset}"


def style_for(color: bool | None, stream: IO[str] | None = None) -> ConsoleStyle:
    """Pick a style; ``None`` enables colors only on a terminal."""

    if color is None:
        isatty = getattr(stream, "isatty", None)
        color = bool(isatty and isatty())
    return ConsoleStyle.ansi() if color else ConsoleStyle.plain()


def _render_file(result: FileResult, reference: str, style: ConsoleStyle) -> list[str]:
    lines = [f"Validating: {result.name}"]
    if not result.valid:
        lines.append(style.paint(f"✗ {result.name}: Invalid JSON syntax", "red"))
        lines.append(f"  {result.error}")
        lines.append("")
        return lines

    lines.append(style.paint(f"✓ {result.name}: Valid JSON syntax", "green"))
    if result.missing:
        lines.append(
            style.paint(
                f"✗ {result.name}: Missing {len(result.missing)} key(s)", "red"
            )
        )
        lines.extend(f"  - {key}" for key in result.missing)
    if result.extra:
        lines.append(
            style.paint(
                f"⚠ {result.name}: Has {len(result.extra)} extra key(s) "
                f"not in {reference}",
                "yellow",
            )
        )
        lines.extend(f"  - {key}" for key in result.extra)
    if not result.missing and not result.extra:
        lines.append(
            style.paint(f"✓ {result.name}: All keys match {reference}", "green")
        )
    lines.append("")
    return lines


def _issue_line(result: FileResult) -> str:
    if not result.valid:
        return f"  - {result.name}: Invalid JSON"
    return (
        f"  - {result.name}: {len(result.missing)} missing, "
        f"{len(result.extra)} extra keys"
    )


def render_console(report: ValidationReport, style: ConsoleStyle | None = None) -> str:
    """Render *report* as the human-readable console transcript."""

    style = style or ConsoleStyle.plain()
    reference = report.reference.name
    lines = [style.paint("=== Translation Validation ===", "blue"), ""]
    lines.append(f"Validating reference file: {reference}")

    if not report.reference_valid:
        lines.append(style.paint(f"✗ {reference}: Invalid JSON syntax", "red"))
        lines.append(f"  {report.reference_error}")
        lines.append(
            style.paint(f"ERROR: Reference file ({reference}) is invalid!", "red")
        )
        return "\n".join(lines)

    lines.append(style.paint(f"✓ {reference}: Valid JSON syntax", "green"))
    lines.append("")
    lines.append(f"Reference file contains {report.reference_key_count} keys")
    lines.append("")

    for result in report.results:
        lines.extend(_render_file(result, reference, style))

    lines.append(style.paint("=== Validation Summary ===", "blue"))
    lines.append(f"Total files validated: {report.total_files}")
    issues = report.files_with_issues
    if issues:
        color = "yellow" if report.passed else "red"
        lines.append(style.paint(f"Files with issues: {len(issues)}", color))
        lines.extend(_issue_line(result) for result in issues)
    else:
        lines.append(style.paint(f"All files valid: {report.total_files}", "green"))
    lines.append("")
    if report.passed:
        lines.append(style.paint("Validation PASSED", "green"))
    else:
        lines.append(style.paint("Validation FAILED", "red"))
    return "\n".join(lines)


_MD_STATUS = {
    "ok": "✅ ok",
    "extra": "⚠️ extra keys",
    "missing": "❌ missing keys",
    "invalid": "❌ invalid JSON",
}


def _md_details(title: str, keys: list[str]) -> list[str]:
    items = [f"- `{key}`" for key in keys]
    return [
        "<details>",
        f"<summary>{html.escape(title)}</summary>",
        "",
        *items,
        "",
        "</details>",
        "",
    ]


def render_markdown(report: ValidationReport) -> str:
    """Render *report* as a Markdown body suitable for a pull-request comment."""

    reference = report.reference.name
    if not report.reference_valid:
        return "\n".join(
            [
                "## ❌ Translation validation failed",
                "",
                f"Reference file `{reference}` is invalid:",
                "",
                "```",
                str(report.reference_error),
                "```",
                "",
            ]
        )

    if report.passed:
        heading = "✅ Translation validation passed"
    else:
        heading = "❌ Translation validation failed"
    lines = [
        f"## {heading}",
        "",
        f"Reference `{reference}`: {report.reference_key_count} keys · "
        f"{report.total_files} files validated · "
        f"{len(report.files_with_issues)} with issues",
        "",
    ]
    if report.strict:
        lines.extend(["Extra keys are treated as errors (strict mode).", ""])
    if not report.results:
        lines.append("No translation files found.")
        lines.append("")
        return "\n".join(lines)

    lines.extend(["| File | Status | Missing | Extra |", "|---|---|---|---|"])
    for result in report.results:
        lines.append(
            f"| `{result.name}` | {_MD_STATUS[result.status]} | "
            f"{len(result.missing)} | {len(result.extra)} |"
        )
    lines.append("")

    for result in report.results:
        if not result.valid:
            lines.extend(
                [
                    "<details>",
                    f"<summary>{html.escape(result.name)}: invalid JSON</summary>",
                    "",
                    "```",
                    str(result.error),
                    "```",
                    "",
                    "</details>",
                    "",
                ]
            )
            continue
        if result.missing:
            lines.extend(
                _md_details(
                    f"{result.name}: {len(result.missing)} missing", result.missing
                )
            )
        if result.extra:
            lines.extend(
                _md_details(f"{result.name}: {len(result.extra)} extra", result.extra)
            )
    return "\n".join(lines)


def _ensure_parent(path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def export_json(path: Path, report: ValidationReport) -> Path:
    """Write the report as JSON and return the path."""

    path = _ensure_parent(path)
    path.write_text(
        json.dumps(report.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def export_markdown(path: Path, report: ValidationReport) -> Path:
    path = _ensure_parent(path)
    path.write_text(render_markdown(report), encoding="utf-8")
    return path


def summary_frame(report: ValidationReport) -> pd.DataFrame:
    """Return one row per candidate file."""

    rows = [
        {
            "file": result.name,
            "status": result.status,
            "valid": result.valid,
            "missing": len(result.missing),
            "extra": len(result.extra),
            "key_count": result.key_count,
            "error": result.error,
        }
        for result in report.results
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def export_csv(path: Path, report: ValidationReport) -> Path:
    path = _ensure_parent(path)
    summary_frame(report).to_csv(path, index=False)
    return path


def render_html_report(outdir: Path, report: ValidationReport) -> Path:
    """Render a standalone HTML report into *outdir*."""

    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    html_path = outdir / "report.html"

    reference = html.escape(report.reference.name)
    verdict = "PASSED" if report.passed else "FAILED"
    sections: list[str] = [
        f"<h1>Translation validation: {verdict}</h1>",
        f"<p>Reference: <code>{reference}</code></p>",
    ]
    if not report.reference_valid:
        sections.append(f"<pre>{html.escape(str(report.reference_error))}</pre>")
    else:
        sections.append(
            f"<p>{report.reference_key_count} reference keys · "
            f"{report.total_files} files validated · "
            f"{len(report.files_with_issues)} with issues</p>"
        )
        frame = summary_frame(report)
        if frame.empty:
            sections.append("<p>No translation files found.</p>")
        else:
            sections.append("<h2>Summary</h2>")
            sections.append(frame.to_html(index=False, na_rep=""))
        for result in report.files_with_issues:
            sections.append(f"<h2>{html.escape(result.name)}</h2>")
            if not result.valid:
                sections.append(f"<pre>{html.escape(str(result.error))}</pre>")
                continue
            for label, keys in (("Missing", result.missing), ("Extra", result.extra)):
                if not keys:
                    continue
                items = "".join(f"<li>{html.escape(key)}</li>" for key in keys)
                sections.append(f"<h3>{label}</h3>")
                sections.append(f"<ul>{items}</ul>")

    html_path.write_text("\n".join(sections), encoding="utf-8")
    return html_path


__all__ = [
    "ConsoleStyle",
    "export_csv",
    "export_json",
    "export_markdown",
    "render_console",
    "render_html_report",
    "render_markdown",
    "style_for",
    "summary_frame",
]
