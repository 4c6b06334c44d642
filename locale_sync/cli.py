"""Command line interface for locale-sync."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Iterable

from . import telemetry
from .checker import ValidationReport, check_file, check_locales, load_keys
from .config import CheckerConfig, ConfigError, build_config
from .loaders import LocaleParseError
from .reporters import (
    export_csv,
    export_json,
    export_markdown,
    render_console,
    render_html_report,
    style_for,
)


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "locales_dir": args.dir,
        "reference": args.reference,
        "exclude": args.exclude,
        "strict_extra": True if args.strict else None,
        "color": args.color,
        "json_report": args.json,
        "csv_report": args.csv,
        "html_report": args.html,
        "markdown_report": args.markdown,
        "events_log": args.events_log,
    }


def _write_reports(config: CheckerConfig, report: ValidationReport) -> None:
    outputs = (
        (config.json_report, export_json),
        (config.csv_report, export_csv),
        (config.markdown_report, export_markdown),
    )
    for target, writer in outputs:
        if target is not None:
            path = writer(target, report)
            print(f"Report saved to {path}")
    if config.html_report is not None:
        path = render_html_report(config.html_report, report)
        print(f"Report saved to {path}")


def cmd_check(args: argparse.Namespace) -> int:
    try:
        config = build_config(args.config, _overrides(args))
    except ConfigError as exc:
        print(f"[err] {exc}", file=sys.stderr)
        return 2

    candidates = [Path(path) for path in args.files] if args.files else None
    try:
        with telemetry.telemetry_session(config.events_log):
            report = check_locales(config, candidates=candidates)
    except OSError as exc:
        print(f"[err] Cannot write event log: {exc}", file=sys.stderr)
        return 2
    print(render_console(report, style_for(config.color, sys.stdout)))
    try:
        _write_reports(config, report)
    except OSError as exc:
        print(f"[err] Cannot write report: {exc}", file=sys.stderr)
        return 2
    return report.exit_code


def cmd_keys(args: argparse.Namespace) -> int:
    try:
        keys = load_keys(args.file)
    except LocaleParseError as exc:
        print(f"[err] {exc}", file=sys.stderr)
        return 1
    for key in keys:
        print(key)
    return 0


def cmd_diff(args: argparse.Namespace) -> int:
    try:
        reference_keys = load_keys(args.reference)
    except LocaleParseError as exc:
        print(f"[err] {exc}", file=sys.stderr)
        return 1
    result = check_file(reference_keys, args.candidate)
    if not result.valid:
        print(f"[err] {result.name}: {result.error}", file=sys.stderr)
        return 1

    reference = Path(args.reference).name
    print(f"Keys in {reference} but not in {result.name}:")
    for key in result.missing:
        print(f"  {key}")
    print(f"\nKeys in {result.name} but not in {reference}:")
    for key in result.extra:
        print(f"  {key}")
    return 1 if result.is_fatal(strict=args.strict) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locale-sync",
        description="Check translation files against a reference locale.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_check = subparsers.add_parser(
        "check", help="Validate every locale file against the reference"
    )
    parser_check.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Candidate files; defaults to every *.json beside the reference.",
    )
    parser_check.add_argument(
        "--dir", type=Path, default=None, help="Directory holding the locale files."
    )
    parser_check.add_argument(
        "--reference",
        default=None,
        help="Reference file name inside --dir (default: en.json).",
    )
    parser_check.add_argument(
        "--config", type=Path, default=None, help="YAML configuration file."
    )
    parser_check.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="File name glob to skip during discovery (repeatable).",
    )
    parser_check.add_argument(
        "--strict",
        action="store_true",
        help="Treat extra keys as errors.",
    )
    parser_check.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force colored output on or off (default: auto).",
    )
    parser_check.add_argument(
        "--json", type=Path, default=None, help="JSON report path."
    )
    parser_check.add_argument("--csv", type=Path, default=None, help="CSV report path.")
    parser_check.add_argument(
        "--html", type=Path, default=None, help="Directory for report.html."
    )
    parser_check.add_argument(
        "--markdown",
        type=Path,
        default=None,
        help="Markdown report path (pull-request comment body).",
    )
    parser_check.add_argument(
        "--events-log", type=Path, default=None, help="JSONL event log path."
    )
    parser_check.set_defaults(func=cmd_check)

    parser_keys = subparsers.add_parser("keys", help="List the key paths of a file")
    parser_keys.add_argument("file", type=Path)
    parser_keys.set_defaults(func=cmd_keys)

    parser_diff = subparsers.add_parser("diff", help="Compare two locale files")
    parser_diff.add_argument("reference", type=Path)
    parser_diff.add_argument("candidate", type=Path)
    parser_diff.add_argument(
        "--strict", action="store_true", help="Treat extra keys as errors."
    )
    parser_diff.set_defaults(func=cmd_diff)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(None if argv is None else list(argv))
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
