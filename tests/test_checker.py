"""Tests for the validation runner."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from locale_sync.checker import check_file, check_locales
from locale_sync.config import CheckerConfig

REFERENCE = {"a": "x", "b": {"c": "y"}}


def _write(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _config(root: Path, **kwargs: Any) -> CheckerConfig:
    return CheckerConfig(locales_dir=root, **kwargs)


def test_all_in_sync_passes(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", REFERENCE)
    _write(tmp_path / "de.json", REFERENCE)
    report = check_locales(_config(tmp_path))
    assert report.passed
    assert report.exit_code == 0
    assert report.total_files == 2
    assert report.files_with_issues == []
    assert report.reference_key_count == 3


def test_missing_keys_fail_the_run(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", REFERENCE)
    _write(tmp_path / "de.json", {"a": "x"})
    report = check_locales(_config(tmp_path))
    [result] = report.results
    assert result.missing == ["b", "b.c"]
    assert result.extra == []
    assert result.status == "missing"
    assert not report.passed
    assert report.exit_code == 1


def test_extra_keys_are_advisory(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", REFERENCE)
    _write(tmp_path / "de.json", {**REFERENCE, "d": "z"})
    report = check_locales(_config(tmp_path))
    [result] = report.results
    assert result.missing == []
    assert result.extra == ["d"]
    assert report.passed
    assert len(report.files_with_issues) == 1


def test_strict_mode_fails_on_extra_keys(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", REFERENCE)
    _write(tmp_path / "de.json", {**REFERENCE, "d": "z"})
    report = check_locales(_config(tmp_path, strict_extra=True))
    assert not report.passed


def test_invalid_candidate_is_recorded_and_others_continue(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", REFERENCE)
    (tmp_path / "bad.json").write_text('{"a": ', encoding="utf-8")
    _write(tmp_path / "pt.json", REFERENCE)
    report = check_locales(_config(tmp_path))
    bad, good = report.results
    assert bad.name == "bad.json"
    assert not bad.valid
    assert bad.error
    assert bad.missing == [] and bad.extra == []
    assert good.valid and good.status == "ok"
    assert not report.passed


def test_non_object_candidate_is_invalid(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", REFERENCE)
    _write(tmp_path / "list.json", ["a", "b"])
    report = check_locales(_config(tmp_path))
    [result] = report.results
    assert not result.valid
    assert "JSON object" in result.error


def test_invalid_reference_aborts(tmp_path: Path) -> None:
    (tmp_path / "en.json").write_text("{not json}", encoding="utf-8")
    _write(tmp_path / "de.json", REFERENCE)
    report = check_locales(_config(tmp_path))
    assert not report.reference_valid
    assert report.reference_error
    assert report.results == []
    assert report.exit_code == 1


def test_missing_reference_is_invalid(tmp_path: Path) -> None:
    report = check_locales(_config(tmp_path))
    assert not report.reference_valid
    assert not report.passed


def test_custom_reference_and_explicit_candidates(tmp_path: Path) -> None:
    _write(tmp_path / "base.json", REFERENCE)
    other = _write(tmp_path / "other.json", {"a": "x"})
    _write(tmp_path / "ignored.json", {})
    report = check_locales(
        _config(tmp_path, reference="base.json"),
        candidates=[tmp_path / "base.json", other],
    )
    assert [result.name for result in report.results] == ["other.json"]


def test_check_file_counts_keys(tmp_path: Path) -> None:
    path = _write(tmp_path / "de.json", {"a": "x", "b": {"c": "y"}, "d": [1]})
    result = check_file(["a", "b", "b.c"], path)
    assert result.key_count == 4
    assert result.extra == ["d"]
    assert result.to_dict()["status"] == "extra"


def test_report_to_dict(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", REFERENCE)
    _write(tmp_path / "de.json", {"a": "x"})
    payload = check_locales(_config(tmp_path)).to_dict()
    assert payload["passed"] is False
    assert payload["total_files"] == 2
    assert payload["results"][0]["missing"] == ["b", "b.c"]


def _nested(depth: int) -> str:
    return '{"a": ' * depth + '"x"' + "}" * depth


def test_unparseable_candidates_never_abort_the_run(tmp_path: Path) -> None:
    _write(tmp_path / "en.json", {"a": "x"})
    (tmp_path / "de.json").write_text(_nested(100_000), encoding="utf-8")
    folder = tmp_path / "es.json"
    folder.mkdir()
    good = _write(tmp_path / "fr.json", {"a": "x"})

    report = check_locales(
        _config(tmp_path), candidates=[tmp_path / "de.json", folder, good]
    )
    deep, directory, valid = report.results
    assert not deep.valid
    assert "nesting depth" in deep.error
    assert not directory.valid
    assert directory.error
    assert valid.status == "ok"
    assert report.exit_code == 1


def test_moderately_deep_documents_are_compared(tmp_path: Path) -> None:
    (tmp_path / "en.json").write_text(_nested(500), encoding="utf-8")
    (tmp_path / "de.json").write_text(_nested(500), encoding="utf-8")
    report = check_locales(_config(tmp_path))
    assert report.passed
    assert report.reference_key_count == 500
