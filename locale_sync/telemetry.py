"""Opt-in JSONL event log for validation runs."""

from __future__ import annotations

import json
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping
from uuid import uuid4

_LOG_PATH: ContextVar[Path | None] = ContextVar("telemetry_path", default=None)
_SESSION_ID: ContextVar[str | None] = ContextVar("telemetry_session", default=None)
_LAST_EVENT: ContextVar[dict[str, Any] | None] = ContextVar(
    "telemetry_last", default=None
)
LOG_FILENAME = "events.jsonl"


def _resolve_path(target: Path | str) -> Path:
    path = Path(target)
    if path.is_dir():
        return (path / LOG_FILENAME).resolve()
    return path.resolve()


def is_enabled() -> bool:
    """Return whether a log destination is active."""

    return _LOG_PATH.get() is not None


def ensure_session_id() -> str:
    session_id = _SESSION_ID.get()
    if session_id is None:
        session_id = str(uuid4())
        _SESSION_ID.set(session_id)
    return session_id


def _prepare_event(
    event: str, props: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(),
        "session": ensure_session_id(),
        "event": event,
        "props": dict(props or {}),
    }


def _write_event(path: Path, payload: Mapping[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(payload, ensure_ascii=False) + "\n")


def log_event(event: str, props: Mapping[str, Any] | None = None) -> None:
    """Append an event to the active log, if any."""

    path = _LOG_PATH.get()
    if path is None:
        _LAST_EVENT.set(None)
        return
    payload = _prepare_event(event, props)
    _write_event(path, payload)
    _LAST_EVENT.set(payload)


def last_event() -> dict[str, Any] | None:
    """Return the last event recorded during this context."""

    return _LAST_EVENT.get()


def iter_events(path: Path | str) -> Iterable[dict[str, Any]]:
    path = Path(path)
    if not path.exists():
        return []
    events: list[dict[str, Any]] = []
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if not line:
                continue
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:  # pragma: no cover - truncated write
                continue
    return events


def aggregate(path: Path | str) -> dict[str, Any]:
    """Count events per name and per session."""

    summary: dict[str, Any] = {"events": {}, "sessions": 0}
    sessions: set[str] = set()
    for event in iter_events(path):
        name = event.get("event", "unknown")
        summary["events"][name] = summary["events"].get(name, 0) + 1
        if isinstance(event.get("session"), str):
            sessions.add(event["session"])
    summary["sessions"] = len(sessions)
    return summary


@contextmanager
def telemetry_session(target: Path | str | None) -> Iterator[Path | None]:
    """Route :func:`log_event` to *target* for the duration of the block.

    ``None`` keeps telemetry disabled. A directory target logs to
    ``events.jsonl`` inside it.
    """

    path = _resolve_path(target) if target is not None else None
    path_token = _LOG_PATH.set(path)
    session_token = _SESSION_ID.set(str(uuid4()))
    try:
        yield path
    finally:
        _LOG_PATH.reset(path_token)
        _SESSION_ID.reset(session_token)
        _LAST_EVENT.set(None)


__all__ = [
    "aggregate",
    "ensure_session_id",
    "is_enabled",
    "iter_events",
    "last_event",
    "log_event",
    "telemetry_session",
]
