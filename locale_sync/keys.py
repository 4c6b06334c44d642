"""Flatten nested locale documents into dotted key paths."""

from __future__ import annotations

from typing import Any, Iterator, Mapping


def _walk(mapping: Mapping[str, Any]) -> Iterator[str]:
    # One (prefix, remaining items) pair per open object, no recursion.
    stack: list[tuple[str, Iterator[tuple[str, Any]]]] = [
        ("", iter(mapping.items()))
    ]
    while stack:
        prefix, items = stack[-1]
        for key, value in items:
            full_key = f"{prefix}.{key}" if prefix else key
            yield full_key
            # Lists are leaves even when they hold objects.
            if isinstance(value, Mapping):
                stack.append((full_key, iter(value.items())))
                break
        else:
            stack.pop()


def extract_keys(document: Mapping[str, Any]) -> list[str]:
    """Return every node path of *document* in depth-first order.

    Containers and leaves are both recorded, so ``{"b": {"c": "y"}}`` yields
    ``["b", "b.c"]``. Keys containing a literal ``.`` may collide with nested
    paths; colliding paths are collapsed into a single entry.
    """

    if not isinstance(document, Mapping):
        raise TypeError("top-level value must be a JSON object")
    return list(dict.fromkeys(_walk(document)))


__all__ = ["extract_keys"]
