"""Key-set diff between a reference locale and a candidate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(slots=True)
class KeyDiff:
    """Keys a candidate lacks (``missing``) or adds (``extra``)."""

    missing: list[str] = field(default_factory=list)
    extra: list[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.missing and not self.extra

    def to_dict(self) -> dict[str, Any]:
        return {"missing": list(self.missing), "extra": list(self.extra)}


def diff_keys(reference: Iterable[str], candidate: Iterable[str]) -> KeyDiff:
    """Compare two key sets using exact string equality.

    ``missing`` keeps the order of *reference* and ``extra`` the order of
    *candidate*.
    """

    reference = list(dict.fromkeys(reference))
    candidate = list(dict.fromkeys(candidate))
    reference_set = set(reference)
    candidate_set = set(candidate)
    return KeyDiff(
        missing=[key for key in reference if key not in candidate_set],
        extra=[key for key in candidate if key not in reference_set],
    )


__all__ = ["KeyDiff", "diff_keys"]
