"""Match outcomes and the failure trace carried with them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .sentinels import MISSING

# Failure kinds
MISMATCH = "mismatch"
MISSING_KEY = "missing_key"
MISSING_ELEMENTS = "missing_elements"
UNMATCHED_ELEMENT = "unmatched_element"
SHAPE = "shape"


def short_repr(value: Any, limit: int | None = None) -> str:
    """repr() that stays readable for large payloads."""
    text = "<missing>" if value is MISSING else repr(value)
    if limit is not None and len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def shape_name(value: Any) -> str:
    if value is MISSING:
        return "nothing"
    if value is None:
        return "None"
    return type(value).__name__


@dataclass
class Failure:
    """One reason a pattern was not satisfied."""

    path: str
    kind: str
    pattern: Any = None
    actual: Any = None
    missing: list[Any] = field(default_factory=list)

    def problem(self, limit: int | None = None) -> str:
        if self.kind == MISSING_KEY:
            return f"key is missing, expected {short_repr(self.pattern, limit)}"
        if self.kind == MISSING_ELEMENTS:
            return f"missing the following expected elements: {short_repr(self.missing, limit)}"
        if self.kind == UNMATCHED_ELEMENT:
            return f"missing the following expected element: {short_repr(self.missing[0], limit)}"
        if self.kind == SHAPE:
            return f"expected a {shape_name(self.pattern)}, got {shape_name(self.actual)}"
        return f"expected {short_repr(self.pattern, limit)}, got {short_repr(self.actual, limit)}"

    def describe(self, limit: int | None = None) -> str:
        return f"{self.path}: {self.problem(limit)}"

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "path": self.path,
            "kind": self.kind,
            "pattern": short_repr(self.pattern),
            "actual": short_repr(self.actual),
        }
        if self.missing:
            d["missing"] = [short_repr(m) for m in self.missing]
        return d


@dataclass
class MatchResult:
    """Outcome of matching a pattern against an actual value."""

    matched: bool
    pattern: Any = None
    actual: Any = None
    failures: list[Failure] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.matched

    def summary(self, limit: int | None = None) -> str:
        if self.matched:
            return "pattern matched"
        if not self.failures:
            return "pattern did not match"
        return "\n".join(f.describe(limit) for f in self.failures)

    def to_dict(self) -> dict:
        return {
            "matched": self.matched,
            "failures": [f.to_dict() for f in self.failures],
        }
