"""Assertion helpers for test suites."""

from __future__ import annotations

from typing import Any

from .config import ReportConfig
from .engine import evaluate
from .reporting import format_failure
from .results import MatchResult, short_repr


def assert_match(
    pattern: Any,
    actual: Any,
    msg: str | None = None,
    *,
    config: ReportConfig | None = None,
) -> MatchResult:
    """Fail with a readable diff-like message unless ``actual`` contains ``pattern``."""
    result = evaluate(pattern, actual)
    if not result.matched:
        text = format_failure(result, config)
        raise AssertionError(f"{msg}\n{text}" if msg else text)
    return result


def assert_no_match(pattern: Any, actual: Any, msg: str | None = None) -> MatchResult:
    """Fail if ``actual`` unexpectedly contains ``pattern``."""
    result = evaluate(pattern, actual)
    if result.matched:
        text = f"pattern unexpectedly matched\npattern: {short_repr(pattern)}\n actual: {short_repr(actual)}"
        raise AssertionError(f"{msg}\n{text}" if msg else text)
    return result
