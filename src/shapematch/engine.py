"""Containment matching of nested mappings, lists and tuples.

A pattern matches an actual value when everything the pattern names can be
found in the actual. Extra mapping keys and extra list elements in the
actual are ignored; list order matters unless the list is wrapped in
:class:`~shapematch.sentinels.Unsorted`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from .results import (
    MISMATCH,
    MISSING_ELEMENTS,
    MISSING_KEY,
    SHAPE,
    UNMATCHED_ELEMENT,
    Failure,
    MatchResult,
)
from .sentinels import EMPTY_LIST, MISSING, WILDCARD, Unsorted

ROOT = "$"

Reporter = Callable[[MatchResult], Any]


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Lists and list-like values. Strings and tuples are not sequences here."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray, tuple))


def _shape(value: Any) -> str:
    if is_mapping(value):
        return "mapping"
    if is_sequence(value):
        return "sequence"
    if isinstance(value, tuple):
        return "tuple"
    return "scalar"


def _child_path(path: str, key: Any) -> str:
    if isinstance(key, str) and key.isidentifier():
        return f"{path}.{key}"
    return f"{path}[{key!r}]"


def _same_instant(a: datetime, b: datetime) -> bool:
    # Aware datetimes compare as UTC instants; naive vs aware is simply unequal.
    return a == b


def _same_number(a: Decimal, b: Decimal) -> bool:
    # Any NaN equals any other NaN, whatever its sign or payload.
    if a.is_nan() or b.is_nan():
        return a.is_nan() and b.is_nan()
    return a == b


def _same_scalar(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, float) and math.isnan(a):
        return math.isnan(b)
    return a == b


def _lookup(mapping: Mapping, key: Any) -> Any:
    """Value stored under ``key``, or MISSING.

    Equal numbers of different types (True, 1, 1.0) hash alike, so the key
    actually stored must also have the pattern key's type.
    """
    value = mapping.get(key, MISSING)
    if value is MISSING or not isinstance(key, (int, float, Decimal)):
        return value
    for stored in mapping:
        if stored is key or (hash(stored) == hash(key) and stored == key):
            return value if type(stored) is type(key) else MISSING
    return value


class _Evaluator:
    """Recursive matcher. Collects a failure trace when ``trace`` is set."""

    def __init__(self, trace: bool = False) -> None:
        self.failures: list[Failure] | None = [] if trace else None

    def compare(self, a: Any, b: Any, path: str = ROOT) -> bool:
        # Domain types come first: their values may also look like plain scalars.
        if isinstance(a, datetime) and isinstance(b, datetime):
            ok = _same_instant(a, b)
        elif isinstance(a, Decimal) and isinstance(b, Decimal):
            ok = _same_number(a, b)
        elif is_mapping(a) and is_mapping(b):
            return self.match_map(a, b, path)
        elif is_sequence(a) and is_sequence(b):
            return self.match_list(a, b, path)
        elif isinstance(a, tuple) and isinstance(b, tuple):
            return self.match_list(list(a), list(b), path)
        elif isinstance(a, Unsorted):
            return self.match_unsorted(a.items, b, path)
        elif a is WILDCARD:
            ok = b is not MISSING
        elif a is EMPTY_LIST:
            ok = is_sequence(b) and len(b) == 0
        else:
            ok = _same_scalar(a, b)

        if not ok:
            self._mismatch(path, a, b)
        return ok

    def match_map(self, pattern: Mapping, actual: Any, path: str) -> bool:
        """Every key in the pattern must be present in the actual with a matching value."""
        if not is_mapping(actual):
            self._record(Failure(path, SHAPE, pattern, actual))
            return False
        for key, expected in pattern.items():
            if not self.compare(expected, _lookup(actual, key), _child_path(path, key)):
                return False
        return True

    def match_list(self, pattern: Sequence, actual: Sequence, path: str) -> bool:
        """Pattern elements must appear in the actual in order, gaps allowed.

        Single forward scan: the first actual element that matches the next
        pattern element is taken, and skipped elements are never revisited.
        """
        wanted = 0
        for item in actual:
            if wanted == len(pattern):
                break
            if self._probe(pattern[wanted], item, f"{path}[{wanted}]"):
                wanted += 1

        if wanted == len(pattern):
            return True
        self._record(Failure(path, MISSING_ELEMENTS, pattern, actual, list(pattern[wanted:])))
        return False

    def match_unsorted(self, pattern: Sequence, actual: Any, path: str) -> bool:
        """Each pattern element must consume a distinct actual element, in any order.

        Greedy: the first remaining candidate that matches is removed from the
        pool, so this can miss an assignment that only a different pairing finds.
        """
        if not is_sequence(actual):
            self._record(Failure(path, SHAPE, list(pattern), actual))
            return False

        pool = list(actual)
        for index, expected in enumerate(pattern):
            for position, candidate in enumerate(pool):
                if self._probe(expected, candidate, f"{path}[{index}]"):
                    del pool[position]
                    break
            else:
                self._record(Failure(path, UNMATCHED_ELEMENT, list(pattern), actual, [expected]))
                return False
        return True

    def _probe(self, a: Any, b: Any, path: str) -> bool:
        """Compare without keeping the trace of a failed attempt."""
        if self.failures is None:
            return self.compare(a, b, path)
        mark = len(self.failures)
        ok = self.compare(a, b, path)
        del self.failures[mark:]
        return ok

    def _mismatch(self, path: str, a: Any, b: Any) -> None:
        if self.failures is None:
            return
        if b is MISSING:
            kind = MISSING_KEY
        elif _shape(a) != "scalar" and _shape(a) != _shape(b):
            kind = SHAPE
        else:
            kind = MISMATCH
        self._record(Failure(path, kind, a, b))

    def _record(self, failure: Failure) -> None:
        if self.failures is not None:
            self.failures.append(failure)


def compare(a: Any, b: Any) -> bool:
    """Base equivalence used for every pairwise comparison during a match.

    Exposed for ad hoc leaf comparisons; ``compare(pattern, actual)`` gives the
    same answer as :func:`match` without any reporting.
    """
    return _Evaluator().compare(a, b)


def evaluate(pattern: Any, actual: Any) -> MatchResult:
    """Match ``pattern`` against ``actual`` and return the outcome with its failure trace."""
    evaluator = _Evaluator(trace=True)
    matched = evaluator.compare(pattern, actual)
    failures = [] if matched else list(evaluator.failures or [])
    return MatchResult(matched=matched, pattern=pattern, actual=actual, failures=failures)


def match(pattern: Any, actual: Any, *, reporter: Reporter | None = None) -> bool:
    """Return True if ``actual`` contains everything described by ``pattern``.

    The pattern is forgiving: extra keys or list elements in the actual are
    fine, but every key and element named in the pattern must be present.

    >>> match({"foo": "bar", "a": 123}, {"a": 123, "foo": "bar"})
    True
    >>> match([2, 4], [1, 2, 3, 4, 5])
    True
    >>> match([1, 2, 3], [1, 2])
    False

    If ``reporter`` is given it is called with the :class:`MatchResult` of a
    failed match. It never changes the returned value.
    """
    if reporter is None:
        return compare(pattern, actual)
    result = evaluate(pattern, actual)
    if not result.matched:
        reporter(result)
    return result.matched
