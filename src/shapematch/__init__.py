"""Containment matching for nested mappings and lists.

>>> from shapematch import match, unsorted, WILDCARD
>>> match({"data": unsorted("a", "b"), "id": WILDCARD}, {"data": ["b", "a"], "id": 7, "extra": 1})
True
"""

from __future__ import annotations

__version__ = "0.1.0"

from .assertions import assert_match, assert_no_match  # noqa: E402
from .engine import compare, evaluate, match  # noqa: E402
from .results import Failure, MatchResult  # noqa: E402
from .sentinels import EMPTY_LIST, WILDCARD, Unsorted, unsorted  # noqa: E402

__all__ = [
    "EMPTY_LIST",
    "WILDCARD",
    "Failure",
    "MatchResult",
    "Unsorted",
    "__version__",
    "assert_match",
    "assert_no_match",
    "compare",
    "evaluate",
    "match",
    "unsorted",
]
