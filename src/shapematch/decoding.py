"""JSON decoding into matchable values, including pattern markers.

Patterns kept in JSON fixture files can use these markers:

- ``"$wildcard"``: any present value
- ``"$empty_list"``: a literal empty list
- ``{"$unsorted": [...]}``: a list whose order does not matter
"""

from __future__ import annotations

import json
import re
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from .config import DecodeConfig
from .sentinels import EMPTY_LIST, WILDCARD, Unsorted

WILDCARD_MARKER = "$wildcard"
EMPTY_LIST_MARKER = "$empty_list"
UNSORTED_MARKER = "$unsorted"

_TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


class PatternDecodeError(ValueError):
    """A document could not be turned into a pattern or actual value."""

    def __init__(self, message: str, source: str = "<string>") -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


def parse_timestamp(text: str) -> datetime | None:
    """Parse an ISO-8601 date-time string, or return None if it is not one."""
    if not _TIMESTAMP_RE.match(text):
        return None
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on.
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def convert(value: Any, config: DecodeConfig, *, pattern: bool = False, source: str = "<string>") -> Any:
    """Recursively turn decoded JSON into matchable values."""
    markers = pattern and config.markers

    if isinstance(value, str):
        if markers and value == WILDCARD_MARKER:
            return WILDCARD
        if markers and value == EMPTY_LIST_MARKER:
            return EMPTY_LIST
        if config.datetimes:
            parsed = parse_timestamp(value)
            if parsed is not None:
                return parsed
        return value
    if isinstance(value, list):
        return [convert(v, config, pattern=pattern, source=source) for v in value]
    if isinstance(value, dict):
        if markers and UNSORTED_MARKER in value:
            items = value[UNSORTED_MARKER]
            if len(value) != 1 or not isinstance(items, list):
                raise PatternDecodeError(
                    f"{UNSORTED_MARKER!r} must be the only key and wrap a list", source
                )
            return Unsorted([convert(v, config, pattern=pattern, source=source) for v in items])
        return {k: convert(v, config, pattern=pattern, source=source) for k, v in value.items()}
    return value


def decode_json(
    text: str,
    config: DecodeConfig | None = None,
    *,
    pattern: bool = False,
    source: str = "<string>",
) -> Any:
    """Decode a JSON document. Markers are only honoured when ``pattern`` is set."""
    config = config or DecodeConfig()
    try:
        raw = json.loads(text, parse_float=Decimal if config.decimals else None)
    except json.JSONDecodeError as e:
        raise PatternDecodeError(f"invalid JSON: {e}", source) from e
    return convert(raw, config, pattern=pattern, source=source)


def load_file(path: str | Path, config: DecodeConfig | None = None, *, pattern: bool = False) -> Any:
    """Load and decode a JSON file. ``-`` reads standard input."""
    from_stdin = str(path) == "-"
    source = "<stdin>" if from_stdin else str(path)
    try:
        if from_stdin:
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PatternDecodeError(f"not valid UTF-8: {e}", source) from e
    except OSError as e:
        raise PatternDecodeError(f"cannot read file: {e.strerror or e}", source) from e
    return decode_json(text, config, pattern=pattern, source=source)
