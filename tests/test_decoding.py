"""Tests for JSON decoding of patterns and actuals."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from shapematch import EMPTY_LIST, WILDCARD, Unsorted, match
from shapematch.config import DecodeConfig
from shapematch.decoding import PatternDecodeError, decode_json, load_file, parse_timestamp


class TestMarkers:
    def test_wildcard_and_empty_list(self):
        pattern = decode_json('{"id": "$wildcard", "tags": "$empty_list"}', pattern=True)
        assert pattern == {"id": WILDCARD, "tags": EMPTY_LIST}

    def test_unsorted(self):
        pattern = decode_json('{"$unsorted": [1, {"$unsorted": [2, 3]}]}', pattern=True)
        assert pattern == Unsorted([1, Unsorted([2, 3])])

    def test_markers_only_in_patterns(self):
        actual = decode_json('{"id": "$wildcard", "x": {"$unsorted": [1]}}')
        assert actual == {"id": "$wildcard", "x": {"$unsorted": [1]}}

    def test_markers_disabled(self):
        pattern = decode_json('["$wildcard"]', DecodeConfig(markers=False), pattern=True)
        assert pattern == ["$wildcard"]

    def test_unsorted_must_wrap_a_list(self):
        with pytest.raises(PatternDecodeError, match="must be the only key"):
            decode_json('{"$unsorted": {"a": 1}}', pattern=True)
        with pytest.raises(PatternDecodeError, match="must be the only key"):
            decode_json('{"$unsorted": [1], "b": 2}', pattern=True)

    def test_decoded_pattern_matches(self):
        pattern = decode_json('{"data": {"$unsorted": ["a", "b"]}, "id": "$wildcard"}', pattern=True)
        actual = decode_json('{"data": ["b", "a", "c"], "id": null}')
        assert match(pattern, actual)


class TestDomainTypes:
    def test_decimals(self):
        value = decode_json('{"price": 2.50}', DecodeConfig(decimals=True))
        assert value == {"price": Decimal("2.50")}
        assert isinstance(value["price"], Decimal)
        assert match(decode_json("[2.5]", DecodeConfig(decimals=True)), [Decimal("2.500")])

    def test_floats_by_default(self):
        assert isinstance(decode_json("2.5"), float)

    def test_datetimes(self):
        config = DecodeConfig(datetimes=True)
        pattern = decode_json('{"at": "2018-01-01T12:00:00Z"}', config, pattern=True)
        actual = decode_json('{"at": "2018-01-01T13:00:00.000000+01:00"}', config)
        assert pattern["at"] == datetime(2018, 1, 1, 12, tzinfo=timezone.utc)
        assert match(pattern, actual)

    def test_plain_strings_stay_strings(self):
        config = DecodeConfig(datetimes=True)
        assert decode_json('["2018-01-01", "hello", "2018-13-45T99:99"]', config) == [
            "2018-01-01",
            "hello",
            "2018-13-45T99:99",
        ]


class TestParseTimestamp:
    def test_utc_suffix(self):
        assert parse_timestamp("2018-01-01T12:00:00Z") == datetime(2018, 1, 1, 12, tzinfo=timezone.utc)

    def test_space_separator(self):
        assert parse_timestamp("2018-01-01 12:00") == datetime(2018, 1, 1, 12)

    def test_not_a_timestamp(self):
        assert parse_timestamp("2018-01-01") is None
        assert parse_timestamp("nope") is None


class TestErrors:
    def test_invalid_json(self):
        with pytest.raises(PatternDecodeError, match="invalid JSON") as exc_info:
            decode_json("{not json", source="pattern.json")
        assert exc_info.value.source == "pattern.json"
        assert str(exc_info.value).startswith("pattern.json: ")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode_json("")


class TestLoadFile:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "pattern.json"
        path.write_text('{"a": "$wildcard"}')
        assert load_file(path, pattern=True) == {"a": WILDCARD}
        assert load_file(str(path)) == {"a": "$wildcard"}

    def test_reads_stdin(self, monkeypatch):
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2]"))
        assert load_file("-") == [1, 2]

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'["\xff"]')
        with pytest.raises(PatternDecodeError, match="latin1.json: not valid UTF-8"):
            load_file(path)

    def test_unreadable_path(self, tmp_path):
        with pytest.raises(PatternDecodeError, match="cannot read file"):
            load_file(tmp_path)

    def test_error_names_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[1,")
        with pytest.raises(PatternDecodeError, match="broken.json"):
            load_file(path)
