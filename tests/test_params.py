"""Tests for wren.params — flat key/value decoding."""

from wren.params import parse_params


class TestParseParams:
    def test_pairs(self) -> None:
        assert parse_params("foo=FOO&buz=BUZ") == {"foo": "FOO", "buz": "BUZ"}

    def test_plus_is_space(self) -> None:
        assert parse_params("a+b=c+d") == {"a b": "c d"}

    def test_percent_decoding(self) -> None:
        assert parse_params("q=caf%C3%A9&path=%2Fdocs%2F") == {"q": "café", "path": "/docs/"}

    def test_encoded_plus_stays_plus(self) -> None:
        assert parse_params("expr=1%2B1") == {"expr": "1+1"}

    def test_semicolon_separator(self) -> None:
        assert parse_params("a=1;b=2&c=3") == {"a": "1", "b": "2", "c": "3"}

    def test_empty_segments_ignored(self) -> None:
        assert parse_params("&&a=1&;&b=2&") == {"a": "1", "b": "2"}

    def test_segment_without_equals(self) -> None:
        assert parse_params("debug&x=1") == {"debug": "debug", "x": "1"}

    def test_splits_on_first_equals(self) -> None:
        assert parse_params("token=a=b=c") == {"token": "a=b=c"}

    def test_empty_value(self) -> None:
        assert parse_params("a=") == {"a": ""}

    def test_last_duplicate_wins(self) -> None:
        assert parse_params("tag=python&tag=rust") == {"tag": "rust"}

    def test_empty_string(self) -> None:
        assert parse_params("") == {}
