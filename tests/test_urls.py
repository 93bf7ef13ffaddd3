"""Tests for wren.urls — browser-style location mappings."""

from wren.urls import parse_location


class TestParseLocation:
    def test_full_url(self) -> None:
        loc = parse_location("https://user@example.com:8080/docs/?page=2#!?tab=api")
        assert loc == {
            "href": "https://user@example.com:8080/docs/?page=2#!?tab=api",
            "protocol": "https:",
            "host": "example.com:8080",
            "hostname": "example.com",
            "port": "8080",
            "origin": "https://example.com:8080",
            "pathname": "/docs/",
            "search": "?page=2",
            "hash": "#!?tab=api",
        }

    def test_host_without_path(self) -> None:
        loc = parse_location("http://example.com")
        assert loc["pathname"] == "/"
        assert loc["port"] == ""
        assert loc["search"] == ""
        assert loc["hash"] == ""

    def test_relative_url(self) -> None:
        loc = parse_location("/foo/bar/?x=1")
        assert loc["pathname"] == "/foo/bar/"
        assert loc["search"] == "?x=1"
        assert loc["protocol"] == ""
        assert loc["origin"] == ""
