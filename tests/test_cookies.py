"""Tests for the Netscape cookies.txt → Cookie header builder."""

from __future__ import annotations

import pytest

from shorts_scraper.scraper.cookies import build_cookie_header


_COOKIES_TXT = """\
# Netscape HTTP Cookie File
# This is a generated file! Do not edit.

.youtube.com\tTRUE\t/\tTRUE\t1767225600\tPREF\tf6=40000000&hl=en
.youtube.com\tTRUE\t/\tTRUE\t1767225600\tSID\tg.a000abc
"""


class TestBuildCookieHeader:
    def test_single_line(self) -> None:
        assert build_cookie_header("example.com\tTRUE\t/\tFALSE\t0\tsid\tabc123\n") == "sid=abc123"

    def test_multiple_lines_joined_in_order(self) -> None:
        assert build_cookie_header(_COOKIES_TXT) == "PREF=f6=40000000&hl=en; SID=g.a000abc"

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_input(self, text) -> None:
        assert build_cookie_header(text) == ""

    def test_short_line_is_skipped(self) -> None:
        text = "example.com\tTRUE\t/\tFALSE\nexample.com\tTRUE\t/\tFALSE\t0\tsid\tabc123\n"
        assert build_cookie_header(text) == "sid=abc123"

    def test_only_malformed_lines_gives_empty(self) -> None:
        assert build_cookie_header("not a cookie line\nnor\tthis\n") == ""

    def test_comments_and_blank_lines_skipped(self) -> None:
        text = "# comment\t1\t2\t3\t4\tname\tvalue\n   \n\n"
        assert build_cookie_header(text) == ""

    def test_value_is_trimmed(self) -> None:
        """Windows line endings leave a trailing CR on the value field."""
        text = "example.com\tTRUE\t/\tFALSE\t0\tsid\t abc123 \r\n"
        assert build_cookie_header(text) == "sid=abc123"

    def test_extra_fields_ignored(self) -> None:
        text = "example.com\tTRUE\t/\tFALSE\t0\tsid\tabc123\textra\n"
        assert build_cookie_header(text) == "sid=abc123"
