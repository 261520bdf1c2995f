"""Tests for optparser.classifier."""

import pytest

from optparser.classifier import TokenKind, classify


class TestShortOptions:
    def test_bare_short_option_has_no_value(self) -> None:
        tok = classify("-a")
        assert tok.kind is TokenKind.SHORT
        assert tok.name == "a"
        assert tok.value is None

    def test_attached_text_is_inline_value(self) -> None:
        tok = classify("-ofoo")
        assert tok.kind is TokenKind.SHORT
        assert (tok.name, tok.value) == ("o", "foo")

    def test_equals_is_part_of_short_inline_value(self) -> None:
        assert classify("-o=foo").value == "=foo"

    def test_raw_token_is_kept(self) -> None:
        assert classify("-ofoo").raw == "-ofoo"


class TestLongOptions:
    def test_long_option_without_value(self) -> None:
        tok = classify("--output")
        assert tok.kind is TokenKind.LONG
        assert tok.name == "output"
        assert tok.value is None

    def test_long_option_with_inline_value(self) -> None:
        tok = classify("--output=foo")
        assert (tok.kind, tok.name, tok.value) == (TokenKind.LONG, "output", "foo")

    def test_value_may_contain_equals(self) -> None:
        tok = classify("--define=k=v")
        assert (tok.name, tok.value) == ("define", "k=v")

    def test_trailing_equals_means_no_inline_value(self) -> None:
        tok = classify("--output=")
        assert tok.name == "output"
        assert tok.value is None

    def test_name_allows_hyphen_and_underscore(self) -> None:
        assert classify("--long-a_b").name == "long-a_b"


class TestPlainText:
    @pytest.mark.parametrize("raw", ["", "-", "--", "foo", "-1", "--=x", "+a", "-é"])
    def test_non_option_shapes_are_text(self, raw: str) -> None:
        tok = classify(raw)
        assert tok.kind is TokenKind.TEXT
        assert not tok.is_option
        assert tok.raw == raw

    def test_options_report_is_option(self) -> None:
        assert classify("-a").is_option
        assert classify("--long").is_option
