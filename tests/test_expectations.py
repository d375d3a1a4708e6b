"""Tests for the generic "Encountered ..., but was expecting ..." text."""

from __future__ import annotations

from parsediag import TOKEN_IMAGE, TokenKind
from parsediag.parser.expectations import (
    format_alternatives,
    format_encountered,
    format_expectations,
    kind_name,
)

from .tokens import chain, failure_at, tok

NAMES = {1: "A", 2: "B", 3: "C"}


class TestFormatExpectations:
    """Full generic description."""

    def test_two_alternatives(self):
        current = failure_at(tok(TokenKind.ID, "x"))
        text = format_expectations(current, [[1], [2]], NAMES, eol="\n")
        assert text == 'Encountered "x", but was expecting one of:\n    A\n    B'

    def test_single_alternative_says_expecting(self):
        current = failure_at(tok(TokenKind.ID, "x"))
        text = format_expectations(current, [[1]], NAMES, eol="\n")
        assert text == 'Encountered "x", but was expecting:\n    A'

    def test_multi_token_alternative_is_space_joined(self):
        current = failure_at(tok(TokenKind.ID, "x"), tok(TokenKind.ID, "y"))
        text = format_expectations(current, [[1, 2], [3]], NAMES, eol="\n")
        assert text == 'Encountered "x y", but was expecting one of:\n    A B\n    C'

    def test_platform_line_terminator_by_default(self):
        import os

        current = failure_at(tok(TokenKind.ID, "x"))
        text = format_expectations(current, [[1], [2]], NAMES)
        assert text.split(os.linesep)[1:] == ["    A", "    B"]

    def test_no_alternatives(self):
        current = failure_at(tok(TokenKind.ID, "x"))
        text = format_expectations(current, [], NAMES, eol="\n")
        assert text == 'Encountered "", but was expecting one of:\n'

    def test_none_sequences_treated_as_empty(self):
        current = failure_at(tok(TokenKind.ID, "x"))
        assert format_expectations(current, None, NAMES, eol="\n").startswith('Encountered ""')

    def test_encountered_text_is_escaped(self):
        current = failure_at(tok(TokenKind.STRING_LITERAL, '"a\tb"'))
        text = format_expectations(current, [[1]], NAMES, eol="\n")
        assert text.startswith('Encountered "\\"a\\tb\\"", but')


class TestFormatEncountered:
    """The run of tokens after the last consumed one."""

    def test_stops_at_eof_with_display_name(self):
        current = failure_at(
            tok(TokenKind.ID, "a"),
            tok(TokenKind.EOF, ""),
            tok(TokenKind.ID, "never"),
        )
        assert format_encountered(current, 5, TOKEN_IMAGE) == "a <EOF>"

    def test_limited_to_requested_length(self):
        current = failure_at(tok(TokenKind.ID, "a"), tok(TokenKind.ID, "b"), tok(TokenKind.ID, "c"))
        assert format_encountered(current, 2, TOKEN_IMAGE) == "a b"

    def test_broken_chain_stops_quietly(self):
        current = chain(tok(TokenKind.STATIC_TEXT, "t"), tok(TokenKind.ID, "a"))
        assert format_encountered(current, 3, TOKEN_IMAGE) == "a"

    def test_zero_length(self):
        current = failure_at(tok(TokenKind.ID, "a"))
        assert format_encountered(current, 0, TOKEN_IMAGE) == ""


class TestKindName:
    """Display-name lookup degrades instead of failing."""

    def test_mapping_lookup(self):
        assert kind_name(TOKEN_IMAGE, TokenKind.CLOSE_PAREN) == '")"'

    def test_sequence_lookup(self):
        assert kind_name(["<EOF>", '"x"'], 1) == '"x"'

    def test_missing_kind_gets_placeholder(self):
        assert kind_name(NAMES, 999) == "<token kind 999>"

    def test_out_of_range_sequence_index(self):
        assert kind_name(["<EOF>"], 5) == "<token kind 5>"

    def test_missing_table(self):
        assert kind_name(None, 3) == "<token kind 3>"

    def test_alternatives_with_unknown_kind(self):
        assert format_alternatives([[1, 42]], NAMES, eol="\n") == "    A <token kind 42>"

    def test_negative_kind_gets_placeholder(self):
        assert kind_name(["<EOF>", '"a"', '"b"'], -1) == "<token kind -1>"

    def test_non_string_entry_gets_placeholder(self):
        assert kind_name({1: "A", 2: None}, 2) == "<token kind 2>"

    def test_non_string_entry_keeps_rest_of_description(self):
        current = failure_at(tok(TokenKind.ID, "x"))
        text = format_expectations(current, [[1], [2]], {1: "A", 2: None}, eol="\n")
        assert text == 'Encountered "x", but was expecting one of:\n    A\n    <token kind 2>'
