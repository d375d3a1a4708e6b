"""Core data shapes shared with the grammar.

The grammar owns tokenization and decides where a parse fails; this module
only defines the record shapes the diagnostics consume:

- ``Token``: one lexical unit, linked to its successor
- ``TokenKind``: the grammar's token categories (``EOF`` is always 0)
- ``TOKEN_IMAGE``: default kind → display-name table
- ``SourceDocument`` / ``Spanned``: what a caller may hand over when building
  a diagnostic from an already-parsed element
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol, runtime_checkable


class TokenKind(IntEnum):
    """Token categories produced by the template lexer."""

    EOF = 0

    # Directive openers
    IF = 1
    ELSE_IF = 2
    ELSE = 3
    LIST = 4
    FOREACH = 5
    SWITCH = 6
    CASE = 7
    ASSIGN = 8
    LOCAL = 9
    GLOBAL = 10
    MACRO = 11
    FUNCTION = 12
    COMPRESS = 13
    TRANSFORM = 14
    ESCAPE = 15
    NOESCAPE = 16
    ATTEMPT = 17
    RECOVER = 18

    # Directive closers
    END_IF = 30
    END_LIST = 31
    END_FOREACH = 32
    END_SWITCH = 33
    END_ASSIGN = 34
    END_LOCAL = 35
    END_GLOBAL = 36
    END_MACRO = 37
    END_FUNCTION = 38
    END_COMPRESS = 39
    END_TRANSFORM = 40
    END_ESCAPE = 41
    END_NOESCAPE = 42
    END_ATTEMPT = 43

    # User-defined directive calls
    UNIFIED_CALL = 50
    UNIFIED_CALL_END = 51

    # Text and interpolation
    STATIC_TEXT = 60
    DOLLAR_INTERPOLATION_OPENING = 61
    CLOSE_TAG = 62
    EMPTY_DIRECTIVE_END = 63

    # Expression tokens
    STRING_LITERAL = 70
    INTEGER = 71
    DECIMAL = 72
    TRUE = 73
    FALSE = 74
    ID = 75
    DOT = 76
    COMMA = 77
    COLON = 78
    EQUALS = 79
    PLUS = 80
    MINUS = 81
    EXCLAM = 82
    BUILT_IN = 83
    OPEN_PAREN = 84
    CLOSE_PAREN = 85
    OPEN_BRACKET = 86
    CLOSE_BRACKET = 87
    OPEN_BRACE = 88
    CLOSE_BRACE = 89


TOKEN_IMAGE: Mapping[int, str] = {
    TokenKind.EOF: "<EOF>",
    TokenKind.IF: "<IF>",
    TokenKind.ELSE_IF: "<ELSE_IF>",
    TokenKind.ELSE: "<ELSE>",
    TokenKind.LIST: "<LIST>",
    TokenKind.FOREACH: "<FOREACH>",
    TokenKind.SWITCH: "<SWITCH>",
    TokenKind.CASE: "<CASE>",
    TokenKind.ASSIGN: "<ASSIGN>",
    TokenKind.LOCAL: "<LOCAL>",
    TokenKind.GLOBAL: "<GLOBAL>",
    TokenKind.MACRO: "<MACRO>",
    TokenKind.FUNCTION: "<FUNCTION>",
    TokenKind.COMPRESS: "<COMPRESS>",
    TokenKind.TRANSFORM: "<TRANSFORM>",
    TokenKind.ESCAPE: "<ESCAPE>",
    TokenKind.NOESCAPE: "<NOESCAPE>",
    TokenKind.ATTEMPT: "<ATTEMPT>",
    TokenKind.RECOVER: "<RECOVER>",
    TokenKind.END_IF: "<END_IF>",
    TokenKind.END_LIST: "<END_LIST>",
    TokenKind.END_FOREACH: "<END_FOREACH>",
    TokenKind.END_SWITCH: "<END_SWITCH>",
    TokenKind.END_ASSIGN: "<END_ASSIGN>",
    TokenKind.END_LOCAL: "<END_LOCAL>",
    TokenKind.END_GLOBAL: "<END_GLOBAL>",
    TokenKind.END_MACRO: "<END_MACRO>",
    TokenKind.END_FUNCTION: "<END_FUNCTION>",
    TokenKind.END_COMPRESS: "<END_COMPRESS>",
    TokenKind.END_TRANSFORM: "<END_TRANSFORM>",
    TokenKind.END_ESCAPE: "<END_ESCAPE>",
    TokenKind.END_NOESCAPE: "<END_NOESCAPE>",
    TokenKind.END_ATTEMPT: "<END_ATTEMPT>",
    TokenKind.UNIFIED_CALL: "<UNIFIED_CALL>",
    TokenKind.UNIFIED_CALL_END: "<UNIFIED_CALL_END>",
    TokenKind.STATIC_TEXT: "<STATIC_TEXT>",
    TokenKind.DOLLAR_INTERPOLATION_OPENING: '"${"',
    TokenKind.CLOSE_TAG: '">"',
    TokenKind.EMPTY_DIRECTIVE_END: '"/>"',
    TokenKind.STRING_LITERAL: "<STRING_LITERAL>",
    TokenKind.INTEGER: "<INTEGER>",
    TokenKind.DECIMAL: "<DECIMAL>",
    TokenKind.TRUE: '"true"',
    TokenKind.FALSE: '"false"',
    TokenKind.ID: "<ID>",
    TokenKind.DOT: '"."',
    TokenKind.COMMA: '","',
    TokenKind.COLON: '":"',
    TokenKind.EQUALS: '"="',
    TokenKind.PLUS: '"+"',
    TokenKind.MINUS: '"-"',
    TokenKind.EXCLAM: '"!"',
    TokenKind.BUILT_IN: '"?"',
    TokenKind.OPEN_PAREN: '"("',
    TokenKind.CLOSE_PAREN: '")"',
    TokenKind.OPEN_BRACKET: '"["',
    TokenKind.CLOSE_BRACKET: '"]"',
    TokenKind.OPEN_BRACE: '"{"',
    TokenKind.CLOSE_BRACE: '"}"',
}


@dataclass(slots=True, eq=False)
class Token:
    """A lexical token linked to its successor in the input stream.

    Attributes:
        kind: Token category (a ``TokenKind`` or a plain int from the grammar).
        image: Literal source text of the token.
        begin_line: 1-based line of the first character (0 if unknown).
        begin_column: 1-based column of the first character (0 if unknown).
        end_line: 1-based line of the last character (0 if unknown).
        end_column: 1-based column of the last character (0 if unknown).
        next: The following token, or None at the end of the chain.
    """

    kind: int
    image: str = ""
    begin_line: int = 0
    begin_column: int = 0
    end_line: int = 0
    end_column: int = 0
    next: Token | None = field(default=None, repr=False)

    def __str__(self) -> str:
        return self.image


@runtime_checkable
class SourceDocument(Protocol):
    """A parsed template, as far as diagnostics care about it."""

    @property
    def name(self) -> str | None: ...


@runtime_checkable
class Spanned(Protocol):
    """Anything that knows where it begins and ends in its template."""

    begin_line: int
    begin_column: int
    end_line: int
    end_column: int
