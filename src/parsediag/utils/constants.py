"""Shared constants for parsediag.

Declarative tables consulted by the end-of-file and dangling-directive
heuristics. Extend these when the grammar grows a new block construct.
"""

from __future__ import annotations

from collections.abc import Mapping

from parsediag._types import TokenKind

# Token kinds that close a block construct, mapped to the name(s) shown in
# "You have an unclosed ..." messages.
# END_MACRO also closes #function definitions, so it reports both.
BLOCK_CLOSER_NAMES: Mapping[int, tuple[str, ...]] = {
    TokenKind.END_FOREACH: ("#foreach",),
    TokenKind.END_LIST: ("#list",),
    TokenKind.END_SWITCH: ("#switch",),
    TokenKind.END_IF: ("#if",),
    TokenKind.END_COMPRESS: ("#compress",),
    TokenKind.END_MACRO: ("#macro", "#function"),
    TokenKind.END_FUNCTION: ("#function",),
    TokenKind.END_TRANSFORM: ("#transform",),
    TokenKind.END_ESCAPE: ("#escape",),
    TokenKind.END_NOESCAPE: ("#noescape",),
    TokenKind.END_ASSIGN: ("#assign",),
    TokenKind.END_LOCAL: ("#local",),
    TokenKind.END_GLOBAL: ("#global",),
    TokenKind.END_ATTEMPT: ("#attempt",),
    TokenKind.CLOSE_BRACE: ('"{"',),
    TokenKind.CLOSE_BRACKET: ('"["',),
    TokenKind.CLOSE_PAREN: ('"("',),
    TokenKind.UNIFIED_CALL_END: ("@...",),
}

# Keywords that only make sense inside an open #if block
CONDITIONAL_BRANCH_KINDS: frozenset[int] = frozenset(
    {
        TokenKind.END_IF,
        TokenKind.ELSE_IF,
        TokenKind.ELSE,
    }
)

# Placeholder used when a token kind has no display name
UNKNOWN_KIND_NAME = "<token kind {kind}>"
