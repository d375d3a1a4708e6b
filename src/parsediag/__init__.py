"""parsediag — human-readable parse errors for grammar-driven template parsers.

When a generated parser cannot continue it knows very little: the last token
it consumed, the token sequences that would have been legal next, and a table
of token display names. parsediag turns that raw signal into a stable report:

    >>> from parsediag import ParseError, Token, TokenKind, TOKEN_IMAGE
    >>> last = Token(TokenKind.STATIC_TEXT, "Hi", 1, 1, 1, 2)
    >>> last.next = Token(TokenKind.EOF, "", 1, 3, 1, 3)
    >>> err = ParseError.from_grammar_failure(last, [[TokenKind.END_IF]], TOKEN_IMAGE)
    >>> err.description
    'Unexpected end of file reached. You have an unclosed #if.'

Architecture:
Grammar failure → ParseError (record) → first read → heuristics or
expectation formatter → location prefix → cached message/description

Thread-Safety:
- Rendering is compute-once per error; concurrent readers see either no
  cache or a complete (message, description) pair
- Assigning ``template_name`` clears the cache under the same lock
- The tooling-mode flag is a lock-free memo of a pure function

Configuration:
- PARSEDIAG_TOOLING_MODE=1 switches to the compact ``[col. N] `` prefix
- NO_COLOR / FORCE_COLOR control colors in ``format_compact()``
"""

from parsediag._types import TOKEN_IMAGE, SourceDocument, Spanned, Token, TokenKind
from parsediag.diagnostics import (
    ErrorCode,
    ParseError,
    SourceSnippet,
    TemplateError,
    build_source_snippet,
)
from parsediag.utils.strings import add_escapes, jquote
from parsediag.utils.tooling import is_tooling_mode, reset_tooling_mode

__version__ = "0.1.0"

__all__ = [
    "TOKEN_IMAGE",
    "ErrorCode",
    "ParseError",
    "SourceDocument",
    "SourceSnippet",
    "Spanned",
    "TemplateError",
    "Token",
    "TokenKind",
    "__version__",
    "add_escapes",
    "build_source_snippet",
    "is_tooling_mode",
    "jquote",
    "reset_tooling_mode",
]


def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'parsediag' has no attribute {name!r}")
