"""String escaping helpers for diagnostic text.

Two conventions are in play:

- ``add_escapes``: makes raw token text safe inside an ASCII string literal
  (used for the "Encountered ..." run)
- ``jquote``: the template language's own quoting, used whenever a single
  token or name is quoted in a message

Both are total: every input character maps to something printable, and
neither raises on any ``str``.
"""

from __future__ import annotations

# Two-character escapes shared by add_escapes
_SIMPLE_ESCAPES: dict[str, str] = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "'": "\\'",
    "\\": "\\\\",
}

# jquote leaves the apostrophe alone
_JQUOTE_ESCAPES: dict[str, str] = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _unicode_escape(ch: str) -> str:
    """Return ``\\uXXXX`` for a BMP character, a surrogate pair otherwise."""
    code = ord(ch)
    if code > 0xFFFF:
        code -= 0x10000
        high = 0xD800 + (code >> 10)
        low = 0xDC00 + (code & 0x3FF)
        return f"\\u{high:04x}\\u{low:04x}"
    return f"\\u{code:04x}"


def add_escapes(text: str) -> str:
    """Escape raw token text for inclusion in an ASCII string literal.

    NUL is dropped, the usual control characters and quotes get their
    two-character form, and anything else outside printable ASCII
    (0x20-0x7e) becomes a ``\\uXXXX`` escape.

    Example:
        >>> add_escapes('a\\tb"')
        'a\\\\tb\\\\"'
    """
    out: list[str] = []
    for ch in text:
        if ch == "\x00":
            continue
        escaped = _SIMPLE_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif " " <= ch <= "~":
            out.append(ch)
        else:
            out.append(_unicode_escape(ch))
    return "".join(out)


def jquote(value: object) -> str:
    """Quote a value as a double-quoted template string literal.

    ``None`` renders as ``null``. Other objects are converted with ``str()``
    first, so a ``Token`` quotes its literal text.
    """
    if value is None:
        return "null"
    text = str(value)
    out: list[str] = ['"']
    for ch in text:
        escaped = _JQUOTE_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ch < " ":
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)
