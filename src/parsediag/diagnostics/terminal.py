"""ANSI coloring for compact terminal diagnostics.

Only ``ParseError.format_compact()`` uses these helpers. The plain
``message``/``description`` strings never carry escape codes.

Respects:
    - NO_COLOR environment variable (https://no-color.org/)
    - FORCE_COLOR environment variable (overrides NO_COLOR)
    - sys.stderr.isatty() for TTY detection
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_CODES = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
}

ColorName = Literal["reset", "bold", "dim", "yellow", "cyan", "bright_red"]

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    # Diagnostics go to stderr
    return sys.stderr.isatty()


# Decided once at import
_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap text in ANSI codes when colors are enabled.

    Example:
        >>> colorize("PD-PAR-002", "bright_red", "bold")
        '\\033[91m\\033[1mPD-PAR-002\\033[0m'  # if colors supported
        'PD-PAR-002'  # if colors not supported
    """
    if not _USE_COLORS or not colors:
        return text
    prefix = "".join(_CODES.get(color, "") for color in colors)
    if not prefix:
        return text
    return f"{prefix}{text}{_CODES['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_ESCAPE.sub("", text)


def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def location(text: str) -> str:
    return colorize(text, "cyan")


def line_number(text: str) -> str:
    return colorize(text, "yellow")


def error_line(text: str) -> str:
    return colorize(text, "bright_red")


def dim_text(text: str) -> str:
    return colorize(text, "dim")


def format_error_header(code: str | None, message: str) -> str:
    """Prefix a message with its (colored) error code, if any."""
    if code:
        return f"{error_code(code)}: {message}"
    return message


def format_source_line(lineno: int, content: str, is_error: bool = False) -> str:
    """Format one numbered source line, marking the error line with ``>``."""
    marker = ">" if is_error else " "
    num = line_number(f"{marker}{lineno:>3}")
    body = error_line(content) if is_error else dim_text(content)
    return f"{num} | {body}"
