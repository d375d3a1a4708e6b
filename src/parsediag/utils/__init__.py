"""Utility modules for parsediag."""

from parsediag.utils.strings import add_escapes, jquote
from parsediag.utils.tooling import is_tooling_mode, reset_tooling_mode

__all__ = [
    "add_escapes",
    "is_tooling_mode",
    "jquote",
    "reset_tooling_mode",
]
