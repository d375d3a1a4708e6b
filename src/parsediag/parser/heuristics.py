"""Domain-specific descriptions that replace the generic expectation text.

Two situations are recognized from the token after the last consumed one:

1. **End of file** while block constructs are still open:
   ``Unexpected end of file reached. You have an unclosed #list or #if.``
2. **Dangling conditional branch** (``#else``, ``#elseif``, ``/#if``) outside
   a valid ``#if`` structure.

Anything else falls through to ``parsediag.parser.expectations``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from parsediag._types import Token, TokenKind
from parsediag.utils.constants import BLOCK_CLOSER_NAMES, CONDITIONAL_BRANCH_KINDS
from parsediag.utils.strings import jquote

UNEXPECTED_EOF = "Unexpected end of file reached."


def unclosed_construct_names(
    expected_sequences: Sequence[Sequence[int]] | None,
) -> list[str]:
    """Collect names of block constructs whose closer would have been legal.

    Names are deduplicated in first-seen order.
    """
    names: dict[str, None] = {}
    for sequence in expected_sequences or ():
        for kind in sequence:
            for name in BLOCK_CLOSER_NAMES.get(kind, ()):
                names.setdefault(name)
    return list(names)


def concat_with_ors(names: Iterable[str]) -> str:
    """Join names with ``" or "``."""
    return " or ".join(names)


def describe_unexpected_eof(expected_sequences: Sequence[Sequence[int]] | None) -> str:
    names = unclosed_construct_names(expected_sequences)
    if not names:
        return UNEXPECTED_EOF
    return f"{UNEXPECTED_EOF} You have an unclosed {concat_with_ors(names)}."


def describe_dangling_directive(token: Token) -> str:
    return (
        f"Unexpected directive, {jquote(token)}. "
        "Check whether you have a valid #if-#elseif-#else structure."
    )


def custom_description(
    current_token: Token,
    expected_sequences: Sequence[Sequence[int]] | None,
) -> str | None:
    """Return an override description, or None to use the generic text."""
    next_token = current_token.next
    if next_token is None:
        return None
    kind = next_token.kind
    if kind == TokenKind.EOF:
        return describe_unexpected_eof(expected_sequences)
    if kind in CONDITIONAL_BRANCH_KINDS:
        return describe_dangling_directive(next_token)
    return None
