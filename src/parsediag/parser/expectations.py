"""Generic "Encountered X, but was expecting ..." descriptions.

Rebuilds the default text from the raw data the grammar hands over when it
cannot continue: the last consumed token, every token-kind sequence that would
have been legal next, and the kind → display-name table.

Example:
    ```
    Encountered "x", but was expecting one of:
        <END_IF>
        <ELSE>
    ```

Nothing here raises. Missing names, a missing table or a truncated token chain
degrade to placeholder text, because this runs while another failure is being
reported.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence

from parsediag._types import Token, TokenKind
from parsediag.utils.constants import UNKNOWN_KIND_NAME
from parsediag.utils.strings import add_escapes

logger = logging.getLogger(__name__)

# Indent for each expected alternative
_INDENT = "    "

TokenImage = Mapping[int, str] | Sequence[str]


def kind_name(token_image: TokenImage | None, kind: int) -> str:
    """Look up the display name of a token kind.

    Accepts either a mapping or a sequence indexed by kind. Unknown or
    negative kinds, and entries that are not strings, get a
    ``<token kind N>`` placeholder.
    """
    if token_image is not None:
        try:
            if kind >= 0:
                name = token_image[kind]
                if isinstance(name, str):
                    return name
        except (LookupError, TypeError):
            pass
    logger.debug("No display name for token kind %r", kind)
    return UNKNOWN_KIND_NAME.format(kind=kind)


def format_encountered(
    current_token: Token,
    length: int,
    token_image: TokenImage | None,
) -> str:
    """Render the run of tokens that follows the last consumed one.

    Takes up to ``length`` tokens. Stops at end of input, emitting the EOF
    display name in its place.
    """
    parts: list[str] = []
    tok = current_token.next
    for _ in range(length):
        if tok is None:
            logger.debug("Token chain ended before end-of-input marker")
            break
        if tok.kind == TokenKind.EOF:
            parts.append(kind_name(token_image, TokenKind.EOF))
            break
        parts.append(add_escapes(tok.image or ""))
        tok = tok.next
    return " ".join(parts)


def format_alternatives(
    expected_sequences: Sequence[Sequence[int]],
    token_image: TokenImage | None,
    eol: str = os.linesep,
) -> str:
    """Render one indented line per expected alternative."""
    lines = [
        _INDENT + " ".join(kind_name(token_image, kind) for kind in sequence)
        for sequence in expected_sequences
    ]
    return eol.join(lines)


def format_expectations(
    current_token: Token,
    expected_sequences: Sequence[Sequence[int]] | None,
    token_image: TokenImage | None,
    eol: str = os.linesep,
) -> str:
    """Build the generic description for a grammar failure.

    Args:
        current_token: Last token the parser accepted.
        expected_sequences: Alternative continuations, as token kinds.
        token_image: Kind → display-name table.
        eol: Line terminator between alternatives.

    Returns:
        ``Encountered "<run>", but was expecting[ one of]:<eol><alternatives>``
    """
    sequences = list(expected_sequences or ())
    max_len = max((len(seq) for seq in sequences), default=0)

    encountered = format_encountered(current_token, max_len, token_image)
    expecting = "was expecting:" if len(sequences) == 1 else "was expecting one of:"
    alternatives = format_alternatives(sequences, token_image, eol)
    return f'Encountered "{encountered}", but {expecting}{eol}{alternatives}'
