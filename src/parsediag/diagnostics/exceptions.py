"""Exceptions for parse-time template diagnostics.

Exception Hierarchy:
TemplateError (base)
└── ParseError                # Grammar could not continue

A ``ParseError`` is built the moment the grammar gives up, but its text is
rendered only when someone reads ``message`` or ``description`` (or calls
``str()``). Many callers only look at ``lineno``/``column`` and never pay for
string building, escaping and set deduplication.

Example:
    ```
    Parsing error in template "page.ftl" in line 12, column 1:
    Unexpected end of file reached. You have an unclosed #list or #if.
    ```

"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from parsediag._types import SourceDocument, Spanned, Token, TokenKind
from parsediag.diagnostics import terminal
from parsediag.diagnostics.snippets import build_source_snippet
from parsediag.parser.expectations import TokenImage, format_expectations
from parsediag.parser.heuristics import custom_description
from parsediag.parser.location import compact_prefix, verbose_prefix
from parsediag.utils.constants import CONDITIONAL_BRANCH_KINDS
from parsediag.utils.tooling import is_tooling_mode

logger = logging.getLogger(__name__)

_NO_DESCRIPTION = "No error description available."


class ErrorCode(Enum):
    """Searchable error codes for parse diagnostics.

    Format: PD-{CATEGORY}-{NUMBER}
    Categories: PAR (grammar failure), TPL (explicitly described error)
    """

    UNEXPECTED_TOKEN = "PD-PAR-001"
    UNEXPECTED_EOF = "PD-PAR-002"
    MISPLACED_DIRECTIVE = "PD-PAR-003"
    SYNTAX_ERROR = "PD-TPL-001"

    @property
    def category(self) -> str:
        """Error category ('parser' or 'template')."""
        prefix = self.value.split("-")[1]
        return {
            "PAR": "parser",
            "TPL": "template",
        }.get(prefix, "unknown")


class TemplateError(Exception):
    """Base exception for template errors reported by parsediag.

    Enables broad exception handling around a parser:

        >>> try:
        ...     parser.parse(source)
        ... except TemplateError as e:
        ...     log.error(f"Template error: {e}")

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None


@dataclass(frozen=True, slots=True)
class _Rendered:
    """Message and description, always produced and cached together."""

    message: str
    description: str


class ParseError(TemplateError):
    """Parse-time error in a template.

    Two kinds of instance exist:

    - Built by the grammar via ``from_grammar_failure()``: carries the last
      consumed token and the expected token sequences; the description is
      derived from them on first read.
    - Built from an explicit description (constructor, ``from_token()``,
      ``from_element()``): the description is returned as given.

    Rendering is thread-safe. The rendered pair is cached and only cleared
    when ``template_name`` is assigned.

    Attributes:
        lineno: 1-based line of the failing section, 0 if unknown.
        column: 1-based column of the failing section, 0 if unknown.
        end_lineno: 1-based end line, 0 if unknown.
        end_column: 1-based end column, 0 if unknown.
        source: Template source text, used only by ``format_compact()``.
    """

    def __init__(
        self,
        description: str | None = None,
        *,
        template_name: str | None = None,
        lineno: int = 0,
        column: int = 0,
        end_lineno: int = 0,
        end_column: int = 0,
        cause: BaseException | None = None,
        source: str | None = None,
    ):
        if description is None:
            super().__init__()
        else:
            super().__init__(description)
        self._lock = threading.Lock()
        self._rendered: _Rendered | None = None
        self._raw_description = description
        self._template_name = template_name
        self._lineno = lineno
        self._column = column
        self._end_lineno = end_lineno
        self._end_column = end_column
        self._current_token: Token | None = None
        self._expected_sequences: tuple[tuple[int, ...], ...] = ()
        self._token_image: TokenImage | None = None
        self._cause = cause
        self.source = source
        if cause is not None:
            self.__cause__ = cause

    # -- construction ------------------------------------------------------

    @classmethod
    def from_grammar_failure(
        cls,
        current_token: Token,
        expected_sequences: Sequence[Sequence[int]] | None,
        token_image: TokenImage | None,
    ) -> ParseError:
        """Build the error the grammar raises when it cannot continue.

        The location is taken from the token after ``current_token``, which
        is the first token the grammar could not accept.

        Args:
            current_token: Last token consumed successfully.
            expected_sequences: Token-kind sequences that would have been legal.
            token_image: Kind → display-name table of the grammar.
        """
        err = cls()
        err._current_token = current_token
        err._expected_sequences = tuple(tuple(seq) for seq in expected_sequences or ())
        err._token_image = token_image
        next_token = current_token.next
        if next_token is not None:
            err._lineno = next_token.begin_line
            err._column = next_token.begin_column
            err._end_lineno = next_token.end_line
            err._end_column = next_token.end_column
        return err

    @classmethod
    def from_token(
        cls,
        description: str,
        document: SourceDocument | None,
        token: Token,
        cause: BaseException | None = None,
    ) -> ParseError:
        """Build an error that spans a single token of ``document``."""
        return cls(
            description,
            template_name=_document_name(document),
            lineno=token.begin_line,
            column=token.begin_column,
            end_lineno=token.end_line,
            end_column=token.end_column,
            cause=cause,
            source=_document_source(document),
        )

    @classmethod
    def from_element(
        cls,
        description: str,
        document: SourceDocument | None,
        element: Spanned,
        cause: BaseException | None = None,
    ) -> ParseError:
        """Build an error that spans an already-parsed template element."""
        return cls(
            description,
            template_name=_document_name(document),
            lineno=element.begin_line,
            column=element.begin_column,
            end_lineno=element.end_line,
            end_column=element.end_column,
            cause=cause,
            source=_document_source(document),
        )

    # -- structured fields -------------------------------------------------

    @property
    def template_name(self) -> str | None:
        """Name of the template whose parsing failed, None if unknown."""
        return self._template_name

    @template_name.setter
    def template_name(self, value: str | None) -> None:
        # The grammar does not know the template; the loader attaches it later.
        with self._lock:
            self._template_name = value
            self._rendered = None

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def column(self) -> int:
        return self._column

    @property
    def end_lineno(self) -> int:
        return self._end_lineno

    @property
    def end_column(self) -> int:
        return self._end_column

    @property
    def current_token(self) -> Token | None:
        """Last token consumed before the failure, None for described errors."""
        return self._current_token

    @property
    def expected_sequences(self) -> tuple[tuple[int, ...], ...]:
        return self._expected_sequences

    @property
    def token_image(self) -> TokenImage | None:
        return self._token_image

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def code(self) -> ErrorCode:  # type: ignore[override]
        """Classify the failure without rendering any text."""
        if self._raw_description is not None or self._current_token is None:
            return ErrorCode.SYNTAX_ERROR
        next_token = self._current_token.next
        if next_token is None:
            return ErrorCode.UNEXPECTED_TOKEN
        if next_token.kind == TokenKind.EOF:
            return ErrorCode.UNEXPECTED_EOF
        if next_token.kind in CONDITIONAL_BRANCH_KINDS:
            return ErrorCode.MISPLACED_DIRECTIVE
        return ErrorCode.UNEXPECTED_TOKEN

    # -- rendered text -----------------------------------------------------

    @property
    def message(self) -> str:
        """Location prefix followed by the description."""
        return self._render().message

    @property
    def description(self) -> str:
        """Error description without location."""
        return self._render().description

    @property
    def editor_message(self) -> str:
        """Description for IDEs, whose markers already show the location."""
        return self._render().description

    def __str__(self) -> str:
        return self.message

    def _render(self) -> _Rendered:
        with self._lock:
            rendered = self._rendered
            template_name = self._template_name
        if rendered is not None:
            return rendered

        description = self._render_description()
        if is_tooling_mode():
            prefix = compact_prefix(self._column)
        else:
            prefix = verbose_prefix(template_name, self._lineno, self._column)
        rendered = _Rendered(message=prefix + description, description=description)

        with self._lock:
            # Drop the result if the name changed while we were rendering
            if self._template_name == template_name:
                self._rendered = rendered
        return rendered

    def _render_description(self) -> str:
        if self._raw_description is not None:
            return self._raw_description
        token = self._current_token
        if token is None:
            return _NO_DESCRIPTION
        try:
            description = custom_description(token, self._expected_sequences)
            if description is None:
                description = format_expectations(
                    token, self._expected_sequences, self._token_image
                )
        except Exception as e:
            logger.debug("Could not describe parse failure: %s: %s", type(e).__name__, e)
            return _NO_DESCRIPTION
        return description

    # -- presentation ------------------------------------------------------

    def format_compact(self) -> str:
        """Format the error as a structured terminal diagnostic.

        Format::

            PD-PAR-002: Unexpected end of file reached. You have an unclosed #if.
              --> page.ftl:4:1
               |
              2 | <#if user??>
              3 |   Hello ${user}
             >4 |
               |

        The source snippet is included only when ``source`` is known.
        """
        parts: list[str] = [terminal.format_error_header(self.code.value, self.description)]

        loc = self._template_name or "<template>"
        if self._lineno:
            loc += f":{self._lineno}"
            if self._column:
                loc += f":{self._column}"
        parts.append(f"  --> {terminal.location(loc)}")

        if self.source and self._lineno:
            snippet = build_source_snippet(self.source, self._lineno, column=self._column or None)
            if snippet is not None:
                parts.append(snippet.format())

        if self._cause is not None:
            cause = f"{type(self._cause).__name__}: {self._cause}"
            parts.append(f"  {terminal.dim_text('Caused by:')} {cause}")

        return "\n".join(parts)

    # -- pickling ----------------------------------------------------------

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, self.args, self.__getstate__())

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        state.pop("_lock", None)
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()
        if self._cause is not None:
            self.__cause__ = self._cause


def _document_name(document: SourceDocument | None) -> str | None:
    return None if document is None else document.name


def _document_source(document: SourceDocument | None) -> str | None:
    return getattr(document, "source", None)
