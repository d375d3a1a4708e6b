"""Parse diagnostics: the error record, its rendering and terminal output."""

from parsediag.diagnostics.exceptions import ErrorCode, ParseError, TemplateError
from parsediag.diagnostics.snippets import SourceSnippet, build_source_snippet

__all__ = [
    "ErrorCode",
    "ParseError",
    "SourceSnippet",
    "TemplateError",
    "build_source_snippet",
]
