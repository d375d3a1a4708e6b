"""Location phrases used in diagnostic message prefixes."""

from __future__ import annotations

from parsediag.utils.strings import jquote


def format_template_name(template_name: str | None) -> str:
    if template_name is None:
        return "nameless template"
    return f"template {jquote(template_name)}"


def format_location_for_parsing_error(
    template_name: str | None,
    lineno: int,
    column: int,
) -> str:
    """Describe where a parse failed.

    Example:
        >>> format_location_for_parsing_error("page.ftl", 3, 7)
        'in template "page.ftl" in line 3, column 7'
        >>> format_location_for_parsing_error(None, 1, 1)
        'in nameless template in line 1, column 1'
    """
    return f"in {format_template_name(template_name)} in line {lineno}, column {column}"


def verbose_prefix(template_name: str | None, lineno: int, column: int) -> str:
    return f"Parsing error {format_location_for_parsing_error(template_name, lineno, column)}:\n"


def compact_prefix(column: int) -> str:
    return f"[col. {column}] "
