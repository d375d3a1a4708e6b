"""Description builders for grammar failures.

- ``expectations``: generic "Encountered ..., but was expecting ..." text
- ``heuristics``: overrides for unexpected EOF and dangling #else/#elseif
- ``location``: "Parsing error in template ..." prefixes
"""

from parsediag.parser.expectations import format_expectations, kind_name
from parsediag.parser.heuristics import custom_description, unclosed_construct_names
from parsediag.parser.location import (
    compact_prefix,
    format_location_for_parsing_error,
    verbose_prefix,
)

__all__ = [
    "compact_prefix",
    "custom_description",
    "format_expectations",
    "format_location_for_parsing_error",
    "kind_name",
    "unclosed_construct_names",
    "verbose_prefix",
]
