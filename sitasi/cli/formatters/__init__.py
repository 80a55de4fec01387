"""Output formatters for citation sets."""

from .citation import (
    OUTPUT_FORMATS,
    format_citations_json,
    format_citations_plain,
    format_citations_table,
)

__all__ = [
    "OUTPUT_FORMATS",
    "format_citations_table",
    "format_citations_plain",
    "format_citations_json",
]
