"""Citation formatting and clipboard copying.

This module formats bibliographic records in the APA, MLA, Chicago and
Harvard styles and provides a copy sink that writes a formatted citation
to the system clipboard with user-facing notifications.
"""

from sitasi.citations.clipboard import (
    ClipboardBackend,
    CopySink,
    Notification,
    PyperclipBackend,
)
from sitasi.citations.styles import (
    FORMATTERS,
    CitationSet,
    CitationStyle,
    format_apa,
    format_chicago,
    format_citation,
    format_citations,
    format_harvard,
    format_mla,
)

__all__ = [
    # Styles
    "CitationStyle",
    "CitationSet",
    "FORMATTERS",
    "format_apa",
    "format_mla",
    "format_chicago",
    "format_harvard",
    "format_citation",
    "format_citations",
    # Clipboard
    "ClipboardBackend",
    "CopySink",
    "Notification",
    "PyperclipBackend",
]
