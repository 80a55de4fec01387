"""Core data models and name parsing for citation formatting."""

from sitasi.core.exceptions import ClipboardError, RecordError, SitasiError
from sitasi.core.models import BibliographicRecord, ParsedName
from sitasi.core.names import get_initials, parse_author_name

__all__ = [
    # Models
    "BibliographicRecord",
    "ParsedName",
    # Names
    "parse_author_name",
    "get_initials",
    # Errors
    "SitasiError",
    "RecordError",
    "ClipboardError",
]
