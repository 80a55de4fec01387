"""Citation style formatting for bibliographic records.

Each supported style is a member of the closed CitationStyle enumeration and
maps to a pure function taking the record and its parsed author name. The
formatters never raise: absent optional fields contribute no text.
"""

from __future__ import annotations

import enum
from collections.abc import Callable

from sitasi.core.models import BibliographicRecord, ParsedName
from sitasi.core.names import get_initials, parse_author_name

DOI_RESOLVER = "https://doi.org/"
NO_DATE = "(n.d.)"


class CitationStyle(enum.Enum):
    """Supported citation styles, in display order."""

    APA = "APA"
    MLA = "MLA"
    CHICAGO = "Chicago"
    HARVARD = "Harvard"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str | CitationStyle) -> CitationStyle:
        """Look up a style by name, ignoring case.

        Raises:
            ValueError: If no style has that name.
        """
        if isinstance(name, cls):
            return name
        for style in cls:
            if style.value.lower() == str(name).strip().lower():
                return style
        choices = ", ".join(style.value for style in cls)
        raise ValueError(f"Unknown citation style '{name}' (choose from {choices})")


# Ordered mapping of style -> formatted citation
CitationSet = dict[CitationStyle, str]


def _format_doi(doi: str | None) -> str:
    return f"{DOI_RESOLVER}{doi}" if doi else ""


def format_apa(record: BibliographicRecord, name: ParsedName) -> str:
    """Format in APA 7th edition style."""
    citation = ""

    if name.last_name:
        citation += f"{name.last_name}, {get_initials(name.first_name)}"

    if record.publish_year:
        citation += f" ({record.publish_year})."
    else:
        citation += f" {NO_DATE}."

    citation += f" {record.title}"
    if record.edition:
        citation += f" ({record.edition})"
    citation += "."

    if record.publisher:
        citation += f" {record.publisher}."

    if record.doi:
        citation += f" {_format_doi(record.doi)}"

    return citation.strip()


def format_mla(record: BibliographicRecord, name: ParsedName) -> str:
    """Format in MLA 9th edition style."""
    citation = ""

    if name.last_name and name.first_name:
        citation += f"{name.last_name}, {name.first_name}"
    elif record.author:
        citation += record.author
    citation += ". "

    citation += f"{record.title}. "

    if record.edition:
        citation += f"{record.edition}, "
    if record.publisher:
        citation += f"{record.publisher}, "
    if record.publish_year:
        citation += f"{record.publish_year}."

    citation = citation.strip()
    if citation.endswith(",."):
        citation = citation[:-2] + "."
    return citation


def format_chicago(record: BibliographicRecord, name: ParsedName) -> str:
    """Format in Chicago 17th edition (notes-bibliography) style."""
    citation = ""

    if name.first_name and name.last_name:
        citation += f"{name.first_name} {name.last_name}"
    elif record.author:
        citation += record.author
    citation += ", "

    citation += record.title
    if record.edition:
        citation += f", {record.edition}"

    if record.publisher:
        citation += f" ({record.publisher}"
        if record.publish_year:
            citation += f", {record.publish_year}"
        citation += ")"
    elif record.publish_year:
        citation += f" ({record.publish_year})"
    citation += "."

    if record.doi:
        citation += f" {_format_doi(record.doi)}."

    return citation.strip()


def format_harvard(record: BibliographicRecord, name: ParsedName) -> str:
    """Format in Harvard style."""
    citation = ""

    if name.last_name:
        citation += f"{name.last_name}, {get_initials(name.first_name)}"

    if record.publish_year:
        citation += f" ({record.publish_year})"
    else:
        citation += f" {NO_DATE}"

    citation += f" {record.title}."
    if record.edition:
        citation += f" {record.edition}."
    if record.publisher:
        citation += f" {record.publisher}."

    return citation.strip()


FORMATTERS: dict[CitationStyle, Callable[[BibliographicRecord, ParsedName], str]] = {
    CitationStyle.APA: format_apa,
    CitationStyle.MLA: format_mla,
    CitationStyle.CHICAGO: format_chicago,
    CitationStyle.HARVARD: format_harvard,
}


def format_citation(
    record: BibliographicRecord, style: CitationStyle | str = CitationStyle.APA
) -> str:
    """Format a record in a single citation style.

    Args:
        record: Record to format
        style: Style member or its name (case-insensitive)

    Returns:
        Formatted citation string

    Raises:
        ValueError: If the style name is unknown.
    """
    style = CitationStyle.from_name(style)
    name = parse_author_name(record.author, record.author_family_name)
    return FORMATTERS[style](record, name)


def format_citations(
    record: BibliographicRecord,
    styles: list[CitationStyle] | None = None,
) -> CitationSet:
    """Format a record in every style.

    The author name is parsed once and shared by all formatters. The result
    is ordered APA, MLA, Chicago, Harvard regardless of the order of
    ``styles``.

    Args:
        record: Record to format
        styles: Optional subset of styles to include

    Returns:
        Mapping of style to formatted citation
    """
    name = parse_author_name(record.author, record.author_family_name)
    wanted = set(styles) if styles else set(CitationStyle)
    return {
        style: formatter(record, name)
        for style, formatter in FORMATTERS.items()
        if style in wanted
    }
