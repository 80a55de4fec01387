"""Citation set formatters for table, plain text and JSON output."""

import msgspec
from rich.box import ROUNDED
from rich.markup import escape
from rich.table import Table

from sitasi.citations.styles import CitationSet, CitationStyle
from sitasi.core.models import BibliographicRecord

OUTPUT_FORMATS = ("table", "plain", "json")


def format_citations_table(
    record: BibliographicRecord,
    citations: CitationSet,
    copied: CitationStyle | None = None,
) -> Table:
    """Format a citation set as a Rich table.

    Args:
        record: Record the citations were formatted from
        citations: Formatted citations by style
        copied: Style to mark as just copied

    Returns:
        Rich Table object
    """
    table = Table(
        title=escape(record.title),
        box=ROUNDED,
        show_header=True,
        header_style="table.header",
        title_style="bold",
    )
    table.add_column("Style", style="style.name", width=10, no_wrap=True)
    table.add_column("Citation", style="citation")

    for style, text in citations.items():
        label = style.value
        if style == copied:
            label = f"[style.copied]✓ {label}[/style.copied]"
        table.add_row(label, escape(text))

    return table


def format_citations_plain(citations: CitationSet) -> str:
    """Format a citation set as ``Style: citation`` lines."""
    return "\n".join(f"{style.value}: {text}" for style, text in citations.items())


def format_citations_json(
    items: list[tuple[BibliographicRecord, CitationSet]],
) -> str:
    """Format records and their citation sets as a JSON array."""
    data = [
        {
            "record": record.to_dict(),
            "citations": {style.value: text for style, text in citations.items()},
        }
        for record, citations in items
    ]
    return msgspec.json.format(msgspec.json.encode(data), indent=2).decode()
