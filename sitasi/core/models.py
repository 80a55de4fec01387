"""Core data models for bibliographic records.

This module defines the input contract of the citation formatters. A
BibliographicRecord carries the metadata of a single work, as stored for a
book in the catalogue, and is immutable for the duration of a formatting
pass.

Key components:
- BibliographicRecord: Immutable metadata for one work
- ParsedName: First/last name pair derived from the author field
"""

from typing import Any

import msgspec

from .exceptions import RecordError

# Catalogue product row column -> record field
ROW_FIELDS = {
    "name": "title",
    "author": "author",
    "author_family_name": "author_family_name",
    "editor": "editor",
    "publisher": "publisher",
    "publish_year": "publish_year",
    "edition": "edition",
    "pages": "pages",
    "doi": "doi",
    "isbn": "isbn",
}

TEXT_FIELDS = frozenset(
    {
        "title",
        "author",
        "author_family_name",
        "editor",
        "publisher",
        "edition",
        "doi",
        "isbn",
    }
)


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class BibliographicRecord(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable bibliographic metadata for a single work.

    Only ``title`` is required. The ``editor``, ``pages`` and ``isbn``
    fields are carried along with the record but no citation style
    currently renders them.
    """

    title: str
    author: str | None = None
    author_family_name: str | None = None
    editor: str | None = None
    publisher: str | None = None
    publish_year: int | None = None
    edition: str | None = None
    pages: int | None = None
    doi: str | None = None
    isbn: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values.

        Returns:
            Dictionary with only non-None fields.
        """
        data = msgspec.to_builtins(self)
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BibliographicRecord":
        """Create a record from a dictionary keyed by field name.

        Unknown keys are ignored and empty values are treated as absent.
        Numeric strings are accepted for ``publish_year`` and ``pages``.

        Args:
            data: Dictionary with record fields.

        Returns:
            New BibliographicRecord instance.

        Raises:
            RecordError: If the title is missing or a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise RecordError(f"expected an object, got {type(data).__name__}")

        fields = {
            name: value
            for name, value in data.items()
            if name in cls.__struct_fields__ and not _is_absent(value)
        }
        # YAML reads bare editions and ISBNs as numbers
        for name in TEXT_FIELDS & fields.keys():
            value = fields[name]
            if isinstance(value, int | float) and not isinstance(value, bool):
                fields[name] = str(value)
        if "title" not in fields:
            raise RecordError("missing required field 'title'")

        try:
            return msgspec.convert(fields, cls, strict=False)
        except msgspec.ValidationError as e:
            raise RecordError(str(e)) from e

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "BibliographicRecord":
        """Create a record from a catalogue product row.

        The catalogue stores the book title in the ``name`` column; all
        other columns not listed in ``ROW_FIELDS`` (price, slug, stock, ...)
        are ignored.

        Args:
            row: Product row as returned by the content backend.

        Returns:
            New BibliographicRecord instance.

        Raises:
            RecordError: If the row has no name or a column has the wrong type.
        """
        if not isinstance(row, dict):
            raise RecordError(f"expected an object, got {type(row).__name__}")
        if _is_absent(row.get("name")):
            raise RecordError("product row has no 'name'", source=row.get("slug"))

        data = {field: row.get(column) for column, field in ROW_FIELDS.items()}
        return cls.from_dict(data)


class ParsedName(msgspec.Struct, frozen=True):
    """First and last name derived from a record's author field."""

    first_name: str
    last_name: str

    def is_empty(self) -> bool:
        """Check if both components are empty."""
        return not self.first_name and not self.last_name
