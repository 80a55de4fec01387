"""Shared conversion of decoded documents into records."""

import logging
from pathlib import Path
from typing import Any

from sitasi.core.exceptions import RecordError
from sitasi.core.models import BibliographicRecord

logger = logging.getLogger(__name__)

# Keys under which a document may hold its list of records
COLLECTION_KEYS = ("products", "records")


class RecordImporter:
    """Base importer turning decoded documents into records.

    Subclasses implement ``decode``. A document is a single object, a list
    of objects, or an object holding a ``products`` or ``records`` list.
    Objects with a ``name`` key are read as catalogue product rows.
    """

    format_name = "data"

    def decode(self, content: bytes) -> Any:
        raise NotImplementedError

    def import_file(self, path: Path) -> tuple[list[BibliographicRecord], list[str]]:
        """Import records from a file."""
        try:
            content = Path(path).read_bytes()
        except OSError as e:
            return [], [f"Failed to read file: {e}"]

        try:
            data = self.decode(content)
        except ValueError as e:
            return [], [f"Invalid {self.format_name}: {e}"]

        return self.import_data(data)

    def import_data(self, data: Any) -> tuple[list[BibliographicRecord], list[str]]:
        """Import records from an already decoded document."""
        if isinstance(data, dict):
            for key in COLLECTION_KEYS:
                if isinstance(data.get(key), list):
                    return self._import_items(data[key])
            return self._import_items([data])
        if isinstance(data, list):
            return self._import_items(data)

        return [], [
            f"Invalid {self.format_name} format: expected object or array of objects"
        ]

    def _import_items(
        self, items: list[Any]
    ) -> tuple[list[BibliographicRecord], list[str]]:
        records = []
        errors = []

        for i, item in enumerate(items):
            try:
                if isinstance(item, dict) and "name" in item:
                    record = BibliographicRecord.from_row(item)
                else:
                    record = BibliographicRecord.from_dict(item)
            except RecordError as e:
                logger.warning("Skipping record %d: %s", i, e)
                errors.append(f"Record {i}: {e}")
                continue
            records.append(record)

        return records, errors
