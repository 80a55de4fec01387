"""Record importers for JSON and YAML files.

Files may contain a single record, a list of records, or an object with a
``products`` or ``records`` list. Invalid items are skipped and reported
as error messages rather than raised.
"""

from pathlib import Path

from sitasi.core.models import BibliographicRecord

from .base import RecordImporter
from .json import JsonImporter
from .yaml import YamlImporter

IMPORTERS: dict[str, type[RecordImporter]] = {
    ".json": JsonImporter,
    ".yaml": YamlImporter,
    ".yml": YamlImporter,
}


def load_records(path: Path) -> tuple[list[BibliographicRecord], list[str]]:
    """Load records from a JSON or YAML file, chosen by extension."""
    path = Path(path)
    importer_cls = IMPORTERS.get(path.suffix.lower())
    if importer_cls is None:
        supported = ", ".join(sorted(IMPORTERS))
        return [], [f"Unsupported file type '{path.suffix}' (expected {supported})"]
    return importer_cls().import_file(path)


__all__ = [
    "RecordImporter",
    "JsonImporter",
    "YamlImporter",
    "IMPORTERS",
    "load_records",
]
