"""JSON importer for catalogue exports."""

from typing import Any

import msgspec

from .base import RecordImporter


class JsonImporter(RecordImporter):
    """Import records from JSON."""

    format_name = "JSON"

    def decode(self, content: bytes) -> Any:
        try:
            return msgspec.json.decode(content)
        except msgspec.DecodeError as e:
            raise ValueError(str(e)) from e
