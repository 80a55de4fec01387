"""YAML importer for hand-written record files."""

from typing import Any

import yaml

from .base import RecordImporter


class YamlImporter(RecordImporter):
    """Import records from YAML."""

    format_name = "YAML"

    def decode(self, content: bytes) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(str(e)) from e
