"""Reading bibliographic records from catalogue exports."""

from sitasi.storage.importers import JsonImporter, YamlImporter, load_records

__all__ = ["JsonImporter", "YamlImporter", "load_records"]
