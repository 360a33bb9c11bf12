"""Client data import from uploaded files."""

from material_ai.importer.importer import DataImporter, validate_rows
from material_ai.importer.parsing import parse_upload

__all__ = ["DataImporter", "parse_upload", "validate_rows"]
