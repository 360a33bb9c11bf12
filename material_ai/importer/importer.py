"""Validate parsed client rows and replace the client master data."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from material_ai.data.store import DataStore
from material_ai.exceptions import DataImportError
from material_ai.models.imports import (
    DataType,
    ImportResult,
    ManufacturerImportRow,
    MaterialImportRow,
    RowError,
    VendorImportRow,
)

logger = logging.getLogger(__name__)

_ROW_SCHEMAS: dict[str, type[BaseModel]] = {
    "materials": MaterialImportRow,
    "vendors": VendorImportRow,
    "manufacturers": ManufacturerImportRow,
}


def _format_errors(exc: ValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "row"
        messages.append(f"{location}: {err['msg']}")
    return messages


def validate_rows(data_type: DataType, rows: list[dict[str, Any]]) -> list[BaseModel]:
    """Validate every row; any failure rejects the whole batch.

    Raises:
        DataImportError: with one ``{row, errors}`` entry per bad row
            (rows are numbered from 1).
    """
    schema = _ROW_SCHEMAS[data_type]
    if not rows:
        raise DataImportError(f"No {data_type} records found in file")

    parsed: list[BaseModel] = []
    row_errors: list[RowError] = []
    for index, row in enumerate(rows, start=1):
        try:
            parsed.append(schema.model_validate(row))
        except ValidationError as exc:
            row_errors.append(RowError(row=index, errors=_format_errors(exc)))

    if row_errors:
        raise DataImportError(
            f"{len(row_errors)} of {len(rows)} {data_type} rows failed validation",
            errors=[e.model_dump() for e in row_errors],
        )
    return parsed


class DataImporter:
    """Imports client materials, vendors and manufacturers into a DataStore."""

    def __init__(self, data_store: DataStore) -> None:
        self._data_store = data_store

    def import_rows(self, data_type: DataType, rows: list[dict[str, Any]]) -> ImportResult:
        parsed = validate_rows(data_type, rows)

        if data_type == "materials":
            count = self._data_store.replace_materials(
                row.to_material(index) for index, row in enumerate(parsed)
            )
        elif data_type == "vendors":
            count = self._data_store.replace_vendors(row.to_vendor() for row in parsed)
        else:
            count = self._data_store.replace_manufacturers(row.to_manufacturer() for row in parsed)

        return ImportResult(
            success=True,
            message=f"{data_type.capitalize()} imported successfully",
            records_imported=count,
        )
