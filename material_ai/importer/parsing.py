"""Turn uploaded .csv/.json files into raw row dicts."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from material_ai.exceptions import DataImportError, UnsupportedFileError
from material_ai.models.imports import RowError

SUPPORTED_EXTENSIONS = (".csv", ".json")


def parse_upload(filename: str, content: bytes) -> list[dict[str, Any]]:
    """Parse file content by extension.

    JSON must be an array of objects. CSV needs a header row; blank lines
    are skipped and cells are whitespace-stripped. CSV rows with more
    non-empty cells than header columns reject the whole file.
    """
    name = (filename or "").lower()
    if not name.endswith(SUPPORTED_EXTENSIONS):
        raise UnsupportedFileError(f"Unsupported file type '{filename}'. Use .csv or .json")

    try:
        text = content.decode("utf-8-sig")  # handle BOM from Excel
    except UnicodeDecodeError as exc:
        raise DataImportError("File is not valid UTF-8 text") from exc

    if name.endswith(".json"):
        return _parse_json(text)
    return _parse_csv(text)


def _parse_json(text: str) -> list[dict[str, Any]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataImportError(f"Invalid JSON: {exc.msg} (line {exc.lineno})") from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise DataImportError("JSON file must contain an array of objects")
    return data


def _parse_csv(text: str) -> list[dict[str, Any]]:
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if not header or not any(h.strip() for h in header):
        raise DataImportError("CSV file has no header row")
    columns = [h.strip() for h in header]

    rows: list[dict[str, Any]] = []
    row_errors: list[dict[str, Any]] = []
    for values in reader:
        if not any(v.strip() for v in values):
            continue
        values = [v.strip() for v in values]
        # Empty trailing cells are padding
        if any(values[len(columns):]):
            row_errors.append(
                RowError(
                    row=len(rows) + len(row_errors) + 1,
                    errors=[f"{len(values)} cells for {len(columns)} columns (unquoted comma?)"],
                ).model_dump()
            )
            continue
        rows.append({col: values[idx] if idx < len(values) else "" for idx, col in enumerate(columns)})

    if row_errors:
        raise DataImportError(
            f"{len(row_errors)} CSV rows have more cells than the header", errors=row_errors
        )
    return rows
