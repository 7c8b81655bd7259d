"""Field metadata workbook writer service."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_field_meta.configuration.runtime_settings import DEFAULT_SHEET_NAME
from schema_field_meta.field_resolution import SchemaResolutionContext
from schema_field_meta.schema_management.schema_models import SchemaConfig

from .constants import METADATA_COLUMNS, SCHEMA_SHEET_NAME


def write_metadata_report(
    schema_config: SchemaConfig,
    context: SchemaResolutionContext,
    paths: Sequence[str],
    output_path: Path | str,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> Path:
    """Write one row of resolved metadata per field path and return the output path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = sheet_name

    for column_index, (header, _) in enumerate(METADATA_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=header)
        cell.style = "Headline 3"
    _write_metadata_rows(sheet, context, paths)
    _fit_column_widths(sheet)
    sheet.freeze_panes = "B2"

    _write_schema_sheet(workbook, schema_config)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_metadata_rows(
    sheet: Worksheet, context: SchemaResolutionContext, paths: Sequence[str]
) -> None:
    for row_index, path in enumerate(paths, start=2):
        values = context.field_metadata(path).as_dict()
        values["path"] = path
        for column_index, (_, key) in enumerate(METADATA_COLUMNS, start=1):
            sheet.cell(row=row_index, column=column_index, value=values.get(key))


def _fit_column_widths(sheet: Worksheet) -> None:
    for column_index in range(1, len(METADATA_COLUMNS) + 1):
        letter = get_column_letter(column_index)
        longest = max(
            (len(str(cell.value)) for cell in sheet[letter] if cell.value is not None),
            default=0,
        )
        sheet.column_dimensions[letter].width = max(12, min(longest + 4, 60))


def _write_schema_sheet(workbook: Workbook, schema_config: SchemaConfig) -> None:
    sheet = workbook.create_sheet(SCHEMA_SHEET_NAME)
    schema_hash = hashlib.sha256(schema_config.text.encode("utf-8")).hexdigest()
    entries = [
        ("schema_type", schema_config.schema_type),
        ("schema_hash", schema_hash),
        ("schema_text", schema_config.text),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
