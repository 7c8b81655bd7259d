"""Shared report layout constants."""

from __future__ import annotations

SCHEMA_SHEET_NAME = "Schema"

METADATA_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Path", "path"),
    ("Required", "required"),
    ("Min", "min"),
    ("Max", "max"),
    ("MinLength", "min_length"),
    ("MaxLength", "max_length"),
    ("Pattern", "pattern"),
    ("Description", "description"),
)
