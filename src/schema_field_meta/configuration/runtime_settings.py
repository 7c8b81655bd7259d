"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_field_meta.schema_management.schema_models import SchemaConfig

DEFAULT_SHEET_NAME = "Fields"


@dataclass(frozen=True)
class ReportSettings:
    """Field selection and layout for metadata reports."""

    fields: tuple[str, ...]
    sheet_name: str = DEFAULT_SHEET_NAME


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig
    report: ReportSettings
