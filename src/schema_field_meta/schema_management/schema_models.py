"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

SUPPORTED_SCHEMA_TYPES: tuple[str, ...] = ("json_schema", "avsc")


class SchemaError(Exception):
    """Raised for schema parsing or adaptation failures."""


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema settings."""

    schema_type: str
    text: str
    source_path: Path | None = None


@dataclass(frozen=True)
class SchemaDocument:
    """Structured representation of a schema definition."""

    schema_type: str
    root: Any
