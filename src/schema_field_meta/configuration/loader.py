"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_field_meta.field_resolution import resolve_path
from schema_field_meta.report_writing.constants import SCHEMA_SHEET_NAME
from schema_field_meta.schema_management import (
    SUPPORTED_SCHEMA_TYPES,
    SchemaConfig,
    SchemaError,
    list_field_paths,
    load_schema_node,
)
from schema_field_meta.schema_model import SchemaNode, parse_field_path

from .runtime_settings import DEFAULT_SHEET_NAME, Configuration, ReportSettings

# Excel limits sheet titles to 31 characters.
_MAX_SHEET_NAME_LENGTH = 31


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = _read_text(path, "configuration file")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    try:
        root = load_schema_node(schema)
        available_fields = list_field_paths(root)
    except SchemaError as exc:
        raise ConfigurationError(str(exc)) from exc

    report = _parse_report_section(
        parsed.get("report"), root=root, available_fields=available_fields
    )

    return Configuration(path=path, schema=schema, report=report)


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    section = _require_mapping(value, "schema")
    type_candidates = [key for key in SUPPORTED_SCHEMA_TYPES if section.get(key)]
    if len(type_candidates) != 1:
        raise ConfigurationError(
            "Exactly one schema type (avsc or json_schema) must be provided."
        )

    schema_type = type_candidates[0]
    definition = section[schema_type]
    text, source_path = _load_schema_definition(definition, base_path)
    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")

    return SchemaConfig(schema_type=schema_type, text=text, source_path=source_path)


def _load_schema_definition(definition: Any, base_path: Path) -> tuple[str, Path | None]:
    if isinstance(definition, str):
        return definition, None
    mapping = _require_mapping(definition, "schema definition")
    inline = mapping.get("inline")
    path_value = mapping.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Schema inline value must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Schema path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        text = _read_text(schema_path, "schema file")
        return text, schema_path
    raise ConfigurationError("Schema definition requires either inline or path.")


def _parse_report_section(
    value: Any, *, root: SchemaNode, available_fields: Sequence[str]
) -> ReportSettings:
    if value is None:
        return ReportSettings(fields=tuple(available_fields))
    section = _require_mapping(value, "report")

    fields = _normalize_string_sequence(section.get("fields"), "report.fields")
    for field_path in fields:
        if resolve_path(root, parse_field_path(field_path)) is None:
            raise ConfigurationError(
                f"report.fields entry '{field_path}' does not exist in schema."
            )

    sheet_name = _require_non_empty_string(
        section.get("sheet_name", DEFAULT_SHEET_NAME), "report.sheet_name"
    )
    if len(sheet_name) > _MAX_SHEET_NAME_LENGTH:
        raise ConfigurationError(
            f"report.sheet_name must be at most {_MAX_SHEET_NAME_LENGTH} characters."
        )
    if sheet_name.casefold() == SCHEMA_SHEET_NAME.casefold():
        raise ConfigurationError(
            f"report.sheet_name must not be '{SCHEMA_SHEET_NAME}'; that sheet holds the schema."
        )

    return ReportSettings(fields=fields or tuple(available_fields), sheet_name=sheet_name)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _read_text(path: Path, description: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read {description} {path}: {exc}") from exc
