"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Field metadata configuration template for schema-field-meta.
# Replace every <REQUIRED> placeholder before running describe, list-fields or export-report.
# Replace <OPTIONAL> placeholders only when your setup needs them.

schema:
  # Choose exactly one schema type (json_schema or avsc).
  json_schema:
    # Provide either inline schema JSON text or a schema path relative to this file.
    inline: "<REQUIRED>"
    # path: "<OPTIONAL>"
  # avsc:
  #   inline: "<OPTIONAL>"
  #   path: "<OPTIONAL>"

report:
  # report.fields entries must be dotted field paths such as "address.city" or "items.0.name".
  # Leave the list out to report every field listed from the schema.
  fields:
    - "<OPTIONAL>"
  sheet_name: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
