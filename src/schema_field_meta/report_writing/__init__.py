"""Report writing exports."""

from .constants import METADATA_COLUMNS, SCHEMA_SHEET_NAME
from .metadata_report_writer import write_metadata_report

__all__ = [
    "METADATA_COLUMNS",
    "SCHEMA_SHEET_NAME",
    "write_metadata_report",
]
