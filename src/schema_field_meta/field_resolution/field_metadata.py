"""Field metadata entities."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class FieldMetadata:
    """UI-relevant facts derived for one field."""

    required: bool
    min: float | int | None = None
    max: float | int | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    description: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return ``required`` plus every populated constraint."""
        result: dict[str, Any] = {}
        for entry in fields(self):
            value = getattr(self, entry.name)
            if entry.name == "required" or value is not None:
                result[entry.name] = value
        return result


UNRESOLVED_FIELD_METADATA = FieldMetadata(required=False)
