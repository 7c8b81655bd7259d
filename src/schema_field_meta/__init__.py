"""Schema-driven field metadata resolution."""

import logging

from .field_resolution import (
    FieldMetadata,
    ResolutionContextError,
    SchemaResolutionContext,
    is_field_required,
    resolve_field_metadata,
    schema_scope,
)
from .schema_management import SchemaConfig, SchemaError, load_schema_node

logging.getLogger("schema_field_meta").addHandler(logging.NullHandler())

__all__ = [
    "FieldMetadata",
    "ResolutionContextError",
    "SchemaConfig",
    "SchemaError",
    "SchemaResolutionContext",
    "is_field_required",
    "load_schema_node",
    "resolve_field_metadata",
    "schema_scope",
]
