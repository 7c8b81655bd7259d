"""Field resolution exports."""

from .constraint_extraction import extract_field_metadata
from .field_metadata import UNRESOLVED_FIELD_METADATA, FieldMetadata
from .path_resolver import resolve_path
from .resolution_context import (
    ResolutionContextError,
    SchemaResolutionContext,
    is_field_required,
    resolve_field_metadata,
    schema_scope,
)
from .unwrapping import is_optional, iter_wrapper_chain, unwrap

__all__ = [
    "FieldMetadata",
    "UNRESOLVED_FIELD_METADATA",
    "ResolutionContextError",
    "SchemaResolutionContext",
    "extract_field_metadata",
    "is_field_required",
    "is_optional",
    "iter_wrapper_chain",
    "resolve_field_metadata",
    "resolve_path",
    "schema_scope",
    "unwrap",
]
