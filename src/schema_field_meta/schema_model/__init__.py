"""Schema model exports."""

from .field_paths import (
    FieldPath,
    IndexSegment,
    NameSegment,
    PathSegment,
    format_field_path,
    parse_field_path,
)
from .schema_nodes import (
    NULL_MARKER_KINDS,
    OPTIONALITY_MODIFIERS,
    ArrayNode,
    Constraint,
    ConstraintKind,
    Modifier,
    ObjectNode,
    PrimitiveKind,
    PrimitiveNode,
    SchemaNode,
    UnionNode,
    WrapperNode,
)

__all__ = [
    "ArrayNode",
    "Constraint",
    "ConstraintKind",
    "Modifier",
    "NULL_MARKER_KINDS",
    "OPTIONALITY_MODIFIERS",
    "ObjectNode",
    "PrimitiveKind",
    "PrimitiveNode",
    "SchemaNode",
    "UnionNode",
    "WrapperNode",
    "FieldPath",
    "IndexSegment",
    "NameSegment",
    "PathSegment",
    "format_field_path",
    "parse_field_path",
]
