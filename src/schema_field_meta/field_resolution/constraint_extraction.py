"""Constraint extraction from resolved schema nodes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_field_meta.schema_model.schema_nodes import (
    ConstraintKind,
    PrimitiveKind,
    PrimitiveNode,
    SchemaNode,
)

from .field_metadata import FieldMetadata
from .unwrapping import is_optional, iter_wrapper_chain, unwrap

_STRING_CONSTRAINTS: Mapping[ConstraintKind, str] = {
    ConstraintKind.MIN_LENGTH: "min_length",
    ConstraintKind.MAX_LENGTH: "max_length",
    ConstraintKind.PATTERN: "pattern",
}
_NUMBER_CONSTRAINTS: Mapping[ConstraintKind, str] = {
    ConstraintKind.MIN: "min",
    ConstraintKind.MAX: "max",
}


def extract_field_metadata(node: SchemaNode) -> FieldMetadata:
    """Build field metadata for a resolved node.

    Requiredness is judged on the wrapped node because the wrappers carry the
    signal; constraints are read from the effective node. Only string and
    number leaves contribute constraints, and a later constraint of the same
    kind replaces an earlier one.
    """
    values: dict[str, Any] = {"required": not is_optional(node)}

    description = _first_description(node)
    if description is not None:
        values["description"] = description

    effective = unwrap(node)
    recognized = _recognized_constraints(effective)
    for constraint in effective.constraints:
        attribute = recognized.get(constraint.kind)
        if attribute is not None:
            values[attribute] = constraint.value

    return FieldMetadata(**values)


def _recognized_constraints(effective: SchemaNode) -> Mapping[ConstraintKind, str]:
    if isinstance(effective, PrimitiveNode):
        if effective.kind is PrimitiveKind.STRING:
            return _STRING_CONSTRAINTS
        if effective.kind is PrimitiveKind.NUMBER:
            return _NUMBER_CONSTRAINTS
    return {}


def _first_description(node: SchemaNode) -> str | None:
    for layer in iter_wrapper_chain(node):
        if layer.description:
            return layer.description
    return None
