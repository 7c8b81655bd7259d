"""Wrapper unwrapping and optionality detection."""

from __future__ import annotations

from collections.abc import Iterator

from schema_field_meta.schema_model.schema_nodes import (
    NULL_MARKER_KINDS,
    OPTIONALITY_MODIFIERS,
    PrimitiveNode,
    SchemaNode,
    UnionNode,
    WrapperNode,
)


def unwrap(node: SchemaNode) -> SchemaNode:
    """Return the effective node below every wrapper layer."""
    current = node
    while isinstance(current, WrapperNode):
        current = current.child
    return current


def iter_wrapper_chain(node: SchemaNode) -> Iterator[SchemaNode]:
    """Yield ``node``, each wrapped child, and finally the effective node."""
    current = node
    while isinstance(current, WrapperNode):
        yield current
        current = current.child
    yield current


def is_optional(node: SchemaNode) -> bool:
    """Return whether the value at ``node`` may be omitted.

    Optional, nullable and defaulted wrappers anywhere in the chain make the
    node optional. Effect and pipe wrappers are walked through without
    counting. When the chain ends in a union, the union is optional if any
    variant is a null or undefined marker.
    """
    for layer in iter_wrapper_chain(node):
        if isinstance(layer, WrapperNode):
            if layer.modifier in OPTIONALITY_MODIFIERS:
                return True
            continue
        if isinstance(layer, UnionNode):
            return any(_is_null_marker(variant) for variant in layer.variants)
    return False


def _is_null_marker(variant: SchemaNode) -> bool:
    effective = unwrap(variant)
    return isinstance(effective, PrimitiveNode) and effective.kind in NULL_MARKER_KINDS
