"""Addressable field path listing."""

from __future__ import annotations

from schema_field_meta.field_resolution.unwrapping import unwrap
from schema_field_meta.schema_model.field_paths import (
    FieldPath,
    IndexSegment,
    NameSegment,
    format_field_path,
)
from schema_field_meta.schema_model.schema_nodes import ArrayNode, ObjectNode, SchemaNode

from .schema_models import SchemaError

REPRESENTATIVE_INDEX = IndexSegment(position=0)


def list_field_paths(root: SchemaNode) -> list[str]:
    """Return deterministic leaf field paths in declaration order.

    Arrays of objects are entered through the representative index ``0``;
    every other array is listed as a leaf of its own.
    """
    paths: list[str] = []
    seen_paths: set[str] = set()
    effective = unwrap(root)
    if not isinstance(effective, ObjectNode):
        raise SchemaError("Schema root must define object fields.")
    _list_object(effective, prefix=(), paths=paths, seen_paths=seen_paths)
    return paths


def _list_object(
    node: ObjectNode, *, prefix: FieldPath, paths: list[str], seen_paths: set[str]
) -> None:
    for name, child in node.fields.items():
        child_path = prefix + (NameSegment(name=name),)
        _list_node(child, prefix=child_path, paths=paths, seen_paths=seen_paths)


def _list_node(
    node: SchemaNode, *, prefix: FieldPath, paths: list[str], seen_paths: set[str]
) -> None:
    effective = unwrap(node)
    if isinstance(effective, ObjectNode) and effective.fields:
        _list_object(effective, prefix=prefix, paths=paths, seen_paths=seen_paths)
        return
    if isinstance(effective, ArrayNode):
        element = unwrap(effective.element)
        if isinstance(element, ObjectNode) and element.fields:
            _list_object(
                element,
                prefix=prefix + (REPRESENTATIVE_INDEX,),
                paths=paths,
                seen_paths=seen_paths,
            )
            return
    _register_path(format_field_path(prefix), paths, seen_paths)


def _register_path(path: str, paths: list[str], seen_paths: set[str]) -> None:
    if path in seen_paths:
        raise SchemaError(f"Duplicate field path detected: {path}")
    seen_paths.add(path)
    paths.append(path)
