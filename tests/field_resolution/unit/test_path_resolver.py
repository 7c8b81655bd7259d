"""Path resolver tests."""

from __future__ import annotations

from schema_field_meta.field_resolution.path_resolver import resolve_path
from schema_field_meta.schema_model.field_paths import parse_field_path
from schema_field_meta.schema_model.schema_nodes import (
    ArrayNode,
    Modifier,
    ObjectNode,
    PrimitiveKind,
    PrimitiveNode,
    SchemaNode,
    UnionNode,
    WrapperNode,
)


def _resolve(root: SchemaNode, path: str) -> SchemaNode | None:
    return resolve_path(root, parse_field_path(path))


def test_resolves_nested_object_fields() -> None:
    city = PrimitiveNode(PrimitiveKind.STRING)
    root = ObjectNode(fields={"address": ObjectNode(fields={"city": city})})

    assert _resolve(root, "address.city") is city


def test_returns_wrapped_node_itself_for_final_segment() -> None:
    nickname = WrapperNode(Modifier.OPTIONAL, PrimitiveNode(PrimitiveKind.STRING))
    root = ObjectNode(fields={"nickname": nickname})

    assert _resolve(root, "nickname") is nickname


def test_unwraps_composites_before_descending() -> None:
    city = PrimitiveNode(PrimitiveKind.STRING)
    address = WrapperNode(
        Modifier.OPTIONAL,
        WrapperNode(Modifier.EFFECT, ObjectNode(fields={"city": city})),
    )
    root = WrapperNode(Modifier.PIPE, ObjectNode(fields={"address": address}))

    assert _resolve(root, "address.city") is city


def test_every_array_index_resolves_to_the_element_schema() -> None:
    name = PrimitiveNode(PrimitiveKind.STRING)
    element = ObjectNode(fields={"name": name})
    root = ObjectNode(fields={"items": ArrayNode(element)})

    assert _resolve(root, "items.0") is element
    assert _resolve(root, "items.57") is element
    assert _resolve(root, "items.3.name") is name


def test_nested_arrays_consume_one_index_each() -> None:
    cell = PrimitiveNode(PrimitiveKind.NUMBER)
    root = ObjectNode(fields={"grid": ArrayNode(WrapperNode(Modifier.NULLABLE, ArrayNode(cell)))})

    assert _resolve(root, "grid.1.2") is cell
    assert isinstance(_resolve(root, "grid.1"), WrapperNode)


def test_empty_path_resolves_to_root() -> None:
    root = ObjectNode(fields={})

    assert _resolve(root, "") is root


def test_missing_property_fails() -> None:
    root = ObjectNode(fields={"name": PrimitiveNode(PrimitiveKind.STRING)})

    assert _resolve(root, "nickname") is None


def test_name_segment_against_array_fails() -> None:
    root = ObjectNode(fields={"tags": ArrayNode(PrimitiveNode(PrimitiveKind.STRING))})

    assert _resolve(root, "tags.abc") is None


def test_index_segment_against_object_fails() -> None:
    address = ObjectNode(fields={"0": PrimitiveNode(PrimitiveKind.STRING)})
    root = ObjectNode(fields={"address": address})

    assert _resolve(root, "address.0") is None


def test_primitive_and_union_cannot_be_descended() -> None:
    address = ObjectNode(fields={"city": PrimitiveNode(PrimitiveKind.STRING)})
    union = UnionNode((address, PrimitiveNode(PrimitiveKind.NULL)))
    root = ObjectNode(fields={"name": PrimitiveNode(PrimitiveKind.STRING), "address": union})

    assert _resolve(root, "name.first") is None
    assert _resolve(root, "address.city") is None


def test_paths_extending_a_missing_prefix_fail() -> None:
    root = ObjectNode(fields={"name": PrimitiveNode(PrimitiveKind.STRING)})

    assert _resolve(root, "missing.deeper.0.path") is None
