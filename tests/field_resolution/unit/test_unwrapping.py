"""Unwrap resolver tests."""

from __future__ import annotations

from itertools import permutations

import pytest
from schema_field_meta.field_resolution.unwrapping import is_optional, iter_wrapper_chain, unwrap
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


def _string() -> PrimitiveNode:
    return PrimitiveNode(PrimitiveKind.STRING)


def _wrap(node: SchemaNode, *modifiers: Modifier) -> SchemaNode:
    for modifier in reversed(modifiers):
        node = WrapperNode(modifier, node)
    return node


@pytest.mark.parametrize(
    "modifiers",
    list(permutations((Modifier.OPTIONAL, Modifier.NULLABLE, Modifier.HAS_DEFAULT))),
)
def test_wrapper_collapse_in_any_order(modifiers: tuple[Modifier, ...]) -> None:
    leaf = _string()
    node = _wrap(leaf, *modifiers)

    assert is_optional(node) is True
    assert unwrap(node) is leaf


def test_repeated_wrappers_collapse_to_effective_node() -> None:
    leaf = _string()
    node = _wrap(leaf, Modifier.OPTIONAL, Modifier.OPTIONAL, Modifier.EFFECT, Modifier.NULLABLE)

    assert unwrap(node) is leaf
    assert is_optional(node) is True


def test_bare_primitive_is_its_own_effective_node_and_required() -> None:
    leaf = _string()

    assert unwrap(leaf) is leaf
    assert is_optional(leaf) is False


@pytest.mark.parametrize("modifier", [Modifier.EFFECT, Modifier.PIPE])
def test_transform_wrappers_do_not_make_a_node_optional(modifier: Modifier) -> None:
    node = _wrap(_string(), modifier, modifier)

    assert is_optional(node) is False


def test_optional_below_transform_wrappers_is_still_detected() -> None:
    node = _wrap(_string(), Modifier.EFFECT, Modifier.PIPE, Modifier.OPTIONAL)

    assert is_optional(node) is True


def test_unwrap_does_not_descend_into_composites() -> None:
    inner = WrapperNode(Modifier.OPTIONAL, _string())
    array = ArrayNode(inner)
    obj = ObjectNode(fields={"name": inner})

    assert unwrap(WrapperNode(Modifier.OPTIONAL, array)) is array
    assert unwrap(obj) is obj


def test_union_with_null_marker_is_optional() -> None:
    union = UnionNode((_string(), PrimitiveNode(PrimitiveKind.NULL)))

    assert is_optional(union) is True


def test_union_with_undefined_marker_behind_transform_is_optional() -> None:
    union = UnionNode((_string(), PrimitiveNode(PrimitiveKind.UNDEFINED)))

    assert is_optional(WrapperNode(Modifier.EFFECT, union)) is True


def test_union_without_null_marker_is_required() -> None:
    union = UnionNode((_string(), PrimitiveNode(PrimitiveKind.NUMBER)))

    assert is_optional(union) is False


def test_empty_union_is_required() -> None:
    assert is_optional(UnionNode(())) is False


def test_wrapper_chain_yields_each_layer_then_effective_node() -> None:
    leaf = _string()
    inner = WrapperNode(Modifier.NULLABLE, leaf)
    outer = WrapperNode(Modifier.OPTIONAL, inner)

    assert list(iter_wrapper_chain(outer)) == [outer, inner, leaf]
