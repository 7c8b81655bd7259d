"""JSON Schema to schema node adaptation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from schema_field_meta.schema_model.schema_nodes import (
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

from .schema_models import SchemaError

_DATE_FORMATS = frozenset({"date", "date-time", "time"})

_STRING_KEYWORDS: Mapping[str, ConstraintKind] = {
    "minLength": ConstraintKind.MIN_LENGTH,
    "maxLength": ConstraintKind.MAX_LENGTH,
    "pattern": ConstraintKind.PATTERN,
}
# Draft 4 spells exclusive bounds as booleans next to minimum/maximum, later
# drafts as numbers; only the numeric form carries a bound of its own.
_NUMBER_KEYWORDS: Mapping[str, ConstraintKind] = {
    "minimum": ConstraintKind.MIN,
    "exclusiveMinimum": ConstraintKind.MIN,
    "maximum": ConstraintKind.MAX,
    "exclusiveMaximum": ConstraintKind.MAX,
}
_PRIMITIVE_TYPES: Mapping[str, PrimitiveKind] = {
    "boolean": PrimitiveKind.BOOLEAN,
    "null": PrimitiveKind.NULL,
}


def adapt_json_schema(root: Any) -> SchemaNode:
    """Translate a parsed JSON Schema document into a schema node tree."""
    if not isinstance(root, Mapping):
        raise SchemaError("JSON schema root must be an object.")
    return _adapt_node(root, root=root, ref_stack=())


def _adapt_node(node: Any, *, root: Mapping[str, Any], ref_stack: tuple[str, ...]) -> SchemaNode:
    if isinstance(node, bool):
        return PrimitiveNode(PrimitiveKind.OTHER)
    if not isinstance(node, Mapping):
        raise SchemaError("JSON schema nodes must be objects.")

    adapted = _adapt_body(node, root=root, ref_stack=ref_stack)
    if "default" in node:
        adapted = WrapperNode(Modifier.HAS_DEFAULT, adapted)
    return adapted


def _adapt_body(
    node: Mapping[str, Any], *, root: Mapping[str, Any], ref_stack: tuple[str, ...]
) -> SchemaNode:
    description = _description(node)

    reference = node.get("$ref")
    if reference is not None:
        if not isinstance(reference, str):
            raise SchemaError("JSON schema $ref must be a string.")
        if reference in ref_stack:
            raise SchemaError(f"Recursive JSON schema $ref is not supported: {reference}")
        target = _resolve_reference(root, reference)
        adapted = _adapt_node(target, root=root, ref_stack=ref_stack + (reference,))
        return replace(adapted, description=description) if description else adapted

    all_of = node.get("allOf")
    if isinstance(all_of, Sequence) and not isinstance(all_of, str):
        if len(all_of) == 1:
            inner = _adapt_node(all_of[0], root=root, ref_stack=ref_stack)
            return WrapperNode(Modifier.EFFECT, inner, description=description)
        return PrimitiveNode(PrimitiveKind.OTHER, description=description)

    for keyword in ("anyOf", "oneOf"):
        alternatives = node.get(keyword)
        if isinstance(alternatives, Sequence) and not isinstance(alternatives, str):
            variants = [_adapt_node(item, root=root, ref_stack=ref_stack) for item in alternatives]
            return _combine_variants(variants, description=description)

    node_types = _json_schema_types(node)
    if len(node_types) > 1:
        variants = [
            _adapt_typed(node, node_type, root=root, ref_stack=ref_stack)
            for node_type in node_types
        ]
        return _combine_variants(variants, description=description)
    if node_types:
        return _adapt_typed(node, node_types[0], root=root, ref_stack=ref_stack)
    return _adapt_typed(node, _infer_type(node), root=root, ref_stack=ref_stack)


def _adapt_typed(
    node: Mapping[str, Any],
    node_type: str,
    *,
    root: Mapping[str, Any],
    ref_stack: tuple[str, ...],
) -> SchemaNode:
    description = _description(node)
    if node_type == "object":
        return ObjectNode(
            fields=_adapt_properties(node, root=root, ref_stack=ref_stack),
            description=description,
        )
    if node_type == "array":
        items = node.get("items")
        if isinstance(items, Mapping | bool):
            element = _adapt_node(items, root=root, ref_stack=ref_stack)
        else:
            element = PrimitiveNode(PrimitiveKind.OTHER)
        return ArrayNode(element, description=description)
    if node_type == "null":
        return PrimitiveNode(PrimitiveKind.NULL, description=description)
    if "enum" in node or "const" in node:
        return PrimitiveNode(PrimitiveKind.ENUM, description=description)
    if node_type == "string":
        if node.get("format") in _DATE_FORMATS:
            return PrimitiveNode(PrimitiveKind.DATE, description=description)
        return PrimitiveNode(
            PrimitiveKind.STRING,
            constraints=_collect_constraints(node, _STRING_KEYWORDS),
            description=description,
        )
    if node_type in ("number", "integer"):
        return PrimitiveNode(
            PrimitiveKind.NUMBER,
            constraints=_collect_constraints(node, _NUMBER_KEYWORDS),
            description=description,
        )
    return PrimitiveNode(
        _PRIMITIVE_TYPES.get(node_type, PrimitiveKind.OTHER), description=description
    )


def _adapt_properties(
    node: Mapping[str, Any], *, root: Mapping[str, Any], ref_stack: tuple[str, ...]
) -> dict[str, SchemaNode]:
    properties = node.get("properties") or {}
    if not isinstance(properties, Mapping):
        raise SchemaError("JSON schema properties must be an object.")
    required_names = _required_names(node.get("required"))

    fields: dict[str, SchemaNode] = {}
    for name, child in properties.items():
        adapted = _adapt_node(child, root=root, ref_stack=ref_stack)
        # Draft 3 marks requiredness on the property itself.
        marked_required = isinstance(child, Mapping) and child.get("required") is True
        if name not in required_names and not marked_required:
            adapted = WrapperNode(Modifier.OPTIONAL, adapted)
        fields[name] = adapted
    return fields


def _required_names(required: Any) -> set[str]:
    # Draft 3 uses a boolean here, handled per property.
    if required is None or isinstance(required, bool):
        return set()
    if not isinstance(required, Sequence) or isinstance(required, str):
        raise SchemaError("JSON schema required must be a list of property names.")
    if not all(isinstance(name, str) for name in required):
        raise SchemaError("JSON schema required entries must be strings.")
    return set(required)


def _combine_variants(variants: list[SchemaNode], *, description: str | None) -> SchemaNode:
    non_null = [variant for variant in variants if not _is_null(variant)]
    if len(non_null) == 1 and len(non_null) < len(variants):
        return WrapperNode(Modifier.NULLABLE, non_null[0], description=description)
    return UnionNode(tuple(variants), description=description)


def _is_null(node: SchemaNode) -> bool:
    return isinstance(node, PrimitiveNode) and node.kind is PrimitiveKind.NULL


def _collect_constraints(
    node: Mapping[str, Any], keywords: Mapping[str, ConstraintKind]
) -> tuple[Constraint, ...]:
    constraints = []
    for keyword, value in node.items():
        kind = keywords.get(keyword)
        if kind is None or isinstance(value, bool):
            continue
        constraints.append(Constraint(kind=kind, value=value))
    return tuple(constraints)


def _json_schema_types(node: Mapping[str, Any]) -> tuple[str, ...]:
    node_type = node.get("type")
    if isinstance(node_type, list):
        return tuple(value for value in node_type if isinstance(value, str))
    if isinstance(node_type, str):
        return (node_type,)
    return ()


def _infer_type(node: Mapping[str, Any]) -> str:
    if "properties" in node:
        return "object"
    if "items" in node:
        return "array"
    return "any"


def _description(node: Mapping[str, Any]) -> str | None:
    description = node.get("description")
    return description if isinstance(description, str) and description else None


def _resolve_reference(root: Mapping[str, Any], reference: str) -> Any:
    if not reference.startswith("#"):
        raise SchemaError(f"Only local JSON schema $ref values are supported: {reference}")
    target: Any = root
    pointer = reference[1:]
    if not pointer:
        return target
    for token in pointer.lstrip("/").split("/"):
        key = token.replace("~1", "/").replace("~0", "~")
        if isinstance(target, Mapping) and key in target:
            target = target[key]
        elif isinstance(target, list) and key.isdigit() and int(key) < len(target):
            target = target[int(key)]
        else:
            raise SchemaError(f"Unresolvable JSON schema $ref: {reference}")
    return target
