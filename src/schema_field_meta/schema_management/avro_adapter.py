"""Avro schema to schema node adaptation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

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

from .schema_models import SchemaError

_PRIMITIVE_KINDS: Mapping[str, PrimitiveKind] = {
    "null": PrimitiveKind.NULL,
    "boolean": PrimitiveKind.BOOLEAN,
    "int": PrimitiveKind.NUMBER,
    "long": PrimitiveKind.NUMBER,
    "float": PrimitiveKind.NUMBER,
    "double": PrimitiveKind.NUMBER,
    "string": PrimitiveKind.STRING,
    "bytes": PrimitiveKind.OTHER,
}
_LOGICAL_KINDS: Mapping[str, PrimitiveKind] = {
    "date": PrimitiveKind.DATE,
    "time-millis": PrimitiveKind.DATE,
    "time-micros": PrimitiveKind.DATE,
    "timestamp-millis": PrimitiveKind.DATE,
    "timestamp-micros": PrimitiveKind.DATE,
    "local-timestamp-millis": PrimitiveKind.DATE,
    "local-timestamp-micros": PrimitiveKind.DATE,
    "decimal": PrimitiveKind.NUMBER,
    "uuid": PrimitiveKind.STRING,
}


@dataclass
class _NamedTypes:
    """Named Avro types seen so far in document order."""

    resolved: dict[str, SchemaNode] = field(default_factory=dict)
    pending: set[str] = field(default_factory=set)

    def lookup(self, name: str, namespace: str | None) -> SchemaNode:
        for candidate in (name, _full_name(name, namespace)):
            if candidate in self.pending:
                raise SchemaError(f"Recursive Avro type reference is not supported: {name}")
            if candidate in self.resolved:
                return self.resolved[candidate]
        raise SchemaError(f"Unknown Avro type: {name}")


def adapt_avro_schema(schema: Any) -> SchemaNode:
    """Translate a parsed Avro schema into a schema node tree."""
    return _adapt(schema, named=_NamedTypes(), namespace=None)


def _adapt(schema: Any, *, named: _NamedTypes, namespace: str | None) -> SchemaNode:
    if isinstance(schema, list):
        variants = [_adapt(item, named=named, namespace=namespace) for item in schema]
        return _combine_union(variants)
    if isinstance(schema, str):
        kind = _PRIMITIVE_KINDS.get(schema)
        if kind is not None:
            return PrimitiveNode(kind)
        return named.lookup(schema, namespace)
    if isinstance(schema, Mapping):
        return _adapt_complex(schema, named=named, namespace=namespace)
    raise SchemaError("Unsupported Avro schema segment.")


def _adapt_complex(
    schema: Mapping[str, Any], *, named: _NamedTypes, namespace: str | None
) -> SchemaNode:
    avro_type = schema.get("type")
    description = _description(schema, "doc")
    if isinstance(avro_type, list | Mapping):
        adapted = _adapt(avro_type, named=named, namespace=namespace)
        return replace(adapted, description=description) if description else adapted
    if not isinstance(avro_type, str):
        raise SchemaError("Avro schema objects require a type.")

    logical_kind = _LOGICAL_KINDS.get(schema.get("logicalType", ""))
    if logical_kind is not None:
        return PrimitiveNode(logical_kind, description=description)

    if avro_type in ("record", "error"):
        return _adapt_record(schema, named=named, namespace=namespace)
    if avro_type == "array":
        if "items" not in schema:
            raise SchemaError("Avro array requires items.")
        element = _adapt(schema["items"], named=named, namespace=namespace)
        return ArrayNode(element, description=description)
    if avro_type == "map":
        return PrimitiveNode(PrimitiveKind.OTHER, description=description)
    if avro_type in ("enum", "fixed"):
        kind = PrimitiveKind.ENUM if avro_type == "enum" else PrimitiveKind.OTHER
        node = PrimitiveNode(kind, description=description)
        full_name, _ = _declare_name(schema, namespace)
        named.resolved[full_name] = node
        return node
    kind = _PRIMITIVE_KINDS.get(avro_type)
    if kind is not None:
        return PrimitiveNode(kind, description=description)
    return named.lookup(avro_type, namespace)


def _adapt_record(
    schema: Mapping[str, Any], *, named: _NamedTypes, namespace: str | None
) -> SchemaNode:
    full_name, record_namespace = _declare_name(schema, namespace)
    record_fields = schema.get("fields")
    if not isinstance(record_fields, Sequence) or isinstance(record_fields, str):
        raise SchemaError("Avro record requires fields.")

    named.pending.add(full_name)
    fields: dict[str, SchemaNode] = {}
    for record_field in record_fields:
        if not isinstance(record_field, Mapping) or "name" not in record_field:
            raise SchemaError("Avro field definitions must include a name.")
        if "type" not in record_field:
            raise SchemaError(f"Avro field '{record_field['name']}' requires a type.")
        child = _adapt(record_field["type"], named=named, namespace=record_namespace)
        doc = _description(record_field, "doc")
        if doc:
            child = replace(child, description=doc)
        if "default" in record_field:
            child = WrapperNode(Modifier.HAS_DEFAULT, child)
        fields[record_field["name"]] = child
    named.pending.discard(full_name)

    node = ObjectNode(fields=fields, description=_description(schema, "doc"))
    named.resolved[full_name] = node
    return node


def _combine_union(variants: list[SchemaNode]) -> SchemaNode:
    non_null = [
        variant
        for variant in variants
        if not (isinstance(variant, PrimitiveNode) and variant.kind is PrimitiveKind.NULL)
    ]
    if len(non_null) == 1 and len(non_null) < len(variants):
        return WrapperNode(Modifier.NULLABLE, non_null[0])
    return UnionNode(tuple(variants))


def _declare_name(schema: Mapping[str, Any], namespace: str | None) -> tuple[str, str | None]:
    name = schema.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaError("Named Avro types require a name.")
    declared_namespace = schema.get("namespace")
    if isinstance(declared_namespace, str) and declared_namespace:
        namespace = declared_namespace
    full_name = _full_name(name, namespace)
    return full_name, full_name.rpartition(".")[0] or None


def _full_name(name: str, namespace: str | None) -> str:
    if "." in name or not namespace:
        return name
    return f"{namespace}.{name}"


def _description(schema: Mapping[str, Any], key: str) -> str | None:
    value = schema.get(key)
    return value if isinstance(value, str) and value else None
