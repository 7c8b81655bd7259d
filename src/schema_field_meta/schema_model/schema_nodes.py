"""Schema node entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PrimitiveKind(str, Enum):
    """Leaf value kinds a schema node can describe."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ENUM = "enum"
    NULL = "null"
    UNDEFINED = "undefined"
    OTHER = "other"


class Modifier(str, Enum):
    """Wrapper modifiers around exactly one child node."""

    OPTIONAL = "optional"
    NULLABLE = "nullable"
    HAS_DEFAULT = "has_default"
    EFFECT = "effect"
    PIPE = "pipe"


OPTIONALITY_MODIFIERS = frozenset({Modifier.OPTIONAL, Modifier.NULLABLE, Modifier.HAS_DEFAULT})
NULL_MARKER_KINDS = frozenset({PrimitiveKind.NULL, PrimitiveKind.UNDEFINED})


class ConstraintKind(str, Enum):
    """Declared checks the resolver knows how to surface."""

    MIN = "min"
    MAX = "max"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"


@dataclass(frozen=True)
class Constraint:
    """One declared check on a node."""

    kind: ConstraintKind
    value: Any


@dataclass(frozen=True, kw_only=True)
class _NodeBase:
    constraints: tuple[Constraint, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class PrimitiveNode(_NodeBase):
    """Leaf node of a single value kind."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class WrapperNode(_NodeBase):
    """Modifier layer around one child node."""

    modifier: Modifier
    child: SchemaNode


@dataclass(frozen=True)
class ObjectNode(_NodeBase):
    """Composite node with named fields."""

    fields: Mapping[str, SchemaNode] = field(default_factory=dict)


@dataclass(frozen=True)
class ArrayNode(_NodeBase):
    """Homogeneous array with one declared element schema."""

    element: SchemaNode


@dataclass(frozen=True)
class UnionNode(_NodeBase):
    """Ordered alternatives."""

    variants: tuple[SchemaNode, ...] = ()


SchemaNode = PrimitiveNode | WrapperNode | ObjectNode | ArrayNode | UnionNode
