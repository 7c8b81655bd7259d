"""Field path resolution over schema trees."""

from __future__ import annotations

import logging

from schema_field_meta.schema_model.field_paths import FieldPath, IndexSegment, NameSegment
from schema_field_meta.schema_model.schema_nodes import ArrayNode, ObjectNode, SchemaNode

from .unwrapping import unwrap

_LOGGER = logging.getLogger("schema_field_meta.field_resolution")


def resolve_path(root: SchemaNode, path: FieldPath) -> SchemaNode | None:
    """Return the node addressed by ``path`` or ``None`` when it does not resolve.

    Every index of an array resolves to its one declared element schema. An
    index against a non-array, a name against a non-object, or a missing
    property ends the walk; speculative lookups are expected, so nothing is
    raised.
    """
    current = root
    for depth, segment in enumerate(path):
        effective = unwrap(current)
        if isinstance(segment, IndexSegment) and isinstance(effective, ArrayNode):
            current = effective.element
            continue
        if isinstance(segment, NameSegment) and isinstance(effective, ObjectNode):
            child = effective.fields.get(segment.name)
            if child is not None:
                current = child
                continue
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Path segment %d (%r) does not resolve against %s",
                depth,
                segment,
                type(effective).__name__,
            )
        return None
    return current
