"""Per-form resolution context with memoized field metadata."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from schema_field_meta.schema_model.field_paths import parse_field_path
from schema_field_meta.schema_model.schema_nodes import SchemaNode

from .constraint_extraction import extract_field_metadata
from .field_metadata import UNRESOLVED_FIELD_METADATA, FieldMetadata
from .path_resolver import resolve_path

_LOGGER = logging.getLogger("schema_field_meta.field_resolution")


class ResolutionContextError(Exception):
    """Raised when a resolution context is bound incorrectly."""


def resolve_field_metadata(root: SchemaNode, path: str) -> FieldMetadata:
    """Resolve metadata for ``path`` without caching."""
    node = resolve_path(root, parse_field_path(path))
    if node is None:
        return UNRESOLVED_FIELD_METADATA
    return extract_field_metadata(node)


def is_field_required(root: SchemaNode, path: str) -> bool:
    """Return whether ``path`` resolves to a required field, without caching."""
    return resolve_field_metadata(root, path).required


class SchemaResolutionContext:
    """Holds one form's schema and answers metadata queries for its fields.

    An unbound context answers every query with ``required=False`` and no
    constraints. Binding creates a private cache that lives until ``unbind``;
    switching schemas means unbinding first or using a new context.
    """

    def __init__(self, schema: SchemaNode | None = None) -> None:
        self._schema: SchemaNode | None = None
        self._cache: dict[tuple[int, str], FieldMetadata] = {}
        if schema is not None:
            self.bind(schema)

    @property
    def schema(self) -> SchemaNode | None:
        """Currently bound root node."""
        return self._schema

    @property
    def is_bound(self) -> bool:
        """Whether a schema is bound."""
        return self._schema is not None

    def bind(self, schema: SchemaNode) -> None:
        """Bind ``schema`` to this context."""
        if self._schema is not None:
            raise ResolutionContextError(
                "Resolution context is already bound; unbind it or create a new context."
            )
        self._schema = schema
        self._cache = {}
        _LOGGER.debug("Bound schema %s to resolution context", type(schema).__name__)

    def unbind(self) -> None:
        """Release the bound schema and its cached metadata."""
        if self._schema is None:
            return
        _LOGGER.debug("Unbinding resolution context after %d cached paths", len(self._cache))
        self._schema = None
        self._cache = {}

    def is_required(self, path: str) -> bool:
        """Return whether the field at ``path`` is required."""
        return self.field_metadata(path).required

    def field_metadata(self, path: str) -> FieldMetadata:
        """Return metadata for the field at ``path``."""
        schema = self._schema
        if schema is None:
            return UNRESOLVED_FIELD_METADATA
        key = (id(schema), path)
        cached = self._cache.get(key)
        if cached is None:
            cached = resolve_field_metadata(schema, path)
            self._cache[key] = cached
        return cached


@contextmanager
def schema_scope(schema: SchemaNode) -> Iterator[SchemaResolutionContext]:
    """Yield a context bound to ``schema`` for the duration of the block."""
    context = SchemaResolutionContext(schema)
    try:
        yield context
    finally:
        context.unbind()
