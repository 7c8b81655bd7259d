"""Schema loading and adaptation service."""

from __future__ import annotations

import json
import logging

from schema_field_meta.schema_model.schema_nodes import SchemaNode

from .avro_adapter import adapt_avro_schema
from .json_schema_adapter import adapt_json_schema
from .schema_models import SchemaConfig, SchemaDocument, SchemaError

_LOGGER = logging.getLogger("schema_field_meta.schema_management")


def load_schema_document(config: SchemaConfig) -> SchemaDocument:
    """Parse schema text into a structured document."""
    try:
        root = json.loads(config.text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid {config.schema_type} schema: {exc}") from exc

    return SchemaDocument(schema_type=config.schema_type, root=root)


def adapt_schema_document(document: SchemaDocument) -> SchemaNode:
    """Translate a schema document into the schema node model."""
    if document.schema_type == "json_schema":
        node = adapt_json_schema(document.root)
    elif document.schema_type == "avsc":
        node = adapt_avro_schema(document.root)
    else:
        raise SchemaError(f"Unsupported schema type: {document.schema_type}")

    _LOGGER.debug("Adapted %s schema into %s", document.schema_type, type(node).__name__)
    return node


def load_schema_node(config: SchemaConfig) -> SchemaNode:
    """Parse and adapt configured schema text in one step."""
    return adapt_schema_document(load_schema_document(config))
