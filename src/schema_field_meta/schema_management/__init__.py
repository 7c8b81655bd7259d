"""Schema management exports."""

from .avro_adapter import adapt_avro_schema
from .document_loading import adapt_schema_document, load_schema_document, load_schema_node
from .field_listing import list_field_paths
from .json_schema_adapter import adapt_json_schema
from .schema_models import SUPPORTED_SCHEMA_TYPES, SchemaConfig, SchemaDocument, SchemaError

__all__ = [
    "SUPPORTED_SCHEMA_TYPES",
    "SchemaConfig",
    "SchemaDocument",
    "SchemaError",
    "adapt_avro_schema",
    "adapt_json_schema",
    "adapt_schema_document",
    "list_field_paths",
    "load_schema_document",
    "load_schema_node",
]
