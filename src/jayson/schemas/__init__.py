"""Schema file loading, caching, meta-validation and standard detection."""

from jayson.schemas.cache import CachedSchema, SchemaCache
from jayson.schemas.loader import SchemaLoader, get_schema_info, list_schemas
from jayson.schemas.meta import check_schema, schema_problems
from jayson.schemas.standards import (
    SCHEMA_URL_TO_VERSION,
    DetectedStandard,
    detect_standard,
)

__all__ = [
    "SCHEMA_URL_TO_VERSION",
    "CachedSchema",
    "DetectedStandard",
    "SchemaCache",
    "SchemaLoader",
    "check_schema",
    "detect_standard",
    "get_schema_info",
    "list_schemas",
    "schema_problems",
]
