"""Generate default ("template") documents from a schema.

Per-property priority: explicit ``default``, first ``enum`` value, then a
type-based fallback. Arrays are never populated with sample elements.
"""

import copy
from typing import Any

from jayson.logger import get_logger
from jayson.models import SchemaNode, SchemaType

logger = get_logger(__name__)


def default_value(node: SchemaNode) -> Any:
    """Return the template value for a single property schema.

    Args:
        node: Property schema

    Returns:
        A fresh value; mutable defaults are copied so callers can edit
        the template without touching the schema.

    """
    if node.has_default:
        return copy.deepcopy(node.default)
    if node.enum:
        return copy.deepcopy(node.enum[0])

    schema_type = node.primary_type
    if schema_type is SchemaType.STRING:
        return ""
    if schema_type in (SchemaType.NUMBER, SchemaType.INTEGER):
        return node.minimum if node.minimum is not None else 0
    if schema_type is SchemaType.BOOLEAN:
        return False
    if schema_type is SchemaType.ARRAY:
        return []
    if schema_type is SchemaType.OBJECT:
        return _object_template(node)
    return None


def _object_template(node: SchemaNode) -> dict[str, Any]:
    return {name: default_value(prop) for name, prop in node.properties.items()}


def generate_template(schema: Any) -> dict[str, Any] | list[Any]:
    """Build a minimal document shaped like ``schema``.

    Args:
        schema: Schema mapping or parsed SchemaNode

    Returns:
        ``[]`` for an array root, ``{}`` for any non-object root or an
        object without properties, otherwise an object with one entry per
        declared property in declaration order.

    Example:
        >>> generate_template({
        ...     "type": "object",
        ...     "properties": {
        ...         "role": {"type": "string", "enum": ["admin", "user"]},
        ...         "age": {"type": "integer", "minimum": 18},
        ...     },
        ... })
        {'role': 'admin', 'age': 18}

    """
    node = SchemaNode.from_dict(schema)

    if node.declares(SchemaType.ARRAY):
        return []
    if not node.declares(SchemaType.OBJECT) or not node.properties:
        return {}

    template = _object_template(node)
    logger.debug("Generated template with %d field(s)", len(template))
    return template
