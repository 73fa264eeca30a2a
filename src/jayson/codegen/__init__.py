"""TypeScript and JavaScript source generation from JSON Schema."""

from typing import Any

from jayson.codegen.files import (
    generate_both,
    write_javascript_file,
    write_typescript_file,
)
from jayson.codegen.javascript import generate_javascript
from jayson.codegen.naming import to_camel_case, to_pascal_case
from jayson.codegen.options import GenerateOptions, GeneratedSources
from jayson.codegen.typescript import generate_typescript
from jayson.models import SchemaNode


def generate_types(
    schema: Any,
    options: GenerateOptions | None = None,
) -> GeneratedSources:
    """Generate the TypeScript declarations and JavaScript class together.

    Args:
        schema: Schema mapping or parsed SchemaNode
        options: Generation options shared by both outputs

    Returns:
        GeneratedSources with ``type_source`` and ``class_source``

    """
    node = SchemaNode.from_dict(schema)
    return GeneratedSources(
        type_source=generate_typescript(node, options),
        class_source=generate_javascript(node, options),
    )


__all__ = [
    "GenerateOptions",
    "GeneratedSources",
    "generate_both",
    "generate_javascript",
    "generate_types",
    "generate_typescript",
    "to_camel_case",
    "to_pascal_case",
    "write_javascript_file",
    "write_typescript_file",
]
