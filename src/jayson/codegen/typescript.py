"""TypeScript interface generation.

Object schemas become ``export interface`` declarations; nested object
properties and root ``definitions`` are hoisted into their own named
interfaces ahead of the type that uses them. Schemas that are not
objects (enums, unions, arrays) become ``export type`` aliases.
"""

from typing import Any

import orjson

from jayson.codegen.naming import (
    is_identifier,
    to_pascal_case,
    type_name_from_title,
)
from jayson.codegen.options import GenerateOptions, doc_comment, file_header
from jayson.constants import DEFAULT_TYPE_NAME
from jayson.core.references import ref_name
from jayson.logger import get_logger
from jayson.models import SchemaNode, SchemaType

logger = get_logger(__name__)

_PRIMITIVES = {
    SchemaType.STRING: "string",
    SchemaType.NUMBER: "number",
    SchemaType.INTEGER: "number",
    SchemaType.BOOLEAN: "boolean",
    SchemaType.NULL: "null",
}


def ts_literal(value: Any) -> str:
    """Render a JSON literal as a TypeScript literal type."""
    return orjson.dumps(value).decode()


def property_key(name: str) -> str:
    """Quote a property name unless it is a plain identifier."""
    return name if is_identifier(name) else orjson.dumps(name).decode()


def _group(type_expr: str) -> str:
    return f"({type_expr})" if " " in type_expr else type_expr


def _inline_object(node: SchemaNode) -> str:
    required = set(node.required)
    members = [
        f"{property_key(name)}{'' if name in required else '?'}: "
        f"{schema_type_to_ts(prop)}"
        for name, prop in node.properties.items()
    ]
    return "{ " + "; ".join(members) + " }"


def _primitive_to_ts(schema_type: SchemaType, node: SchemaNode) -> str:
    if schema_type in _PRIMITIVES:
        return _PRIMITIVES[schema_type]
    if schema_type is SchemaType.ARRAY:
        if node.items is None:
            return "unknown[]"
        return f"{_group(schema_type_to_ts(node.items))}[]"
    if node.properties:
        return _inline_object(node)
    return "Record<string, unknown>"


def schema_type_to_ts(node: SchemaNode) -> str:
    """Map a schema node to a TypeScript type expression.

    Nested objects reached here (array items, combinator branches) are
    written inline; properties are hoisted by the interface generator
    before this function is consulted.
    """
    if node.enum is not None:
        if not node.enum:
            return "never"
        return " | ".join(ts_literal(value) for value in node.enum)

    if node.ref is not None:
        return to_pascal_case(ref_name(node.ref))

    branches = node.one_of if node.one_of is not None else node.any_of
    if branches is not None:
        return " | ".join(schema_type_to_ts(branch) for branch in branches)

    if node.all_of is not None:
        return " & ".join(
            _group(schema_type_to_ts(branch)) for branch in node.all_of
        )

    if node.types is None:
        return "unknown"
    return " | ".join(_primitive_to_ts(t, node) for t in node.types)


def generate_interface(
    node: SchemaNode,
    name: str,
    options: GenerateOptions,
) -> list[str]:
    """Return the lines of one ``export interface`` (or type alias).

    Args:
        node: Schema for the type
        name: Name of the generated type
        options: Generation options

    Returns:
        Source lines without a trailing blank line

    """
    lines: list[str] = []
    if options.include_descriptions and node.description:
        lines.extend(["/**", f" * {doc_comment(node.description)}", " */"])

    if not node.properties and not node.declares(SchemaType.OBJECT):
        lines.append(f"export type {name} = {schema_type_to_ts(node)};")
        return lines

    indent = options.indent
    required = set(node.required)
    lines.append(f"export interface {name} {{")
    for prop_name, prop in node.properties.items():
        if options.include_descriptions and prop.description:
            lines.append(f"{indent}/** {doc_comment(prop.description)} */")

        if prop.is_nested_object():
            ts_type = name + to_pascal_case(prop_name)
        else:
            ts_type = schema_type_to_ts(prop)

        optional = "" if prop_name in required else "?"
        lines.append(f"{indent}{property_key(prop_name)}{optional}: {ts_type};")
    lines.append("}")
    return lines


def _emit_hoisted(
    node: SchemaNode,
    name: str,
    options: GenerateOptions,
    lines: list[str],
) -> None:
    """Emit nested object interfaces depth-first, then ``name`` itself."""
    for prop_name, prop in node.properties.items():
        if prop.is_nested_object():
            _emit_hoisted(prop, name + to_pascal_case(prop_name), options, lines)
    lines.extend(generate_interface(node, name, options))
    lines.append("")


def export_type_name(
    node: SchemaNode,
    options: GenerateOptions,
    fallback: str = DEFAULT_TYPE_NAME,
) -> str:
    """Return the exported name: explicit option, schema title, fallback."""
    if options.export_name:
        return options.export_name
    if node.title:
        return type_name_from_title(node.title) or fallback
    return fallback


def generate_typescript(
    schema: Any,
    options: GenerateOptions | None = None,
) -> str:
    """Generate a TypeScript module declaring the schema's types.

    Args:
        schema: Schema mapping or parsed SchemaNode
        options: Generation options

    Returns:
        TypeScript source text

    Example:
        >>> source = generate_typescript(
        ...     {"title": "User", "type": "object",
        ...      "properties": {"id": {"type": "integer"}},
        ...      "required": ["id"]},
        ...     GenerateOptions(include_timestamp=False),
        ... )
        >>> "    id: number;" in source
        True

    """
    options = options or GenerateOptions()
    node = SchemaNode.from_dict(schema)
    export_name = export_type_name(node, options)

    lines = file_header(
        "Auto-generated TypeScript interface from JSON Schema",
        node.title,
        options,
    )
    for def_name, definition in node.definitions.items():
        _emit_hoisted(definition, to_pascal_case(def_name), options, lines)
    _emit_hoisted(node, export_name, options, lines)
    lines.append(f"export default {export_name};")

    logger.debug("Generated TypeScript declarations for %s", export_name)
    return "\n".join(lines)
