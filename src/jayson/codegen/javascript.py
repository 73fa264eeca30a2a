"""JavaScript class generation.

Each generated class has a constructor that fills camelCase fields from
the original property names, a ``validate()`` method covering required
fields, ``minLength``, ``minimum`` and ``enum``, a ``toJSON()`` that
restores the original names, and a static ``fromJSON()``.
"""

from typing import Any

import orjson

from jayson.codegen.naming import is_identifier, to_camel_case, to_pascal_case
from jayson.codegen.options import GenerateOptions, doc_comment, file_header
from jayson.codegen.typescript import export_type_name, property_key
from jayson.constants import DEFAULT_CLASS_NAME
from jayson.core.validator import MSG_REQUIRED, format_literal
from jayson.logger import get_logger
from jayson.models import SchemaNode, SchemaType

logger = get_logger(__name__)


def js_literal(value: Any) -> str:
    """Render a JSON value as a JavaScript expression."""
    return orjson.dumps(value).decode()


def default_expression(node: SchemaNode) -> str:
    """Return the JavaScript expression for a property's default value."""
    if node.has_default:
        return js_literal(node.default)
    if node.enum:
        return js_literal(node.enum[0])

    schema_type = node.primary_type
    if schema_type is SchemaType.STRING:
        return '""'
    if schema_type in (SchemaType.NUMBER, SchemaType.INTEGER):
        return js_literal(node.minimum if node.minimum is not None else 0)
    if schema_type is SchemaType.BOOLEAN:
        return "false"
    if schema_type is SchemaType.ARRAY:
        return "[]"
    if schema_type is SchemaType.OBJECT:
        return "{}"
    return "null"


def _member(name: str) -> str:
    """Return ``.name`` or ``["name"]`` for property access on ``data``."""
    if is_identifier(name):
        return f".{name}"
    return f"[{js_literal(name)}]"


def _field(prop_name: str) -> str:
    """Return the instance field holding a property, quoted when needed."""
    camel = to_camel_case(prop_name)
    if is_identifier(camel):
        return f"this.{camel}"
    return f"this[{js_literal(camel)}]"


def _push_error(indent: str, prop_name: str, message: str) -> str:
    return (
        f"{indent}errors.push({{ path: {js_literal(prop_name)}, "
        f"message: {js_literal(message)} }});"
    )


def _validation_lines(
    node: SchemaNode, indent: str
) -> list[str]:
    """Build the body of ``validate()`` for one class."""
    body = indent * 2
    nested = indent * 3
    required = [name for name in node.required if name in node.properties]
    lines = [f"{body}var errors = [];"]

    for prop_name in required:
        field = _field(prop_name)
        lines.extend(
            [
                f"{body}if ({field} === undefined || {field} === null) {{",
                _push_error(nested, prop_name, MSG_REQUIRED),
                f"{body}}}",
            ]
        )

    for prop_name, prop in node.properties.items():
        field = _field(prop_name)
        schema_type = prop.primary_type

        if schema_type is SchemaType.STRING and prop.min_length is not None:
            limit = format_literal(prop.min_length)
            lines.extend(
                [
                    f'{body}if (typeof {field} === "string" && '
                    f"{field}.length < {limit}) {{",
                    _push_error(
                        nested, prop_name, f"String length must be >= {limit}"
                    ),
                    f"{body}}}",
                ]
            )

        if (
            schema_type in (SchemaType.NUMBER, SchemaType.INTEGER)
            and prop.minimum is not None
        ):
            limit = format_literal(prop.minimum)
            lines.extend(
                [
                    f'{body}if (typeof {field} === "number" && '
                    f"{field} < {limit}) {{",
                    _push_error(nested, prop_name, f"Value must be >= {limit}"),
                    f"{body}}}",
                ]
            )

        if prop.enum is not None:
            allowed = ", ".join(format_literal(v) for v in prop.enum)
            guard = (
                ""
                if prop_name in required
                else f"{field} !== undefined && {field} !== null && "
            )
            lines.extend(
                [
                    f"{body}if ({guard}{js_literal(list(prop.enum))}"
                    f".indexOf({field}) === -1) {{",
                    _push_error(
                        nested, prop_name, f"Value must be one of: {allowed}"
                    ),
                    f"{body}}}",
                ]
            )

    lines.append(
        f"{body}return {{ valid: errors.length === 0, errors: errors }};"
    )
    return lines


def generate_class(
    node: SchemaNode,
    name: str,
    options: GenerateOptions,
) -> list[str]:
    """Return the lines of one JavaScript class."""
    indent = options.indent
    body = indent * 2
    properties = node.properties
    lines: list[str] = []

    if options.include_descriptions and node.description:
        lines.extend(["/**", f" * {doc_comment(node.description)}", " */"])

    lines.append(f"class {name} {{")

    lines.extend(
        [
            f"{indent}/**",
            f"{indent} * Create a new {name} instance",
            f"{indent} * @param {{Object}} [data={{}}] - Initial data",
            f"{indent} */",
            f"{indent}constructor(data) {{",
            f"{body}data = data || {{}};",
        ]
    )
    for prop_name, prop in properties.items():
        access = f"data{_member(prop_name)}"
        lines.append(
            f"{body}{_field(prop_name)} = {access} !== undefined"
            f" ? {access} : {default_expression(prop)};"
        )
    lines.extend([f"{indent}}}", ""])

    lines.extend(
        [
            f"{indent}/**",
            f"{indent} * Validate the instance",
            f"{indent} * @returns {{{{ valid: boolean, errors: "
            "Array<{ path: string, message: string }> }}",
            f"{indent} */",
            f"{indent}validate() {{",
            *_validation_lines(node, indent),
            f"{indent}}}",
            "",
        ]
    )

    members = [
        f"{indent * 3}{property_key(prop_name)}: {_field(prop_name)}"
        for prop_name in properties
    ]
    lines.extend(
        [
            f"{indent}/**",
            f"{indent} * Convert to plain object",
            f"{indent} * @returns {{Object}}",
            f"{indent} */",
            f"{indent}toJSON() {{",
            f"{body}return {{",
            *[
                member + ("," if index < len(members) - 1 else "")
                for index, member in enumerate(members)
            ],
            f"{body}}};",
            f"{indent}}}",
            "",
        ]
    )

    lines.extend(
        [
            f"{indent}/**",
            f"{indent} * Create instance from plain object",
            f"{indent} * @param {{Object}} json - Plain object",
            f"{indent} * @returns {{{name}}}",
            f"{indent} */",
            f"{indent}static fromJSON(json) {{",
            f"{body}return new {name}(json);",
            f"{indent}}}",
            "}",
        ]
    )
    return lines


def generate_javascript(
    schema: Any,
    options: GenerateOptions | None = None,
) -> str:
    """Generate a JavaScript module with one class per object schema.

    Classes are emitted for object-shaped ``definitions`` first, then for
    the root schema.

    Args:
        schema: Schema mapping or parsed SchemaNode
        options: Generation options

    Returns:
        JavaScript source text

    """
    options = options or GenerateOptions()
    node = SchemaNode.from_dict(schema)
    export_name = export_type_name(node, options, DEFAULT_CLASS_NAME)

    lines = file_header(
        "Auto-generated JavaScript class from JSON Schema",
        node.title,
        options,
        extra=("@module",),
    )
    for def_name, definition in node.definitions.items():
        if definition.properties or definition.declares(SchemaType.OBJECT):
            lines.extend(
                generate_class(definition, to_pascal_case(def_name), options)
            )
            lines.append("")

    lines.extend(generate_class(node, export_name, options))
    lines.extend(
        [
            "",
            "// Module exports",
            f"export {{ {export_name} }};",
            f"export default {export_name};",
        ]
    )

    logger.debug("Generated JavaScript class %s", export_name)
    return "\n".join(lines)
