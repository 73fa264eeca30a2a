"""Tests for TypeScript interface generation."""

import pytest

from jayson.codegen import GenerateOptions, generate_typescript
from jayson.codegen.typescript import schema_type_to_ts
from jayson.models import SchemaNode

NO_TIMESTAMP = GenerateOptions(include_timestamp=False)


def ts_type(schema: dict) -> str:
    return schema_type_to_ts(SchemaNode.from_dict(schema))


class TestSchemaTypeToTs:
    """Type mapping for single schema nodes."""

    @pytest.mark.parametrize(
        ("schema", "expected"),
        [
            ({"type": "string"}, "string"),
            ({"type": "number"}, "number"),
            ({"type": "integer"}, "number"),
            ({"type": "boolean"}, "boolean"),
            ({"type": "null"}, "null"),
            ({}, "unknown"),
            ({"type": "array"}, "unknown[]"),
            ({"type": "array", "items": {"type": "string"}}, "string[]"),
            ({"type": "object"}, "Record<string, unknown>"),
            ({"type": ["string", "null"]}, "string | null"),
        ],
    )
    def test_primitives(self, schema, expected):
        assert ts_type(schema) == expected

    def test_enum_is_literal_union(self):
        assert ts_type({"enum": ["a", 1, None, True]}) == '"a" | 1 | null | true'

    def test_ref_uses_pascal_case_name(self):
        assert ts_type({"$ref": "#/definitions/address_info"}) == "AddressInfo"

    def test_combinators(self):
        one_of = {"oneOf": [{"type": "string"}, {"type": "integer"}]}
        all_of = {
            "allOf": [
                {"$ref": "#/definitions/base"},
                {"type": ["string", "null"]},
            ]
        }

        assert ts_type(one_of) == "string | number"
        assert ts_type({"anyOf": [{"type": "boolean"}]}) == "boolean"
        assert ts_type(all_of) == "Base & (string | null)"

    def test_union_items_are_grouped(self):
        schema = {"type": "array", "items": {"enum": ["a", "b"]}}

        assert ts_type(schema) == '("a" | "b")[]'

    def test_inline_object_in_array(self):
        schema = {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"x": {"type": "number"}},
                "required": ["x"],
            },
        }

        assert ts_type(schema) == "({ x: number })[]"


class TestGenerateTypescript:
    """Whole-module generation."""

    def test_user_interface(self, user_schema):
        source = generate_typescript(user_schema, NO_TIMESTAMP)

        assert source.splitlines() == [
            "/**",
            " * Auto-generated TypeScript interface from JSON Schema",
            " * Schema: User",
            " */",
            "",
            "/**",
            " * A registered user",
            " */",
            "export interface User {",
            "    id: number;",
            "    user_name: string;",
            "    email?: string;",
            '    role?: "admin" | "user";',
            "    active?: boolean;",
            "    tags?: string[];",
            "}",
            "",
            "export default User;",
        ]

    def test_nested_objects_are_hoisted_first(self):
        schema = {
            "title": "Order",
            "type": "object",
            "properties": {
                "shipping_address": {
                    "type": "object",
                    "properties": {
                        "geo": {
                            "type": "object",
                            "properties": {"lat": {"type": "number"}},
                        }
                    },
                }
            },
        }

        source = generate_typescript(schema, NO_TIMESTAMP)

        geo = source.index("export interface OrderShippingAddressGeo {")
        address = source.index("export interface OrderShippingAddress {")
        order = source.index("export interface Order {")
        assert geo < address < order
        assert "    shipping_address?: OrderShippingAddress;" in source
        assert "    geo?: OrderShippingAddressGeo;" in source

    def test_definitions_are_emitted_before_main_type(self):
        schema = {
            "title": "Customer",
            "type": "object",
            "properties": {"home": {"$ref": "#/definitions/address_info"}},
            "required": ["home"],
            "definitions": {
                "address_info": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                },
                "unused": {"type": "string"},
            },
        }

        source = generate_typescript(schema, NO_TIMESTAMP)

        assert source.index("export interface AddressInfo {") < source.index(
            "export interface Customer {"
        )
        assert "export type Unused = string;" in source
        assert "    home: AddressInfo;" in source

    def test_non_object_root_is_type_alias(self):
        schema = {"title": "Status", "enum": ["active", "inactive"]}

        source = generate_typescript(schema, NO_TIMESTAMP)

        assert 'export type Status = "active" | "inactive";' in source
        assert source.endswith("export default Status;")

    def test_non_identifier_keys_are_quoted(self):
        schema = {
            "title": "Contact",
            "type": "object",
            "properties": {"first-name": {"type": "string"}},
        }

        source = generate_typescript(schema, NO_TIMESTAMP)

        assert '    "first-name"?: string;' in source

    def test_options(self, user_schema):
        options = GenerateOptions(
            export_name="Account",
            include_descriptions=False,
            indent_size=2,
            include_timestamp=False,
        )

        source = generate_typescript(user_schema, options)

        assert "export interface Account {" in source
        assert "  id: number;" in source
        assert "A registered user" not in source

    def test_property_descriptions(self):
        schema = {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Primary key */"}
            },
        }

        source = generate_typescript(schema, NO_TIMESTAMP)

        assert "    /** Primary key *\\/ */" in source
        assert "export interface GeneratedType {" in source

    def test_timestamp_header(self, user_schema):
        source = generate_typescript(user_schema)

        assert " * Generated: " in source.splitlines()[2]
