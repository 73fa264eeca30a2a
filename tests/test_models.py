"""Tests for the schema and validation data model."""

import pytest

from jayson.exceptions import SchemaError
from jayson.models import (
    UNSET,
    SchemaNode,
    SchemaType,
    ValidationError,
    ValidationResult,
)


class TestSchemaNode:
    """Parsing decoded schemas into SchemaNode trees."""

    def test_parses_nested_tree(self, user_schema):
        node = SchemaNode.from_dict(user_schema)

        assert node.types == (SchemaType.OBJECT,)
        assert list(node.properties) == [
            "id",
            "user_name",
            "email",
            "role",
            "active",
            "tags",
        ]
        assert node.required == ("id", "user_name")
        assert node.properties["id"].minimum == 1
        assert node.properties["user_name"].min_length == 3
        assert node.properties["role"].enum == ("admin", "user")
        assert node.properties["tags"].items.types == (SchemaType.STRING,)
        assert node.title == "User"

    def test_type_list(self):
        node = SchemaNode.from_dict({"type": ["string", "null"]})

        assert node.types == (SchemaType.STRING, SchemaType.NULL)
        assert node.primary_type is SchemaType.STRING
        assert not node.declares(SchemaType.STRING)

    def test_unconstrained_node(self):
        node = SchemaNode.from_dict({})

        assert node.types is None
        assert node.primary_type is None
        assert node.properties == {}
        assert node.has_default is False

    def test_null_default_is_distinct_from_absent(self):
        node = SchemaNode.from_dict({"default": None})

        assert node.has_default
        assert node.default is None

    def test_combinators_and_definitions(self):
        node = SchemaNode.from_dict(
            {
                "oneOf": [{"type": "string"}, {"type": "integer"}],
                "definitions": {"Item": {"type": "object"}},
                "$defs": {"Tag": {"type": "string"}},
                "$ref": "#/definitions/Item",
            }
        )

        assert len(node.one_of) == 2
        assert node.any_of is None
        assert node.definitions["Item"].declares(SchemaType.OBJECT)
        assert node.defs["Tag"].primary_type is SchemaType.STRING
        assert node.ref == "#/definitions/Item"

    def test_existing_node_is_returned_unchanged(self):
        node = SchemaNode.from_dict({"type": "string"})

        assert SchemaNode.from_dict(node) is node

    def test_nested_object_detection(self):
        nested = SchemaNode.from_dict(
            {"type": "object", "properties": {"a": {}}}
        )
        open_map = SchemaNode.from_dict({"type": "object"})

        assert nested.is_nested_object()
        assert not open_map.is_nested_object()

    @pytest.mark.parametrize(
        "schema",
        [
            [],
            {"type": "str"},
            {"type": []},
            {"properties": []},
            {"items": [{"type": "string"}]},
            {"required": "name"},
            {"enum": "a"},
            {"oneOf": {"type": "string"}},
            {"minimum": "1"},
            {"maxLength": True},
            {"pattern": 5},
            {"$ref": ["#/definitions/a"]},
            {"properties": {"a": {"$ref": 1}}},
        ],
    )
    def test_malformed_schema_raises(self, schema):
        with pytest.raises(SchemaError):
            SchemaNode.from_dict(schema)


class TestValidationResult:
    def test_from_errors(self):
        ok = ValidationResult.from_errors([])
        bad = ValidationResult.from_errors([ValidationError("a", "boom", 1)])

        assert ok.valid
        assert not bad.valid
        assert bad.errors[0].value == 1

    def test_to_dict_omits_missing_value(self):
        result = ValidationResult.from_errors(
            [
                ValidationError("name", "Required field missing"),
                ValidationError("age", "Value must be >= 0", None),
            ]
        )

        assert result.to_dict()["errors"] == [
            {"path": "name", "message": "Required field missing"},
            {"path": "age", "message": "Value must be >= 0", "value": None},
        ]

    def test_unset_is_falsy_singleton(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert ValidationError("", "x").value is UNSET
