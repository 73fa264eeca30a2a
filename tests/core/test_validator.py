"""Tests for the recursive validator."""

import pytest

from jayson.constants import PATTERN_CACHE_SIZE
from jayson.core import Validator, get_value_type, validate, validate_value
from jayson.core.validator import _compile
from jayson.exceptions import SchemaError
from jayson.models import ValidationError


class TestGetValueType:
    """Runtime JSON type detection."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            (True, "boolean"),
            (False, "boolean"),
            ([], "array"),
            ({}, "object"),
            ("x", "string"),
            (3, "integer"),
            (3.0, "integer"),
            (3.5, "number"),
        ],
    )
    def test_detects_json_type(self, value, expected):
        assert get_value_type(value) == expected

    def test_infinity_is_number(self):
        assert get_value_type(float("inf")) == "number"


class TestConcreteScenarios:
    """Behaviour documented for the validator's public contract."""

    def test_missing_required_field(self):
        schema = {
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        }

        result = validate({}, schema)

        assert result.valid is False
        assert result.to_dict() == {
            "valid": False,
            "errors": [{"path": "name", "message": "Required field missing"}],
        }

    def test_minimum_at_root(self):
        result = validate(-1, {"type": "integer", "minimum": 0})

        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].path == ""
        assert result.errors[0].message == "Value must be >= 0"
        assert result.errors[0].value == -1

    def test_array_item_type_mismatch(self):
        schema = {"type": "array", "items": {"type": "string"}}

        result = validate(["a", 1, "c"], schema)

        assert [(e.path, e.message) for e in result.errors] == [
            ("[1]", "Expected type string, got integer")
        ]


class TestObjects:
    """Required fields and nested properties."""

    def test_every_missing_required_field_reported(self):
        schema = {
            "type": "object",
            "properties": {
                "a": {"type": "string"},
                "b": {"type": "string"},
                "c": {"type": "string"},
            },
            "required": ["a", "b", "c"],
        }

        result = validate({"b": "x"}, schema)

        assert [e.path for e in result.errors] == ["a", "c"]
        assert all(e.message == "Required field missing" for e in result.errors)
        assert not any(e.has_value for e in result.errors)

    def test_nested_paths_are_dot_qualified(self):
        schema = {
            "type": "object",
            "properties": {
                "address": {
                    "type": "object",
                    "properties": {
                        "zip": {"type": "string", "pattern": "^[0-9]{5}$"}
                    },
                    "required": ["city"],
                }
            },
        }

        result = validate({"address": {"zip": "abc"}}, schema)

        assert [(e.path, e.message) for e in result.errors] == [
            ("address.city", "Required field missing"),
            ("address.zip", "Value does not match pattern: ^[0-9]{5}$"),
        ]

    def test_errors_follow_schema_declaration_order(self, user_schema):
        document = {"role": "guest", "user_name": "ab", "id": 0}

        result = validate(document, user_schema)

        assert [e.path for e in result.errors] == ["id", "user_name", "role"]

    def test_absent_optional_property_is_not_checked(self, user_schema):
        result = validate({"id": 1, "user_name": "alice"}, user_schema)

        assert result.valid
        assert result.errors == ()

    def test_undeclared_properties_are_ignored(self, user_schema):
        document = {"id": 1, "user_name": "alice", "extra": object()}

        assert validate(document, user_schema).valid

    def test_array_of_objects(self):
        schema = {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"n": {"type": "integer"}},
                "required": ["n"],
            },
        }

        result = validate([{"n": 1}, {}, {"n": "two"}], schema)

        assert [(e.path, e.message) for e in result.errors] == [
            ("[1].n", "Required field missing"),
            ("[2].n", "Expected type integer, got string"),
        ]

    def test_array_without_items_accepts_anything(self):
        assert validate([1, "a", None], {"type": "array"}).valid


class TestTypeChecks:
    """Type mismatches and the number policy."""

    def test_type_mismatch_short_circuits(self):
        schema = {
            "type": "string",
            "enum": ["a"],
            "minLength": 5,
            "pattern": "^x",
        }

        result = validate(42, schema)

        assert [e.message for e in result.errors] == [
            "Expected type string, got integer"
        ]

    def test_union_type(self):
        schema = {"type": ["string", "null"]}

        assert validate(None, schema).valid
        assert validate("x", schema).valid
        result = validate(1, schema)
        assert result.errors[0].message == (
            "Expected type string | null, got integer"
        )

    def test_boolean_is_not_integer(self):
        result = validate(True, {"type": "integer"})

        assert result.errors[0].message == "Expected type integer, got boolean"

    def test_number_rejects_integral_values_by_default(self):
        result = validate(5, {"type": "number"})

        assert not result.valid
        assert result.errors[0].message == "Expected type number, got integer"
        assert validate(5.5, {"type": "number"}).valid

    def test_relaxed_number_accepts_integers(self):
        validator = Validator(strict_number=False)

        assert validator.validate(5, {"type": "number"}).valid
        assert not validator.validate(True, {"type": "number"}).valid

    def test_integral_float_is_integer(self):
        assert validate(2.0, {"type": "integer"}).valid

    def test_no_type_is_unconstrained(self):
        assert validate({"any": 1}, {}).valid


class TestConstraints:
    """Enum, pattern, bounds and lengths."""

    def test_enum_message_lists_values(self):
        result = validate("guest", {"enum": ["admin", "user", 3]})

        assert result.errors[0].message == "Value must be one of: admin, user, 3"

    def test_enum_uses_json_equality(self):
        schema = {"enum": [1, {"a": [1, 2]}]}

        assert validate(1.0, schema).valid
        assert validate({"a": [1, 2]}, schema).valid
        assert not validate(True, schema).valid
        assert not validate({"a": [2, 1]}, schema).valid

    def test_enum_false_does_not_match_zero(self):
        assert not validate(0, {"enum": [False]}).valid

    def test_pattern_searches_anywhere(self):
        assert validate("abc123", {"type": "string", "pattern": "[0-9]+"}).valid

    def test_pattern_ignored_for_non_strings(self):
        assert validate(5, {"pattern": "^x$"}).valid

    def test_maximum(self):
        result = validate(11, {"type": "integer", "maximum": 10})

        assert result.errors[0].message == "Value must be <= 10"

    def test_string_lengths(self):
        short = validate("ab", {"type": "string", "minLength": 3})
        long = validate("abcdef", {"type": "string", "maxLength": 3})

        assert short.errors[0].message == "String length must be >= 3"
        assert long.errors[0].message == "String length must be <= 3"

    def test_multiple_constraints_fire_together(self):
        schema = {"type": "string", "enum": ["long-value"], "minLength": 5}

        result = validate("ab", schema)

        assert [e.message for e in result.errors] == [
            "Value must be one of: long-value",
            "String length must be >= 5",
        ]

    def test_invalid_pattern_raises(self):
        with pytest.raises(SchemaError, match="invalid regular expression"):
            validate("x", {"type": "string", "pattern": "(unclosed"})

    def test_non_string_pattern_raises(self):
        with pytest.raises(SchemaError, match="'pattern' must be a string"):
            validate("x", {"type": "string", "pattern": 5})

    def test_compiled_patterns_are_bounded(self):
        for index in range(PATTERN_CACHE_SIZE + 10):
            validate("a1", {"type": "string", "pattern": f"^a{index}"})

        assert _compile.cache_info().currsize <= PATTERN_CACHE_SIZE


class TestCombinators:
    """oneOf, anyOf and allOf."""

    def test_one_of_requires_exactly_one_match(self):
        schema = {"oneOf": [{"type": "integer"}, {"minimum": 0}]}

        both = validate(5, schema)
        one = validate(-5, schema)
        none = validate("x", {"oneOf": [{"type": "integer"}]})

        assert [e.message for e in both.errors] == [
            "Value must match exactly one of the oneOf schemas"
        ]
        assert one.valid
        assert not none.valid

    def test_one_of_skips_sibling_checks(self):
        schema = {"oneOf": [{"type": "string"}], "type": "integer"}

        assert validate("x", schema).valid

    def test_any_of(self):
        schema = {"anyOf": [{"type": "string"}, {"type": "null"}]}

        assert validate(None, schema).valid
        result = validate(1, schema)
        assert [e.message for e in result.errors] == [
            "Value must match at least one of the anyOf schemas"
        ]

    def test_branch_errors_are_discarded(self):
        schema = {
            "type": "object",
            "properties": {
                "v": {"anyOf": [{"type": "string", "minLength": 10}]}
            },
        }

        result = validate({"v": "x"}, schema)

        assert [(e.path, e.message) for e in result.errors] == [
            ("v", "Value must match at least one of the anyOf schemas")
        ]

    def test_all_of_reports_every_branch(self):
        schema = {
            "allOf": [
                {"type": "integer", "minimum": 10},
                {"type": "integer", "maximum": 0},
            ]
        }

        result = validate(5, schema)

        assert [e.message for e in result.errors] == [
            "Value must be >= 10",
            "Value must be <= 0",
        ]


class TestReferences:
    """Local $ref resolution."""

    def test_definition_reference(self):
        schema = {
            "type": "object",
            "properties": {"home": {"$ref": "#/definitions/address"}},
            "definitions": {
                "address": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                    "required": ["city"],
                }
            },
        }

        result = validate({"home": {}}, schema)

        assert [(e.path, e.message) for e in result.errors] == [
            ("home.city", "Required field missing")
        ]

    def test_recursive_schema_terminates(self):
        schema = {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "children": {"type": "array", "items": {"$ref": "#"}},
            },
        }
        document = {
            "name": "root",
            "children": [{"name": "a", "children": [{"name": 1}]}],
        }

        result = validate(document, schema)

        assert [(e.path, e.message) for e in result.errors] == [
            ("children[0].children[0].name", "Expected type string, got integer")
        ]

    def test_self_referencing_definition_does_not_loop(self):
        schema = {
            "$ref": "#/definitions/loop",
            "definitions": {"loop": {"$ref": "#/definitions/loop"}},
        }

        assert validate(1, schema).valid

    def test_unresolved_reference(self):
        result = validate(1, {"$ref": "#/definitions/missing"})

        assert [e.message for e in result.errors] == [
            "Unresolved reference: #/definitions/missing"
        ]

    def test_resolution_can_be_disabled(self):
        validator = Validator(resolve_refs=False)

        result = validator.validate(1, {"$ref": "#/definitions/missing"})

        assert result.valid


class TestModuleFunctions:
    """Module-level helpers and determinism."""

    def test_validate_value_appends_to_sink(self):
        errors: list[ValidationError] = []

        validate_value("x", {"type": "integer"}, "field", errors)
        validate_value(-1, {"minimum": 0}, "other", errors)

        assert [e.path for e in errors] == ["field", "other"]

    def test_repeated_validation_is_deterministic(self, user_schema):
        document = {"id": "1", "email": "nope", "tags": ["a", 2]}

        first = validate(document, user_schema)
        second = validate(document, user_schema)

        assert first == second
        assert not first.valid

    def test_malformed_schema_raises(self):
        with pytest.raises(SchemaError):
            validate(1, {"type": "integr"})
