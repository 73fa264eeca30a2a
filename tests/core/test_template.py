"""Tests for template generation."""

from jayson.core import generate_template, validate


class TestGenerateTemplate:
    """Root shapes and per-property defaults."""

    def test_enum_and_minimum(self):
        schema = {
            "type": "object",
            "properties": {
                "role": {"type": "string", "enum": ["admin", "user"]},
                "age": {"type": "integer", "minimum": 18},
            },
        }

        assert generate_template(schema) == {"role": "admin", "age": 18}

    def test_type_fallbacks(self):
        schema = {
            "type": "object",
            "properties": {
                "s": {"type": "string"},
                "n": {"type": "number"},
                "i": {"type": "integer"},
                "b": {"type": "boolean"},
                "a": {"type": "array", "items": {"type": "string"}},
                "o": {"type": "object"},
                "z": {"type": "null"},
                "u": {},
            },
        }

        assert generate_template(schema) == {
            "s": "",
            "n": 0,
            "i": 0,
            "b": False,
            "a": [],
            "o": {},
            "z": None,
            "u": None,
        }

    def test_default_wins_over_enum(self):
        schema = {
            "type": "object",
            "properties": {
                "role": {"enum": ["admin", "user"], "default": "user"},
                "note": {"type": "string", "default": None},
            },
        }

        assert generate_template(schema) == {"role": "user", "note": None}

    def test_nested_objects_recurse(self):
        schema = {
            "type": "object",
            "properties": {
                "address": {
                    "type": "object",
                    "properties": {
                        "city": {"type": "string"},
                        "geo": {
                            "type": "object",
                            "properties": {"lat": {"type": "number"}},
                        },
                    },
                }
            },
        }

        assert generate_template(schema) == {
            "address": {"city": "", "geo": {"lat": 0}}
        }

    def test_preserves_declaration_order(self, user_schema):
        template = generate_template(user_schema)

        assert list(template) == list(user_schema["properties"])

    def test_array_root_is_empty_list(self):
        schema = {"type": "array", "items": {"type": "string"}}

        assert generate_template(schema) == []

    def test_non_object_roots_are_empty_objects(self):
        assert generate_template({"type": "string"}) == {}
        assert generate_template({"type": "object"}) == {}
        assert generate_template({}) == {}

    def test_mutable_defaults_are_copied(self):
        schema = {
            "type": "object",
            "properties": {"tags": {"type": "array", "default": ["a"]}},
        }

        first = generate_template(schema)
        first["tags"].append("b")

        assert generate_template(schema) == {"tags": ["a"]}

    def test_template_passes_type_and_required_checks(self, user_schema):
        template = generate_template(user_schema)

        result = validate(template, user_schema)

        structural = [
            e
            for e in result.errors
            if e.message.startswith("Expected type")
            or e.message == "Required field missing"
        ]
        assert structural == []
