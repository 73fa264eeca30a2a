"""Tests for local reference resolution."""

import pytest

from jayson.core import ReferenceResolver, ref_name
from jayson.models import SchemaNode


@pytest.fixture
def root():
    return SchemaNode.from_dict(
        {
            "type": "object",
            "properties": {"id": {"type": "integer"}},
            "definitions": {"Address": {"type": "object"}},
            "$defs": {"Tag": {"type": "string"}},
            "anyOf": [{"type": "object"}, {"type": "null"}],
        }
    )


class TestRefName:
    @pytest.mark.parametrize(
        ("ref", "expected"),
        [
            ("#/definitions/Address", "Address"),
            ("#/$defs/user_profile", "user_profile"),
            ("other.json#/definitions/Item/", "Item"),
            ("#", "#"),
        ],
    )
    def test_last_segment(self, ref, expected):
        assert ref_name(ref) == expected


class TestReferenceResolver:
    def test_root_reference(self, root):
        resolver = ReferenceResolver(root)

        assert resolver.resolve("#") is root

    def test_definitions_and_defs(self, root):
        resolver = ReferenceResolver(root)

        assert resolver.resolve("#/definitions/Address") is (
            root.definitions["Address"]
        )
        assert resolver.resolve("#/$defs/Tag") is root.defs["Tag"]

    def test_json_pointer(self, root):
        resolver = ReferenceResolver(root)

        node = resolver.resolve("#/properties/id")
        branch = resolver.resolve("#/anyOf/1")

        assert node.primary_type.value == "integer"
        assert branch.primary_type.value == "null"

    def test_pointer_results_are_memoized(self, root):
        resolver = ReferenceResolver(root)

        assert resolver.resolve("#/properties/id") is resolver.resolve(
            "#/properties/id"
        )

    @pytest.mark.parametrize(
        "ref",
        [
            "#/definitions/Missing",
            "#/anyOf/9",
            "#/type",
            "http://example.com/schema.json",
        ],
    )
    def test_unresolvable(self, root, ref):
        assert ReferenceResolver(root).resolve(ref) is None
