"""Tests for identifier transforms."""

import pytest

from jayson.codegen.naming import (
    is_identifier,
    to_camel_case,
    to_pascal_case,
    type_name_from_title,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("user_profile", "UserProfile"),
        ("my-component", "MyComponent"),
        ("address", "Address"),
        ("already_Pascal", "AlreadyPascal"),
        ("", ""),
    ],
)
def test_to_pascal_case(name, expected):
    assert to_pascal_case(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("user_name", "userName"),
        ("first-name", "firstName"),
        ("MyComponent", "myComponent"),
        ("id", "id"),
    ],
)
def test_to_camel_case(name, expected):
    assert to_camel_case(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("userName", True),
        ("$ref", True),
        ("_private", True),
        ("user-name", False),
        ("1st", False),
        ("with space", False),
    ],
)
def test_is_identifier(name, expected):
    assert is_identifier(name) is expected


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("User", "User"),
        ("user profile", "UserProfile"),
        ("Order (v2)", "Orderv2"),
        ("3d model", "_3dModel"),
        ("!!!", ""),
    ],
)
def test_type_name_from_title(title, expected):
    assert type_name_from_title(title) == expected
