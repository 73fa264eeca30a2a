"""Identifier transforms used by the code generators."""

import re

_BOUNDARY = re.compile(r"[-_](.)")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]")
_WHITESPACE = re.compile(r"\s+")


def to_pascal_case(name: str) -> str:
    """Convert ``user_profile`` / ``my-component`` to ``UserProfile``."""
    joined = _BOUNDARY.sub(lambda m: m.group(1).upper(), name)
    return joined[:1].upper() + joined[1:]


def to_camel_case(name: str) -> str:
    """Convert ``user_profile`` / ``MyComponent`` to ``userProfile``."""
    joined = _BOUNDARY.sub(lambda m: m.group(1).upper(), name)
    return joined[:1].lower() + joined[1:]


def is_identifier(name: str) -> bool:
    """Return True if ``name`` can be written unquoted in TS/JS source."""
    return bool(_IDENTIFIER.match(name))


def type_name_from_title(title: str) -> str:
    """Derive an exported type name from a schema title.

    Whitespace counts as a word boundary; characters that cannot appear
    in an identifier are dropped. ``"user profile"`` -> ``UserProfile``.
    """
    name = _NON_IDENTIFIER.sub("", to_pascal_case(_WHITESPACE.sub("_", title)))
    if name[:1].isdigit():
        name = f"_{name}"
    return name
