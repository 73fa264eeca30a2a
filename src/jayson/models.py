"""Schema and validation data model.

``SchemaNode`` is the single node shape shared by the validator, the
template generator and the code generators. Root schemas and nested
property schemas use the same class; fields a node does not declare are
``None`` (or empty for the mapping fields).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jayson.exceptions import SchemaError


class SchemaType(str, Enum):
    """JSON Schema primitive type names."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"

    @classmethod
    def parse(cls, name: Any) -> "SchemaType":
        """Return the member for ``name`` or raise SchemaError."""
        try:
            return cls(name)
        except ValueError:
            msg = f"Unknown type {name!r}"
            raise SchemaError(msg) from None


class _Unset:
    """Marker for an absent optional value (distinct from JSON null)."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def _parse_types(raw: Any) -> tuple[SchemaType, ...] | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return (SchemaType.parse(raw),)
    if isinstance(raw, list) and raw:
        return tuple(SchemaType.parse(name) for name in raw)
    msg = f"'type' must be a string or non-empty list, got {raw!r}"
    raise SchemaError(msg)


def _parse_children(raw: Any, keyword: str) -> dict[str, "SchemaNode"]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        msg = f"'{keyword}' must be an object"
        raise SchemaError(msg)
    return {name: SchemaNode.from_dict(sub) for name, sub in raw.items()}


def _parse_branches(raw: Any, keyword: str) -> tuple["SchemaNode", ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        msg = f"'{keyword}' must be an array of schemas"
        raise SchemaError(msg)
    return tuple(SchemaNode.from_dict(sub) for sub in raw)


def _parse_number(raw: Any, keyword: str) -> int | float | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        msg = f"'{keyword}' must be a number"
        raise SchemaError(msg)
    return raw


def _parse_string(raw: Any, keyword: str) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        msg = f"'{keyword}' must be a string"
        raise SchemaError(msg)
    return raw


@dataclass(frozen=True, eq=False)
class SchemaNode:
    """One JSON Schema node, either a document root or a nested schema.

    Nodes are immutable once parsed and compare by identity.
    """

    types: tuple[SchemaType, ...] | None = None
    properties: dict[str, "SchemaNode"] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    items: "SchemaNode | None" = None
    enum: tuple[Any, ...] | None = None
    pattern: str | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    default: Any = UNSET
    one_of: tuple["SchemaNode", ...] | None = None
    any_of: tuple["SchemaNode", ...] | None = None
    all_of: tuple["SchemaNode", ...] | None = None
    ref: str | None = None
    title: str | None = None
    description: str | None = None
    format: str | None = None
    definitions: dict[str, "SchemaNode"] = field(default_factory=dict)
    defs: dict[str, "SchemaNode"] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, schema: Any) -> "SchemaNode":
        """Parse a decoded JSON Schema document into a node tree.

        Args:
            schema: Mapping decoded from schema JSON

        Returns:
            Root SchemaNode

        Raises:
            SchemaError: If the schema is not an object or a keyword has
                the wrong shape

        """
        if isinstance(schema, SchemaNode):
            return schema
        if not isinstance(schema, Mapping):
            msg = f"Schema must be an object, got {type(schema).__name__}"
            raise SchemaError(msg)

        items = schema.get("items")
        if items is not None and not isinstance(items, Mapping):
            msg = "'items' must be a single schema object"
            raise SchemaError(msg)

        required = schema.get("required", [])
        if not isinstance(required, list):
            msg = "'required' must be an array of property names"
            raise SchemaError(msg)

        enum = schema.get("enum")
        if enum is not None and not isinstance(enum, list):
            msg = "'enum' must be an array"
            raise SchemaError(msg)

        return cls(
            types=_parse_types(schema.get("type")),
            properties=_parse_children(schema.get("properties"), "properties"),
            required=tuple(required),
            items=cls.from_dict(items) if items is not None else None,
            enum=tuple(enum) if enum is not None else None,
            pattern=_parse_string(schema.get("pattern"), "pattern"),
            minimum=_parse_number(schema.get("minimum"), "minimum"),
            maximum=_parse_number(schema.get("maximum"), "maximum"),
            min_length=_parse_number(schema.get("minLength"), "minLength"),
            max_length=_parse_number(schema.get("maxLength"), "maxLength"),
            default=schema.get("default", UNSET),
            one_of=_parse_branches(schema.get("oneOf"), "oneOf"),
            any_of=_parse_branches(schema.get("anyOf"), "anyOf"),
            all_of=_parse_branches(schema.get("allOf"), "allOf"),
            ref=_parse_string(schema.get("$ref"), "$ref"),
            title=schema.get("title"),
            description=schema.get("description"),
            format=schema.get("format"),
            definitions=_parse_children(
                schema.get("definitions"), "definitions"
            ),
            defs=_parse_children(schema.get("$defs"), "$defs"),
            raw=schema,
        )

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET

    @property
    def primary_type(self) -> SchemaType | None:
        """First declared type, or None when unconstrained."""
        return self.types[0] if self.types else None

    def declares(self, schema_type: SchemaType) -> bool:
        """Return True if ``schema_type`` is the node's only declared type.

        Structural recursion (properties, items) is tied to a single
        declared type, mirroring how ``type: "object"`` is written in
        practice.
        """
        return self.types == (schema_type,)

    def is_nested_object(self) -> bool:
        """Object node with its own properties (hoisted by codegen)."""
        return self.declares(SchemaType.OBJECT) and bool(self.properties)


@dataclass(frozen=True)
class ValidationError:
    """A single data validation failure.

    ``value`` is UNSET for errors that have no offending value, such as a
    missing required field.
    """

    path: str
    message: str
    value: Any = UNSET

    @property
    def has_value(self) -> bool:
        return self.value is not UNSET

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping, omitting an absent value."""
        data: dict[str, Any] = {"path": self.path, "message": self.message}
        if self.has_value:
            data["value"] = self.value
        return data


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one document."""

    valid: bool
    errors: tuple[ValidationError, ...] = ()

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> "ValidationResult":
        return cls(valid=not errors, errors=tuple(errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
        }


@dataclass(frozen=True)
class SchemaInfo:
    """Summary of a schema's top-level structure."""

    title: str
    description: str
    root_type: str
    required_fields: list[str]
    properties: list[str]
