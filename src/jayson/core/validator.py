"""Recursive validation of JSON values against a schema tree.

Evaluation order at each node:

1. ``$ref``: validate against the referenced node (or skip when
   reference resolution is disabled).
2. ``oneOf`` / ``anyOf`` / ``allOf``: evaluated instead of the plain
   checks on the same node.
3. ``type``: a mismatch is reported once and ends checks on the node.
4. ``enum``, ``pattern``, numeric bounds, string length: independent,
   each may add its own error.
5. Object properties and array items: recursion with a qualified path.

Errors are appended to a shared list in depth-first order. Data problems
never raise; a malformed schema (bad regex, unknown type) raises
``SchemaError``.
"""

import math
import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

import orjson

from jayson.constants import PATTERN_CACHE_SIZE
from jayson.core.references import ReferenceResolver
from jayson.exceptions import SchemaError
from jayson.logger import get_logger
from jayson.models import (
    SchemaNode,
    SchemaType,
    ValidationError,
    ValidationResult,
)

logger = get_logger(__name__)

MSG_ONE_OF = "Value must match exactly one of the oneOf schemas"
MSG_ANY_OF = "Value must match at least one of the anyOf schemas"
MSG_REQUIRED = "Required field missing"


def get_value_type(value: Any) -> str:
    """Return the JSON type name of a decoded value.

    Integral numbers, including floats such as ``3.0``, are "integer";
    only non-integral numbers are "number". Booleans are never numbers.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return "integer"
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def format_literal(value: Any) -> str:
    """Render a literal the way it appears in error messages."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    try:
        return orjson.dumps(value).decode()
    except TypeError:
        return str(value)


def json_equal(left: Any, right: Any) -> bool:
    """Compare two decoded JSON values; ``True`` never equals ``1``."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and (
            left is right
        )
    if _is_number(left) and _is_number(right):
        return left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(
            json_equal(left[key], right[key]) for key in left
        )
    if isinstance(left, list | tuple) and isinstance(right, list | tuple):
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right, strict=True)
        )
    return type(left) is type(right) and left == right


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        msg = f"invalid regular expression: {e}"
        raise SchemaError(msg, target=pattern) from e


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


class _Traversal:
    """Per-call state: reference resolver and the active ``$ref`` stack."""

    def __init__(self, root: SchemaNode) -> None:
        self.resolver = ReferenceResolver(root)
        self.active_refs: set[tuple[str, str]] = set()


class Validator:
    """Validate documents against schemas.

    Args:
        resolve_refs: Resolve local ``$ref`` pointers. When False a
            ``$ref`` node passes without checks.
        strict_number: Treat "number" as non-integral numbers only. When
            False, "number" also accepts integers.

    """

    def __init__(
        self,
        *,
        resolve_refs: bool = True,
        strict_number: bool = True,
    ) -> None:
        self.resolve_refs = resolve_refs
        self.strict_number = strict_number

    def validate(self, document: Any, schema: Any) -> ValidationResult:
        """Validate ``document`` against ``schema`` (mapping or node).

        Raises:
            SchemaError: If the schema is malformed

        """
        root = SchemaNode.from_dict(schema)
        errors: list[ValidationError] = []
        self.validate_value(document, root, "", errors, _Traversal(root))
        logger.debug(
            "Validation finished with %d error(s) against %s",
            len(errors),
            root.title or "untitled schema",
        )
        return ValidationResult.from_errors(errors)

    def validate_value(
        self,
        value: Any,
        node: SchemaNode,
        path: str,
        errors: list[ValidationError],
        traversal: _Traversal | None = None,
    ) -> None:
        """Validate one value, appending failures to ``errors``.

        Args:
            value: Decoded JSON value
            node: Schema node to check against
            path: Location of ``value`` in the document, "" for the root
            errors: Sink that receives ValidationError entries
            traversal: Reference state; ``node`` is treated as the root
                when omitted

        """
        if traversal is None:
            traversal = _Traversal(node)

        if node.ref is not None:
            self._check_ref(value, node.ref, path, errors, traversal)
            return

        if node.one_of is not None:
            matches = sum(
                1
                for branch in node.one_of
                if self._matches(value, branch, path, traversal)
            )
            if matches != 1:
                errors.append(ValidationError(path, MSG_ONE_OF, value))
            return

        if node.any_of is not None:
            if not any(
                self._matches(value, branch, path, traversal)
                for branch in node.any_of
            ):
                errors.append(ValidationError(path, MSG_ANY_OF, value))
            return

        if node.all_of is not None:
            for branch in node.all_of:
                self.validate_value(value, branch, path, errors, traversal)
            return

        if node.types is not None and not self._type_matches(
            value, node.types
        ):
            declared = " | ".join(t.value for t in node.types)
            errors.append(
                ValidationError(
                    path,
                    f"Expected type {declared}, got {get_value_type(value)}",
                    value,
                )
            )
            return

        self._check_constraints(value, node, path, errors)

        if node.declares(SchemaType.OBJECT) and isinstance(value, Mapping):
            self._check_object(value, node, path, errors, traversal)
        elif (
            node.declares(SchemaType.ARRAY)
            and isinstance(value, list | tuple)
            and node.items is not None
        ):
            for index, item in enumerate(value):
                self.validate_value(
                    item, node.items, f"{path}[{index}]", errors, traversal
                )

    def _check_ref(
        self,
        value: Any,
        ref: str,
        path: str,
        errors: list[ValidationError],
        traversal: _Traversal,
    ) -> None:
        if not self.resolve_refs:
            return

        target = traversal.resolver.resolve(ref)
        if target is None:
            errors.append(
                ValidationError(path, f"Unresolved reference: {ref}", value)
            )
            return

        # Re-entering the same reference at the same path is a cycle
        key = (ref, path)
        if key in traversal.active_refs:
            return
        traversal.active_refs.add(key)
        try:
            self.validate_value(value, target, path, errors, traversal)
        finally:
            traversal.active_refs.discard(key)

    def _matches(
        self,
        value: Any,
        branch: SchemaNode,
        path: str,
        traversal: _Traversal,
    ) -> bool:
        attempt: list[ValidationError] = []
        self.validate_value(value, branch, path, attempt, traversal)
        return not attempt

    def _type_matches(
        self, value: Any, declared: tuple[SchemaType, ...]
    ) -> bool:
        actual = get_value_type(value)
        if any(t.value == actual for t in declared):
            return True
        return (
            not self.strict_number
            and actual == SchemaType.INTEGER.value
            and SchemaType.NUMBER in declared
        )

    def _check_constraints(
        self,
        value: Any,
        node: SchemaNode,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        if node.enum is not None and not any(
            json_equal(value, allowed) for allowed in node.enum
        ):
            allowed = ", ".join(format_literal(v) for v in node.enum)
            errors.append(
                ValidationError(path, f"Value must be one of: {allowed}", value)
            )

        if node.pattern is not None and isinstance(value, str):
            if _compile(node.pattern).search(value) is None:
                errors.append(
                    ValidationError(
                        path,
                        f"Value does not match pattern: {node.pattern}",
                        value,
                    )
                )

        if _is_number(value):
            if node.minimum is not None and value < node.minimum:
                errors.append(
                    ValidationError(
                        path,
                        f"Value must be >= {format_literal(node.minimum)}",
                        value,
                    )
                )
            if node.maximum is not None and value > node.maximum:
                errors.append(
                    ValidationError(
                        path,
                        f"Value must be <= {format_literal(node.maximum)}",
                        value,
                    )
                )

        if isinstance(value, str):
            if node.min_length is not None and len(value) < node.min_length:
                errors.append(
                    ValidationError(
                        path,
                        "String length must be >= "
                        f"{format_literal(node.min_length)}",
                        value,
                    )
                )
            if node.max_length is not None and len(value) > node.max_length:
                errors.append(
                    ValidationError(
                        path,
                        "String length must be <= "
                        f"{format_literal(node.max_length)}",
                        value,
                    )
                )

    def _check_object(
        self,
        value: Mapping[str, Any],
        node: SchemaNode,
        path: str,
        errors: list[ValidationError],
        traversal: _Traversal,
    ) -> None:
        for name in node.required:
            if name not in value:
                errors.append(ValidationError(_join(path, name), MSG_REQUIRED))

        for name, prop in node.properties.items():
            if name in value:
                self.validate_value(
                    value[name], prop, _join(path, name), errors, traversal
                )


_default_validator = Validator()


def validate(document: Any, schema: Any) -> ValidationResult:
    """Validate ``document`` against ``schema`` with default settings.

    Example:
        >>> schema = {"type": "integer", "minimum": 0}
        >>> validate(-1, schema).errors[0].message
        'Value must be >= 0'

    """
    return _default_validator.validate(document, schema)


def validate_value(
    value: Any,
    schema: Any,
    path: str,
    errors: list[ValidationError],
) -> None:
    """Validate a single value at ``path`` into an existing error list."""
    _default_validator.validate_value(
        value, SchemaNode.from_dict(schema), path, errors
    )
