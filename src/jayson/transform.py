"""Helpers for reshaping decoded JSON data."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def get_nested_value(obj: Any, path: str) -> Any:
    """Follow a dotted path through objects and arrays.

    Numeric segments index into arrays. Returns None when any segment is
    missing.

    Example:
        >>> get_nested_value({"user": {"tags": ["a", "b"]}}, "user.tags.1")
        'b'

    """
    current = obj
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return None
            current = current[part]
        elif isinstance(current, list) and part.isdigit():
            index = int(part)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def extract_fields(data: Any, fields: Iterable[str]) -> list[dict[str, Any]]:
    """Project each record onto ``fields`` (dotted paths allowed).

    A single object is treated as a one-record list.
    """
    records = data if isinstance(data, list) else [data]
    fields = list(fields)
    return [
        {field: get_nested_value(record, field) for field in fields}
        for record in records
    ]


def transform_data(
    data: Iterable[T], transformer: Callable[[T, int], R]
) -> list[R]:
    """Apply ``transformer(item, index)`` to every item."""
    return [transformer(item, index) for index, item in enumerate(data)]


def filter_data(data: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    return [item for item in data if predicate(item)]
