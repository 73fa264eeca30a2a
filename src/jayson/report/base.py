"""Shared report types and helpers."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import orjson

from jayson.exceptions import ReportFormatError
from jayson.models import ValidationResult

ROOT_LABEL = "(root)"


class ReportFormat(str, Enum):
    """Output formats for validation reports."""

    TERMINAL = "terminal"
    MARKDOWN = "markdown"
    HTML = "html"

    @classmethod
    def parse(cls, name: "str | ReportFormat") -> "ReportFormat":
        """Return the member for ``name`` or raise ReportFormatError."""
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            msg = f"expected one of: {choices}"
            raise ReportFormatError(msg, target=str(name)) from None

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]


_EXTENSIONS = {
    ReportFormat.TERMINAL: ".txt",
    ReportFormat.MARKDOWN: ".md",
    ReportFormat.HTML: ".html",
}


@dataclass(frozen=True)
class ReportOptions:
    """Report header options.

    Attributes:
        title: Heading text; each format has its own default
        file_path: Validated document shown in the header
        schema_path: Schema shown in the header
        timestamp: Include the generation date

    """

    title: str | None = None
    file_path: str | None = None
    schema_path: str | None = None
    timestamp: bool = True

    @property
    def has_metadata(self) -> bool:
        return bool(self.timestamp or self.file_path or self.schema_path)


@dataclass(frozen=True)
class SummaryCounts:
    files: int
    valid: int
    invalid: int
    errors: int

    @classmethod
    def of(cls, results: Mapping[str, ValidationResult]) -> "SummaryCounts":
        invalid = [r for r in results.values() if not r.valid]
        return cls(
            files=len(results),
            valid=len(results) - len(invalid),
            invalid=len(invalid),
            errors=sum(len(r.errors) for r in invalid),
        )


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("" if count == 1 else "s")


def display_path(path: str) -> str:
    return path or ROOT_LABEL


def format_value(value: Any, limit: int, quote_strings: bool = False) -> str:
    """Render an offending value, truncating long JSON to ``limit`` chars."""
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"' if quote_strings else value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict | list | tuple):
        try:
            text = orjson.dumps(value).decode()
        except TypeError:
            return "[Object]"
        return text if len(text) <= limit else text[: limit - 3] + "..."
    return str(value)
