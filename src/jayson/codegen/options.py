"""Options and result types for code generation."""

from dataclasses import dataclass

from jayson.constants import DEFAULT_INDENT_SIZE
from jayson.utils.datetime_utils import get_current_datetime_utc_iso


@dataclass(frozen=True)
class GenerateOptions:
    """Code generation options.

    Attributes:
        export_name: Name of the exported type/class. Defaults to the
            PascalCase schema title.
        include_descriptions: Emit JSDoc comments from ``description``.
        indent_size: Spaces per indentation level.
        include_timestamp: Emit a ``Generated:`` line in the file header.

    """

    export_name: str | None = None
    include_descriptions: bool = True
    indent_size: int = DEFAULT_INDENT_SIZE
    include_timestamp: bool = True

    @property
    def indent(self) -> str:
        return " " * self.indent_size


@dataclass(frozen=True)
class GeneratedSources:
    """TypeScript declaration and JavaScript class generated together."""

    type_source: str
    class_source: str


def doc_comment(text: str) -> str:
    """Escape ``text`` so it cannot close a block comment."""
    return text.replace("*/", "*\\/")


def file_header(
    summary: str,
    title: str | None,
    options: GenerateOptions,
    extra: tuple[str, ...] = (),
) -> list[str]:
    """Build the JSDoc block that opens a generated file."""
    lines = ["/**", f" * {summary}"]
    if options.include_timestamp:
        lines.append(f" * Generated: {get_current_datetime_utc_iso()}")
    if title:
        lines.append(f" * Schema: {doc_comment(title)}")
    lines.extend(f" * {line}" for line in extra)
    lines.extend([" */", ""])
    return lines
