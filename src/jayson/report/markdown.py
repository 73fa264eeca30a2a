"""Markdown reports."""

from collections.abc import Mapping

from jayson.constants import MARKDOWN_VALUE_LIMIT
from jayson.models import ValidationError, ValidationResult
from jayson.report.base import (
    ReportOptions,
    SummaryCounts,
    display_path,
    format_value,
)
from jayson.utils.datetime_utils import get_current_datetime_utc_iso


def _format_error(error: ValidationError, index: int) -> list[str]:
    lines = [
        f"### Error {index}",
        "",
        f"- **Path:** `{display_path(error.path)}`",
        f"- **Message:** {error.message}",
    ]
    if error.has_value:
        value = format_value(error.value, MARKDOWN_VALUE_LIMIT)
        lines.append(f"- **Value:** `{value}`")
    return lines


def format_report(
    result: ValidationResult, options: ReportOptions | None = None
) -> str:
    """Format one validation result as a Markdown document."""
    options = options or ReportOptions()
    lines = [f"# {options.title or 'Validation Report'}", ""]

    if options.has_metadata:
        lines.extend(["| Property | Value |", "|----------|-------|"])
        if options.timestamp:
            lines.append(f"| Date | {get_current_datetime_utc_iso()} |")
        if options.file_path:
            lines.append(f"| File | `{options.file_path}` |")
        if options.schema_path:
            lines.append(f"| Schema | `{options.schema_path}` |")
        lines.append("")

    if result.valid:
        lines.extend(["## Status: VALID", "", "> No validation errors found."])
    else:
        count = len(result.errors)
        noun = "error" if count == 1 else "errors"
        lines.extend(
            [
                "## Status: INVALID",
                "",
                f"Found **{count}** validation {noun}.",
                "",
                "## Errors",
                "",
            ]
        )
        for index, error in enumerate(result.errors, start=1):
            lines.extend(_format_error(error, index))
            lines.append("")

    return "\n".join(lines)


def format_summary(
    results: Mapping[str, ValidationResult],
    options: ReportOptions | None = None,
) -> str:
    """Format a Markdown summary with a results table and error details."""
    options = options or ReportOptions()
    counts = SummaryCounts.of(results)
    lines = [f"# {options.title or 'Validation Summary'}", ""]

    if options.timestamp:
        lines.extend([f"*Generated: {get_current_datetime_utc_iso()}*", ""])

    lines.extend(
        [
            "## Summary",
            "",
            "| Metric | Count |",
            "|--------|-------|",
            f"| Files Validated | {counts.files} |",
            f"| Valid | {counts.valid} |",
            f"| Invalid | {counts.invalid} |",
            f"| Total Errors | {counts.errors} |",
            "",
            "## Results",
            "",
            "| Status | File | Errors |",
            "|--------|------|--------|",
        ]
    )
    for file_path, result in results.items():
        status = "PASS" if result.valid else "FAIL"
        error_count = "-" if result.valid else str(len(result.errors))
        lines.append(f"| {status} | `{file_path}` | {error_count} |")
    lines.append("")

    failed = [(path, r) for path, r in results.items() if not r.valid]
    if failed:
        lines.extend(["## Detailed Errors", ""])
        for file_path, result in failed:
            lines.extend([f"### {file_path}", ""])
            lines.extend(
                f"{index}. **`{display_path(error.path)}`**: {error.message}"
                for index, error in enumerate(result.errors, start=1)
            )
            lines.append("")

    return "\n".join(lines)
