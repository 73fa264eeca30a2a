"""Plain-text reports for terminal output."""

from collections.abc import Mapping

from jayson.constants import REPORT_RULE_WIDTH, TERMINAL_VALUE_LIMIT
from jayson.models import ValidationError, ValidationResult
from jayson.report.base import (
    ReportOptions,
    SummaryCounts,
    display_path,
    format_value,
    plural,
)
from jayson.utils.datetime_utils import get_current_datetime_utc_iso

HEAVY_RULE = "=" * REPORT_RULE_WIDTH
LIGHT_RULE = "-" * REPORT_RULE_WIDTH


def _center(text: str) -> str:
    padding = max(0, (REPORT_RULE_WIDTH - len(text)) // 2)
    return " " * padding + text


def _header(title: str) -> list[str]:
    return [HEAVY_RULE, _center(title), HEAVY_RULE, ""]


def _format_error(error: ValidationError, index: int) -> list[str]:
    lines = [
        f"Error #{index}:",
        f"  Path:    {display_path(error.path)}",
        f"  Message: {error.message}",
    ]
    if error.has_value:
        value = format_value(
            error.value, TERMINAL_VALUE_LIMIT, quote_strings=True
        )
        lines.append(f"  Value:   {value}")
    return lines


def format_report(
    result: ValidationResult, options: ReportOptions | None = None
) -> str:
    """Format one validation result as a boxed plain-text report."""
    options = options or ReportOptions()
    lines = _header(options.title or "Validation Report")

    if options.timestamp:
        lines.append(f"Date: {get_current_datetime_utc_iso()}")
    if options.file_path:
        lines.append(f"File: {options.file_path}")
    if options.schema_path:
        lines.append(f"Schema: {options.schema_path}")
    if options.has_metadata:
        lines.append("")

    lines.append(LIGHT_RULE)
    if result.valid:
        lines.extend(["Status: VALID", "", "No validation errors found."])
    else:
        count = plural(len(result.errors), "error")
        lines.extend([f"Status: INVALID ({count})", LIGHT_RULE, ""])
        for index, error in enumerate(result.errors, start=1):
            lines.extend(_format_error(error, index))
            lines.append("")

    lines.append(HEAVY_RULE)
    return "\n".join(lines)


def format_summary(
    results: Mapping[str, ValidationResult],
    options: ReportOptions | None = None,
) -> str:
    """Format pass/fail lines and totals for several validated files."""
    options = options or ReportOptions()
    counts = SummaryCounts.of(results)
    lines = _header(options.title or "Validation Summary")

    if options.timestamp:
        lines.extend([f"Date: {get_current_datetime_utc_iso()}", ""])

    lines.extend(
        [
            LIGHT_RULE,
            f"Files Validated: {counts.files}",
            f"  Valid:   {counts.valid}",
            f"  Invalid: {counts.invalid}",
            f"  Total Errors: {counts.errors}",
            LIGHT_RULE,
            "",
        ]
    )
    for file_path, result in results.items():
        if result.valid:
            lines.append(f"[PASS] {file_path}")
        else:
            errors = plural(len(result.errors), "error")
            lines.append(f"[FAIL] {file_path} ({errors})")

    lines.extend(["", HEAVY_RULE])
    return "\n".join(lines)
