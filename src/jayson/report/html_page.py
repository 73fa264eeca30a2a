"""Standalone HTML reports with inline styles.

Every piece of user-supplied text (title, paths, messages, values) is
HTML-escaped.
"""

from collections.abc import Mapping
from html import escape

from jayson.constants import HTML_VALUE_LIMIT
from jayson.models import ValidationError, ValidationResult
from jayson.report.base import (
    ReportOptions,
    SummaryCounts,
    display_path,
    format_value,
    plural,
)
from jayson.utils.datetime_utils import get_current_datetime_utc_iso

PASS_COLOR = "#22c55e"
FAIL_COLOR = "#ef4444"
CODE_STYLE = "background: #f3f4f6; padding: 2px 6px; border-radius: 3px;"
H2_STYLE = "font-size: 18px; margin: 24px 0 16px 0; color: #111827;"
CELL_STYLE = "padding: 10px; border-bottom: 1px solid #e5e7eb;"


def _open_page(title: str, max_width: int) -> list[str]:
    return [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '    <meta charset="UTF-8">',
        '    <meta name="viewport" content="width=device-width, '
        'initial-scale=1.0">',
        f"    <title>{escape(title)}</title>",
        "</head>",
        '<body style="font-family: -apple-system, \'Segoe UI\', Roboto, '
        f"sans-serif; max-width: {max_width}px; margin: 0 auto; "
        'padding: 20px; background: #f9fafb; color: #1f2937;">',
        '    <div style="background: white; border-radius: 8px; '
        'padding: 24px;">',
        '        <h1 style="margin: 0 0 16px 0; font-size: 24px;">'
        f"{escape(title)}</h1>",
    ]


def _close_page() -> list[str]:
    return ["    </div>", "</body>", "</html>"]


def _code(text: str) -> str:
    return f'<code style="{CODE_STYLE}">{escape(text)}</code>'


def _format_error(error: ValidationError, index: int) -> list[str]:
    lines = [
        f'        <div style="border-left: 4px solid {FAIL_COLOR}; '
        'background: #fef2f2; padding: 12px 16px; margin-bottom: 12px;">',
        f'            <div style="font-weight: 600;">Error #{index}</div>',
        "            <div><strong>Path:</strong> "
        f"{_code(display_path(error.path))}</div>",
        "            <div><strong>Message:</strong> "
        f"{escape(error.message)}</div>",
    ]
    if error.has_value:
        value = format_value(error.value, HTML_VALUE_LIMIT)
        lines.append(
            f"            <div><strong>Value:</strong> {_code(value)}</div>"
        )
    lines.append("        </div>")
    return lines


def format_report(
    result: ValidationResult, options: ReportOptions | None = None
) -> str:
    """Format one validation result as an HTML page."""
    options = options or ReportOptions()
    lines = _open_page(options.title or "Validation Report", 800)

    if options.has_metadata:
        lines.append(
            '        <div style="background: #f3f4f6; border-radius: 6px; '
            'padding: 12px; margin-bottom: 20px;">'
        )
        if options.timestamp:
            lines.append(
                "            <div><strong>Date:</strong> "
                f"{get_current_datetime_utc_iso()}</div>"
            )
        if options.file_path:
            lines.append(
                "            <div><strong>File:</strong> "
                f"{_code(options.file_path)}</div>"
            )
        if options.schema_path:
            lines.append(
                "            <div><strong>Schema:</strong> "
                f"{_code(options.schema_path)}</div>"
            )
        lines.append("        </div>")

    color = PASS_COLOR if result.valid else FAIL_COLOR
    status = "VALID" if result.valid else "INVALID"
    if result.valid:
        detail = "No validation errors found."
    else:
        detail = f"Found {plural(len(result.errors), 'validation error')}."
    lines.extend(
        [
            f'        <div style="border: 1px solid {color}; '
            'border-radius: 6px; padding: 16px; margin-bottom: 20px;">',
            f'            <span style="background: {color}; color: white; '
            f'padding: 4px 12px; font-weight: 600;">{status}</span>',
            f'            <p style="margin: 12px 0 0 0;">{detail}</p>',
            "        </div>",
        ]
    )

    if result.errors:
        lines.append(f'        <h2 style="{H2_STYLE}">Errors</h2>')
        for index, error in enumerate(result.errors, start=1):
            lines.extend(_format_error(error, index))

    lines.extend(_close_page())
    return "\n".join(lines)


def _stat(label: str, value: int, color: str) -> str:
    return (
        '            <div style="background: #f3f4f6; padding: 16px; '
        'border-radius: 6px; text-align: center;">'
        f'<div style="font-size: 24px; font-weight: 700; color: {color};">'
        f"{value}</div>"
        '<div style="font-size: 12px; text-transform: uppercase;">'
        f"{label}</div></div>"
    )


def format_summary(
    results: Mapping[str, ValidationResult],
    options: ReportOptions | None = None,
) -> str:
    """Format an HTML summary page for several validated files."""
    options = options or ReportOptions()
    counts = SummaryCounts.of(results)
    lines = _open_page(options.title or "Validation Summary", 900)

    if options.timestamp:
        lines.append(
            '        <p style="color: #6b7280; font-size: 14px;">'
            f"Generated: {get_current_datetime_utc_iso()}</p>"
        )

    lines.extend(
        [
            f'        <h2 style="{H2_STYLE}">Summary</h2>',
            '        <div style="display: grid; '
            'grid-template-columns: repeat(4, 1fr); gap: 16px;">',
            _stat("Files", counts.files, "#111827"),
            _stat("Valid", counts.valid, PASS_COLOR),
            _stat("Invalid", counts.invalid, FAIL_COLOR),
            _stat("Errors", counts.errors, "#ca8a04"),
            "        </div>",
            f'        <h2 style="{H2_STYLE}">Results</h2>',
            '        <table style="width: 100%; border-collapse: collapse;">',
            "            <thead><tr><th>Status</th><th>File</th>"
            "<th>Errors</th></tr></thead>",
            "            <tbody>",
        ]
    )
    for file_path, result in results.items():
        color = PASS_COLOR if result.valid else FAIL_COLOR
        status = "PASS" if result.valid else "FAIL"
        error_count = "-" if result.valid else str(len(result.errors))
        lines.append(
            f'                <tr><td style="{CELL_STYLE}">'
            f'<span style="background: {color}; color: white; '
            f'padding: 2px 8px;">{status}</span></td>'
            f'<td style="{CELL_STYLE}">{_code(file_path)}</td>'
            f'<td style="{CELL_STYLE} text-align: right;">{error_count}</td>'
            "</tr>"
        )
    lines.extend(["            </tbody>", "        </table>"])

    failed = [(path, r) for path, r in results.items() if not r.valid]
    if failed:
        lines.append(f'        <h2 style="{H2_STYLE}">Detailed Errors</h2>')
        for file_path, result in failed:
            lines.append(f"        <h3>{_code(file_path)}</h3>")
            lines.extend(
                f'        <div style="border-left: 3px solid {FAIL_COLOR}; '
                f'padding: 8px 12px;"><strong>{index}.</strong> '
                f"{_code(display_path(error.path))}: "
                f"{escape(error.message)}</div>"
                for index, error in enumerate(result.errors, start=1)
            )

    lines.extend(_close_page())
    return "\n".join(lines)
