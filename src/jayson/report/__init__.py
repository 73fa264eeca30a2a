"""Validation reports in terminal, Markdown and HTML formats."""

from collections.abc import Mapping
from pathlib import Path

from jayson.logger import get_logger
from jayson.models import ValidationResult
from jayson.report import html_page, markdown, terminal
from jayson.report.base import ReportFormat, ReportOptions

logger = get_logger(__name__)

_FORMATTERS = {
    ReportFormat.TERMINAL: terminal,
    ReportFormat.MARKDOWN: markdown,
    ReportFormat.HTML: html_page,
}


def format_report(
    result: ValidationResult,
    report_format: ReportFormat | str = ReportFormat.TERMINAL,
    options: ReportOptions | None = None,
) -> str:
    """Render one validation result.

    Raises:
        ReportFormatError: If ``report_format`` is not a known format

    """
    formatter = _FORMATTERS[ReportFormat.parse(report_format)]
    return formatter.format_report(result, options)


def format_summary(
    results: Mapping[str, ValidationResult],
    report_format: ReportFormat | str = ReportFormat.TERMINAL,
    options: ReportOptions | None = None,
) -> str:
    """Render a summary of results keyed by file path.

    Raises:
        ReportFormatError: If ``report_format`` is not a known format

    """
    formatter = _FORMATTERS[ReportFormat.parse(report_format)]
    return formatter.format_summary(results, options)


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote report %s", path)
    return path


def write_report(
    result: ValidationResult,
    output_path: Path | str,
    report_format: ReportFormat | str = ReportFormat.TERMINAL,
    options: ReportOptions | None = None,
) -> Path:
    """Render ``result`` and write it to ``output_path``."""
    return _write(
        Path(output_path), format_report(result, report_format, options)
    )


def write_summary(
    results: Mapping[str, ValidationResult],
    output_path: Path | str,
    report_format: ReportFormat | str = ReportFormat.TERMINAL,
    options: ReportOptions | None = None,
) -> Path:
    """Render a multi-file summary and write it to ``output_path``."""
    return _write(
        Path(output_path), format_summary(results, report_format, options)
    )


def generate_all_formats(
    result: ValidationResult,
    output_dir: Path | str,
    base_name: str,
    options: ReportOptions | None = None,
) -> list[Path]:
    """Write ``<base_name>.txt``, ``.md`` and ``.html`` into ``output_dir``.

    Returns:
        Created paths in terminal, Markdown, HTML order

    """
    output_dir = Path(output_dir)
    return [
        write_report(
            result,
            output_dir / f"{base_name}{report_format.extension}",
            report_format,
            options,
        )
        for report_format in ReportFormat
    ]


def generate_all_summary_formats(
    results: Mapping[str, ValidationResult],
    output_dir: Path | str,
    base_name: str,
    options: ReportOptions | None = None,
) -> list[Path]:
    """Write the summary in every format into ``output_dir``."""
    output_dir = Path(output_dir)
    return [
        write_summary(
            results,
            output_dir / f"{base_name}{report_format.extension}",
            report_format,
            options,
        )
        for report_format in ReportFormat
    ]


__all__ = [
    "ReportFormat",
    "ReportOptions",
    "format_report",
    "format_summary",
    "generate_all_formats",
    "generate_all_summary_formats",
    "write_report",
    "write_summary",
]
