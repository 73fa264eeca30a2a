"""Console formatters for jayson log output.

INFO records are printed as bare messages so that command output stays
readable; everything else carries timestamp, logger and a colored level.
"""

import logging

from jayson.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI color codes."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with a colored level name.

        The record's ``levelname`` is restored afterwards since the same
        record may be handed to the file handler too.
        """
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class SimpleConsoleFormatter(logging.Formatter):
    """Formatter that emits only the message."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Simple format for INFO, colored structured format otherwise."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize with the structured format used for non-INFO levels.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
