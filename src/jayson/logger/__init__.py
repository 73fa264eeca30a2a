"""Logging utilities for jayson.

Usage:
    >>> from jayson.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Validated %s", path)  # %-style, never f-strings

Rules:
    1. Always use ``logger = get_logger(__name__)``
    2. Never call ``logging.basicConfig()``
    3. Handlers live only on the ``jayson`` root logger, behind a
       QueueHandler/QueueListener pair

Environment Variables:
    JAYSON_LOG_DIR: Directory for jayson.log (used by the test suite)
    JAYSON_DISABLE_FILE_LOG: Set to 1 to skip the file handler
"""

from jayson.logger.config import (
    update_logger_from_config as _update_config,
)
from jayson.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from jayson.logger.handlers import ConfigurationError
from jayson.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from jayson.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config() -> None:
    """Apply settings.conf log levels to the running handlers."""
    _update_config(get_state())
