"""Bootstrap settings for the logging system.

The logger is initialized on first import of any jayson module, before
settings.conf has been read. ``load_log_settings`` returns defaults that
only depend on the environment; ``update_logger_from_config`` applies the
levels from settings.conf once it is available.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from jayson.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_NAME,
)
from jayson.exceptions import ConfigError

if TYPE_CHECKING:
    from jayson.logger.state import _LoggerState

LOG_DIR_ENV = "JAYSON_LOG_DIR"
DISABLE_FILE_LOG_ENV = "JAYSON_DISABLE_FILE_LOG"


def file_logging_disabled() -> bool:
    """Return True when file logging is switched off via the environment."""
    return os.getenv(DISABLE_FILE_LOG_ENV, "").lower() in ("1", "true", "yes")


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        JAYSON_LOG_DIR: directory for jayson.log. Tests point this at a
        temporary directory so they never write to the user's config dir.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / DEFAULT_CONFIG_SUBDIR
            / CONFIG_DIR_NAME
            / "logs"
            / LOG_FILE_NAME
        )
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(state: "_LoggerState") -> None:
    """Apply settings.conf log levels to the running handlers.

    Only handler levels are touched; handlers are never added or removed.

    Args:
        state: Logger state object (from logger.state module)

    """
    try:
        # Late import, jayson.config logs through this package
        from jayson.config import GlobalSettingsManager  # noqa: PLC0415

        settings = GlobalSettingsManager().load()
    except (ImportError, OSError, ValueError, ConfigError):
        return

    console_level = getattr(
        logging, settings["console_log_level"], logging.WARNING
    )
    file_level = getattr(logging, settings["log_level"], logging.INFO)

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_level)

    state.config_applied = True
