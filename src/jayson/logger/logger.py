"""Public logging API: setup, lookup, flush and test reset."""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from jayson.constants import APP_NAME
from jayson.logger.config import file_logging_disabled, load_log_settings
from jayson.logger.handlers import setup_root_logger
from jayson.logger.state import get_state

_FLUSH_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Wait for the queue to drain and flush every listener handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > _FLUSH_TIMEOUT_SECONDS:
            break
        time.sleep(0.01)
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the queue listener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = APP_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Initialize the ``jayson`` root logger once and return ``name``.

    Child loggers (``jayson.core.validator`` etc.) propagate to the root,
    which is the only logger with a handler.

    Args:
        name: Logger name, typically ``__name__``
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging and not file_logging_disabled(),
            )

    return logging.getLogger(name)


def get_logger(
    name: str = APP_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Return a logger for ``name``.

    Example:
        >>> from jayson.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Loaded schema %s", path)

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def clear_logger_state() -> None:
    """Reset logging state. Intended for tests only.

    Stops the listener, closes handlers and drops ``jayson`` loggers from
    the logging manager so the next ``get_logger`` call starts fresh.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name == APP_NAME or logger_name.startswith(
                f"{APP_NAME}."
            ):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
                del logging.Logger.manager.loggerDict[logger_name]


def set_console_level(level: str) -> None:
    """Change the console handler level, leaving the file handler as is."""
    state = get_state()
    if state.queue_listener is None:
        return
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            handler.setLevel(getattr(logging, level.upper(), logging.WARNING))
