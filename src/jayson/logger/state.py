"""Logger state shared by the jayson logging package.

A single module-level instance tracks whether the ``jayson`` root logger
has been configured and owns the queue listener thread.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state.

    Attributes:
        lock: Guards root logger initialization
        root_initialized: Whether the root logger has handlers attached
        config_applied: Whether settings.conf levels have been applied
        queue_listener: Background thread draining the log queue
        log_queue: Queue shared by every jayson logger

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the process-wide logger state."""
    return _state
