"""Logging helpers for session correlation."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

HANDLER_NAME = "webdriver_augment"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [session=%(session_id)s] %(message)s"

_current_session_id: ContextVar[str | None] = ContextVar("webdriver_session_id", default=None)


def get_current_session_id() -> str | None:
    """Return the session id of the command currently being executed, if any."""
    return _current_session_id.get()


@contextmanager
def session_context(session_id: str) -> Iterator[None]:
    """Publish session_id to log records emitted inside the block."""
    token = _current_session_id.set(session_id)
    try:
        yield
    finally:
        _current_session_id.reset(token)


class SessionContextFilter(logging.Filter):
    """Attach the active session id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject session_id into the log record."""
        record.session_id = get_current_session_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> logging.Handler:
    """Set the root level and attach a stdout handler that prints the session id.

    The handler is added once; later calls only change the level.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(SessionContextFilter())
    root.addHandler(handler)
    return handler
