"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "tavilykit_request_id", default="-"
)


class _ContextFilter(logging.Filter):
    """Inject request context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = _request_id_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def request_context(request_id: str) -> Any:
    """Temporarily bind a request id for structured logging.

    Each asyncio task runs in its own context copy, so concurrent calls keep
    their ids apart.

    Args:
        request_id: Client-side request identifier.
    """

    token = _request_id_var.set(request_id)
    try:
        yield
    finally:
        _request_id_var.reset(token)


def current_request_id() -> str:
    """Return the request id bound to the current context."""

    return _request_id_var.get()


def configure_logging(level: str = "INFO") -> None:
    """Configure client logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s req=%(request_id)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                if not any(isinstance(f, _ContextFilter) for f in h.filters):
                    h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
