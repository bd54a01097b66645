"""Logging setup: rich console output fed through a background queue."""
from __future__ import annotations

import logging
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from pathlib import Path
from queue import SimpleQueue
from threading import RLock
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from .context import ContextFilter, log_context
from .timing import timeit

if TYPE_CHECKING:
    from salaryboard.core.config import LogSettings

__all__ = [
    "init_logging",
    "get_logger",
    "shutdown_logging",
    "log_context",
    "timeit",
]

DEFAULT_APP_NAME = "salaryboard"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"

_lock = RLock()
_active: tuple[str, str, Path | None] | None = None
_listener: QueueListener | None = None
_app_name = DEFAULT_APP_NAME
_context_filter = ContextFilter()


def _console_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
    handler.addFilter(_context_filter)
    return handler


def _file_handler(log_dir: Path, app_name: str, level: int) -> logging.Handler:
    """One file per day under ``log_dir``; older days keep a date suffix."""

    log_dir.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        log_dir / f"{app_name}.log", when="midnight", encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(_context_filter)
    return handler


def init_logging(settings: LogSettings | None = None, *, app_name: str = DEFAULT_APP_NAME) -> None:
    """Route the root logger through a queue to the console and optional log file.

    Calling it again with the same settings is a no-op; different settings
    replace the previous handlers.
    """

    level_name = (settings.level if settings else "INFO").upper()
    log_dir = settings.log_dir if settings else None
    wanted = (app_name, level_name, log_dir)

    with _lock:
        global _active, _listener, _app_name
        if _active == wanted:
            return
        _teardown_locked()

        level = getattr(logging, level_name, logging.INFO)
        install_rich_traceback(show_locals=False)
        handlers = [_console_handler(level)]
        if log_dir is not None:
            handlers.append(_file_handler(Path(log_dir), app_name, level))

        log_queue: SimpleQueue = SimpleQueue()
        queue_handler = QueueHandler(log_queue)
        queue_handler.setLevel(level)
        queue_handler.addFilter(_context_filter)

        root = logging.getLogger()
        root.setLevel(logging.NOTSET)
        root.addHandler(queue_handler)

        _listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
        _listener.start()
        _active = wanted
        _app_name = app_name


def _teardown_locked() -> None:
    global _active, _listener
    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
    _listener = None
    _active = None
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


def shutdown_logging() -> None:
    """Flush queued records and detach every handler."""

    with _lock:
        _teardown_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    with _lock:
        if _active is None:
            init_logging()
    return logging.getLogger(name or _app_name)
