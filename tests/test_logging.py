"""Tests for the log context helpers."""
from __future__ import annotations

import logging

from salaryboard.core.config import LogSettings
from salaryboard.core.log import init_logging, shutdown_logging
from salaryboard.core.log.context import ContextFilter, log_context
from salaryboard.core.log.timing import timeit


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)


def test_scoped_context_is_attached_and_released() -> None:
    context_filter = ContextFilter()

    with log_context.scoped(entry_id="e1", viewer=None):
        record = _record()
        context_filter.filter(record)
        assert record.context == "entry_id=e1 "

    outside = _record()
    context_filter.filter(outside)
    assert outside.context == ""
    assert log_context.as_dict() == {}


def test_timeit_logs_completion(caplog) -> None:
    logger = logging.getLogger("salaryboard.tests.timer")

    with caplog.at_level(logging.DEBUG, logger="salaryboard.tests.timer"):
        with timeit("Breakdown", logger=logger, total=4):
            pass

    assert any("Breakdown completed" in message for message in caplog.messages)


def test_init_logging_writes_context_to_log_file(tmp_path) -> None:
    init_logging(LogSettings(level="DEBUG", log_dir=tmp_path), app_name="salaryboard-test")
    try:
        with log_context.scoped(entry_id="e9"):
            logging.getLogger("salaryboard.tests.file").info("vote recorded")
    finally:
        shutdown_logging()

    content = (tmp_path / "salaryboard-test.log").read_text(encoding="utf-8")
    assert "entry_id=e9 vote recorded" in content
