import logging

import pytest

from jalali_sql import logging_setup
from jalali_sql.logging_setup import NOISY_LOGGERS, TruncateLongMsgs, get_logger, setup_logging


@pytest.fixture
def restore_root_logging(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(logging_setup, "_configured", False)
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord("t", logging.INFO, __file__, 1, msg, (), None)


def test_truncate_filter_shortens_long_messages():
    rec = _record("x" * 50)
    assert TruncateLongMsgs(max_len=10).filter(rec) is True
    assert rec.getMessage() == "x" * 10 + " …(truncated)"


def test_truncate_filter_leaves_short_messages():
    rec = _record("short")
    TruncateLongMsgs(max_len=10).filter(rec)
    assert rec.getMessage() == "short"


def test_setup_logging_console_and_file(restore_root_logging, tmp_path):
    log_file = tmp_path / "jalali.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    root = restore_root_logging
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING

    get_logger("jalali_sql.test").info("hello %s", "file")
    for h in root.handlers:
        h.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")


def test_setup_logging_runs_once_unless_forced(restore_root_logging):
    setup_logging(level=logging.INFO)
    setup_logging(level=logging.DEBUG)
    assert restore_root_logging.level == logging.INFO

    setup_logging(level=logging.DEBUG, force=True)
    assert restore_root_logging.level == logging.DEBUG
