import logging

from app.core.config import settings
from app.core.logging import setup_logging


def test_setup_logging_console_only():
    logger = setup_logging("stats-test", logger_name="stats-test-console", log_to_file=False)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_file(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path))
    logger = setup_logging("stats-test", logger_name="stats-test-file", log_to_file=True)
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    files = list(tmp_path.glob("stats-test_*.log"))
    assert len(files) == 1
    assert "hello" in files[0].read_text()


def test_setup_logging_no_duplicate_handlers():
    first = setup_logging("stats-test", logger_name="stats-test-dup", log_to_file=False)
    second = setup_logging("stats-test", logger_name="stats-test-dup", log_to_file=False)
    assert first is second
    assert len(second.handlers) == 1
