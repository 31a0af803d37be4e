# tests/test_logging_conf.py
"""
Logging Configuration Tests

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- currconv.shared.logging_conf (setup_logging)
- pytest (testing framework)
"""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from currconv.shared.logging_conf import LOG_FORMAT, setup_logging


def _ours(handler):
    if isinstance(handler, logging.NullHandler):
        return True
    return handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for h in root.handlers[:]:
        if _ours(h):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


class TestSetupLogging:
    def test_console_only(self, restore_root_logger):
        setup_logging(level="DEBUG")

        handlers = restore_root_logger.handlers
        assert restore_root_logger.level == logging.DEBUG
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        setup_logging(level=logging.INFO, log_file=log_file, log_console=False, backup_count=2)
        logging.getLogger("currconv.test").info("hello file")
        for h in restore_root_logger.handlers:
            h.flush()

        (handler,) = restore_root_logger.handlers
        assert isinstance(handler, RotatingFileHandler)
        assert handler.backupCount == 2
        assert "INFO currconv.test :: hello file" in log_file.read_text(encoding="utf-8")

    def test_log_dir(self, restore_root_logger, tmp_path):
        setup_logging(log_dir=tmp_path / "logdir", log_console=False)
        assert (tmp_path / "logdir" / "currconv.log").exists()

    def test_nothing_requested(self, restore_root_logger):
        setup_logging(log_console=False)

        (handler,) = restore_root_logger.handlers
        assert isinstance(handler, logging.NullHandler)
