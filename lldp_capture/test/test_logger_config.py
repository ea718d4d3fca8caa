"""Tests for the logging setup."""
import logging
import os
import sys

import pytest

from lldp_capture.logger_config import setup_logger, LOGGER_NAME


@pytest.fixture
def restore_root_logging(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logger(tmp_path, restore_root_logging):
    log_directory = str(tmp_path / "logs")

    logger = setup_logger(log_directory, force=True)

    assert logger is logging.getLogger(LOGGER_NAME)
    log_files = os.listdir(log_directory)
    assert len(log_files) == 1
    assert log_files[0].startswith("lldp_capture_")
    file_handlers = [h for h in restore_root_logging.handlers
                     if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == os.path.join(
        os.path.abspath(log_directory), log_files[0])
    assert sys.excepthook is not sys.__excepthook__


def test_non_ascii_messages_written_as_utf8(tmp_path, restore_root_logging):
    """Log lines survive a log file opened on a non-UTF-8 locale."""
    log_directory = str(tmp_path / "logs")
    logger = setup_logger(log_directory, force=True)

    logger.info("Système: Pôrt Gi1/0/12 🚀")
    for handler in restore_root_logging.handlers:
        handler.flush()

    file_handler = next(h for h in restore_root_logging.handlers
                        if isinstance(h, logging.FileHandler))
    assert file_handler.encoding == "utf-8"
    log_file = os.path.join(log_directory, os.listdir(log_directory)[0])
    with open(log_file, encoding="utf-8") as f:
        assert "Système: Pôrt Gi1/0/12 🚀" in f.read()
