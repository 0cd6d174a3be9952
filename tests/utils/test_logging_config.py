"""
Tests for logging setup.
"""

import logging

import pytest

from movie_service.utils.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_console_only(restore_root_logger):
    setup_logging(level="debug")
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1


def test_setup_logging_writes_file(restore_root_logger, tmp_path):
    setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path / "logs"))
    get_logger("movie_service.test").info("hello from test")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "api.log").read_text()
    assert "hello from test" in content


def test_get_logger_level_override():
    logger = get_logger("movie_service.quiet", level="warning")
    assert logger.level == logging.WARNING
