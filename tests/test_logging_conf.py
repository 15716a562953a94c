"""
Logging Configuration Tests - Unit Tests for setup_logging

logging.basicConfig is patched so the handlers built by setup_logging can be
inspected without changing the test process's logging configuration.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- blackcore.shared.logging_conf (setup_logging under test)
- unittest.mock (patch for logging.basicConfig)
- pytest (testing framework)
"""
import logging  # Handler classes and levels
import sys  # Standard streams
from logging.handlers import RotatingFileHandler  # Expected file handler type

import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Patch logging.basicConfig

from blackcore.shared.logging_conf import setup_logging


@pytest.fixture
def basic_config():
    with patch("blackcore.shared.logging_conf.logging.basicConfig") as mock_basic:
        yield mock_basic
    for call in mock_basic.call_args_list:
        for handler in call.kwargs["handlers"]:
            handler.close()


def _handlers(mock_basic):
    return mock_basic.call_args.kwargs["handlers"]


class TestSetupLogging:
    def test_stdout_handler(self, basic_config):
        setup_logging(level=logging.INFO, log_stdout=True)
        handlers = _handlers(basic_config)
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stdout
        assert basic_config.call_args.kwargs["level"] == logging.INFO

    def test_falls_back_to_stderr(self, basic_config):
        setup_logging(log_stdout=False)
        handlers = _handlers(basic_config)
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_level_name_normalized(self, basic_config):
        setup_logging(level=" debug ", log_stdout=False)
        assert basic_config.call_args.kwargs["level"] == "DEBUG"

    def test_log_dir(self, basic_config, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging(log_dir=log_dir, log_stdout=False, max_bytes=1024, backup_count=2)
        handlers = _handlers(basic_config)
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert handlers[0].maxBytes == 1024
        assert handlers[0].backupCount == 2
        assert (log_dir / "blackcore.log").exists()

    def test_log_file_and_stdout(self, basic_config, tmp_path):
        log_file = tmp_path / "nested" / "app.log"
        setup_logging(log_file=log_file, log_stdout=True)
        handlers = _handlers(basic_config)
        assert len(handlers) == 2
        assert log_file.exists()
