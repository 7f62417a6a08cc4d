"""Tests for logging setup."""

import logging

import pytest

import wordhunt  # noqa: F401  (installs the package NullHandler)
from wordhunt.utils.logger import configure_logging, get_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_names_stay_in_package_namespace(self):
        assert get_logger().name == "wordhunt"
        assert get_logger("wordhunt.board.generator").name == "wordhunt.board.generator"
        assert get_logger("cli").name == "wordhunt.cli"

    def test_package_logger_is_silent_by_default(self):
        """Importing the library installs a NullHandler, never a stream handler."""
        handlers = logging.getLogger("wordhunt").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
        assert not any(type(h) is logging.StreamHandler for h in handlers)


class TestConfigureLogging:
    def test_installs_single_handler(self, restore_root_logger):
        configure_logging(logging.DEBUG)
        handler = configure_logging(logging.WARNING)
        assert restore_root_logger.handlers == [handler]
        assert restore_root_logger.level == logging.WARNING
        assert "%(levelname)-7s" in handler.formatter._fmt
