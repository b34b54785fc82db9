"""Tests for centralized logging setup."""

import logging
from pathlib import Path

import pytest

from request_gateway.core.logging import ROOT_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def clean_root_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_and_file_handlers(self, clean_root_logger, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "gateway.log"

        logger = setup_logging(log_level="debug", log_file=log_file)

        assert logger is clean_root_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert log_file.parent.exists()

    def test_no_duplicate_handlers(self, clean_root_logger) -> None:
        setup_logging()
        setup_logging()

        assert len(clean_root_logger.handlers) == 1


class TestGetLogger:
    """Tests for get_logger naming."""

    def test_root(self) -> None:
        assert get_logger().name == ROOT_LOGGER_NAME

    def test_foreign_name_is_prefixed(self) -> None:
        assert get_logger("demo").name == "request_gateway.demo"

    def test_package_module_name_is_kept(self) -> None:
        name = "request_gateway.services.request_gateway"

        assert get_logger(name).name == name
