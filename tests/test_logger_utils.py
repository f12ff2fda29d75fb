"""Tests for the file logger set up by the entry point."""

import logging
from pathlib import Path

import pytest

from devenv_setup.logger_utils import setup_logger

TEST_LOGGER = "DevEnvSetupTest"


@pytest.fixture
def test_logger():
    yield TEST_LOGGER
    logger = logging.getLogger(TEST_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_writes_to_the_given_file(tmp_path: Path, test_logger):
    log_file = tmp_path / "logs" / "devenv_setup.log"

    logger = setup_logger(test_logger, log_file_path=log_file)
    logger.info("hello from the test")

    assert [type(handler) for handler in logger.handlers] == [logging.FileHandler]
    assert "hello from the test" in log_file.read_text()


def test_repeated_setup_does_not_stack_handlers(tmp_path: Path, test_logger):
    log_file = tmp_path / "devenv_setup.log"

    setup_logger(test_logger, log_file_path=log_file)
    logger = setup_logger(test_logger, log_file_path=log_file)

    assert len(logger.handlers) == 1


def test_unopenable_log_file_disables_file_logging(tmp_path: Path, test_logger, capsys):
    # A directory cannot be opened as the log file.
    logger = setup_logger(test_logger, log_file_path=tmp_path)
    logger.info("still fine")

    assert [type(handler) for handler in logger.handlers] == [logging.NullHandler]
    assert "File logging disabled" in capsys.readouterr().err
