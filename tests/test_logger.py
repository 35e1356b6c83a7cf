"""Tests for logging setup."""

import logging

import pytest

import logger as logger_module
from logger import LOGGER_NAME, setup_logging


@pytest.fixture
def fresh_logger():
    yield
    # Put the shared logger back the way the rest of the suite expects it
    logger_module.setup_logging()


def test_level_from_setting(tmp_path, fresh_logger):
    log = setup_logging(tmp_path, "DEBUG")
    assert log.name == LOGGER_NAME
    assert log.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(tmp_path, fresh_logger):
    assert setup_logging(tmp_path, "CHATTY").level == logging.INFO


def test_writes_dated_file(tmp_path, fresh_logger):
    log = setup_logging(tmp_path, "INFO")
    log.info("Latest month (2025-07): $215.00")
    for handler in log.handlers:
        handler.flush()

    files = list(tmp_path.glob("*.log"))
    assert len(files) == 1
    assert "Latest month (2025-07): $215.00" in files[0].read_text(encoding="utf-8")
