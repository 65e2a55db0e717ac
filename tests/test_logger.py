# tests/test_logger.py

import logging
from appseed.logger import get_logger, ROOT_LOGGER


def test_unknown_level_name_falls_back_to_info():
    log = get_logger("appseed.test_levels", level="verbose")
    assert log.level == logging.INFO

    log = get_logger("appseed.test_levels", level="debug")
    assert log.level == logging.DEBUG


def test_unknown_env_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("APPSEED_LOG_LEVEL", "verbose")
    root = logging.getLogger(ROOT_LOGGER)
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        get_logger("appseed.test_env")
        assert root.level == logging.INFO
        assert root.handlers
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
