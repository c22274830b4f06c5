import logging

import pytest
import structlog

from core.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_installs_structlog_handler(restore_logging):
    configure_logging("debug", "json")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info(restore_logging):
    configure_logging("chatty", "console")
    assert logging.getLogger().level == logging.INFO


def test_get_logger_binds():
    log = get_logger("cache-test").bind(cache="c1")
    assert log is not None
