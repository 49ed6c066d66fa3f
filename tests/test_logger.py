# tests/test_logger.py
import logging
import pytest

from analytics.utils.logger import logger, resolve_log_level


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("WARN", logging.WARNING),
    (" error ", logging.ERROR),
    ("verbose", logging.INFO),
    ("BASIC_FORMAT", logging.INFO),
])
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


def test_logger_writes_once_to_stdout():
    assert logger.name == "analytics"
    assert len(logger.handlers) == 1
    assert logger.propagate is False
