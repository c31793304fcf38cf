"""Pytest configuration for debug_log_file tests."""

import logging

import pytest

from debug_log_file.log_target import ErrorLogSetting, error_log
from debug_log_file.settings import settings

# ============================================================================
# Settings Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test with no fallback path and debug mode off."""
    monkeypatch.setattr(settings, "debug_log_file", None)
    monkeypatch.setattr(settings, "debug", False)


# ============================================================================
# Log Destination Fixtures
# ============================================================================


@pytest.fixture
def sink_logger():
    """Dedicated logger so tests never touch the root logger's handlers."""
    logger = logging.getLogger("tests.sink")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def log_setting(sink_logger):
    """An unset ErrorLogSetting bound to the test sink logger."""
    setting = ErrorLogSetting(logger=sink_logger)
    yield setting
    setting.reset()


@pytest.fixture
def default_log_levels():
    """Package logger at NOTSET and root at WARNING, as in a host that configured nothing."""
    package_logger = logging.getLogger("debug_log_file")
    root = logging.getLogger()
    saved = (package_logger.level, root.level)
    package_logger.setLevel(logging.NOTSET)
    root.setLevel(logging.WARNING)
    yield
    package_logger.setLevel(saved[0])
    root.setLevel(saved[1])


@pytest.fixture
def process_error_log():
    """The process-wide error_log, reset after the test."""
    yield error_log
    error_log.reset()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
