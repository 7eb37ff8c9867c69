"""
Shared Test Fixtures

Every test gets a clean slate for the variable names used here, so
results never depend on the environment pytest was launched from.
"""

import logging

import pytest

from EnvReader import logging_config

TEST_VAR = "ENVREADER_TEST"
FALLBACK_VAR = "ENVREADER_TEST_FALLBACK"
LOGGING_VARS = ("LOG_LEVEL", "LOG_JSON")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove the test variables before each test"""
    for name in (TEST_VAR, FALLBACK_VAR) + LOGGING_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def var_name():
    """Name of the primary test variable"""
    return TEST_VAR


@pytest.fixture
def fallback_name():
    """Name of the second candidate in list lookups"""
    return FALLBACK_VAR


@pytest.fixture
def set_var(clean_env):
    """Set the primary test variable: set_var('value')"""
    def _set(value, name=TEST_VAR):
        clean_env.setenv(name, value)
    return _set


@pytest.fixture
def reset_logging():
    """Restore the EnvReader package logger and config singleton after a test"""
    package_logger = logging.getLogger(logging_config.ROOT_LOGGER_NAME)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    logging_config.set_logging_config(None)
