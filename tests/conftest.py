"""Test configuration for pytest."""

import logging
import os
import pytest

from vec1 import config


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['VEC1_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)

    # Refusals log at DEBUG, keep them out of test output
    for logger_name in ['vec1.container', 'vec1.drain', 'vec1.serde']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def restore_settings(monkeypatch):
    """Undo any configure() call made by a test."""
    monkeypatch.setattr(config, "_settings", config.get_settings())
