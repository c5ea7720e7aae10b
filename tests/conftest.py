"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True, scope="session")
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['FAILFAST_LOG_LEVEL'] = 'WARNING'
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def letters():
    """The five-letter fixture used throughout the demonstrations."""
    return ["A", "B", "C", "D", "E"]
