"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging() so tests stay independent."""
    yield
    logger = logging.getLogger("lifeterm")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
