"""Shared pytest fixtures for logging platform tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from splatfmt.platform.logging import LOGGER_NAME


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger's handlers and level around a test run."""

    target = logging.getLogger(LOGGER_NAME)
    original_handlers = list(target.handlers)
    original_level = target.level

    try:
        yield target
    finally:
        for handler in list(target.handlers):
            if handler not in original_handlers:
                handler.close()
        target.handlers[:] = original_handlers
        target.setLevel(original_level)
