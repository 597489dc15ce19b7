"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest

from slime.core.buffer import Buffer


@pytest.fixture
def hello_world() -> Buffer:
    return Buffer.from_text("hello\nworld\n")


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)
