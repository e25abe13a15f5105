"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

import pytest


@pytest.fixture
def rng() -> random.Random:
    """A fixed-seed random source so policy and match tests are reproducible."""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Keep ``app.main`` from leaking root handlers into the next test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
