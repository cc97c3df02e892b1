"""
Shared test fixtures for the asciispin test suite.
"""

import logging

import numpy as np
import pytest
from PIL import Image


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """setup_logging() attaches handlers to captured streams; drop them after each test."""
    yield
    logger = logging.getLogger("asciispin")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_image(tmp_path):
    """Write a solid or array-backed image to tmp_path and return its path."""

    def _make(name="img.png", size=(2, 2), value=0, mode="L", array=None):
        if array is not None:
            img = Image.fromarray(np.asarray(array, dtype=np.uint8))
        else:
            img = Image.new(mode, size, value)
        path = tmp_path / name
        img.save(path)
        return str(path)

    return _make


@pytest.fixture
def letter_grid():
    """A 7x11 grid where every cell holds a non-blank character."""
    letters = "abcdefghijklmnopqrstuvwxyz"
    rows = [[letters[(y * 11 + x) % len(letters)] for x in range(11)] for y in range(7)]
    return np.array(rows, dtype="<U1")
