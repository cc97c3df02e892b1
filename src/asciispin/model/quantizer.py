"""
Luminance Quantizer & Grid Builder
==================================
Turns 8-bit luminance samples into characters of the density gradient.

A sample brighter than ``BLANK_THRESHOLD`` is background and becomes the
blank marker. Every other sample picks ``ASCII_CHARS[s * (L - 1) // 255]``,
so darker pixels get denser characters.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from asciispin.config import ASCII_CHARS, BLANK, BLANK_THRESHOLD

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

GRID_DTYPE = "<U1"

_GRADIENT: np.ndarray = np.array(list(ASCII_CHARS), dtype=GRID_DTYPE)


def quantize(sample: int) -> str:
    """Map one luminance sample in [0, 255] to a gradient character."""
    if sample > BLANK_THRESHOLD:
        return BLANK
    return ASCII_CHARS[int(sample) * (len(ASCII_CHARS) - 1) // 255]


def quantize_array(samples: npt.ArrayLike) -> np.ndarray:
    """Vectorised :func:`quantize` over an array of any shape."""
    # int64 so that s * (L - 1) cannot overflow uint8 input
    values = np.asarray(samples).astype(np.int64)
    index = values * (len(ASCII_CHARS) - 1) // 255
    chars = _GRADIENT[np.clip(index, 0, len(ASCII_CHARS) - 1)]
    return np.where(values > BLANK_THRESHOLD, BLANK, chars).astype(GRID_DTYPE)


def build_grid(luminance: npt.ArrayLike) -> np.ndarray:
    """
    Build the unrotated character grid from a resized grayscale image.

    Args:
        luminance: 2D array of 8-bit samples, shape (height, width).

    Returns:
        Character grid of the same shape, dtype ``<U1``.
    """
    samples = np.asarray(luminance)
    if samples.ndim != 2:
        raise ValueError(f"Expected a 2D luminance array, got shape {samples.shape}.")
    grid = quantize_array(samples)
    logger.debug(f"Built {grid.shape[1]}x{grid.shape[0]} character grid.")
    return grid


def grid_to_lines(grid: np.ndarray) -> list[str]:
    """Rows of the grid as strings, top to bottom."""
    return ["".join(row) for row in grid]


def grid_to_text(grid: np.ndarray) -> str:
    return "\n".join(grid_to_lines(grid))
