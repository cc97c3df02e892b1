"""
Rotation Transform
==================
Rotates a character grid about its integer midpoint.

The default rasterizer is a *forward* mapping: every source cell is moved to
its rotated position and written into the nearest destination cell.
Consequences that callers can rely on:

* destination cells nobody lands on stay blank (holes),
* when several source cells round to the same destination cell, the last
  one in row-major scan order of the source wins,
* cells rotated off the grid are dropped.

The three-axis mode is not a projection. It rotates (dx, dy) through the
X and Y angles, derives an intermediate ``nz`` and folds it into ``nx`` via
the Z angle. There is no depth test, so overlapping cells resolve purely by
scan order.

``RasterMethod.INVERSE`` samples the nearest source cell for every
destination cell instead. It never leaves holes inside the rotated image,
but the picture differs from the forward output, so it has to be asked for.

Rounding is half away from zero everywhere (``round_half_away``).
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from asciispin.config import BLANK
from asciispin.model.quantizer import GRID_DTYPE
from asciispin.model.state import AngleState, RotationMode

logger = logging.getLogger(__name__)

Angles = Union[AngleState, Sequence[float], float]

SINGULAR_EPS = 1e-9


class RasterMethod(str, Enum):
    FORWARD = "forward"
    INVERSE = "inverse"


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    values = np.asarray(values, dtype=float)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def _resolve(angles: Angles, mode: Optional[RotationMode]) -> tuple[tuple[float, float, float], RotationMode]:
    """Normalise the accepted angle forms to an (x, y, z) triple and a mode."""
    if isinstance(angles, AngleState):
        triple = angles.as_tuple()
    elif np.ndim(angles) == 0:
        # A bare scalar is the single planar angle
        return (0.0, 0.0, float(angles)), RotationMode.PLANAR
    else:
        ax, ay, az = angles
        triple = (float(ax), float(ay), float(az))
    return triple, (mode or RotationMode.THREE_AXIS)


def _center(width: int, height: int) -> tuple[float, float]:
    return float(width // 2), float(height // 2)


def _target_positions(
    xs: np.ndarray,
    ys: np.ndarray,
    angles: tuple[float, float, float],
    mode: RotationMode,
    width: int,
    height: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Unrounded destination coordinates of the given source cells."""
    cx, cy = _center(width, height)
    dx = xs - cx
    dy = ys - cy
    angle_x, angle_y, angle_z = angles

    if mode is RotationMode.PLANAR:
        cos_a, sin_a = math.cos(angle_z), math.sin(angle_z)
        nx = dx * cos_a - dy * sin_a
        ny = dx * sin_a + dy * cos_a
    else:
        cos_x, sin_x = math.cos(angle_x), math.sin(angle_x)
        cos_y, sin_y = math.cos(angle_y), math.sin(angle_y)
        cos_z, sin_z = math.cos(angle_z), math.sin(angle_z)

        nx = dx * cos_y - dy * sin_y
        ny = dx * sin_x * sin_y + dy * cos_x
        nz = dx * cos_x * sin_y - dy * sin_x
        nx = nx * cos_z - nz * sin_z

    return nx + cx, ny + cy


def _linear_map(angles: tuple[float, float, float], mode: RotationMode) -> np.ndarray:
    """The 2x2 matrix M with (nx, ny) = M @ (dx, dy)."""
    unit = np.array([1.0, 0.0]), np.array([0.0, 1.0])
    cols = [
        _target_positions(np.array([u[0]]), np.array([u[1]]), angles, mode, 0, 0)
        for u in unit
    ]
    return np.array([[cols[0][0][0], cols[1][0][0]],
                     [cols[0][1][0], cols[1][1][0]]])


def map_position(
    x: float,
    y: float,
    angles: Angles,
    width: int,
    height: int,
    mode: Optional[RotationMode] = None,
) -> tuple[float, float]:
    """Where the centre of source cell (x, y) lands, before rounding."""
    triple, mode = _resolve(angles, mode)
    tx, ty = _target_positions(np.array([float(x)]), np.array([float(y)]), triple, mode, width, height)
    return float(tx[0]), float(ty[0])


def _rotate_forward(source: np.ndarray, angles: tuple[float, float, float], mode: RotationMode) -> np.ndarray:
    height, width = source.shape
    ys, xs = np.indices((height, width))
    xs = xs.ravel().astype(float)
    ys = ys.ravel().astype(float)

    tx, ty = _target_positions(xs, ys, angles, mode, width, height)
    fx = round_half_away(tx).astype(np.int64)
    fy = round_half_away(ty).astype(np.int64)

    inside = (fx >= 0) & (fx < width) & (fy >= 0) & (fy < height)
    targets = fy[inside] * width + fx[inside]
    values = source.ravel()[inside]

    # numpy leaves the order of repeated-index assignment unspecified, so pick
    # the last writer in scan order explicitly.
    reversed_targets = targets[::-1]
    unique_targets, first_in_reversed = np.unique(reversed_targets, return_index=True)
    last_writer = len(targets) - 1 - first_in_reversed

    out = np.full(height * width, BLANK, dtype=GRID_DTYPE)
    out[unique_targets] = values[last_writer]
    return out.reshape(height, width)


def _rotate_inverse(source: np.ndarray, angles: tuple[float, float, float], mode: RotationMode) -> np.ndarray:
    height, width = source.shape
    matrix = _linear_map(angles, mode)
    det = float(np.linalg.det(matrix))
    if abs(det) < SINGULAR_EPS:
        # Edge-on pose: the image collapses onto a line, nothing to sample from
        logger.debug(f"Singular rotation (det={det:.3g}), falling back to forward mapping.")
        return _rotate_forward(source, angles, mode)

    cx, cy = _center(width, height)
    ys, xs = np.indices((height, width))
    px = xs.ravel() - cx
    py = ys.ravel() - cy

    inverse = np.linalg.inv(matrix)
    sx = round_half_away(inverse[0, 0] * px + inverse[0, 1] * py + cx).astype(np.int64)
    sy = round_half_away(inverse[1, 0] * px + inverse[1, 1] * py + cy).astype(np.int64)

    inside = (sx >= 0) & (sx < width) & (sy >= 0) & (sy < height)
    out = np.full(height * width, BLANK, dtype=GRID_DTYPE)
    out[inside] = source[sy[inside], sx[inside]]
    return out.reshape(height, width)


def rotate(
    source: np.ndarray,
    angles: Angles,
    mode: Optional[RotationMode] = None,
    method: RasterMethod = RasterMethod.FORWARD,
) -> np.ndarray:
    """
    Rotate a character grid and return a new grid of the same shape.

    Args:
        source: Character grid, shape (height, width). Never modified.
        angles: An ``AngleState``, an (x, y, z) triple, or a single float.
            A single float always means planar rotation.
        mode: Planar or three-axis. Defaults to three-axis for triples.
        method: Forward (default) or inverse rasterization.

    Returns:
        A freshly allocated grid; cells nothing was written to are blank.
    """
    source = np.asarray(source)
    if source.ndim != 2:
        raise ValueError(f"Expected a 2D character grid, got shape {source.shape}.")

    triple, mode = _resolve(angles, mode)
    if method is RasterMethod.INVERSE:
        return _rotate_inverse(source, triple, mode)
    return _rotate_forward(source, triple, mode)
