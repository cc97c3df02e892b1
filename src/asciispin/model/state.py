"""
Animation State (Data Model)
============================
This module defines the small value types shared by the rotation transform,
the animation clock and the render loop.

Classes:
    Axis: Which angle the clock advances in three-axis mode.
    RotationMode: Planar (single angle) or combined three-axis rotation.
    AngleState: The current rotation angles, always within one full turn.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"

    @classmethod
    def parse(cls, token: Union[Axis, str]) -> Optional[Axis]:
        """Return the axis named by token (case-insensitive), or None."""
        if isinstance(token, Axis):
            return token
        try:
            return cls(str(token).strip().lower())
        except ValueError:
            return None


class RotationMode(str, Enum):
    """How the angle state is applied to the grid."""
    PLANAR = "planar"
    THREE_AXIS = "3d"


@dataclass(frozen=True)
class AngleState:
    """
    Rotation angles in radians.

    In planar mode only ``z`` is used: it is the single rotation angle in the
    screen plane. Three-axis mode uses all three.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def get(self, axis: Axis) -> float:
        return getattr(self, axis.value)

    def with_angle(self, axis: Axis, value: float) -> AngleState:
        return replace(self, **{axis.value: value})

    def as_tuple(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z
