"""
Animation Clock
===============
Advances the rotation angles once per tick.

Two interchangeable policies share one interface,
``advance(angles, context) -> angles``:

* ``FixedStepPolicy`` adds a constant increment every tick (poll loop).
* ``ElapsedTimePolicy`` scales the increment by the real time since the
  previous tick, so the rotation rate does not depend on how often the
  window happens to redraw.

Only the angle of the selected axis moves. Once it reaches a full turn it is
reset to 0.0, which keeps every angle in [0, 2*pi) as long as a single
increment stays below a full turn.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from asciispin.config import ROTATION_SPEED, TIME_NORMALIZATION, DEFAULT_SPEED
from asciispin.model.state import AngleState, Axis

logger = logging.getLogger(__name__)

FULL_TURN = 2.0 * math.pi


@dataclass(frozen=True)
class TickContext:
    """Per-tick inputs of an advancement policy."""
    axis: Union[Axis, str] = Axis.Z
    elapsed: float = 0.0  # seconds since the previous tick
    speed: float = DEFAULT_SPEED


def wrap_angle(angle: float) -> float:
    """Reset an angle that has reached a full turn back to zero."""
    if angle >= FULL_TURN:
        return 0.0
    return angle


def reset_angles() -> AngleState:
    return AngleState(0.0, 0.0, 0.0)


class AdvancePolicy(ABC):
    """Strategy deciding how far the selected angle moves on one tick."""

    @abstractmethod
    def increment(self, context: TickContext) -> float:
        """Angle increment in radians for this tick."""

    def advance(self, angles: AngleState, context: TickContext) -> AngleState:
        axis = Axis.parse(context.axis)
        if axis is None:
            logger.warning(f"Unknown rotation axis '{context.axis}', angles left unchanged.")
            return angles

        value = wrap_angle(angles.get(axis) + self.increment(context))
        return angles.with_angle(axis, value)


class FixedStepPolicy(AdvancePolicy):
    """Constant increment per tick, independent of real time."""

    def __init__(self, step: float = ROTATION_SPEED) -> None:
        self.step = step

    def increment(self, context: TickContext) -> float:
        return self.step

    def __repr__(self) -> str:
        return f"FixedStepPolicy(step={self.step})"


class ElapsedTimePolicy(AdvancePolicy):
    """Increment = elapsed seconds * normalization * speed."""

    def __init__(self, normalization: float = TIME_NORMALIZATION) -> None:
        self.normalization = normalization

    def increment(self, context: TickContext) -> float:
        return max(context.elapsed, 0.0) * self.normalization * context.speed

    def __repr__(self) -> str:
        return f"ElapsedTimePolicy(normalization={self.normalization})"
