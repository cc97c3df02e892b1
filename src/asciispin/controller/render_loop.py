"""
Render Loop (Controller)
========================
Owns the animation state and drives one frame at a time.

Why is this file needed?
------------------------
1. Ownership: the base grid, the current angles and the last-tick timestamp
   live in one object instead of module globals.
2. Two driving models: ``step()`` is called by a host redraw callback (the
   Qt timer), ``run()`` is the blocking terminal poll loop.
3. Testability: the clock and the sleep function are injected, so tests run
   without real time passing.

Classes:
    RenderLoop: rotate -> advance -> display, once per tick.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Union

import numpy as np

from asciispin.config import DEFAULT_SPEED, FRAME_INTERVAL, SPEED_MIN, SPEED_MAX
from asciispin.model.clock import AdvancePolicy, FixedStepPolicy, TickContext, reset_angles
from asciispin.model.rotation import RasterMethod, rotate
from asciispin.model.state import AngleState, Axis, RotationMode

logger = logging.getLogger(__name__)

DisplaySink = Callable[[np.ndarray], None]


class RenderLoop:
    def __init__(
        self,
        base_grid: np.ndarray,
        policy: Optional[AdvancePolicy] = None,
        mode: RotationMode = RotationMode.THREE_AXIS,
        axis: Union[Axis, str] = Axis.Z,
        speed: float = DEFAULT_SPEED,
        method: RasterMethod = RasterMethod.FORWARD,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._base_grid = np.asarray(base_grid)
        self.policy = policy if policy is not None else FixedStepPolicy()
        self.mode = mode
        self.method = method
        self._clock = clock
        self._axis: Union[Axis, str] = Axis.parse(axis) or axis
        self._speed = DEFAULT_SPEED
        self.set_speed(speed)
        self._angles: AngleState = reset_angles()
        self._last_tick: float = self._clock()
        self.frame_count: int = 0

    # --- PROPERTIES ---

    @property
    def base_grid(self) -> np.ndarray:
        return self._base_grid

    @property
    def angles(self) -> AngleState:
        return self._angles

    @property
    def axis(self) -> Union[Axis, str]:
        return self._axis

    @property
    def speed(self) -> float:
        return self._speed

    # --- CONTROLS ---

    def reset(self) -> None:
        """Zero all angles and restart the elapsed-time reference."""
        self._angles = reset_angles()
        self._last_tick = self._clock()
        logger.debug("Angles reset.")

    def select_axis(self, axis: Union[Axis, str]) -> None:
        """Switch the advancing axis; always restarts from zero angles."""
        parsed = Axis.parse(axis)
        self._axis = parsed if parsed is not None else axis
        self.reset()
        logger.info(f"Rotation axis set to '{self._axis.value if parsed else axis}'.")

    def set_speed(self, speed: float) -> None:
        clamped = min(max(float(speed), SPEED_MIN), SPEED_MAX)
        if clamped != speed:
            logger.warning(f"Speed {speed} outside [{SPEED_MIN}, {SPEED_MAX}], using {clamped}.")
        self._speed = clamped

    def set_base_grid(self, grid: np.ndarray) -> None:
        """Replace the source art (new image loaded)."""
        self._base_grid = np.asarray(grid)
        self.reset()

    # --- FRAMES ---

    def step(self) -> np.ndarray:
        """Produce one frame and advance the angles for the next one."""
        grid = rotate(self._base_grid, self._angles, mode=self.mode, method=self.method)

        now = self._clock()
        elapsed = now - self._last_tick
        self._last_tick = now

        context = TickContext(axis=self._axis, elapsed=elapsed, speed=self._speed)
        self._angles = self.policy.advance(self._angles, context)
        self.frame_count += 1
        logger.debug(
            f"Frame {self.frame_count}: elapsed={elapsed * 1000:.1f} ms, "
            f"angles=({self._angles.x:.3f}, {self._angles.y:.3f}, {self._angles.z:.3f})"
        )
        return grid

    def tick(self, sink: DisplaySink) -> None:
        sink(self.step())

    def run(
        self,
        sink: DisplaySink,
        interval: float = FRAME_INTERVAL,
        max_frames: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Poll loop: draw a frame, sleep, repeat.

        Without ``max_frames`` this only ends when the process is terminated.
        """
        logger.info(f"Starting render loop ({self.mode.value}, {self.policy!r}, interval={interval}s).")
        frames = 0
        while max_frames is None or frames < max_frames:
            self.tick(sink)
            frames += 1
            sleep(interval)
