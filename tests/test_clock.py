"""Tests for the animation clock policies."""

import logging
import math

import pytest

from asciispin.config import ROTATION_SPEED, TIME_NORMALIZATION
from asciispin.model.clock import (
    FULL_TURN,
    ElapsedTimePolicy,
    FixedStepPolicy,
    TickContext,
    reset_angles,
    wrap_angle,
)
from asciispin.model.state import AngleState, Axis


class TestAxis:
    @pytest.mark.parametrize("token, expected", [("x", Axis.X), ("Y", Axis.Y), (" z ", Axis.Z), (Axis.X, Axis.X)])
    def test_parse(self, token, expected):
        assert Axis.parse(token) is expected

    @pytest.mark.parametrize("token", ["w", "", "xy", "1"])
    def test_parse_unknown(self, token):
        assert Axis.parse(token) is None


class TestAngleState:
    def test_with_angle_returns_new_state(self):
        state = AngleState(0.1, 0.2, 0.3)
        moved = state.with_angle(Axis.Y, 1.0)
        assert moved == AngleState(0.1, 1.0, 0.3)
        assert state.y == 0.2

    def test_reset(self):
        assert reset_angles().as_tuple() == (0.0, 0.0, 0.0)


# ---------------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------------


class TestWrap:
    def test_below_full_turn_unchanged(self):
        assert wrap_angle(6.0) == 6.0

    def test_full_turn_resets_to_zero(self):
        assert wrap_angle(FULL_TURN) == 0.0
        assert wrap_angle(FULL_TURN + 0.05) == 0.0

    def test_step_across_full_turn(self):
        policy = FixedStepPolicy(0.1)
        state = AngleState(z=FULL_TURN - 0.05)
        advanced = policy.advance(state, TickContext(axis=Axis.Z))
        assert 0.0 <= advanced.z < FULL_TURN
        assert advanced.z == 0.0

    def test_many_ticks_stay_in_range(self):
        policy = FixedStepPolicy()
        state = reset_angles()
        for _ in range(1000):
            state = policy.advance(state, TickContext(axis=Axis.X))
            assert 0.0 <= state.x < FULL_TURN


# ---------------------------------------------------------------------------
# Fixed-step policy
# ---------------------------------------------------------------------------


class TestFixedStep:
    def test_default_step(self):
        state = FixedStepPolicy().advance(reset_angles(), TickContext(axis=Axis.Z))
        assert state.z == pytest.approx(ROTATION_SPEED)

    def test_ignores_elapsed_time(self):
        policy = FixedStepPolicy(0.2)
        slow = policy.advance(reset_angles(), TickContext(axis=Axis.Z, elapsed=5.0))
        fast = policy.advance(reset_angles(), TickContext(axis=Axis.Z, elapsed=0.001))
        assert slow == fast

    def test_only_selected_axis_moves(self):
        state = AngleState(0.5, 0.0, 1.5)
        advanced = FixedStepPolicy(0.25).advance(state, TickContext(axis=Axis.Y))
        assert advanced == AngleState(0.5, 0.25, 1.5)


# ---------------------------------------------------------------------------
# Elapsed-time policy
# ---------------------------------------------------------------------------


class TestElapsedTime:
    def test_increment_scales_with_elapsed_and_speed(self):
        policy = ElapsedTimePolicy()
        context = TickContext(axis=Axis.X, elapsed=0.5, speed=0.05)
        assert policy.increment(context) == pytest.approx(0.5 * TIME_NORMALIZATION * 0.05)
        assert policy.advance(reset_angles(), context).x == pytest.approx(1.5)

    def test_one_sixtieth_second_is_one_speed_unit(self):
        policy = ElapsedTimePolicy()
        state = policy.advance(reset_angles(), TickContext(axis=Axis.Z, elapsed=1 / 60, speed=0.3))
        assert state.z == pytest.approx(0.3)

    def test_negative_elapsed_does_not_rewind(self):
        policy = ElapsedTimePolicy()
        assert policy.increment(TickContext(elapsed=-1.0)) == 0.0

    def test_wraps(self):
        policy = ElapsedTimePolicy()
        state = AngleState(y=FULL_TURN - 0.01)
        advanced = policy.advance(state, TickContext(axis=Axis.Y, elapsed=0.1, speed=0.5))
        assert advanced.y == 0.0


# ---------------------------------------------------------------------------
# Invalid axis
# ---------------------------------------------------------------------------


class TestInvalidAxis:
    def test_no_op_with_warning(self, caplog):
        state = AngleState(0.1, 0.2, 0.3)
        with caplog.at_level(logging.WARNING, logger="asciispin"):
            advanced = FixedStepPolicy().advance(state, TickContext(axis="w"))
        assert advanced is state
        assert any("Unknown rotation axis 'w'" in r.getMessage() for r in caplog.records)

    def test_elapsed_policy_no_op(self):
        state = reset_angles()
        advanced = ElapsedTimePolicy().advance(state, TickContext(axis="q", elapsed=1.0, speed=0.5))
        assert advanced == state
        assert math.isclose(advanced.z, 0.0)
