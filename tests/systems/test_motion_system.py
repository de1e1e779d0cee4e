import math

import pytest

from ant_grid.actions import InputSnapshot, Key
from ant_grid.systems.motion import motion_system
from tests.test_utils import make_state


def test_no_input_is_noop() -> None:
    state = make_state()
    assert motion_system(state, InputSnapshot(), 0.5) is state


def test_zero_dt_is_noop() -> None:
    state = make_state()
    assert motion_system(state, InputSnapshot.holding(Key.FORWARD), 0.0) is state


def test_negative_dt_rejected() -> None:
    state = make_state()
    with pytest.raises(ValueError):
        motion_system(state, InputSnapshot.holding(Key.FORWARD), -0.1)


def test_forward_moves_along_heading() -> None:
    state = make_state(movement_speed=10.0)
    moved = motion_system(state, InputSnapshot.holding(Key.FORWARD), 0.5)
    assert moved.agent.position == pytest.approx((5.0, 0.0))
    assert moved.agent.angle == 0.0


def test_backward_moves_against_heading() -> None:
    state = make_state(movement_speed=10.0, agent_angle=math.pi / 2)
    moved = motion_system(state, InputSnapshot.holding(Key.BACKWARD), 1.0)
    assert moved.agent.position == pytest.approx((0.0, -10.0), abs=1e-9)


@pytest.mark.parametrize(
    "keys, expected_angle",
    [
        ((Key.LEFT,), 0.5),
        ((Key.RIGHT,), -0.5),
        ((Key.LEFT, Key.RIGHT), 0.0),
    ],
)
def test_rotation_intent(keys, expected_angle) -> None:
    state = make_state(rotation_speed=1.0)
    moved = motion_system(state, InputSnapshot.holding(*keys), 0.5)
    assert moved.agent.angle == pytest.approx(expected_angle)
    assert moved.agent.position == (0.0, 0.0)


def test_forward_and_backward_cancel() -> None:
    state = make_state()
    moved = motion_system(state, InputSnapshot.holding(Key.FORWARD, Key.BACKWARD), 1.0)
    assert moved is state


def test_rotation_applied_before_translation() -> None:
    state = make_state(movement_speed=10.0, rotation_speed=math.pi / 2)
    moved = motion_system(state, InputSnapshot.holding(Key.FORWARD, Key.LEFT), 1.0)
    assert moved.agent.angle == pytest.approx(math.pi / 2)
    # translation follows the new heading (straight up), not the old one
    assert moved.agent.position == pytest.approx((0.0, 10.0), abs=1e-9)


def test_no_clamping_outside_play_area() -> None:
    state = make_state(movement_speed=1000.0)
    moved = motion_system(state, InputSnapshot.holding(Key.FORWARD), 1.0)
    assert moved.agent.position == pytest.approx((1000.0, 0.0))
