from ant_grid.actions import InputSnapshot, Key
from ant_grid.systems.terminal import close_system, frame_system
from tests.test_utils import make_state


def test_close_key_closes_session() -> None:
    state = make_state()
    closed = close_system(state, InputSnapshot.from_keys([], [Key.CLOSE]))
    assert closed.closed


def test_holding_close_without_press_does_nothing() -> None:
    state = make_state()
    assert close_system(state, InputSnapshot.holding(Key.CLOSE)) is state


def test_frame_system_advances_clock() -> None:
    state = frame_system(frame_system(make_state(), 0.25), 0.5)
    assert state.frame == 2
    assert state.elapsed == 0.75
