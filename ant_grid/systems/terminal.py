"""Session termination system.

A close request (the CLOSE key going down this frame) ends the session.
Closing is a clean shutdown, not an error: the state is flagged and the
reducer stops advancing it.
"""

from dataclasses import replace

from ant_grid.actions import InputSnapshot, Key
from ant_grid.state import State


def close_system(state: State, snapshot: InputSnapshot) -> State:
    if state.closed or not snapshot.was_pressed(Key.CLOSE):
        return state
    return replace(state, closed=True)


def frame_system(state: State, dt: float) -> State:
    """Bump the frame counter and simulated clock."""
    return replace(state, frame=state.frame + 1, elapsed=state.elapsed + dt)
