"""Frame reducer.

Wires the systems together to implement a single *frame* transition. The
exported :func:`step` is the only entry point for advancing the simulation
and is pure: it returns a *new* :class:`ant_grid.state.State`.

Ordering:

1. ``close_system`` honors a close request; a closed state is returned as is.
2. ``motion_system`` integrates input into the agent pose.
3. ``marker_system`` reconciles the occupied-cell marker with the new pose.
4. ``frame_system`` bumps the frame counter and simulated clock.

Rendering happens in the host after ``step`` returns.
"""

from ant_grid.actions import NO_INPUT, InputSnapshot
from ant_grid.state import State
from ant_grid.systems.marker import marker_system
from ant_grid.systems.motion import motion_system
from ant_grid.systems.terminal import close_system, frame_system


def step(state: State, snapshot: InputSnapshot = NO_INPUT, dt: float = 0.0) -> State:
    """Advance the simulation by one frame.

    Args:
        state (State): Previous immutable state.
        snapshot (InputSnapshot): Keyboard state sampled for this frame.
        dt (float): Seconds elapsed since the previous frame. Motion scales
            directly with it; large values are not clamped.

    Returns:
        State: Next snapshot. A closed state is returned unchanged.

    Raises:
        ValueError: If ``dt`` is negative.
    """
    if state.closed:
        return state

    state = close_system(state, snapshot)
    if state.closed:
        return state

    state = motion_system(state, snapshot, dt)
    state = marker_system(state)
    return frame_system(state, dt)
