"""Agent motion system.

Integrates one frame of player intent into the agent pose:

1. Rotation intent is ``+1`` for LEFT, ``-1`` for RIGHT and ``0`` when both
    or neither are held (the keys cancel, neither has priority).
2. Movement intent follows the same rule for FORWARD / BACKWARD.
3. The heading is updated first, then the agent translates along the *new*
    heading.

The agent is not clamped to the play area; it may wander off the visible
grid indefinitely.
"""

import math
from dataclasses import replace

from ant_grid.actions import InputSnapshot, Key
from ant_grid.state import State


def _axis(snapshot: InputSnapshot, positive: Key, negative: Key) -> int:
    return int(snapshot.is_held(positive)) - int(snapshot.is_held(negative))


def motion_system(state: State, snapshot: InputSnapshot, dt: float) -> State:
    """Advance the agent pose by ``dt`` seconds.

    Args:
        state (State): Current state.
        snapshot (InputSnapshot): Keys held this frame.
        dt (float): Elapsed seconds since the previous frame.

    Returns:
        State: Same state when nothing moves, otherwise one with a new agent.

    Raises:
        ValueError: If ``dt`` is negative.
    """
    if dt < 0:
        raise ValueError(f"Frame time must be non-negative, got {dt}")

    rotation = _axis(snapshot, Key.LEFT, Key.RIGHT)
    movement = _axis(snapshot, Key.FORWARD, Key.BACKWARD)
    if dt == 0 or (rotation == 0 and movement == 0):
        return state

    agent = state.agent
    angle = agent.angle + rotation * agent.rotation_speed * dt
    distance = movement * agent.movement_speed * dt
    x, y = agent.position
    position = (x + distance * math.cos(angle), y + distance * math.sin(angle))

    return replace(state, agent=replace(agent, angle=angle, position=position))
