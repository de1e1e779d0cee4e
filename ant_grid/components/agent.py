"""Agent component.

The single player-controlled ant. Pose is rewritten every frame by
:func:`ant_grid.systems.motion.motion_system`.
"""

from dataclasses import dataclass

from ant_grid.types import Vec2


@dataclass(frozen=True)
class Agent:
    """Agent pose and speeds.

    Attributes:
        position: World position.
        angle: Heading in radians, counter-clockwise from +x.
        movement_speed: Units per second while moving.
        rotation_speed: Radians per second while turning.
    """

    position: Vec2 = (0.0, 0.0)
    angle: float = 0.0
    movement_speed: float = 0.0
    rotation_speed: float = 0.0
