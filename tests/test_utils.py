from dataclasses import replace
from typing import Optional

from ant_grid.config import GridConfig, PlayArea
from ant_grid.levels.grid import generate
from ant_grid.state import State
from ant_grid.types import Vec2

SMALL_AREA = PlayArea(width=100.0, height=60.0, spacing=10.0)


def make_config(
    area: PlayArea = SMALL_AREA,
    agent_start: Vec2 = (0.0, 0.0),
    agent_angle: float = 0.0,
    movement_speed: float = 10.0,
    rotation_speed: float = 1.0,
) -> GridConfig:
    return GridConfig(
        area=area,
        agent_start=agent_start,
        agent_angle=agent_angle,
        movement_speed=movement_speed,
        rotation_speed=rotation_speed,
    )


def make_state(
    agent_start: Vec2 = (0.0, 0.0),
    area: PlayArea = SMALL_AREA,
    config: Optional[GridConfig] = None,
    **kwargs: float,
) -> State:
    """Small 10x6 grid (cells of 10 units) with the agent at ``agent_start``."""
    return generate(config or make_config(area=area, agent_start=agent_start, **kwargs))


def teleport(state: State, position: Vec2) -> State:
    """Move the agent without running any system."""
    return replace(state, agent=replace(state.agent, position=position))
