"""Play area and session configuration.

``DEFAULT_CONFIG`` reproduces the reference window: a 1280x640 play area
centered on the origin, grid lines every 10 units with a stroke of 1, black
lines over a light grey clear color.
"""

import math
from dataclasses import dataclass, field

from ant_grid.types import Color, Vec2


@dataclass(frozen=True)
class PlayArea:
    """Rectangular region centered on the origin.

    Attributes:
        width: Horizontal extent in world units.
        height: Vertical extent in world units.
        spacing: Distance between adjacent grid lines (the cell size).
    """

    width: float = 1280.0
    height: float = 640.0
    spacing: float = 10.0

    @property
    def left(self) -> float:
        return -(self.width / 2.0)

    @property
    def right(self) -> float:
        return self.width / 2.0

    @property
    def bottom(self) -> float:
        return -(self.height / 2.0)

    @property
    def top(self) -> float:
        return self.height / 2.0

    @property
    def columns(self) -> int:
        return math.floor(self.width / self.spacing)

    @property
    def rows(self) -> int:
        return math.floor(self.height / self.spacing)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Play area must have positive size, got {self.width}x{self.height}"
            )
        if self.spacing <= 0:
            raise ValueError(f"Grid spacing must be positive, got {self.spacing}")
        if self.spacing > self.width or self.spacing > self.height:
            raise ValueError(
                f"Grid spacing {self.spacing} does not fit in "
                f"{self.width}x{self.height}"
            )


@dataclass(frozen=True)
class GridConfig:
    """Everything needed to build the initial :class:`ant_grid.state.State`.

    Attributes:
        area: Play area bounds and grid spacing.
        stroke: Grid line width.
        agent_start: Initial agent position.
        agent_angle: Initial heading in radians (0 faces +x).
        movement_speed: Agent translation speed in units per second.
        rotation_speed: Agent turn rate in radians per second.
        agent_size: Rendered agent length.
        clear_color: Background color.
        line_color: Grid line color.
        marker_color: Fill of the occupied cell.
        agent_color: Agent fill.
    """

    area: PlayArea = field(default_factory=PlayArea)
    stroke: float = 1.0
    agent_start: Vec2 = (0.0, 0.0)
    agent_angle: float = 0.0
    movement_speed: float = 200.0
    rotation_speed: float = math.pi
    agent_size: float = 8.0
    clear_color: Color = (230, 230, 230)
    line_color: Color = (0, 0, 0)
    marker_color: Color = (230, 120, 40)
    agent_color: Color = (120, 40, 20)

    def validate(self) -> None:
        self.area.validate()
        if self.stroke <= 0:
            raise ValueError(f"Stroke must be positive, got {self.stroke}")
        if self.movement_speed < 0 or self.rotation_speed < 0:
            raise ValueError("Agent speeds must be non-negative")


DEFAULT_CONFIG = GridConfig()
