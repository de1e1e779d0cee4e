from dataclasses import dataclass
from enum import StrEnum, auto
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from ant_grid.components import Segment
from ant_grid.config import PlayArea
from ant_grid.state import State
from ant_grid.types import Color, Vec2
from ant_grid.utils.grid import cell_at


DEFAULT_RESOLUTION = 1280

FloatArray = npt.NDArray[np.float64]


class DrawKind(StrEnum):
    SEGMENT = auto()
    MARKER = auto()
    AGENT = auto()


@dataclass(frozen=True)
class DrawCommand:
    """Backend-agnostic draw submission.

    ``extent`` is the full ``(width, height)`` of the shape before rotation.
    """

    kind: DrawKind
    position: Vec2
    rotation: float
    extent: Tuple[float, float]
    color: Color

    def outline(self) -> FloatArray:
        """World-space polygon: a rectangle, or a triangle for the agent."""
        w, h = self.extent[0] / 2.0, self.extent[1] / 2.0
        if self.kind == DrawKind.AGENT:
            local = np.array([[w, 0.0], [-w, h], [-w, -h]], dtype=np.float64)
        else:
            local = np.array([[-w, -h], [w, -h], [w, h], [-w, h]], dtype=np.float64)
        cos_a, sin_a = np.cos(self.rotation), np.sin(self.rotation)
        rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=np.float64)
        return local @ rotation.T + np.asarray(self.position, dtype=np.float64)


def segment_command(segment: Segment, color: Color) -> DrawCommand:
    return DrawCommand(
        kind=DrawKind.SEGMENT,
        position=segment.center,
        rotation=segment.angle,
        extent=(segment.length, segment.stroke),
        color=color,
    )


def marker_commands(state: State) -> List[DrawCommand]:
    commands: List[DrawCommand] = []
    for index in state.marker:
        cell = cell_at(state, index)
        commands.append(
            DrawCommand(
                kind=DrawKind.MARKER,
                position=cell.center,
                rotation=0.0,
                extent=cell.extent,
                color=state.config.marker_color,
            )
        )
    return commands


def agent_command(state: State) -> DrawCommand:
    size = state.config.agent_size
    return DrawCommand(
        kind=DrawKind.AGENT,
        position=state.agent.position,
        rotation=state.agent.angle,
        extent=(size, size * 0.6),
        color=state.config.agent_color,
    )


def draw_commands(state: State, include_grid: bool = True) -> List[DrawCommand]:
    """
    Draw submissions in painter's order: markers, grid lines, then the agent.
    """
    commands = marker_commands(state)
    if include_grid:
        commands.extend(
            segment_command(segment, state.config.line_color)
            for segment in state.segments
        )
    commands.append(agent_command(state))
    return commands


def scale_for(area: PlayArea, resolution: int) -> float:
    return resolution / area.width


def world_to_screen(area: PlayArea, points: FloatArray, scale: float) -> FloatArray:
    """
    Map world points (origin centered, y up) to pixel coordinates (origin top-left, y down).
    """
    screen = np.empty_like(points, dtype=np.float64)
    screen[..., 0] = (points[..., 0] - area.left) * scale
    screen[..., 1] = (area.top - points[..., 1]) * scale
    return screen


def image_size(area: PlayArea, resolution: int) -> Tuple[int, int]:
    scale = scale_for(area, resolution)
    return resolution, max(1, int(round(area.height * scale)))


def _draw_polygons(
    img: Image.Image,
    area: PlayArea,
    scale: float,
    commands: Sequence[DrawCommand],
) -> None:
    draw = ImageDraw.Draw(img)
    for command in commands:
        pts = world_to_screen(area, command.outline(), scale)
        polygon = [(float(x), float(y)) for x, y in pts]
        color = (*command.color, 255)
        # outline keeps sub-pixel strokes visible
        draw.polygon(polygon, fill=color, outline=color)


@lru_cache(maxsize=16)
def _grid_layer(
    area: PlayArea,
    segments: Tuple[Segment, ...],
    color: Color,
    resolution: int,
) -> Image.Image:
    img = Image.new("RGBA", image_size(area, resolution), (0, 0, 0, 0))
    commands = [segment_command(segment, color) for segment in segments]
    _draw_polygons(img, area, scale_for(area, resolution), commands)
    return img


def render(state: State, resolution: int = DEFAULT_RESOLUTION) -> Image.Image:
    """
    Renders the state as a PIL image ``resolution`` pixels wide.

    The static grid layer is drawn once per (area, segments, resolution) and
    composited over the markers on every call.
    """
    if resolution <= 0:
        raise ValueError(f"Resolution must be positive, got {resolution}")
    area = state.config.area
    scale = scale_for(area, resolution)
    img = Image.new("RGBA", image_size(area, resolution), (*state.config.clear_color, 255))

    _draw_polygons(img, area, scale, marker_commands(state))
    grid = _grid_layer(
        area, tuple(state.segments), state.config.line_color, resolution
    )
    img.alpha_composite(grid)
    _draw_polygons(img, area, scale, [agent_command(state)])
    return img


class GridRenderer:
    resolution: int

    def __init__(self, resolution: int = DEFAULT_RESOLUTION):
        self.resolution = resolution

    def render(self, state: State) -> Image.Image:
        return render(state, resolution=self.resolution)


def to_array(img: Optional[Image.Image]) -> npt.NDArray[np.uint8]:
    if img is None:
        raise ValueError("No image to convert")
    return np.asarray(img, dtype=np.uint8)
