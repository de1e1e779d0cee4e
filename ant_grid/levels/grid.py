"""Grid generation.

Builds the static geometry once at startup: the grid lines, the cell
partition and the initial :class:`ant_grid.state.State`. Line and cell
coordinates are computed as ``origin + k * spacing`` rather than by repeated
addition so long rows do not accumulate floating error.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from pyrsistent import pvector

from ant_grid.components import Agent, Cell, Segment
from ant_grid.config import DEFAULT_CONFIG, GridConfig, PlayArea
from ant_grid.state import State
from ant_grid.systems.marker import marker_system
from ant_grid.utils.grid import make_cell
from ant_grid.utils.segment import segment_between

logger = logging.getLogger(__name__)


def _line_count(extent: float, spacing: float) -> int:
    # number of k >= 0 with k * spacing < extent
    return math.ceil(extent / spacing)


def vertical_lines(area: PlayArea, stroke: float) -> List[Segment]:
    """One line at each ``x = left + k * spacing`` with ``x < right``."""
    lines: List[Segment] = []
    for k in range(_line_count(area.width, area.spacing)):
        x = area.left + k * area.spacing
        if x >= area.right:
            break
        lines.append(segment_between((x, area.top), (x, area.bottom), stroke))
    return lines


def horizontal_lines(area: PlayArea, stroke: float) -> List[Segment]:
    """One line at each ``y = bottom + k * spacing`` with ``y < top``."""
    lines: List[Segment] = []
    for k in range(_line_count(area.height, area.spacing)):
        y = area.bottom + k * area.spacing
        if y >= area.top:
            break
        lines.append(segment_between((area.left, y), (area.right, y), stroke))
    return lines


def grid_lines(area: PlayArea, stroke: float) -> List[Segment]:
    return vertical_lines(area, stroke) + horizontal_lines(area, stroke)


def grid_cells(area: PlayArea) -> List[Cell]:
    """Row-major cell partition covering ``columns x rows`` cells."""
    return [
        make_cell(area, (i, j)) for j in range(area.rows) for i in range(area.columns)
    ]


def generate(config: Optional[GridConfig] = None) -> State:
    """Build the initial state for ``config``.

    The agent is placed at ``config.agent_start`` and one marker pass is run
    so the first rendered frame already marks the starting cell.

    Args:
        config (GridConfig | None): Session configuration; ``DEFAULT_CONFIG``
            when omitted.

    Returns:
        State: Frame 0 snapshot.

    Raises:
        ValueError: If the configuration is invalid.
    """
    config = config or DEFAULT_CONFIG
    config.validate()
    area = config.area

    if not math.isclose(
        area.width / area.spacing, area.columns
    ) or not math.isclose(area.height / area.spacing, area.rows):
        logger.warning(
            "Play area %sx%s is not a multiple of spacing %s; trailing strip has no cells",
            area.width,
            area.height,
            area.spacing,
        )

    segments = grid_lines(area, config.stroke)
    cells = grid_cells(area)
    logger.info(
        "Generated grid: %d lines, %d cells (%dx%d)",
        len(segments),
        len(cells),
        area.columns,
        area.rows,
    )

    state = State(
        config=config,
        segments=pvector(segments),
        cells=pvector(cells),
        agent=Agent(
            position=config.agent_start,
            angle=config.agent_angle,
            movement_speed=config.movement_speed,
            rotation_speed=config.rotation_speed,
        ),
    )
    return marker_system(state)
