"""Cell index queries.

Point-to-cell lookups over the uniform partition built by
:mod:`ant_grid.levels.grid`. :func:`cell_index_at` is the closed-form O(1)
lookup used every frame; :func:`find_cell` is the plain linear scan kept as
the reference it must agree with.
"""

import math
from typing import Iterable, Optional

from ant_grid.components import Cell
from ant_grid.config import PlayArea
from ant_grid.state import State
from ant_grid.types import CellIndex, Vec2


def make_cell(area: PlayArea, index: CellIndex) -> Cell:
    """Return the cell at ``index`` for ``area`` (no bounds check)."""
    i, j = index
    return Cell(
        index=index,
        min_x=area.left + i * area.spacing,
        min_y=area.bottom + j * area.spacing,
        max_x=area.left + (i + 1) * area.spacing,
        max_y=area.bottom + (j + 1) * area.spacing,
    )


def is_valid_index(area: PlayArea, index: CellIndex) -> bool:
    i, j = index
    return 0 <= i < area.columns and 0 <= j < area.rows


def cell_contains(cell: Cell, point: Vec2) -> bool:
    """Half-open containment test; see :meth:`ant_grid.components.Cell.contains`."""
    return cell.contains(point)


def cell_index_at(area: PlayArea, point: Vec2) -> Optional[CellIndex]:
    """Return the index of the cell containing ``point`` or ``None``.

    The floor division can land one cell off when ``point`` sits on an edge
    and the subtraction rounds; the candidate is therefore confirmed with the
    same half-open test the linear scan uses, falling back to its neighbours.
    """
    x, y = point
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    i0 = math.floor((x - area.left) / area.spacing)
    j0 = math.floor((y - area.bottom) / area.spacing)
    for i in (i0, i0 - 1, i0 + 1):
        for j in (j0, j0 - 1, j0 + 1):
            index = (i, j)
            if not is_valid_index(area, index):
                continue
            if cell_contains(make_cell(area, index), point):
                return index
    return None


def find_cell(cells: Iterable[Cell], point: Vec2) -> Optional[Cell]:
    """Linear scan for the first cell containing ``point``."""
    for cell in cells:
        if cell_contains(cell, point):
            return cell
    return None


def cell_at(state: State, index: CellIndex) -> Cell:
    """Return the stored cell for ``index``.

    Raises:
        IndexError: If ``index`` is outside the partition.
    """
    area = state.config.area
    if not is_valid_index(area, index):
        raise IndexError(
            f"Out of bounds: {index} for grid {area.columns}x{area.rows}"
        )
    i, j = index
    return state.cells[j * area.columns + i]
