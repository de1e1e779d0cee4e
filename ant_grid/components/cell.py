"""Cell component.

One square of the uniform grid partition. Bounds are half-open so that a
point on a shared edge belongs to exactly one cell: the one whose lower bound
equals the coordinate.
"""

from dataclasses import dataclass

from ant_grid.types import CellIndex, Vec2


@dataclass(frozen=True)
class Cell:
    """Axis-aligned square region.

    Neighbouring cells share edge values exactly: the ``max_x`` of column
    ``i`` is the ``min_x`` of column ``i + 1``, computed by the same
    expression, so fractional spacings leave no gaps or overlaps.

    Attributes:
        index: ``(i, j)`` column / row of the cell.
        min_x: Left edge (inclusive).
        min_y: Bottom edge (inclusive).
        max_x: Right edge (exclusive).
        max_y: Top edge (exclusive).
    """

    index: CellIndex
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def extent(self) -> Vec2:
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    @property
    def center(self) -> Vec2:
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def contains(self, point: Vec2) -> bool:
        x, y = point
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y
