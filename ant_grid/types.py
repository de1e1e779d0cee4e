"""Common type aliases.

Coordinates are world units on a plane centered at the origin with ``y``
pointing up. Cells are addressed by their integer column / row index.
"""

from typing import Tuple

Vec2 = Tuple[float, float]

CellIndex = Tuple[int, int]
"""``(i, j)``: column counted from the left edge, row counted from the bottom."""

MarkerID = int

Color = Tuple[int, int, int]
