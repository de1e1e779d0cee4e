"""Line segment construction."""

import math

from ant_grid.components import Segment
from ant_grid.types import Vec2


def segment_between(start: Vec2, end: Vec2, stroke: float) -> Segment:
    """Build the rectangle that draws a line from ``start`` to ``end``.

    The rectangle is centered on the midpoint, as long as the distance between
    the points and rotated by ``atan2(dy, dx)``, so vertical lines come out at
    +/- pi/2 without any division.

    Args:
        start: First endpoint.
        end: Second endpoint.
        stroke: Line width, must be positive.

    Returns:
        Segment: The oriented rectangle.

    Raises:
        ValueError: If the endpoints coincide or ``stroke`` is not positive.
    """
    if stroke <= 0:
        raise ValueError(f"Stroke must be positive, got {stroke}")
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length == 0:
        raise ValueError(f"Zero-length segment at {start}")
    return Segment(
        center=(start[0] + dx / 2.0, start[1] + dy / 2.0),
        angle=math.atan2(dy, dx),
        length=length,
        stroke=stroke,
    )
