"""Segment component.

A grid line rendered as a thin rectangle: centered on the midpoint of its
endpoints and rotated about the viewing axis. Built by
:func:`ant_grid.utils.segment.segment_between`.
"""

from dataclasses import dataclass

from ant_grid.types import Vec2


@dataclass(frozen=True)
class Segment:
    """Oriented rectangle.

    Attributes:
        center: Midpoint of the original endpoints.
        angle: Rotation in radians, counter-clockwise from +x.
        length: Extent along the rotated x axis.
        stroke: Extent along the rotated y axis (line width).
    """

    center: Vec2
    angle: float
    length: float
    stroke: float
