"""Marker component.

Visual indicator bound to the cell the agent occupies. Stored in
``State.marker`` keyed by its cell index, so a cell never holds two markers.
"""

from dataclasses import dataclass

from ant_grid.types import CellIndex, MarkerID


@dataclass(frozen=True)
class Marker:
    """Live marker handle.

    Attributes:
        marker_id: Monotonic handle, unique within a session.
        cell: Index of the bound cell.
    """

    marker_id: MarkerID
    cell: CellIndex
