"""ant_grid.components
====================

Aggregate import surface for the value objects stored in
:class:`ant_grid.state.State`::

    from ant_grid.components import Agent, Cell, Marker, Segment

All components are frozen dataclasses; systems replace them rather than
mutate them.
"""

from .agent import Agent
from .cell import Cell
from .marker import Marker
from .segment import Segment

__all__ = [
    "Agent",
    "Cell",
    "Marker",
    "Segment",
]
