"""Marker synchronization system.

Keeps the occupied-cell marker in step with the agent. Each pass:

1. Looks up the cell containing the agent (none when it is off the grid).
2. Creates a marker for that cell if it has none.
3. Sweeps every live marker and removes those whose *own* cell no longer
    contains the agent.

Creation runs before the sweep, so within one pass the marker of the cell
just entered and the one just left coexist only until the sweep finishes.
After the pass at most one marker is live, and running the pass again
without movement changes nothing.
"""

import logging
from dataclasses import replace

from ant_grid.components import Marker
from ant_grid.state import State
from ant_grid.utils.grid import cell_at, cell_index_at

logger = logging.getLogger(__name__)


def marker_system(state: State) -> State:
    """Create the marker for the occupied cell and drop stale ones."""
    position = state.agent.position
    markers = state.marker
    next_marker_id = state.next_marker_id

    index = cell_index_at(state.config.area, position)
    if index is not None and index not in markers:
        markers = markers.set(index, Marker(marker_id=next_marker_id, cell=index))
        logger.debug("Marker %d created for cell %s", next_marker_id, index)
        next_marker_id += 1

    for cell_index, marker in markers.items():
        if not cell_at(state, cell_index).contains(position):
            markers = markers.discard(cell_index)
            logger.debug("Marker %d removed from cell %s", marker.marker_id, cell_index)

    if markers is state.marker:
        return state
    return replace(state, marker=markers, next_marker_id=next_marker_id)
