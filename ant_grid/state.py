"""Core immutable `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole simulation at a single frame. Systems are pure functions that take a
previous ``State`` plus inputs (an :class:`ant_grid.actions.InputSnapshot`
and the frame duration) and return a *new* ``State``.

Design notes:

* Static geometry (``segments`` and ``cells``) is computed once by
    :func:`ant_grid.levels.grid.generate` and shared by every later snapshot;
    ``cells`` is row-major so the cell ``(i, j)`` lives at
    ``j * columns + i``.
* Live markers are a **persistent map** (``pyrsistent.PMap``) keyed by cell
    index. Absence of a key means that cell has no marker.
* ``closed`` is the only terminal flag. The reducer short-circuits on it.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import PMap, PVector, pmap, pvector

from ant_grid.components import Agent, Cell, Marker, Segment
from ant_grid.config import DEFAULT_CONFIG, GridConfig
from ant_grid.types import CellIndex


@dataclass(frozen=True)
class State:
    """Immutable simulation snapshot.

    Attributes:
        config (GridConfig): Play area, speeds and colors the state was built from.
        segments (PVector[Segment]): Grid lines (vertical first, then horizontal).
        cells (PVector[Cell]): Row-major cell partition of the play area.
        agent (Agent): The single agent.
        marker (PMap[CellIndex, Marker]): Live markers keyed by bound cell.
        next_marker_id (int): Handle the next created marker receives.
        frame (int): Frame counter (0-based).
        elapsed (float): Accumulated simulated seconds.
        closed (bool): True once a close request was honored.
    """

    config: GridConfig = DEFAULT_CONFIG
    segments: PVector[Segment] = pvector()
    cells: PVector[Cell] = pvector()
    agent: Agent = Agent()
    marker: PMap[CellIndex, Marker] = pmap()
    next_marker_id: int = 0

    frame: int = 0
    elapsed: float = 0.0
    closed: bool = False

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization for diagnostics.

        The static ``segments`` / ``cells`` vectors are summarised by their
        length; empty maps and falsy scalars are skipped.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pvector())):
                value = len(value)
            elif isinstance(value, type(pmap())):
                if len(value) == 0:
                    continue
                value = {str(k): v for k, v in value.items()}
            description = description.set(field, value)
        return description
