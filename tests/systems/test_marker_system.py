from dataclasses import replace

from pyrsistent import pmap

from ant_grid.components import Marker
from ant_grid.config import PlayArea
from ant_grid.systems.marker import marker_system
from ant_grid.utils.grid import cell_at, cell_index_at
from tests.test_utils import SMALL_AREA, make_state, teleport


def test_agent_at_rest_at_origin_has_one_marker() -> None:
    state = make_state()
    assert len(state.marker) == 1
    (index,) = state.marker.keys()
    assert index == cell_index_at(SMALL_AREA, (0.0, 0.0))
    assert cell_at(state, index).contains((0.0, 0.0))
    assert state.marker[index].cell == index


def test_pass_is_idempotent() -> None:
    state = make_state()
    again = marker_system(state)
    assert again is state
    assert marker_system(marker_system(again)) is state


def test_moving_to_adjacent_cell_swaps_marker() -> None:
    state = make_state(agent_start=(5.0, 5.0))
    old_index = (5, 3)
    assert list(state.marker.keys()) == [old_index]
    old_id = state.marker[old_index].marker_id

    state = marker_system(teleport(state, (15.0, 5.0)))
    assert list(state.marker.keys()) == [(6, 3)]
    assert state.marker[(6, 3)].marker_id == old_id + 1


def test_staying_inside_cell_keeps_marker() -> None:
    state = make_state(agent_start=(1.0, 1.0))
    marker = state.marker[(5, 3)]
    state = marker_system(teleport(state, (9.0, 9.0)))
    assert state.marker[(5, 3)] is marker


def test_leaving_the_grid_removes_marker_without_creating() -> None:
    state = make_state()
    next_id = state.next_marker_id
    state = marker_system(teleport(state, (500.0, 500.0)))
    assert len(state.marker) == 0
    assert state.next_marker_id == next_id
    # and stays stable while outside
    assert marker_system(state) is state


def test_reentering_the_grid_creates_marker() -> None:
    state = marker_system(teleport(make_state(), (500.0, 500.0)))
    state = marker_system(teleport(state, (-45.0, -25.0)))
    assert list(state.marker.keys()) == [(0, 0)]


def test_every_stale_marker_checked_against_its_own_cell() -> None:
    # several stale markers left over; only the occupied cell's marker survives
    state = make_state(agent_start=(25.0, 15.0))
    stale = {
        (0, 0): Marker(marker_id=90, cell=(0, 0)),
        (9, 5): Marker(marker_id=91, cell=(9, 5)),
        (4, 2): Marker(marker_id=92, cell=(4, 2)),
    }
    state = replace(state, marker=state.marker.update(pmap(stale)))
    assert len(state.marker) == 4

    state = marker_system(state)
    assert list(state.marker.keys()) == [(7, 4)]


def test_marker_ids_are_monotonic() -> None:
    state = make_state(agent_start=(-45.0, -25.0))
    ids = [state.marker[(0, 0)].marker_id]
    for i in range(1, 5):
        state = marker_system(teleport(state, (-45.0 + 10 * i, -25.0)))
        (marker,) = state.marker.values()
        ids.append(marker.marker_id)
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_agent_on_fractional_cell_edge_is_marked() -> None:
    # within rounding of a column edge
    state = make_state(
        area=PlayArea(width=30.0, height=21.0, spacing=0.3),
        agent_start=(-7.800000000000002, 0.05),
    )
    assert len(state.marker) == 1
    (index,) = state.marker.keys()
    assert cell_at(state, index).contains(state.agent.position)
