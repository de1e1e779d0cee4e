import numpy as np
import pytest

from ant_grid.renderer.draw import (
    DrawKind,
    draw_commands,
    render,
    segment_command,
    world_to_screen,
)
from ant_grid.config import PlayArea
from ant_grid.utils.grid import cell_at
from ant_grid.utils.segment import segment_between
from tests.test_utils import make_state


def test_draw_commands_cover_grid_marker_and_agent() -> None:
    state = make_state()
    commands = draw_commands(state)
    kinds = [command.kind for command in commands]
    assert kinds.count(DrawKind.SEGMENT) == len(state.segments) == 10 + 6
    assert kinds.count(DrawKind.MARKER) == 1
    assert kinds[-1] == DrawKind.AGENT
    marker = commands[0]
    assert marker.kind == DrawKind.MARKER
    assert marker.position == (5.0, 5.0)
    assert marker.extent == (10.0, 10.0)


def test_world_to_screen_flips_y() -> None:
    area = PlayArea(width=100.0, height=60.0, spacing=10.0)
    points = np.array([[-50.0, 30.0], [50.0, -30.0], [0.0, 0.0]])
    screen = world_to_screen(area, points, 2.0)
    np.testing.assert_allclose(screen, [[0.0, 0.0], [200.0, 120.0], [100.0, 60.0]])


def test_render_image_size_and_marker_color() -> None:
    state = make_state(agent_start=(-45.0, -25.0))
    img = render(state, resolution=200)
    assert img.size == (200, 120)
    assert img.mode == "RGBA"
    # cell (0, 0) spans pixels x 0..20, y 100..120; sample off the lines and the agent
    pixel = img.getpixel((4, 116))
    assert pixel[:3] == state.config.marker_color
    # an unmarked cell shows the clear color
    assert img.getpixel((55, 55))[:3] == state.config.clear_color


def test_render_rejects_bad_resolution() -> None:
    with pytest.raises(ValueError):
        render(make_state(), resolution=0)


def test_segment_outline_spans_endpoints() -> None:
    segment = segment_between((0.0, 0.0), (0.0, 10.0), 2.0)
    outline = segment_command(segment, (0, 0, 0)).outline()
    assert outline.shape == (4, 2)
    np.testing.assert_allclose(outline[:, 0].min(), -1.0, atol=1e-9)
    np.testing.assert_allclose(outline[:, 0].max(), 1.0, atol=1e-9)
    np.testing.assert_allclose(outline[:, 1].min(), 0.0, atol=1e-9)
    np.testing.assert_allclose(outline[:, 1].max(), 10.0, atol=1e-9)


def test_marker_matches_fractional_cell_bounds() -> None:
    state = make_state(
        area=PlayArea(width=30.0, height=21.0, spacing=0.3),
        agent_start=(-7.800000000000002, 0.05),
    )
    (marker,) = [c for c in draw_commands(state) if c.kind == DrawKind.MARKER]
    (index,) = state.marker.keys()
    outline = marker.outline()
    cell = cell_at(state, index)
    np.testing.assert_allclose(outline[:, 0].min(), cell.min_x, atol=1e-9)
    np.testing.assert_allclose(outline[:, 0].max(), cell.max_x, atol=1e-9)
    np.testing.assert_allclose(outline[:, 1].min(), cell.min_y, atol=1e-9)
    np.testing.assert_allclose(outline[:, 1].max(), cell.max_y, atol=1e-9)
