"""Rendering subpackage.

Turns immutable ``State`` snapshots into visuals in two stages:

* :func:`ant_grid.renderer.draw.draw_commands` emits backend-agnostic
    ``DrawCommand`` submissions (position, rotation, extent, color) for grid
    lines, the occupied-cell marker and the agent.
* :func:`ant_grid.renderer.draw.render` composes them into a Pillow image,
    caching the static grid layer.

The pygame viewer consumes the same commands through
:func:`ant_grid.renderer.draw.world_to_screen`.
"""
