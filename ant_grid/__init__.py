"""ant_grid
========

A single agent (the "ant") roams continuously over a fixed grid overlay; the
cell it currently occupies is marked and the mark follows it from cell to
cell.

The package is organised like a tiny ECS with a data-oriented twist:

* :mod:`ant_grid.state` holds the immutable :class:`State` snapshot.
* :mod:`ant_grid.levels.grid` builds the grid lines, cells and initial state.
* :mod:`ant_grid.systems` contains the pure per-frame systems (motion,
  marker synchronization, close handling).
* :mod:`ant_grid.step` wires the systems into one frame transition.
* :mod:`ant_grid.renderer` turns a snapshot into draw commands / images.
"""
