# src/neuralcircuit/engine/flow.py
# Flood-fill from the entry anchor. Two neighbors are joined only when both
# present a connector on their shared edge.

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from ..grid import Grid
from ..tiles import DELTAS, Tile, dirs_in, opposite

XY = Tuple[int, int]


@dataclass(frozen=True)
class FlowResult:
    lit_cells: FrozenSet[XY]
    won: bool


def clear_lit(grid: Grid) -> None:
    for tile in grid.buf:
        tile.lit = False


def _propagate(grid: Grid, start: Tile, arrived_from: int) -> bool:
    """
    Light everything reachable from `start`; return True if flow leaves
    through the exit anchor. `lit` is the only visited marker.
    """
    won = False
    exit_pos, exit_dir = grid.exit.pos, grid.exit.outward
    pending: List[Tuple[Tile, int]] = [(start, arrived_from)]

    while pending:
        tile, came_from = pending.pop()
        if tile.lit:
            continue
        tile.lit = True

        cons = tile.connections()
        if tile.pos == exit_pos and cons & exit_dir:
            won = True

        for d in dirs_in(cons):
            if d == came_from:
                continue  # the edge we just crossed
            dr, dc = DELTAS[d]
            nb = grid.tile_at(tile.row + dr, tile.col + dc)
            back = opposite(d)
            if nb is not None and nb.connects(back):
                pending.append((nb, back))

    return won


def evaluate(grid: Grid) -> FlowResult:
    """Recompute every tile's `lit` flag and report whether the exit is reached."""
    clear_lit(grid)
    entry = grid.entry
    start = grid.get(entry.row, entry.col)

    won = False
    if start.connects(entry.outward):
        won = _propagate(grid, start, entry.outward)

    return FlowResult(lit_cells=grid.lit_cells(), won=won)
