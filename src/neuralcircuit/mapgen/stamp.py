# src/neuralcircuit/mapgen/stamp.py
# Turn a carved path into pipe shapes, fill the rest with decoys, then scramble.

import logging
from typing import Dict, List, Tuple
from ..grid import Grid
from ..rng import RandomSource
from ..tiles import (
    N, E, S, W,
    EMPTY, STRAIGHT, ELBOW, CROSS, DECOY_SHAPES,
    dir_between, mask_label,
)

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

# inbound|outbound -> (shape, rotation)
STAMP_TABLE: Dict[int, Tuple[int, int]] = {
    N | S: (STRAIGHT, 0),
    E | W: (STRAIGHT, 1),
    N | E: (ELBOW, 0),
    E | S: (ELBOW, 1),
    S | W: (ELBOW, 2),
    W | N: (ELBOW, 3),
}

def shape_for_mask(mask: int) -> Tuple[int, int]:
    """
    Map a two-connection mask to the shape/rotation that presents it.
    Anything else stamps as CROSS, which connects every side and therefore
    can't cut the carved path.
    """
    hit = STAMP_TABLE.get(mask)
    if hit is None:
        logger.debug("unstampable mask %s, using cross", mask_label(mask))
        return (CROSS, 0)
    return hit

def path_masks(grid: Grid, path: List[XY]) -> List[int]:
    """
    For each path cell: the side flow arrives through OR the side it leaves by.
    The first cell arrives through the entry's outward side and the last cell
    leaves through the exit's outward side.
    """
    masks = []
    last = len(path) - 1
    for i, cur in enumerate(path):
        d_in = grid.entry.outward if i == 0 else dir_between(cur, path[i - 1])
        d_out = grid.exit.outward if i == last else dir_between(cur, path[i + 1])
        masks.append(d_in | d_out)
    return masks

def stamp_path(grid: Grid, path: List[XY]) -> Dict[XY, int]:
    """Write shapes/rotations along the path; returns the solving rotation per cell."""
    solution: Dict[XY, int] = {}
    for pos, mask in zip(path, path_masks(grid, path)):
        shape, rotation = shape_for_mask(mask)
        tile = grid.get(*pos)
        tile.shape = shape
        tile.set_rotation(rotation)
        solution[pos] = rotation
    return solution

def fill_decoys(grid: Grid, rng: RandomSource) -> None:
    for tile in grid.buf:
        if tile.shape == EMPTY:
            tile.shape = DECOY_SHAPES[rng.randint(0, len(DECOY_SHAPES) - 1)]

def scramble(grid: Grid, rng: RandomSource) -> None:
    # Overwrites every rotation, path cells included. Shapes are untouched.
    for tile in grid.buf:
        tile.set_rotation(rng.randint(0, 3))

def apply_solution(grid: Grid, solution: Dict[XY, int]) -> None:
    """Put every path cell back at its stamped rotation."""
    for (r, c), rotation in solution.items():
        grid.get(r, c).set_rotation(rotation)
