# src/neuralcircuit/mapgen/anchors.py
from typing import Tuple
from ..grid import Anchor
from ..rng import RandomSource
from ..tiles import SIDES, TOP, RIGHT, BOTTOM

def opposite_side(side: int) -> int:
    # Two positions around the board: Top<->Bottom, Right<->Left.
    return (side + 2) % 4

def perimeter_anchor(side: int, rows: int, cols: int, rng: RandomSource) -> Anchor:
    """
    Pick a cell on the grid row/column that touches `side`, uniformly along it.
    The anchor's outward direction points off the board through that side.
    """
    if side == TOP:
        return Anchor(0, rng.randint(0, cols - 1), side)
    if side == RIGHT:
        return Anchor(rng.randint(0, rows - 1), cols - 1, side)
    if side == BOTTOM:
        return Anchor(rows - 1, rng.randint(0, cols - 1), side)
    return Anchor(rng.randint(0, rows - 1), 0, side)

def place_anchors(rows: int, cols: int, rng: RandomSource) -> Tuple[Anchor, Anchor]:
    """
    Order of draws:
      1) entry side, uniform over Top/Right/Bottom/Left
      2) entry coordinate along that side
      3) exit coordinate along the opposite side
    """
    start_side = SIDES[rng.randint(0, 3)]
    entry = perimeter_anchor(start_side, rows, cols, rng)
    exit = perimeter_anchor(opposite_side(start_side), rows, cols, rng)
    return entry, exit
