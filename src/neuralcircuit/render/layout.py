# src/neuralcircuit/render/layout.py
"""
Presentation math with no pygame dependency: viewport fitting, pointer to
cell mapping, anchor marker placement and rotation easing.

Nothing here feeds back into the engine; the animator reads discrete
rotations as targets only.
"""

import math
from typing import Dict, Optional, Tuple

from ..config import CONFIG, GameConfig
from ..grid import Anchor, Grid
from ..tiles import DELTAS

XY = Tuple[int, int]

QUARTER = math.pi / 2
SNAP_EPS = 0.01


def fit_tile_size(
    view_w: int, view_h: int, rows: int, cols: int, config: GameConfig = CONFIG
) -> int:
    """Largest tile that fits the window with margins, clamped to [min, max]."""
    max_w = max(100, view_w - config.margin_x)
    max_h = max(100, view_h - config.margin_y)
    size = min(max_w // cols, max_h // rows, config.max_tile_size)
    return max(config.min_tile_size, size)


def board_size(tile: int, rows: int, cols: int) -> Tuple[int, int]:
    return (tile * cols, tile * rows)


def cell_at(x: float, y: float, tile: int, rows: int, cols: int) -> Optional[XY]:
    """(row, col) under a board-relative pixel, or None off the board."""
    if x < 0 or y < 0:
        return None
    c = int(x // tile)
    r = int(y // tile)
    if r >= rows or c >= cols:
        return None
    return (r, c)


def tile_center(row: int, col: int, tile: int) -> Tuple[float, float]:
    return (col * tile + tile / 2, row * tile + tile / 2)


def anchor_marker(anchor: Anchor, tile: int) -> Tuple[float, float]:
    """Center of the IN/OUT marker, just outside the board past the anchor's side."""
    cx, cy = tile_center(anchor.row, anchor.col, tile)
    dr, dc = DELTAS[anchor.outward]
    off = tile * 0.6
    return (cx + dc * off, cy + dr * off)


class RotationAnimator:
    """
    Eases each tile's drawn angle toward its rotation target.

    Targets count quarter turns without wrapping so a 3→0 click still spins
    forward instead of unwinding three quarters backward.
    """

    def __init__(self, speed: float = CONFIG.anim_speed) -> None:
        self.speed = speed
        self.targets: Dict[XY, int] = {}
        self.angles: Dict[XY, float] = {}

    def sync(self, grid: Grid) -> None:
        # New level: snap everything to its scrambled rotation.
        self.targets = {t.pos: t.rotation for t in grid.buf}
        self.angles = {pos: turns * QUARTER for pos, turns in self.targets.items()}

    def follow(self, pos: XY, rotation: int) -> None:
        """Advance the target forward to the tile's current rotation (0..3 turns)."""
        if pos in self.targets:
            self.targets[pos] += (rotation - self.targets[pos]) % 4

    def step(self) -> None:
        for pos, turns in self.targets.items():
            goal = turns * QUARTER
            diff = goal - self.angles[pos]
            if abs(diff) > SNAP_EPS:
                self.angles[pos] += diff * self.speed
            else:
                self.angles[pos] = goal

    def angle(self, pos: XY) -> float:
        return self.angles.get(pos, 0.0)

    def settled(self) -> bool:
        return all(self.angles[p] == t * QUARTER for p, t in self.targets.items())
