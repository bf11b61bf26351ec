# src/neuralcircuit/render/pipes.py
from __future__ import annotations
import math
import pygame
from functools import lru_cache
from typing import Tuple

from ..config import CONFIG, GameConfig
from ..grid import Anchor, Grid
from ..tiles import N, E, S, W, EMPTY, dirs_in
from .layout import RotationAnimator, anchor_marker, tile_center

# unit arm vectors in screen space (y grows downward)
_ARMS = {N: (0, -1), E: (1, 0), S: (0, 1), W: (-1, 0)}
_GRID_LINE = (34, 34, 34)
_JOINT_DARK = (42, 26, 16)
_WHITE = (255, 255, 255)

class PipeTileset:
    """
    Cached pipe sprites drawn at rotation 0:
      - one surface per (shape, lit) at exactly (tile_size, tile_size)
      - rotated views cached per whole degree
    """
    def __init__(self, tile_size: int, config: GameConfig = CONFIG):
        self.tile_size = tile_size
        self.config = config

    @lru_cache(maxsize=64)
    def get(self, shape: int, lit: bool) -> pygame.Surface:
        size = self.tile_size
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        c = size / 2
        arm = size * 0.4
        width = max(1, int(size * 0.2))
        color = self.config.pipe_active if lit else self.config.pipe_inactive

        for d in dirs_in(shape):
            dx, dy = _ARMS[d]
            end = (c + dx * arm, c + dy * arm)
            if lit:
                # soft glow under the pipe
                pygame.draw.line(img, (*color, 70), (c, c), end, width * 2)
            pygame.draw.line(img, color, (c, c), end, width)

        if shape != EMPTY:
            joint = _WHITE if lit else _JOINT_DARK
            pygame.draw.circle(img, joint, (int(c), int(c)), max(1, int(size * 0.08)))
        return img

    @lru_cache(maxsize=1024)
    def view(self, shape: int, lit: bool, degrees: int) -> pygame.Surface:
        base = self.get(shape, lit)
        if degrees % 360 == 0:
            return base
        # pygame rotates counter-clockwise; tiles turn clockwise
        return pygame.transform.rotate(base, -degrees)

def draw_board(
    screen: pygame.Surface,
    grid: Grid,
    tileset: PipeTileset,
    animator: RotationAnimator,
    origin: Tuple[int, int] = (0, 0),
) -> None:
    ox, oy = origin
    size = tileset.tile_size
    for tile in grid.buf:
        x0, y0 = ox + tile.col * size, oy + tile.row * size
        pygame.draw.rect(screen, _GRID_LINE, pygame.Rect(x0, y0, size, size), 1)
        degrees = int(round(math.degrees(animator.angle(tile.pos))))
        img = tileset.view(tile.shape, tile.lit, degrees)
        cx, cy = tile_center(tile.row, tile.col, size)
        screen.blit(img, img.get_rect(center=(ox + cx, oy + cy)))

def draw_anchor(
    screen: pygame.Surface,
    anchor: Anchor,
    tile: int,
    is_entry: bool,
    font: pygame.font.Font,
    origin: Tuple[int, int] = (0, 0),
    config: GameConfig = CONFIG,
) -> None:
    ox, oy = origin
    mx, my = anchor_marker(anchor, tile)
    cx, cy = tile_center(anchor.row, anchor.col, tile)
    mx, my, cx, cy = mx + ox, my + oy, cx + ox, cy + oy
    color = _WHITE if is_entry else config.pipe_active

    # connector stub toward the board, then the node
    stub = (mx + (cx - mx) * 0.6, my + (cy - my) * 0.6)
    pygame.draw.line(screen, color, (mx, my), stub, max(1, int(tile * 0.2)))
    pygame.draw.circle(screen, color, (int(mx), int(my)), max(2, int(tile * 0.25)))

    label = font.render("IN" if is_entry else "OUT", True, (0, 0, 0))
    screen.blit(label, label.get_rect(center=(int(mx), int(my))))
