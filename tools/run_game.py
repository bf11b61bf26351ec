# tools/run_game.py
# Playable pygame window for Neural Circuit.
# - Click a tile to turn it clockwise; flow is re-evaluated after every turn.
# - R or the overlay button starts a new level.
# - H snaps every solution-path tile to its solving rotation (debug hint).
# - Window is resizable; tile size is refit on every resize.

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import replace
from typing import Optional

import pygame

from neuralcircuit.config import CONFIG
from neuralcircuit.engine.state import GameState
from neuralcircuit.mapgen.stamp import apply_solution
from neuralcircuit.render.layout import RotationAnimator, board_size, cell_at, fit_tile_size
from neuralcircuit.render.pipes import PipeTileset, draw_anchor, draw_board
from neuralcircuit.rng import PMRandom
from neuralcircuit.ui.overlay import WinOverlay, draw_win_overlay, hit


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Neural Circuit: rotate pipes to link IN to OUT")
    parser.add_argument("--rows", type=int, default=CONFIG.rows)
    parser.add_argument("--cols", type=int, default=CONFIG.cols)
    parser.add_argument("--seed", type=int, default=None, help="Park-Miller seed for reproducible levels")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--width", type=int, default=None, help="initial window width (default: fits base tile size)")
    parser.add_argument("--height", type=int, default=None, help="initial window height")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = replace(CONFIG, rows=args.rows, cols=args.cols)

    overlay = WinOverlay(delay_ms=config.win_delay_ms)
    rng = PMRandom(args.seed) if args.seed is not None else random.Random()

    pygame.init()
    width = args.width or config.tile_size * config.cols + config.margin_x
    height = args.height or config.tile_size * config.rows + config.margin_y
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption("Neural Circuit")
    clock = pygame.time.Clock()

    fonts = {}
    def get_font(px: int) -> pygame.font.Font:
        if px not in fonts:
            fonts[px] = pygame.font.SysFont("Arial", px, bold=True)
        return fonts[px]

    state = GameState(rng=rng, config=config, on_win=lambda _grid: overlay.arm(pygame.time.get_ticks()))
    animator = RotationAnimator(config.anim_speed)
    animator.sync(state.grid)

    tile = fit_tile_size(*screen.get_size(), state.rows, state.cols, config)
    tileset = PipeTileset(tile, config)

    def new_level() -> None:
        overlay.reset()
        state.restart()
        animator.sync(state.grid)

    def board_origin() -> tuple:
        bw, bh = board_size(tile, state.rows, state.cols)
        sw, sh = screen.get_size()
        return ((sw - bw) // 2, (sh - bh) // 2)

    button = None
    running = True
    while running:
        now = pygame.time.get_ticks()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                tile = fit_tile_size(event.w, event.h, state.rows, state.cols, config)
                tileset = PipeTileset(tile, config)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    new_level()
                elif event.key == pygame.K_h and state.last_build is not None and not state.won:
                    apply_solution(state.grid, state.last_build.solution)
                    animator.sync(state.grid)
                    state.recompute_flow()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if overlay.visible(now):
                    if button is not None and hit(button, *event.pos):
                        new_level()
                    continue
                ox, oy = board_origin()
                cell = cell_at(event.pos[0] - ox, event.pos[1] - oy, tile, state.rows, state.cols)
                if cell is None or state.won:
                    continue
                state.rotate_tile(*cell)
                animator.follow(cell, state.grid.get(*cell).rotation)

        animator.step()

        screen.fill(config.bg_color)
        origin = board_origin()
        draw_board(screen, state.grid, tileset, animator, origin)
        label_font = get_font(max(8, tile // 7))
        draw_anchor(screen, state.grid.entry, tile, True, label_font, origin, config)
        draw_anchor(screen, state.grid.exit, tile, False, label_font, origin, config)

        button = draw_win_overlay(screen, get_font, config) if overlay.visible(now) else None

        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
