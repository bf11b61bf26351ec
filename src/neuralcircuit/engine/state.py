# src/neuralcircuit/engine/state.py
# GameState: owns the current level slot and serializes rotate+evaluate.

from __future__ import annotations

import logging
import random
import threading
from typing import Callable, Optional

from ..config import CONFIG, GameConfig
from ..grid import Grid
from ..mapgen.generator import LevelBuild, build_level
from ..rng import RandomSource
from .flow import FlowResult, evaluate

logger = logging.getLogger(__name__)

WinCallback = Callable[[Grid], None]


class GameState:
    def __init__(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        *,
        rng: Optional[RandomSource] = None,
        on_win: Optional[WinCallback] = None,
        config: GameConfig = CONFIG,
        grid: Optional[Grid] = None,
    ) -> None:
        self.config = config
        self.rows = rows if rows is not None else config.rows
        self.cols = cols if cols is not None else config.cols
        self.rng = rng if rng is not None else random.Random()
        self.on_win = on_win

        # rotate + evaluate run as one unit
        self._lock = threading.RLock()

        self.level = 0
        self.grid: Grid
        self.last_build: Optional[LevelBuild] = None
        self.flow = FlowResult(lit_cells=frozenset(), won=False)
        self._win_reported = False

        if grid is not None:
            self.load(grid)
        else:
            self.restart()

    # ---- Level lifecycle ----
    def restart(self) -> Grid:
        """Generate a fresh level and swap it in wholesale."""
        build = build_level(
            self.rows, self.cols, self.rng,
            max_attempts=self.config.max_generation_attempts,
        )
        with self._lock:
            self.last_build = build
            self._install(build.grid)
        return build.grid

    def load(self, grid: Grid) -> None:
        """Install a caller-built level (fixed puzzles, tests)."""
        with self._lock:
            self.last_build = None
            self._install(grid)

    def _install(self, grid: Grid) -> None:
        self.grid = grid
        self.rows, self.cols = grid.rows, grid.cols
        self.level += 1
        self._win_reported = False
        logger.debug("level %d: entry %s exit %s", self.level, grid.entry, grid.exit)
        self.recompute_flow()

    # ---- Interaction ----
    @property
    def won(self) -> bool:
        return self.flow.won

    def rotate_tile(self, row: int, col: int) -> FlowResult:
        """
        Turn one tile clockwise and re-evaluate. Ignored once the level is won
        and for coordinates off the board.
        """
        with self._lock:
            if self.flow.won or not self.grid.in_bounds(row, col):
                return self.flow
            self.grid.rotate(row, col)
            return self.recompute_flow()

    def recompute_flow(self) -> FlowResult:
        with self._lock:
            self.flow = evaluate(self.grid)
            if self.flow.won and not self._win_reported:
                self._win_reported = True
                logger.info("level %d solved", self.level)
                if self.on_win is not None:
                    self.on_win(self.grid)
            return self.flow
