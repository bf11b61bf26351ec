# src/neuralcircuit/mapgen/generator.py
# Level pipeline: anchors -> carve -> stamp -> decoys -> scramble,
# retried in a bounded loop when the carve dead-ends.

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config import CONFIG
from ..grid import Grid
from ..rng import RandomSource
from .anchors import place_anchors
from .carve import carve_path
from .stamp import fill_decoys, scramble, stamp_path

logger = logging.getLogger(__name__)

XY = Tuple[int, int]


class GenerationExhausted(RuntimeError):
    def __init__(self, rows: int, cols: int, attempts: int) -> None:
        super().__init__(
            f"no entry-to-exit path found on a {rows}x{cols} grid after {attempts} attempts"
        )
        self.rows = rows
        self.cols = cols
        self.attempts = attempts


@dataclass
class LevelBuild:
    grid: Grid
    path: List[XY] = field(default_factory=list)
    # stamped (pre-scramble) rotation for every path cell
    solution: Dict[XY, int] = field(default_factory=dict)
    attempts: int = 1


def _try_build(rows: int, cols: int, rng: RandomSource) -> Optional[LevelBuild]:
    entry, exit = place_anchors(rows, cols, rng)
    path = carve_path(rows, cols, entry.pos, exit.pos, rng)
    if path is None:
        return None

    grid = Grid.empty(rows, cols, entry, exit)
    solution = stamp_path(grid, path)
    fill_decoys(grid, rng)
    scramble(grid, rng)
    return LevelBuild(grid=grid, path=path, solution=solution)


def build_level(
    rows: int,
    cols: int,
    rng: Optional[RandomSource] = None,
    *,
    max_attempts: Optional[int] = None,
) -> LevelBuild:
    """
    Build a solvable, scrambled level and keep the carved path alongside it.
    Each failed attempt starts over from fresh anchors; after `max_attempts`
    failures GenerationExhausted is raised.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
    if rng is None:
        rng = random.Random()
    if max_attempts is None:
        max_attempts = CONFIG.max_generation_attempts

    for attempt in range(1, max_attempts + 1):
        build = _try_build(rows, cols, rng)
        if build is not None:
            build.attempts = attempt
            return build
        logger.debug("Regenerating %dx%d level (attempt %d failed)", rows, cols, attempt)

    logger.warning("level generation gave up after %d attempts", max_attempts)
    raise GenerationExhausted(rows, cols, max_attempts)


def generate_level(rows: int, cols: int, rng: Optional[RandomSource] = None) -> Grid:
    return build_level(rows, cols, rng).grid
