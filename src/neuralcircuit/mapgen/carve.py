# src/neuralcircuit/mapgen/carve.py
# Randomized depth-first search from the entry cell to the exit cell.
# Last-pushed-first-popped frontier biases toward long, winding paths.

from typing import Dict, List, Optional, Tuple
from ..rng import RandomSource
from ..tiles import DELTAS, N, S, W, E

XY = Tuple[int, int]

# Neighbor enumeration order before shuffling
_NEIGHBOR_ORDER = (N, S, W, E)

def neighbors(pos: XY, rows: int, cols: int) -> List[XY]:
    r, c = pos
    out = []
    for d in _NEIGHBOR_ORDER:
        dr, dc = DELTAS[d]
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            out.append((nr, nc))
    return out

def walk_back(parents: Dict[XY, Optional[XY]], end: XY) -> List[XY]:
    """Follow parent links from `end` to the root and return root→end order."""
    path = []
    cur: Optional[XY] = end
    while cur is not None:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    return path

def carve_path(
    rows: int,
    cols: int,
    start: XY,
    end: XY,
    rng: RandomSource,
) -> Optional[List[XY]]:
    """
    Return the start→end cell sequence, or None when the frontier empties
    before `end` is reached (the caller retries with fresh anchors).

    `parents` doubles as the visited set: a cell gets its parent recorded the
    first time it is popped, and later duplicate frontier entries are skipped.
    """
    parents: Dict[XY, Optional[XY]] = {}
    frontier: List[Tuple[XY, Optional[XY]]] = [(start, None)]

    while frontier:
        cur, parent = frontier.pop()
        if cur in parents:
            continue
        parents[cur] = parent

        if cur == end:
            return walk_back(parents, end)

        cands = [n for n in neighbors(cur, rows, cols) if n not in parents]
        rng.shuffle(cands)
        for n in cands:
            frontier.append((n, cur))

    return None
