from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from .tiles import EMPTY, SIDE_OUTWARD, Tile

XY = Tuple[int, int]

@dataclass(frozen=True)
class Anchor:
    row: int
    col: int
    side: int

    @property
    def pos(self) -> XY:
        return (self.row, self.col)

    @property
    def outward(self) -> int:
        # Top→N, Right→E, Bottom→S, Left→W
        return SIDE_OUTWARD[self.side]

@dataclass
class Grid:
    rows: int
    cols: int
    entry: Anchor
    exit: Anchor
    buf: List[Tile] = field(default_factory=list)

    @classmethod
    def empty(cls, rows: int, cols: int, entry: Anchor, exit: Anchor) -> "Grid":
        # Every cell starts EMPTY at rotation 0; the generator fills them in.
        buf = [Tile(r, c, EMPTY) for r in range(rows) for c in range(cols)]
        return cls(rows=rows, cols=cols, entry=entry, exit=exit, buf=buf)

    def idx(self, row: int, col: int) -> int:
        return row * self.cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Tile:
        return self.buf[self.idx(row, col)]

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        if not self.in_bounds(row, col):
            return None
        return self.get(row, col)

    def rotate(self, row: int, col: int) -> None:
        # Stale coordinates (e.g. mid-resize) are ignored, not an error.
        tile = self.tile_at(row, col)
        if tile is not None:
            tile.rotate_once()

    def anchors(self) -> Tuple[Anchor, Anchor]:
        return (self.entry, self.exit)

    def tiles(self) -> Tuple[Tuple[Tile, ...], ...]:
        return tuple(
            tuple(self.buf[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)
        )

    def lit_cells(self) -> FrozenSet[XY]:
        return frozenset(t.pos for t in self.buf if t.lit)

    def as_shape_matrix(self) -> List[List[Tuple[int, int]]]:
        """(shape, rotation) per cell, row-major."""
        return [[(t.shape, t.rotation) for t in row] for row in self.tiles()]
