# Direction bits, pipe shapes and the tile rotation state machine.

from dataclasses import dataclass
from typing import Iterator, Tuple

# Directions: one bit each so a set of directions is a 4-bit mask.
N, E, S, W = 1, 2, 4, 8
DIRECTIONS = (N, E, S, W)    # clockwise order

# (drow, dcol) toward each direction
DELTAS = {
    N: (-1, 0),
    E: (0, 1),
    S: (1, 0),
    W: (0, -1),
}

# Sides of the board: 0=Top, 1=Right, 2=Bottom, 3=Left
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3
SIDES = (TOP, RIGHT, BOTTOM, LEFT)
SIDE_OUTWARD = {TOP: N, RIGHT: E, BOTTOM: S, LEFT: W}
SIDE_NAMES = {TOP: "top", RIGHT: "right", BOTTOM: "bottom", LEFT: "left"}

# Base shapes, connections at rotation 0
EMPTY = 0
STRAIGHT = N | S        # 5
ELBOW = N | E           # 3
TEE = N | E | S         # 7
CROSS = N | E | S | W   # 15

DECOY_SHAPES = (STRAIGHT, ELBOW, TEE, CROSS)
SHAPE_NAMES = {
    EMPTY: "empty",
    STRAIGHT: "straight",
    ELBOW: "elbow",
    TEE: "tee",
    CROSS: "cross",
}

def rotate_dir(d: int, turns: int) -> int:
    """Turn a single direction bit clockwise (N→E→S→W→N)."""
    i = DIRECTIONS.index(d)
    return DIRECTIONS[(i + turns) % 4]

def rotate_mask(mask: int, turns: int) -> int:
    out = 0
    for d in DIRECTIONS:
        if mask & d:
            out |= rotate_dir(d, turns)
    return out

def opposite(d: int) -> int:
    return rotate_dir(d, 2)

def dirs_in(mask: int) -> Iterator[int]:
    for d in DIRECTIONS:
        if mask & d:
            yield d

def dir_between(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Direction that points from cell a to the 4-adjacent cell b."""
    dr, dc = b[0] - a[0], b[1] - a[1]
    for d, delta in DELTAS.items():
        if delta == (dr, dc):
            return d
    raise ValueError(f"{a} and {b} are not 4-adjacent")

def mask_label(mask: int) -> str:
    return "".join(ch for d, ch in zip(DIRECTIONS, "NESW") if mask & d) or "-"

@dataclass(eq=False)
class Tile:
    row: int
    col: int
    shape: int = EMPTY
    rotation: int = 0
    lit: bool = False
    locked: bool = False   # fixed pieces ignore rotate_once()

    def __post_init__(self) -> None:
        self.rotation %= 4

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def connections(self) -> int:
        # Derived from (shape, rotation) on every call; never cached.
        return rotate_mask(self.shape, self.rotation)

    def connects(self, d: int) -> bool:
        return bool(self.connections() & d)

    def rotate_once(self) -> None:
        if self.locked:
            return
        self.rotation = (self.rotation + 1) % 4

    def set_rotation(self, rotation: int) -> None:
        self.rotation = rotation % 4

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.pos == other.pos

    def __hash__(self) -> int:
        return hash(self.pos)
