# src/neuralcircuit/render/text.py
# Plain-text views of a level: box-drawing art and a TSV-friendly matrix.

from typing import List, Optional

from ..grid import Grid
from ..tiles import N, E, S, W, TOP, RIGHT, BOTTOM, LEFT, SHAPE_NAMES

# current connection mask -> glyph
GLYPHS = {
    0: " ",
    N: "╵", E: "╶", S: "╷", W: "╴",
    N | S: "│", E | W: "─",
    N | E: "└", E | S: "┌", S | W: "┐", W | N: "┘",
    N | E | S: "├", E | S | W: "┬", S | W | N: "┤", W | N | E: "┴",
    N | E | S | W: "┼",
}

def cell_code(shape: int, rotation: int) -> str:
    """e.g. 'elbow:2'."""
    return f"{SHAPE_NAMES[shape]}:{rotation}"

def grid_codes(grid: Grid) -> List[List[str]]:
    return [[cell_code(t.shape, t.rotation) for t in row] for row in grid.tiles()]

def render_ascii(grid: Grid, show_lit: bool = True) -> str:
    """
    Two characters per cell inside a box frame. The frame shows 'I' where
    the entry anchor sits and 'O' for the exit. With show_lit, lit cells
    carry a trailing '*'.
    """
    def frame_mark(r: int, c: int, side: int) -> Optional[str]:
        for anchor, ch in ((grid.entry, "I"), (grid.exit, "O")):
            if anchor.side == side and anchor.pos == (r, c):
                return ch
        return None

    out = []
    top = "".join((frame_mark(0, c, TOP) or "─") + "─" for c in range(grid.cols))
    out.append("┌" + top + "┐")
    for r, row in enumerate(grid.tiles()):
        line = [frame_mark(r, 0, LEFT) or "│"]
        for t in row:
            line.append(GLYPHS[t.connections()])
            line.append("*" if (show_lit and t.lit) else " ")
        line.append(frame_mark(r, grid.cols - 1, RIGHT) or "│")
        out.append("".join(line))
    bottom = "".join(
        (frame_mark(grid.rows - 1, c, BOTTOM) or "─") + "─" for c in range(grid.cols)
    )
    out.append("└" + bottom + "┘")
    return "\n".join(out)
