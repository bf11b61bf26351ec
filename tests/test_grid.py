from neuralcircuit.grid import Anchor, Grid
from neuralcircuit.tiles import N, E, S, W, TOP, RIGHT, BOTTOM, LEFT, EMPTY, STRAIGHT

def make_grid(rows=3, cols=4):
    return Grid.empty(rows, cols, Anchor(0, 1, TOP), Anchor(rows - 1, 2, BOTTOM))

def test_anchor_outward_follows_side():
    assert Anchor(0, 0, TOP).outward == N
    assert Anchor(0, 3, RIGHT).outward == E
    assert Anchor(2, 0, BOTTOM).outward == S
    assert Anchor(1, 0, LEFT).outward == W

def test_empty_grid_layout():
    g = make_grid()
    view = g.tiles()
    assert len(view) == 3 and all(len(row) == 4 for row in view)
    for r, row in enumerate(view):
        for c, t in enumerate(row):
            assert (t.row, t.col) == (r, c)
            assert t.shape == EMPTY and t.rotation == 0 and not t.lit
    assert g.get(2, 3) is view[2][3]

def test_rotate_addresses_one_tile():
    g = make_grid()
    g.get(1, 2).shape = STRAIGHT
    g.rotate(1, 2)
    assert g.get(1, 2).rotation == 1
    assert all(t.rotation == 0 for t in g.buf if t.pos != (1, 2))

def test_out_of_bounds_is_ignored():
    g = make_grid()
    before = g.as_shape_matrix()
    for r, c in ((-1, 0), (0, -1), (3, 0), (0, 4), (99, 99)):
        g.rotate(r, c)
        assert g.tile_at(r, c) is None
    assert g.as_shape_matrix() == before

def test_anchors_and_lit_cells():
    g = make_grid()
    assert g.anchors() == (Anchor(0, 1, TOP), Anchor(2, 2, BOTTOM))
    g.get(0, 1).lit = True
    assert g.lit_cells() == frozenset({(0, 1)})
