import random
import threading
from unittest.mock import Mock

from neuralcircuit.config import CONFIG
from neuralcircuit.engine.state import GameState
from neuralcircuit.grid import Anchor, Grid
from neuralcircuit.mapgen.stamp import apply_solution
from neuralcircuit.rng import PMRandom
from neuralcircuit.tiles import TOP, BOTTOM, STRAIGHT, ELBOW

def column(top_rot=0, bottom=(STRAIGHT, 0)):
    g = Grid.empty(2, 1, Anchor(0, 0, TOP), Anchor(1, 0, BOTTOM))
    g.get(0, 0).shape = STRAIGHT
    g.get(0, 0).set_rotation(top_rot)
    shape, rot = bottom
    g.get(1, 0).shape = shape
    g.get(1, 0).set_rotation(rot)
    return g

def test_win_is_idempotent_and_reported_once():
    cb = Mock()
    st = GameState(grid=column(), on_win=cb)
    assert st.won
    first = st.recompute_flow()
    second = st.recompute_flow()
    assert first.won and second.won
    assert first.lit_cells == second.lit_cells == {(0, 0), (1, 0)}
    cb.assert_called_once_with(st.grid)

def test_rotation_solves_and_fires_callback():
    cb = Mock()
    st = GameState(grid=column(top_rot=1), on_win=cb)
    assert not st.won and cb.call_count == 0
    res = st.rotate_tile(0, 0)   # straight at rotation 2 is N|S again
    assert res.won and st.won
    assert st.grid.get(0, 0).rotation == 2
    assert cb.call_count == 1

def test_input_ignored_after_win():
    st = GameState(grid=column())
    st.rotate_tile(0, 0)
    assert st.grid.get(0, 0).rotation == 0
    assert st.won

def test_out_of_bounds_rotation_is_a_no_op():
    st = GameState(grid=column(top_rot=1))
    before = st.flow
    for cell in ((2, 0), (0, 1), (-1, 0)):
        assert st.rotate_tile(*cell) is before
    assert st.grid.as_shape_matrix() == column(top_rot=1).as_shape_matrix()

def test_each_level_gets_its_own_win():
    cb = Mock()
    st = GameState(grid=column(), on_win=cb)
    st.load(column())
    st.recompute_flow()
    assert cb.call_count == 2
    assert st.level == 2

def test_restart_swaps_in_a_new_grid():
    st = GameState(3, 4, rng=PMRandom(17))
    old = st.grid
    new = st.restart()
    assert new is st.grid and new is not old
    assert (new.rows, new.cols) == (3, 4)
    assert st.level == 2
    assert st.last_build is not None and st.last_build.grid is new

def test_generated_level_can_be_won_through_the_facade():
    cb = Mock()
    st = GameState(5, 5, rng=PMRandom(3), on_win=cb)
    if not st.won:
        apply_solution(st.grid, st.last_build.solution)
        assert st.recompute_flow().won
    assert cb.call_count == 1

def test_stdlib_random_level_can_be_won_through_the_facade():
    for seed in range(1, 11):
        cb = Mock()
        st = GameState(5, 5, rng=random.Random(seed), on_win=cb)
        if not st.won:
            apply_solution(st.grid, st.last_build.solution)
            assert st.recompute_flow().won, f"seed {seed}"
        assert cb.call_count == 1

def test_defaults_come_from_config():
    st = GameState(rng=PMRandom(1))
    assert (st.rows, st.cols) == (CONFIG.rows, CONFIG.cols)

def test_concurrent_rotations_are_serialized():
    # exit tile never faces south, so the level can't be won mid-test
    st = GameState(grid=column(bottom=(ELBOW, 0)))

    def spin():
        for _ in range(101):
            st.rotate_tile(0, 0)

    threads = [threading.Thread(target=spin) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert st.grid.get(0, 0).rotation == (8 * 101) % 4
    assert st.flow.lit_cells == {(0, 0), (1, 0)}
    assert not st.won
