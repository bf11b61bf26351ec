import math
from dataclasses import replace

import pygame

from neuralcircuit.config import CONFIG
from neuralcircuit.grid import Anchor, Grid
from neuralcircuit.render.layout import (
    RotationAnimator, anchor_marker, board_size, cell_at, fit_tile_size, tile_center,
)
from neuralcircuit.tiles import TOP, RIGHT, BOTTOM, STRAIGHT
from neuralcircuit.ui.overlay import WinOverlay, button_rect, draw_win_overlay, hit

def test_fit_tile_size_caps_and_floors():
    assert fit_tile_size(900, 700, 6, 8) == 100     # capped at max
    assert fit_tile_size(300, 300, 6, 8) == 32      # width-bound: 260 // 8
    assert fit_tile_size(10, 10, 6, 8) == 12        # viewport floored at 100px
    assert fit_tile_size(10, 10, 20, 20) == 10      # never below min tile

def test_board_size():
    assert board_size(40, 6, 8) == (320, 240)

def test_cell_at_maps_pixels_to_cells():
    assert cell_at(130, 45, 40, 6, 8) == (1, 3)
    assert cell_at(0, 0, 40, 6, 8) == (0, 0)
    assert cell_at(319.9, 239.9, 40, 6, 8) == (5, 7)
    assert cell_at(320, 10, 40, 6, 8) is None
    assert cell_at(10, 240, 40, 6, 8) is None
    assert cell_at(-1, 10, 40, 6, 8) is None

def test_anchor_markers_sit_outside_the_board():
    assert tile_center(0, 2, 40) == (100, 20)
    assert anchor_marker(Anchor(0, 2, TOP), 40) == (100, -4)
    assert anchor_marker(Anchor(1, 7, RIGHT), 40) == (324, 60)
    assert anchor_marker(Anchor(5, 0, BOTTOM), 40) == (20, 244)

def column():
    g = Grid.empty(2, 1, Anchor(0, 0, TOP), Anchor(1, 0, BOTTOM))
    for t in g.buf:
        t.shape = STRAIGHT
    g.get(1, 0).set_rotation(3)
    return g

def test_animator_snaps_on_sync():
    anim = RotationAnimator(0.2)
    anim.sync(column())
    assert anim.angle((0, 0)) == 0
    assert anim.angle((1, 0)) == 3 * math.pi / 2
    assert anim.settled()

def test_animator_eases_forward_and_settles():
    anim = RotationAnimator(0.2)
    anim.sync(column())
    anim.follow((1, 0), 0)              # 3 -> 4 quarter turns, not back to 0
    anim.step()
    assert 3 * math.pi / 2 < anim.angle((1, 0)) < 2 * math.pi
    for _ in range(200):
        anim.step()
    assert anim.angle((1, 0)) == 2 * math.pi
    assert anim.settled()

def test_animator_ignores_unknown_cells():
    anim = RotationAnimator()
    anim.sync(column())
    anim.follow((9, 9), 1)
    assert anim.angle((9, 9)) == 0.0
    assert anim.settled()

def test_win_overlay_waits_for_delay():
    ov = WinOverlay(delay_ms=500)
    assert not ov.visible(0)
    ov.arm(1000)
    assert not ov.visible(1499)
    assert ov.visible(1500)
    ov.arm(5000)                # a later arm doesn't push it back
    assert ov.visible(1500)
    ov.reset()
    assert not ov.visible(10_000)

def test_restart_button_hit_box():
    rect = button_rect(400, 300)
    assert rect == (110, 170, 180, 44)
    assert hit(rect, 110, 170)
    assert hit(rect, 289, 213)
    assert not hit(rect, 290, 200)
    assert not hit(rect, 200, 169)

def test_animator_only_moves_when_the_tile_turned():
    g = column()
    anim = RotationAnimator()
    anim.sync(g)

    top = g.get(0, 0)
    top.locked = True
    g.rotate(0, 0)
    anim.follow(top.pos, top.rotation)
    assert anim.targets[top.pos] == 0
    assert anim.settled()

    top.locked = False
    g.rotate(0, 0)
    anim.follow(top.pos, top.rotation)
    assert anim.targets[top.pos] == 1

class _StubFont:
    def render(self, text, antialias, color):
        return pygame.Surface((4, 4))

def test_win_overlay_uses_the_given_palette():
    config = replace(CONFIG, pipe_active=(1, 2, 3))
    screen = pygame.Surface((400, 300))
    rect = draw_win_overlay(screen, lambda px: _StubFont(), config)
    x, y, w, h = rect
    assert tuple(screen.get_at((x + 10, y + h // 2)))[:3] == (1, 2, 3)
