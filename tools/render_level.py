#!/usr/bin/env python3
# Render a generated level to PNG using Pillow (no window needed).

import argparse, os
from PIL import Image, ImageDraw, ImageFont

from neuralcircuit.config import CONFIG
from neuralcircuit.engine.flow import evaluate
from neuralcircuit.mapgen.generator import build_level
from neuralcircuit.mapgen.stamp import apply_solution
from neuralcircuit.render.layout import anchor_marker, tile_center
from neuralcircuit.rng import PMRandom, seed_for_level
from neuralcircuit.tiles import DELTAS, dirs_in

def render_grid(grid, out_png, tile_size=CONFIG.tile_size):
    margin = tile_size  # room for the IN/OUT markers
    w = grid.cols * tile_size + 2 * margin
    h = grid.rows * tile_size + 2 * margin
    canvas = Image.new("RGB", (w, h), CONFIG.bg_color)
    draw = ImageDraw.Draw(canvas)
    arm = tile_size * 0.4
    width = max(1, int(tile_size * 0.2))

    for t in grid.buf:
        x0, y0 = margin + t.col * tile_size, margin + t.row * tile_size
        draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), outline=(34, 34, 34))
        cx, cy = tile_center(t.row, t.col, tile_size)
        cx, cy = cx + margin, cy + margin
        color = CONFIG.pipe_active if t.lit else CONFIG.pipe_inactive
        for d in dirs_in(t.connections()):
            dr, dc = DELTAS[d]
            draw.line((cx, cy, cx + dc * arm, cy + dr * arm), fill=color, width=width)
        r = max(1, tile_size * 0.08)
        draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=(255, 255, 255) if t.lit else (42, 26, 16))

    font = ImageFont.load_default()
    for anchor, text, color in ((grid.entry, "IN", (255, 255, 255)), (grid.exit, "OUT", CONFIG.pipe_active)):
        mx, my = anchor_marker(anchor, tile_size)
        mx, my = mx + margin, my + margin
        r = tile_size * 0.25
        draw.ellipse((mx - r, my - r, mx + r, my + r), fill=color)
        tw = draw.textlength(text, font=font)
        draw.text((mx - tw / 2, my - 5), text, fill=(0, 0, 0), font=font)

    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=CONFIG.rows)
    ap.add_argument("--cols", type=int, default=CONFIG.cols)
    ap.add_argument("--seed", type=int, default=1, help="Park-Miller base seed")
    ap.add_argument("--levels", type=int, default=1, help="how many consecutive levels to render")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=CONFIG.tile_size, help="Tile size in pixels")
    ap.add_argument("--solved", action="store_true", help="render the solution instead of the scramble")
    args = ap.parse_args()

    for lvl in range(1, args.levels + 1):
        build = build_level(args.rows, args.cols, PMRandom(seed_for_level(args.seed, lvl)))
        if args.solved:
            apply_solution(build.grid, build.solution)
        evaluate(build.grid)
        png = os.path.join(args.outdir, f"{lvl:02d}.png")
        render_grid(build.grid, png, tile_size=args.tile)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
