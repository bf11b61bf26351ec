#!/usr/bin/env python3
import argparse, csv, logging, os
from statistics import mean

from neuralcircuit.engine.flow import evaluate
from neuralcircuit.mapgen.generator import GenerationExhausted, build_level
from neuralcircuit.mapgen.stamp import apply_solution
from neuralcircuit.render.text import grid_codes, render_ascii
from neuralcircuit.rng import PMRandom, seed_for_level
from neuralcircuit.tiles import SIDE_NAMES

def write_tsv(rows, path):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        w = csv.writer(f, delimiter='\t')
        for r in rows:
            w.writerow(r)

def _build(args, level=1):
    seed = seed_for_level(args.seed, level)
    try:
        return build_level(args.rows, args.cols, PMRandom(seed))
    except (GenerationExhausted, ValueError) as e:
        raise SystemExit(f"seed {seed}: {e}")

def cmd_emit(args):
    build = _build(args, args.level)
    grid = build.grid
    if args.solved:
        apply_solution(grid, build.solution)
    evaluate(grid)
    if args.out:
        write_tsv(grid_codes(grid), args.out)
        print(f"Wrote {args.out}")
    else:
        e, x = grid.anchors()
        print(f"entry {e.pos} {SIDE_NAMES[e.side]}  exit {x.pos} {SIDE_NAMES[x.side]}  path {len(build.path)} cells")
        print(render_ascii(grid))

def cmd_stats(args):
    lengths, attempts, lucky = [], [], 0
    for lvl in range(1, args.count + 1):
        build = _build(args, lvl)
        lengths.append(len(build.path))
        attempts.append(build.attempts)
        if evaluate(build.grid).won:
            lucky += 1
    print(f"{args.count} levels of {args.rows}x{args.cols} from seed {args.seed}")
    print(f"  path length   min {min(lengths)}  mean {mean(lengths):.1f}  max {max(lengths)}")
    print(f"  attempts      max {max(attempts)}")
    print(f"  solved as dealt {lucky}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--rows', type=int, default=6)
    p.add_argument('--cols', type=int, default=8)
    p.add_argument('--seed', type=int, default=1)
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, default=1)
    p1.add_argument('--out', type=str, default=None, help='write shape:rotation TSV instead of printing')
    p1.add_argument('--solved', action='store_true', help='restore solution rotations before output')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('stats')
    p2.add_argument('--count', type=int, default=100)
    p2.set_defaults(func=cmd_stats)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)

if __name__ == '__main__':
    main()
