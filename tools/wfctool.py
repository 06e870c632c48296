#!/usr/bin/env python3
# Command-line driver: generate a map, then print it, dump it as TSV, or save a PNG.
import argparse, logging, sys
from dataclasses import replace

from tilecollapse.config import GeneratorConfig
from tilecollapse.errors import AttemptsExhaustedError, TileCollapseError
from tilecollapse.logging_config import setup_logging
from tilecollapse.mapgen.generator import generate
from tilecollapse.render.image import render_matrix, save_png
from tilecollapse.render.terminal import print_grid
from tilecollapse.tsv import write_tsv

def build_config(args):
    cfg = GeneratorConfig.from_env()
    overrides = {}
    for attr in ("width", "height", "seed", "max_attempts"):
        v = getattr(args, attr)
        if v is not None:
            overrides[attr] = v
    if args.no_border:
        overrides["bordered"] = False
    return replace(cfg, **overrides)

def run(args):
    try:
        return generate(build_config(args))
    except AttemptsExhaustedError as e:
        print(f"gave up: {e}", file=sys.stderr)
        raise SystemExit(1)
    except TileCollapseError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1)

def cmd_print(args):
    m = run(args)
    print_grid(m.grid, title=f"Generated map ({m.attempts} attempt(s), exit {m.exit})",
               highlight=m.path if args.highlight else ())

def cmd_emit(args):
    m = run(args)
    write_tsv(m.as_matrix(), args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_png(args):
    m = run(args)
    img = render_matrix(m.as_matrix(), tile_size=args.tile, highlight=m.path if args.highlight else ())
    save_png(img, args.out)
    print(f"Wrote {args.out}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--width', type=int)
    p.add_argument('--height', type=int)
    p.add_argument('--seed', type=int)
    p.add_argument('--max-attempts', dest='max_attempts', type=int)
    p.add_argument('--no-border', action='store_true', help='single-seed variant without rim or carved path')
    p.add_argument('-v', '--verbose', action='count', default=0)
    p.add_argument('--log-file', type=str)
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('print')
    p1.add_argument('--highlight', action='store_true', help='reverse-video the carved path')
    p1.set_defaults(func=cmd_print)
    p2 = sub.add_parser('emit')
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--header', action='store_true')
    p2.set_defaults(func=cmd_emit)
    p3 = sub.add_parser('png')
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--tile', type=int, default=16)
    p3.add_argument('--highlight', action='store_true')
    p3.set_defaults(func=cmd_png)
    args = p.parse_args()
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(level, log_file=args.log_file)
    args.func(args)

if __name__ == '__main__':
    main()
