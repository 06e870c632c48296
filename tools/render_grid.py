#!/usr/bin/env python3
# Render TSV grids (as written by `wfctool.py emit`) to PNGs using Pillow.

import argparse, os
from tilecollapse.errors import TileCollapseError
from tilecollapse.render.image import render_matrix, save_png
from tilecollapse.tsv import read_tsv

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("tsv", nargs="+", help="TSV grid files")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    for tsv in args.tsv:
        name = os.path.splitext(os.path.basename(tsv))[0] + ".png"
        try:
            mat = read_tsv(tsv)
        except TileCollapseError as e:
            raise SystemExit(str(e))
        save_png(render_matrix(mat, tile_size=args.tile), os.path.join(args.outdir, name))
    print(f"Wrote {len(args.tsv)} PNG(s) to {args.outdir}")

if __name__ == "__main__":
    main()
