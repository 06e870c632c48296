# src/tilecollapse/mapgen/border.py
# Initial placement: obstacle rim with a fixed entry and a random exit, or the
# rimless single-seed start.

from typing import List, Tuple

from ..context import EngineContext
from ..grid import XY, Grid
from .choose import choose


def exit_candidates(width: int, height: int, entry: XY) -> List[XY]:
    """
    Border cells that may host the exit: not in the entry's row or column and
    not a corner (a corner only touches other rim cells and can never connect).
    """
    ex, ey = entry
    out = []
    for y in range(height):
        for x in range(width):
            if not (x in (0, width - 1) or y in (0, height - 1)):
                continue
            if x in (0, width - 1) and y in (0, height - 1):
                continue
            if x == ex or y == ey:
                continue
            out.append((x, y))
    return out


def init_bordered_grid(ctx: EngineContext) -> Tuple[Grid, XY, XY]:
    """
    Fresh grid with every rim cell pre-collapsed to the obstacle tile except
    the entry (bottom-row midpoint) and one random exit, both set to the path
    tile. Consumes one draw for the exit.
    """
    cfg, cat = ctx.config, ctx.catalog
    grid = Grid.initialize(cfg.width, cfg.height, cat.tiles)
    entry = cfg.entry
    exit_ = ctx.rng.pick(exit_candidates(cfg.width, cfg.height, entry))

    for x, y in grid.coords():
        if grid.is_border(x, y):
            grid.force(x, y, cat.obstacle)
    grid.force(*entry, cat.path)
    grid.force(*exit_, cat.path)
    return grid, entry, exit_


def init_seeded_grid(ctx: EngineContext) -> Tuple[Grid, XY]:
    """Rimless start: only the bottom-row midpoint is collapsed, to a weighted pick over all tiles."""
    cfg, cat = ctx.config, ctx.catalog
    grid = Grid.initialize(cfg.width, cfg.height, cat.tiles)
    seed = cfg.entry
    grid.force(*seed, choose(cat.tiles, ctx.weights, ctx.rng))
    return grid, seed
