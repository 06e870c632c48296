# src/tilecollapse/mapgen/collapse.py
import logging
from typing import Iterable, List, Mapping, Optional

from ..context import EngineContext
from ..errors import ContradictionError
from ..grid import XY, Grid
from ..rng import PMRandom
from .choose import choose
from .entropy import select_lowest_entropy
from .propagate import propagate

logger = logging.getLogger(__name__)


def collapse_cell(grid: Grid, x: int, y: int, weights: Mapping[int, float], rng: PMRandom) -> Optional[int]:
    """Settle (x, y) on one weighted pick from its options. No-op if already collapsed."""
    cell = grid.cell(x, y)
    if cell.collapsed:
        return None
    if not cell.options:
        raise ContradictionError(x, y)
    chosen = choose(cell.options, weights, rng)
    cell.settle(chosen)
    return chosen


def collapsed_neighbor_tiles(grid: Grid, x: int, y: int) -> List[int]:
    out = []
    for nx, ny in grid.neighbors(x, y):
        c = grid.cell(nx, ny)
        if c.collapsed:
            out.append(c.options[0])
    return out


def biased_weights(ctx: EngineContext, grid: Grid, x: int, y: int):
    # Each collapsed neighbour multiplies its own tile's weight once.
    return ctx.boosted_weights(collapsed_neighbor_tiles(grid, x, y))


def run_collapse(ctx: EngineContext, grid: Grid, seeds: Iterable[XY]) -> int:
    """
    Propagate from every seed, then collapse lowest-entropy cells until none
    remain. Returns the number of cells collapsed by the loop.
    """
    for sx, sy in seeds:
        propagate(grid, sx, sy, ctx.catalog)

    steps = 0
    while True:
        pos = select_lowest_entropy(grid, ctx.rng)
        if pos is None:
            break
        x, y = pos
        collapse_cell(grid, x, y, biased_weights(ctx, grid, x, y), ctx.rng)
        propagate(grid, x, y, ctx.catalog)
        steps += 1
    logger.debug("collapse loop settled %d cells", steps)
    return steps
