# src/tilecollapse/mapgen/entropy.py
from typing import List, Optional

from ..errors import ContradictionError
from ..grid import XY, Grid
from ..rng import PMRandom


def find_contradiction(grid: Grid) -> Optional[XY]:
    for x, y in grid.coords():
        c = grid.cell(x, y)
        if not c.collapsed and not c.options:
            return (x, y)
    return None


def select_lowest_entropy(grid: Grid, rng: PMRandom) -> Optional[XY]:
    """
    Uncollapsed cell with the fewest options, ties broken uniformly at random.

    None means every cell is collapsed. An empty option set is reported as a
    ContradictionError rather than being skipped, so "done" and "stuck" can't
    be confused.
    """
    bad = find_contradiction(grid)
    if bad is not None:
        raise ContradictionError(*bad)

    best = None
    candidates: List[XY] = []
    for x, y in grid.coords():
        c = grid.cell(x, y)
        if c.collapsed:
            continue
        n = c.entropy
        if best is None or n < best:
            best = n
            candidates = [(x, y)]
        elif n == best:
            candidates.append((x, y))

    if not candidates:
        return None
    return rng.pick(candidates)
