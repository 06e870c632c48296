# src/tilecollapse/mapgen/propagate.py
# Arc-consistency cascade. Option sets only ever shrink, so the queue drains.

import logging
from collections import deque

from ..errors import ContradictionError
from ..grid import Grid
from ..tiles import Direction, TileCatalog

logger = logging.getLogger(__name__)


def propagate(grid: Grid, x: int, y: int, catalog: TileCatalog) -> int:
    """
    Shrink neighbour option sets starting from (x, y) until nothing changes.

    A neighbour option survives in direction d if at least one option of the
    current cell lists it in compatible(option, d). Collapsed neighbours are
    left alone. Returns how many times a cell was narrowed; raises
    ContradictionError as soon as a cell loses its last option.
    """
    q = deque([(x, y)])
    narrowed = 0
    while q:
        cx, cy = q.popleft()
        current = grid.cell(cx, cy).options
        for d in Direction:
            n = grid.step(cx, cy, d)
            if n is None:
                continue
            neighbor = grid.cell(*n)
            if neighbor.collapsed:
                continue

            allowed = set()
            for cur in current:
                allowed |= catalog.compatible(cur, d)
            valid = tuple(opt for opt in neighbor.options if opt in allowed)

            if len(valid) < len(neighbor.options):
                if not valid:
                    logger.debug("contradiction at %s propagating %s from (%d, %d)", n, d.name, cx, cy)
                    raise ContradictionError(*n)
                neighbor.options = valid
                narrowed += 1
                q.append(n)
    return narrowed
