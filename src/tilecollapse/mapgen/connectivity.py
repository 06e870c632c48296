# src/tilecollapse/mapgen/connectivity.py
from collections import deque
from typing import Set

from ..grid import XY, Grid
from ..tiles import TileCatalog


def passable_at(grid: Grid, x: int, y: int, catalog: TileCatalog) -> bool:
    t = grid.tile_at(x, y)
    return t is not None and catalog.is_passable(t)


def reachable_from(grid: Grid, start: XY, catalog: TileCatalog) -> Set[XY]:
    """Passable cells 4-connected to `start` (empty if start itself is blocked)."""
    if not passable_at(grid, *start, catalog):
        return set()
    visited = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for nx, ny in grid.neighbors(cx, cy):
            if (nx, ny) not in visited and passable_at(grid, nx, ny, catalog):
                visited.add((nx, ny))
                q.append((nx, ny))
    return visited


def count_passable(grid: Grid, catalog: TileCatalog) -> int:
    return sum(1 for x, y in grid.coords() if passable_at(grid, x, y, catalog))


def is_connected(grid: Grid, start: XY, catalog: TileCatalog) -> bool:
    """
    True iff every passable cell is reachable from `start`.

    The default catalog never fails this: WATER is the obstacle and no other
    tile may border it, so propagation removes it from the interior. Only a
    custom catalog with an enclosable obstacle can leave cells cut off.
    """
    total = count_passable(grid, catalog)
    return total > 0 and len(reachable_from(grid, start, catalog)) == total
