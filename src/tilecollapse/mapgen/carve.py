# src/tilecollapse/mapgen/carve.py
# A* corridor carve. Walks passable cells only; every cell on the best route
# is rewritten to the path tile and marked collapsed.

import heapq
import itertools
from typing import List, Set

from ..errors import UnreachablePathError
from ..grid import XY, Grid
from ..tiles import TileCatalog
from .connectivity import passable_at


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(grid: Grid, start: XY, end: XY, catalog: TileCatalog) -> List[XY]:
    """
    Shortest 4-connected passable route from start to end, both inclusive.

    Frontier entries are (f, g, tie, coord, path); `tie` is an insertion
    counter so equal-cost entries pop in push order and a given grid always
    yields the same route.
    """
    tie = itertools.count()
    frontier = [(manhattan(start, end), 0, next(tie), start, [start])]
    visited: Set[XY] = set()
    while frontier:
        _, g, _, cur, path = heapq.heappop(frontier)
        if cur == end:
            return path
        if cur in visited:
            continue
        visited.add(cur)
        for n in grid.neighbors(*cur):
            if n in visited or not passable_at(grid, *n, catalog):
                continue
            heapq.heappush(frontier, (g + 1 + manhattan(n, end), g + 1, next(tie), n, path + [n]))
    raise UnreachablePathError(start, end)


def carve_path(grid: Grid, start: XY, end: XY, catalog: TileCatalog) -> List[XY]:
    """Overwrite the A* route with the path tile. Re-carving gives the same route."""
    path = find_path(grid, start, end, catalog)
    for x, y in path:
        grid.force(x, y, catalog.path)
    return path
