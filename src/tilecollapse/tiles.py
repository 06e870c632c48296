# src/tilecollapse/tiles.py
# Canonical tile IDs, directional adjacency rules and selection weights.

from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from .errors import ConfigurationError


class Tile(IntEnum):
    GRASS = 1
    DIRT = 2
    WATER = 3
    TREE = 4
    PATH = 5


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


# y grows downward: UP is y-1.
_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

# WATER admits no other neighbour, so it is the one hard barrier in the default rules.
OBSTACLE = Tile.WATER
PATH = Tile.PATH

DEFAULT_WEIGHTS: Dict[int, float] = {
    Tile.GRASS: 1.0,
    Tile.DIRT: 1.0,
    Tile.WATER: 0.5,
    Tile.TREE: 1.5,
    Tile.PATH: 1.0,
}

Rules = Mapping[int, Sequence[Iterable[int]]]


def _same_all_sides(*tiles: int) -> Tuple[FrozenSet[int], ...]:
    s = frozenset(tiles)
    return (s, s, s, s)


DEFAULT_RULES: Dict[int, Tuple[FrozenSet[int], ...]] = {
    Tile.GRASS: _same_all_sides(Tile.GRASS, Tile.DIRT, Tile.TREE),
    Tile.DIRT:  _same_all_sides(Tile.GRASS, Tile.DIRT, Tile.PATH),
    Tile.WATER: _same_all_sides(Tile.WATER),
    Tile.TREE:  _same_all_sides(Tile.GRASS, Tile.TREE),
    Tile.PATH:  _same_all_sides(Tile.DIRT, Tile.PATH),
}


class TileCatalog:
    """
    Immutable adjacency table.

    Rules are stored in a list indexed directly by tile id, so lookups never
    go through a hash. Rules are taken as given: if A allows B to its right,
    B must list A to its left on its own or propagation treats the pair as
    incompatible in that orientation. See asymmetries().
    """

    def __init__(self, rules: Rules, obstacle: int = OBSTACLE, path: int = PATH):
        if not rules:
            raise ConfigurationError("catalog needs at least one tile")
        ids = sorted(int(t) for t in rules)
        if ids[0] <= 0:
            raise ConfigurationError(f"tile ids must be positive, got {ids[0]}")

        table: List[Optional[Tuple[FrozenSet[int], ...]]] = [None] * (ids[-1] + 1)
        for tile, sides in rules.items():
            sides = tuple(frozenset(int(n) for n in side) for side in sides)
            if len(sides) != 4:
                raise ConfigurationError(f"tile {tile} needs 4 directional lists, got {len(sides)}")
            table[int(tile)] = sides
        self._table = tuple(table)
        self._ids = tuple(ids)

        for tile in ids:
            for d, side in enumerate(self._table[tile]):
                for n in side:
                    if not self.has(n):
                        raise ConfigurationError(
                            f"tile {tile} {Direction(d).name} references undefined tile {n}"
                        )
        for label, t in (("obstacle", obstacle), ("path", path)):
            if not self.has(t):
                raise ConfigurationError(f"{label} tile {t} is not in the catalog")
        self.obstacle = obstacle
        self.path = path

    @property
    def tiles(self) -> Tuple[int, ...]:
        return self._ids

    def has(self, tile: int) -> bool:
        return 0 < tile < len(self._table) and self._table[tile] is not None

    def compatible(self, tile: int, direction: int) -> FrozenSet[int]:
        if not self.has(tile):
            raise ConfigurationError(f"tile {tile} is not in the catalog")
        return self._table[tile][direction]

    def is_passable(self, tile: int) -> bool:
        return tile != self.obstacle

    def validate_weights(self, weights: Mapping[int, float]) -> None:
        for tile in self._ids:
            w = weights.get(tile)
            if w is None:
                raise ConfigurationError(f"no weight for tile {tile}")
            if w <= 0:
                raise ConfigurationError(f"weight for tile {tile} must be > 0, got {w}")

    def asymmetries(self) -> List[Tuple[int, Direction, int]]:
        """(tile, direction, neighbour) where the neighbour does not allow tile back."""
        out = []
        for tile in self._ids:
            for d in Direction:
                for n in sorted(self._table[tile][d]):
                    if tile not in self._table[n][d.opposite]:
                        out.append((tile, d, n))
        return out


DEFAULT_CATALOG = TileCatalog(DEFAULT_RULES)

