from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import ContradictionError
from .tiles import Direction

XY = Tuple[int, int]

@dataclass
class Cell:
    options: Tuple[int, ...]
    collapsed: bool = False

    @property
    def entropy(self) -> int:
        return len(self.options)

    def resolved(self) -> Optional[int]:
        """The settled tile, None while more than one option remains."""
        if not self.options:
            raise ContradictionError(-1, -1, "cell has no remaining options")
        if len(self.options) == 1:
            return self.options[0]
        return None

    def settle(self, tile: int) -> None:
        self.options = (tile,)
        self.collapsed = True


@dataclass
class Grid:
    width: int
    height: int
    buf: List[Cell] = field(default_factory=list)

    @classmethod
    def initialize(cls, width: int, height: int, default_options: Iterable[int]) -> "Grid":
        opts = tuple(default_options)
        buf = [Cell(options=opts) for _ in range(width * height)]
        return cls(width=width, height=height, buf=buf)

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.buf[self.idx(x, y)]

    def coords(self) -> Iterator[XY]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def step(self, x: int, y: int, d: Direction) -> Optional[XY]:
        dx, dy = d.delta
        nx, ny = x + dx, y + dy
        return (nx, ny) if self.in_bounds(nx, ny) else None

    def neighbors(self, x: int, y: int) -> List[XY]:
        # UP, RIGHT, DOWN, LEFT; no wraparound.
        out = []
        for d in Direction:
            n = self.step(x, y, d)
            if n is not None:
                out.append(n)
        return out

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def tile_at(self, x: int, y: int) -> Optional[int]:
        try:
            return self.cell(x, y).resolved()
        except ContradictionError:
            raise ContradictionError(x, y) from None

    def force(self, x: int, y: int, tile: int) -> None:
        self.cell(x, y).settle(tile)

    def is_fully_collapsed(self) -> bool:
        return all(c.collapsed for c in self.buf)

    def as_matrix(self, unresolved: int = 0) -> List[List[int]]:
        """Row-major tiles of collapsed cells; every other cell reads as `unresolved`."""
        out = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                c = self.cell(x, y)
                row.append(int(c.options[0]) if c.collapsed else unresolved)
            out.append(row)
        return out
