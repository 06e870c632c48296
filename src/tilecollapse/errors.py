# src/tilecollapse/errors.py
from typing import Optional, Tuple


class TileCollapseError(Exception):
    """Base class for every error raised by the generator."""


class ConfigurationError(TileCollapseError):
    """Catalog, weights or config are inconsistent. Never retried."""


class ContradictionError(TileCollapseError):
    """A cell ran out of options. The attempt is discarded and retried."""

    def __init__(self, x: int, y: int, message: Optional[str] = None):
        self.x = x
        self.y = y
        super().__init__(message or f"cell ({x}, {y}) has no remaining options")

    @property
    def coord(self) -> Tuple[int, int]:
        return (self.x, self.y)


class UnreachablePathError(TileCollapseError):
    """A* exhausted its frontier without reaching the target."""

    def __init__(self, start: Tuple[int, int], end: Tuple[int, int]):
        self.start = start
        self.end = end
        super().__init__(f"no passable route from {start} to {end}")


class AttemptsExhaustedError(TileCollapseError):
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"no valid map after {attempts} attempts")
