# src/tilecollapse/rng.py
# Park–Miller minimal standard generator. One instance is shared by the
# chooser and the entropy selector for a whole run, so a seed pins the map.

from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar
import time

A = 16807
M = 0x7FFFFFFF  # 2^31-1

T = TypeVar("T")

def pm_next(state: int) -> int:
    return (state * A) % M

def normalize_seed(seed: int) -> int:
    # State must lie in 1..M-1; 0 would stick at 0 forever.
    s = seed % M
    return s if s else 1

@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "PMRandom":
        """Seeded generator; None falls back to wall-clock time."""
        if seed is None:
            seed = time.time_ns()
        return cls(normalize_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def uniform(self, upper: float) -> float:
        """Uniform float in [0, upper)."""
        return (self.next32() - 1) / (M - 1) * upper

    def below(self, n: int) -> int:
        """0..n-1."""
        assert n > 0
        return (self.next32() - 1) % n

    def pick(self, items: Sequence[T]) -> T:
        return items[self.below(len(items))]
