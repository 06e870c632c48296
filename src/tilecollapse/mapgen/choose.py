# src/tilecollapse/mapgen/choose.py
from typing import Mapping, Sequence

from ..errors import ConfigurationError, ContradictionError
from ..rng import PMRandom


def choose(options: Sequence[int], weights: Mapping[int, float], rng: PMRandom) -> int:
    """
    Weighted pick from `options`, consuming exactly one draw from `rng`.

    Draws r in [0, total) and returns the first option whose running weight
    reaches r. If float rounding leaves the running sum short of r the last
    option is returned, so a given seed always yields the same tile.
    """
    if not options:
        raise ContradictionError(-1, -1, "cannot choose from an empty option set")
    total = 0.0
    for opt in options:
        w = weights.get(opt)
        if w is None:
            raise ConfigurationError(f"no weight for tile {opt}")
        if w <= 0:
            raise ConfigurationError(f"weight for tile {opt} must be > 0, got {w}")
        total += w

    r = rng.uniform(total)
    accum = 0.0
    for opt in options:
        accum += weights[opt]
        if r <= accum:
            return opt
    return options[-1]  # rounding fallback
