# src/tilecollapse/mapgen/generator.py
# Attempt driver: one attempt reports an Outcome, generate() retries until a
# map passes or the attempt budget runs out.

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..config import DEFAULT_CONFIG, GeneratorConfig
from ..context import EngineContext
from ..errors import AttemptsExhaustedError, ContradictionError
from ..grid import XY, Grid
from ..rng import PMRandom
from .border import init_bordered_grid, init_seeded_grid
from .carve import carve_path
from .collapse import run_collapse
from .connectivity import is_connected

logger = logging.getLogger(__name__)


class Outcome(Enum):
    SUCCESS = "success"
    CONTRADICTION = "contradiction"
    CONNECTIVITY_FAILURE = "connectivity_failure"


@dataclass
class AttemptResult:
    outcome: Outcome
    grid: Grid
    entry: XY
    exit: Optional[XY] = None
    path: List[XY] = field(default_factory=list)
    contradiction: Optional[XY] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS


@dataclass
class GeneratedMap:
    grid: Grid
    entry: XY
    exit: Optional[XY]
    path: List[XY]
    attempts: int
    seed: Optional[int] = None

    def as_matrix(self) -> List[List[int]]:
        return self.grid.as_matrix()


def run_attempt(ctx: EngineContext) -> AttemptResult:
    """
    One generation attempt on a fresh grid.

    Contradictions and a disconnected map come back as outcomes; configuration
    errors and an unreachable carve (a logic error once connectivity passed)
    propagate.
    """
    if ctx.config.bordered:
        grid, entry, exit_ = init_bordered_grid(ctx)
        seeds = [entry, exit_]
    else:
        grid, entry = init_seeded_grid(ctx)
        exit_ = None
        seeds = [entry]

    try:
        run_collapse(ctx, grid, seeds)
    except ContradictionError as e:
        return AttemptResult(Outcome.CONTRADICTION, grid, entry, exit_, contradiction=e.coord)

    if exit_ is None:
        # Rimless variant: nothing to carve; a blocked seed has nothing to connect.
        seed_tile = grid.tile_at(*entry)
        if ctx.catalog.is_passable(seed_tile) and not is_connected(grid, entry, ctx.catalog):
            return AttemptResult(Outcome.CONNECTIVITY_FAILURE, grid, entry)
        return AttemptResult(Outcome.SUCCESS, grid, entry)

    if not is_connected(grid, entry, ctx.catalog):
        return AttemptResult(Outcome.CONNECTIVITY_FAILURE, grid, entry, exit_)

    path = carve_path(grid, entry, exit_, ctx.catalog)
    return AttemptResult(Outcome.SUCCESS, grid, entry, exit_, path=path)


def generate(
    config: GeneratorConfig = DEFAULT_CONFIG,
    rng: Optional[PMRandom] = None,
    ctx: Optional[EngineContext] = None,
) -> GeneratedMap:
    """
    Retry run_attempt until one succeeds.

    The random source carries over between attempts, so each retry sees fresh
    draws while the whole run stays reproducible for a fixed seed. Raises
    AttemptsExhaustedError once `config.max_attempts` attempts have failed.
    """
    if ctx is None:
        ctx = EngineContext(config=config, rng=rng)
    config = ctx.config
    attempt = 0
    while config.max_attempts is None or attempt < config.max_attempts:
        attempt += 1
        result = run_attempt(ctx)
        if result.ok:
            logger.info("map accepted after %d attempt(s), exit=%s, path=%d cells",
                        attempt, result.exit, len(result.path))
            return GeneratedMap(result.grid, result.entry, result.exit, result.path,
                                attempts=attempt, seed=ctx.seed)
        if result.outcome is Outcome.CONTRADICTION:
            logger.warning("attempt %d: contradiction at %s, retrying", attempt, result.contradiction)
        else:
            logger.warning("attempt %d: passable tiles not connected, retrying", attempt)
    raise AttemptsExhaustedError(attempt)
