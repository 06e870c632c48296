# src/tilecollapse/context.py
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .config import DEFAULT_CONFIG, GeneratorConfig
from .rng import PMRandom
from .tiles import DEFAULT_CATALOG, DEFAULT_WEIGHTS, TileCatalog


@dataclass
class EngineContext:
    """Everything a generation attempt reads: rules, weights, randomness, knobs."""
    config: GeneratorConfig = DEFAULT_CONFIG
    catalog: TileCatalog = DEFAULT_CATALOG
    weights: Mapping[int, float] = field(default_factory=lambda: dict(DEFAULT_WEIGHTS))
    rng: Optional[PMRandom] = None
    # Starting state of `rng`; PMRandom.from_seed(seed) replays the run.
    seed: int = field(init=False)

    def __post_init__(self):
        self.catalog.validate_weights(self.weights)
        if self.rng is None:
            self.rng = PMRandom.from_seed(self.config.seed)
        self.seed = self.rng.state

    def boosted_weights(self, boosted_tiles) -> Dict[int, float]:
        """Copy of the base weights with `neighbor_boost` applied once per listed tile."""
        w = dict(self.weights)
        for t in boosted_tiles:
            w[t] *= self.config.neighbor_boost
        return w
