import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigurationError

ENV_PREFIX = "TILECOLLAPSE_"

@dataclass(frozen=True)
class GeneratorConfig:
    width: int = 20
    height: int = 20
    seed: Optional[int] = None
    # None retries forever, like the original program.
    max_attempts: Optional[int] = 1000
    neighbor_boost: float = 1.5
    # False runs the single-seed variant: no border, no exit, no carve.
    bordered: bool = True

    def __post_init__(self):
        # Bordered maps need an interior plus a non-corner exit slot off the entry row/column.
        min_side = 3 if self.bordered else 1
        if self.width < min_side or self.height < min_side:
            raise ConfigurationError(
                f"grid must be at least {min_side}x{min_side}, got {self.width}x{self.height}"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ConfigurationError("max_attempts must be >= 1 or None")
        if self.neighbor_boost <= 0:
            raise ConfigurationError("neighbor_boost must be > 0")

    @property
    def entry(self):
        return (self.width // 2, self.height - 1)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, base: Optional["GeneratorConfig"] = None) -> "GeneratorConfig":
        """Overlay TILECOLLAPSE_* environment variables on `base` (or defaults)."""
        env = os.environ if environ is None else environ
        overrides = {}
        for key, attr, conv in (
            ("WIDTH", "width", int),
            ("HEIGHT", "height", int),
            ("SEED", "seed", int),
            ("MAX_ATTEMPTS", "max_attempts", _optional_int),
            ("NEIGHBOR_BOOST", "neighbor_boost", float),
            ("BORDERED", "bordered", _flag),
        ):
            raw = env.get(ENV_PREFIX + key)
            if raw is None:
                continue
            try:
                overrides[attr] = conv(raw)
            except ValueError as e:
                raise ConfigurationError(f"{ENV_PREFIX + key}={raw!r}: {e}") from e
        return replace(base or cls(), **overrides)


def _optional_int(raw: str) -> Optional[int]:
    # "0" goes through int() so validation rejects it like max_attempts=0.
    return None if raw.strip().lower() in {"", "none"} else int(raw)

def _flag(raw: str) -> bool:
    return raw.strip().lower() not in {"0", "false", "no", ""}


# Global defaults (can be swapped by launcher)
DEFAULT_CONFIG = GeneratorConfig()
