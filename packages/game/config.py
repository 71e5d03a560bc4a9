import os
from dataclasses import dataclass, field
from pathlib import Path

from packages.datasets.dictionary import DEFAULT_DICTIONARY_PATH, DICTIONARY_TTL_SEC
from packages.engine.multiplier import MultiplierConfig

# Per-hand feasibility indexes live much shorter than the dictionary itself.
INDEX_TTL_SEC = 60 * 60
INDEX_CACHE_PREFIX = "feasibility/index/"


@dataclass(frozen=True)
class Settings:
    dictionary_path: Path = DEFAULT_DICTIONARY_PATH
    dictionary_ttl: float = DICTIONARY_TTL_SEC
    index_ttl: float = INDEX_TTL_SEC
    multiplier: MultiplierConfig = field(default_factory=MultiplierConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            dictionary_path=Path(os.environ.get('LETTERGRID_DICTIONARY') or DEFAULT_DICTIONARY_PATH),
            dictionary_ttl=float(os.environ.get('LETTERGRID_DICTIONARY_TTL_SEC', DICTIONARY_TTL_SEC)),
            index_ttl=float(os.environ.get('LETTERGRID_INDEX_TTL_SEC', INDEX_TTL_SEC)),
            multiplier=MultiplierConfig.from_env(),
        )
