"""
Process configuration, read from the environment.

Game rules options live in GameOptions and travel with the game state;
this module only covers how the process around the engine behaves.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os


DEFAULT_DATA_DIR = ".everdell"


@dataclass
class EngineConfig:
    env: str = "development"
    log_level: str = "WARNING"
    data_dir: str = DEFAULT_DATA_DIR
    seed: int | None = None

    @classmethod
    def from_env(cls) -> EngineConfig:
        seed = os.getenv("EVERDELL_SEED")
        return cls(
            env=os.getenv("EVERDELL_ENV", "development"),
            log_level=os.getenv("EVERDELL_LOG_LEVEL", "WARNING").upper(),
            data_dir=os.getenv("EVERDELL_DATA_DIR", DEFAULT_DATA_DIR),
            seed=int(seed) if seed else None,
        )

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
