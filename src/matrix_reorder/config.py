"""
Configuration management for Matrix Reorder.

Loads configuration from environment variables (typically from a .env file).
Uses python-dotenv to load .env automatically.

Usage:
    from matrix_reorder.config import config

    max_iter = config.engine.two_dim_sort_max_iter
    rng = config.engine.make_rng()
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
from dotenv import load_dotenv

# Look for .env in project root (parent of src/)
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

NORMALIZATION_MODES = ("none", "row", "column", "global")


@dataclass
class EngineConfig:
    """Settings for the reordering engine."""
    two_dim_sort_max_iter: int = 500
    seed: Optional[int] = None
    default_normalization: str = "row"

    def __post_init__(self):
        """Validate ranges and enumerated values."""
        if self.two_dim_sort_max_iter < 1:
            raise ValueError(
                f"two_dim_sort_max_iter must be >= 1, got {self.two_dim_sort_max_iter}"
            )
        if self.default_normalization not in NORMALIZATION_MODES:
            raise ValueError(
                f"Unknown normalization mode: {self.default_normalization}. "
                f"Expected one of {', '.join(NORMALIZATION_MODES)}"
            )

    def make_rng(self) -> np.random.Generator:
        """Create a random generator seeded from this config (unseeded if no seed)."""
        return np.random.default_rng(self.seed)


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    """Read an integer environment variable, treating empty as unset."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


class Config:
    """
    Application configuration loaded from environment variables.

    Environment variables can be set:
    1. In a .env file in the project root
    2. In the system environment
    3. In a container/deployment environment
    """

    def __init__(self):
        """Load configuration from environment."""
        self.engine = EngineConfig(
            two_dim_sort_max_iter=_int_env("MATRIX_REORDER_MAX_ITER", 500),
            seed=_int_env("MATRIX_REORDER_SEED", None),
            default_normalization=os.getenv(
                "MATRIX_REORDER_DEFAULT_NORMALIZATION", "row"
            ).strip().lower(),
        )
        self.log_level = os.getenv("MATRIX_REORDER_LOG_LEVEL", "INFO").strip().upper()


# Global config instance
config = Config()
