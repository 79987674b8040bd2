"""
Configuration settings for the numeric helpers.

**Conceptual**: This module provides a strongly-typed configuration object
that loads from environment variables (via .env files). Settings are
validated at construction, so a bad tolerance fails fast instead of silently
skewing every comparison later.

**Why not a module-level EPSILON constant?**
  - A mutable global leaks between callers and between tests.
  - A frozen settings object can be passed explicitly (NumericUtilities binds
    one per instance), while module-level helpers fall back to a lazily
    loaded default.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op if the file is absent)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


DEFAULT_EPSILON = 0.001
DEFAULT_LOG_LEVEL = "WARNING"

# Standard logging level names accepted for log_level
LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class NumericSettings:
    """
    Global settings for numeric comparisons, randomness and logging.

    **Conceptual**: Floating-point arithmetic rarely produces exact results,
    so approximate equality needs an error bound (epsilon). Randomized
    helpers need a reproducible seed in tests and an unseeded generator in
    production. Both live here.

    Attributes:
        epsilon: Maximum absolute difference for two numbers to count as equal.
                 Must be finite and non-negative. Default 0.001.
        random_seed: Seed for the default random source. None means an
                     unseeded (non-reproducible) generator.
        log_level: Level name for the "numlib" logger (e.g. "DEBUG").
                   Case-insensitive; must be one of LOG_LEVEL_NAMES.
    """
    epsilon: float = DEFAULT_EPSILON
    random_seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        """Validate settings after initialization."""
        if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, (int, float)):
            raise ValueError(
                f"epsilon must be a number, got: {self.epsilon!r}"
            )
        if not math.isfinite(self.epsilon) or self.epsilon < 0:
            raise ValueError(
                f"epsilon must be a finite, non-negative number, got: {self.epsilon}"
            )
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError(
                f"random_seed must be non-negative, got: {self.random_seed}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVEL_NAMES:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVEL_NAMES)}, "
                f"got: {self.log_level!r}"
            )

    @classmethod
    def from_env(cls) -> "NumericSettings":
        """
        Load numeric settings from environment variables.

        **Environment variables**:
          - NUMLIB_EPSILON (optional): Comparison tolerance. Defaults to 0.001.
          - NUMLIB_RANDOM_SEED (optional): Integer seed for the default
            random source. Unseeded if not set.
          - NUMLIB_LOG_LEVEL (optional): Logging level name. Defaults to WARNING.
            Unknown names such as VERBOSE are rejected.

        Returns:
            NumericSettings object with values loaded from environment.

        Raises:
            ValueError: If a variable is set but cannot be parsed, or the
                        parsed value fails validation.

        Usage example:
            >>> # In .env file:
            >>> # NUMLIB_EPSILON=0.0001
            >>>
            >>> settings = NumericSettings.from_env()
            >>> print(settings.epsilon)  # 0.0001
        """
        epsilon_str = os.getenv("NUMLIB_EPSILON", str(DEFAULT_EPSILON))
        seed_str = os.getenv("NUMLIB_RANDOM_SEED", "")
        log_level = os.getenv("NUMLIB_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

        try:
            epsilon = float(epsilon_str)
        except ValueError:
            raise ValueError(
                f"NUMLIB_EPSILON must be a number, got: {epsilon_str}"
            )

        random_seed = None
        if seed_str.strip():
            try:
                random_seed = int(seed_str)
            except ValueError:
                raise ValueError(
                    f"NUMLIB_RANDOM_SEED must be an integer, got: {seed_str}"
                )

        return cls(
            epsilon=epsilon,
            random_seed=random_seed,
            log_level=log_level,
        )


# Lazily loaded default; tests construct NumericSettings directly or call reset_settings()
_default_settings: Optional[NumericSettings] = None


def get_settings() -> NumericSettings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.
    Code that needs different settings should build its own NumericSettings
    and pass it along (or bind it to a NumericUtilities instance) rather
    than mutating this one.

    Returns:
        Global NumericSettings singleton.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = NumericSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("NUMLIB_EPSILON", "0.5")
          reset_settings()
          assert get_settings().epsilon == 0.5
      ```
    """
    global _default_settings
    _default_settings = None
