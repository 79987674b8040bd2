"""
Random source abstractions for deterministic testing.

This module provides a simple, testable way to obtain uniform random numbers
via a source object rather than calling a global generator directly. This
enables deterministic tests of shuffling and sampling by scripting the exact
numbers a helper will see.

The key insight: depending on a RandomSource abstraction instead of a hidden
global generator makes randomized code reproducible. Production code passes
nothing and gets the default numpy generator; tests pass a seeded generator
or a ScriptedRandomSource.
"""

from typing import Iterable, Optional, Protocol

import numpy as np

from numlib.config.settings import get_settings
from numlib.utils.logging import get_logger

logger = get_logger(__name__)


class RandomSource(Protocol):
    """
    Abstract uniform random number protocol.

    **Conceptual**: A RandomSource is any object that can answer "give me a
    float in [0, 1)". numpy.random.Generator and random.Random both satisfy
    this protocol as-is, so either can be injected.

    **Example**:
        # In production:
        shuffle_in_place(values)

        # In tests:
        shuffle_in_place(values, rng=np.random.default_rng(42))
        shuffle_in_place(values, rng=ScriptedRandomSource([0.0, 0.5]))
    """

    def random(self) -> float:
        """
        Return the next uniform sample.

        Returns:
            float in the half-open interval [0, 1).
        """
        ...


class ScriptedRandomSource:
    """
    Random source that replays a fixed list of values (for deterministic tests).

    **Conceptual**: The random analogue of a frozen clock. Each call to
    random() returns the next scripted value, cycling back to the start when
    the script runs out. Because the helpers map a sample r to an index with
    floor(r * m), a test can force any particular swap sequence.

    **Usage**:
        rng = ScriptedRandomSource([0.0])
        shuffle_in_place([1, 2, 3], rng=rng)  # every swap picks index 0
    """

    def __init__(self, values: Iterable[float]):
        """
        Initialize with the values to replay.

        Args:
            values: Non-empty iterable of floats, each in [0, 1).

        Raises:
            ValueError: If values is empty or any value lies outside [0, 1).
        """
        self._values = [float(v) for v in values]
        if not self._values:
            raise ValueError("ScriptedRandomSource needs at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Scripted values must lie in [0, 1), got: {v}")
        self._position = 0
        self.calls = 0

    def random(self) -> float:
        """Return the next scripted value."""
        value = self._values[self._position]
        self._position = (self._position + 1) % len(self._values)
        self.calls += 1
        return value


_default_source: Optional[np.random.Generator] = None


def default_random_source() -> RandomSource:
    """
    Return the process-wide default random source.

    Created lazily as numpy.random.default_rng(seed) where seed comes from
    NumericSettings.random_seed (None means unseeded).
    """
    global _default_source

    if _default_source is None:
        seed = get_settings().random_seed
        logger.debug("Creating default random source (seed=%s)", seed)
        _default_source = np.random.default_rng(seed)

    return _default_source


def reset_random_source():
    """Discard the default random source so the next call rebuilds it (for testing)."""
    global _default_source
    _default_source = None


def resolve_random_source(rng: Optional[RandomSource]) -> RandomSource:
    """Return rng if given, else the default random source."""
    if rng is None:
        return default_random_source()
    return rng
