"""
NumericUtilities: the numeric helpers bound to one settings object.

**Conceptual**: The module-level helpers read their tolerance from the
lazily loaded default settings and draw randomness from the process-wide
generator. A NumericUtilities instance instead carries its own
NumericSettings and (optionally) its own random source, so two parts of an
application, or two tests, can use different tolerances or seeds without
touching shared state.

**Usage**:
    utils = NumericUtilities(NumericSettings(epsilon=1e-6, random_seed=7))
    utils.nearly_equals(0.1 + 0.2, 0.3)    # True
    utils.shuffle([1, 2, 3, 4])            # reproducible for seed 7
"""

from typing import Any, List, Optional, Sequence

import numpy as np

from numlib.basic.arithmetic import (
    compute_product,
    compute_square,
    compute_subtraction,
    compute_sum,
    nearly_equals,
)
from numlib.basic.combinatorics import compute_binomial, compute_factorial
from numlib.basic.number_theory import compute_gcd, compute_lcm
from numlib.basic.sampling import select_random, shuffle_in_place
from numlib.basic.sequences import find_max, find_min, generate_range
from numlib.config.settings import NumericSettings, get_settings
from numlib.utils.randomness import RandomSource


class NumericUtilities:
    """
    Stateless numeric helpers sharing one tolerance and one random source.

    Attributes:
        settings: The NumericSettings in effect (epsilon, random_seed).
        rng: Random source used by random() and shuffle().
    """

    def __init__(
        self,
        settings: Optional[NumericSettings] = None,
        rng: Optional[RandomSource] = None,
    ):
        """
        Args:
            settings: Settings to bind; defaults to get_settings().
            rng: Random source; defaults to a numpy Generator seeded with
                 settings.random_seed.
        """
        self.settings = settings or get_settings()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.random_seed)

    @property
    def epsilon(self) -> float:
        return self.settings.epsilon

    def with_epsilon(self, epsilon: float) -> "NumericUtilities":
        """Return a copy bound to a different tolerance, sharing the random source."""
        settings = NumericSettings(
            epsilon=epsilon,
            random_seed=self.settings.random_seed,
            log_level=self.settings.log_level,
        )
        return NumericUtilities(settings, rng=self.rng)

    def nearly_equals(self, a: float, b: float, tolerance: Optional[float] = None) -> bool:
        return nearly_equals(a, b, tolerance=tolerance, settings=self.settings)

    def sum(self, values: Sequence[float]) -> float:
        return compute_sum(values)

    def subtraction(self, values: Sequence[float]) -> float:
        return compute_subtraction(values)

    def product(self, values: Sequence[float]) -> float:
        return compute_product(values)

    def square(self, x: Any) -> Any:
        return compute_square(x)

    def binomial(self, n: int, k: int) -> int:
        return compute_binomial(n, k)

    def factorial(self, n: int) -> int:
        return compute_factorial(n)

    def gcd(self, a: float, b: float) -> float:
        return compute_gcd(a, b)

    def lcm(self, a: float, b: float) -> float:
        return compute_lcm(a, b)

    def random(
        self,
        values: Sequence[Any],
        quantity: int,
        allow_duplicates: bool = False,
    ) -> List[Any]:
        return select_random(values, quantity, allow_duplicates=allow_duplicates, rng=self.rng)

    def shuffle(self, values):
        return shuffle_in_place(values, rng=self.rng)

    def max(self, values: Sequence[float]) -> float:
        return find_max(values)

    def min(self, values: Sequence[float]) -> float:
        return find_min(values)

    def range(
        self,
        start: float,
        stop: Optional[float] = None,
        step: Optional[float] = None,
    ) -> List[float]:
        return generate_range(start, stop, step)
