"""
Randomized selection and in-place shuffling.

Both helpers draw uniform samples from a RandomSource (numlib.utils.randomness).
Pass rng explicitly for reproducible results; leave it out to use the
process-wide default generator.
"""

import math
from collections.abc import MutableSequence
from typing import Any, List, Optional, Sequence, TypeVar

import numpy as np
import pandas as pd

from numlib.basic.errors import EmptyInput, InvalidArgument, InvalidArgumentType
from numlib.basic.validation import is_number_sequence_container, require_integral
from numlib.utils.logging import get_logger
from numlib.utils.randomness import RandomSource, resolve_random_source

logger = get_logger(__name__)

S = TypeVar("S")


def _random_index(rng: RandomSource, upper: int) -> int:
    """Map a uniform sample in [0, 1) to an index in [0, upper)."""
    return min(int(math.floor(rng.random() * upper)), upper - 1)


def shuffle_in_place(values: S, rng: Optional[RandomSource] = None) -> S:
    """
    Shuffle a sequence in place (Fisher–Yates) and return it.

    **Conceptual**: Walks from the last position down to the first; at each
    position m it swaps the element there with one picked uniformly from
    positions 0..m (inclusive). Every permutation of the input is equally
    likely, provided the random source is uniform.

    **Functionally**:
    - Mutates values and returns the same object, for chaining.
    - Accepts lists (any MutableSequence) and 1-D numpy arrays.
    - Elements are not type-checked; any values can be shuffled.

    Args:
        values: Mutable sequence to shuffle.
        rng: Random source; defaults to the process-wide generator.

    Returns:
        values, shuffled.

    Raises:
        InvalidArgumentType: If values is not a mutable sequence.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidArgumentType(
                f"shuffle: numpy arrays must be 1-D, got {values.ndim}-D"
            )
    elif isinstance(values, (str, bytes)) or not isinstance(values, MutableSequence):
        raise InvalidArgumentType(
            f"shuffle: input must be a mutable sequence, got {type(values).__name__}"
        )

    rng = resolve_random_source(rng)

    m = len(values)
    while m:
        i = _random_index(rng, m)
        m -= 1
        values[m], values[i] = values[i], values[m]

    return values


def select_random(
    values: Sequence[Any],
    quantity: int,
    allow_duplicates: bool = False,
    rng: Optional[RandomSource] = None,
) -> List[Any]:
    """
    Pick a number of elements from a sequence at random.

    **Functionally**:
    - allow_duplicates=True: quantity independent uniform draws with
      replacement; quantity may exceed len(values).
    - allow_duplicates=False: shuffles a copy of values and returns its first
      quantity elements (uniform sampling without replacement). The caller's
      sequence is left untouched.

    **Edge cases**:
    - quantity=0 returns an empty list.

    Args:
        values: Population to select from (list, tuple, 1-D array, Series).
        quantity: Number of elements to return (non-negative integer).
        allow_duplicates: Whether the same element may be returned twice.
        rng: Random source; defaults to the process-wide generator.

    Returns:
        List of selected elements.

    Raises:
        InvalidArgumentType: If values is not a sequence or quantity is not an integer.
        EmptyInput: If values is empty.
        InvalidArgument: If quantity is negative, or exceeds len(values)
                         while duplicates are disallowed.
    """
    if not is_number_sequence_container(values):
        raise InvalidArgumentType(
            f"random: input must be a sequence, got {type(values).__name__}"
        )
    quantity = require_integral(quantity, "quantity", "random")

    if isinstance(values, (np.ndarray, pd.Series)):
        population = values.tolist()
    else:
        population = list(values)

    if not population:
        raise EmptyInput("random: cannot select from an empty sequence")
    if quantity < 0:
        raise InvalidArgument(f"random: quantity must be non-negative, got {quantity}")
    if quantity > len(population) and not allow_duplicates:
        raise InvalidArgument(
            f"random: quantity requested ({quantity}) exceeds size of input "
            f"({len(population)}) and duplicates are not allowed"
        )

    rng = resolve_random_source(rng)

    if allow_duplicates:
        logger.debug("Drawing %d of %d elements with replacement", quantity, len(population))
        return [population[_random_index(rng, len(population))] for _ in range(quantity)]

    logger.debug("Drawing %d of %d elements without replacement", quantity, len(population))
    return shuffle_in_place(population, rng=rng)[:quantity]
