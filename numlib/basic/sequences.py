"""
Extrema and arithmetic range generation.
"""

import math
from typing import List, Optional, Sequence

from numlib.basic.errors import EmptyInput
from numlib.basic.validation import as_number_list


def _has_nan(items: List[float]) -> bool:
    return any(isinstance(item, float) and math.isnan(item) for item in items)


def find_max(values: Sequence[float]) -> float:
    """
    Find the maximum value in a sequence.

    **Edge cases**:
    - Empty sequence raises EmptyInput.
    - Any NaN element makes the result NaN (the builtin max would otherwise
      give an order-dependent answer).

    Raises:
        InvalidArgumentType: If values is not a sequence.
        InvalidElementType: If any element is not a number.
        EmptyInput: If values is empty.
    """
    items = as_number_list(values, "max")
    if not items:
        raise EmptyInput("max: input must contain at least one number")
    if _has_nan(items):
        return math.nan
    return max(items)


def find_min(values: Sequence[float]) -> float:
    """
    Find the minimum value in a sequence.

    Same validation and NaN rules as find_max.
    """
    items = as_number_list(values, "min")
    if not items:
        raise EmptyInput("min: input must contain at least one number")
    if _has_nan(items):
        return math.nan
    return min(items)


def generate_range(
    start: float,
    stop: Optional[float] = None,
    step: Optional[float] = None,
) -> List[float]:
    """
    Create a fully materialized arithmetic sequence from start toward stop.

    **Mathematical**: The length is
        len = max(ceil((stop - start) / step) + 1, 0)
    and element i is start advanced by step i times (by repeated addition).
    Because of the "+ 1" the stop value itself is included whenever the
    steps land on it exactly. When they don't, the last value lies past
    stop by less than one step: generate_range(0, 10, 3) -> [0, 3, 6, 9, 12].

    **Functionally**:
    - Called with one argument, that argument is stop and start is 0.
    - step defaults to 1 (a step of 0 is treated as 1).
    - If stop < start the step is forced negative (-|step|) so the sequence
      still heads from start toward stop.
    - A zero-length result is a valid empty list, never an error.

    **Examples**:
        generate_range(5)        -> [0, 1, 2, 3, 4, 5]
        generate_range(1, 5)     -> [1, 2, 3, 4, 5]
        generate_range(5, 1)     -> [5, 4, 3, 2, 1]
        generate_range(0, 0)     -> [0]
        generate_range(0, 1, .5) -> [0, 0.5, 1.0]

    Args:
        start: First value (or stop, when called with one argument).
        stop: Bound to progress toward.
        step: Increment between consecutive values.

    Returns:
        List of values.
    """
    if stop is None:
        stop = start or 0
        start = 0

    step = step or 1

    if stop < start:
        step = 0 - abs(step)

    length = max(math.ceil((stop - start) / step) + 1, 0)

    result = []
    value = start
    while len(result) < length:
        result.append(value)
        value += step

    return result
