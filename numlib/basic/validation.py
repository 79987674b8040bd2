"""
Runtime validation for sequence and scalar arguments.

**Conceptual**: Python cannot enforce "a list of numbers" statically at a
library boundary, so every reduction helper funnels its input through
`as_number_list`. That one function decides what counts as a sequence and
what counts as a number, keeping the rules identical across sum, product,
max, min and friends.

**Rules**:
  - Sequences: list, tuple, 1-D numpy.ndarray, pandas.Series.
    Strings, bytes, mappings, sets, iterators and scalars are rejected.
  - Numbers: anything registered as numbers.Real (int, float, Fraction,
    numpy integer/float scalars). bool is rejected even though it is an int
    subclass; True + True == 2 is never what a caller meant.
"""

import numbers
from collections.abc import Sequence
from typing import Any, List

import numpy as np
import pandas as pd

from numlib.basic.errors import InvalidArgumentType, InvalidElementType


def is_real_number(value: Any) -> bool:
    """Return True if value is a real number and not a boolean."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def is_integral(value: Any) -> bool:
    """Return True if value is an integer (Python or numpy) and not a boolean."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Integral)


def is_number_sequence_container(values: Any) -> bool:
    """
    Return True if values is a container type accepted as a numeric sequence.

    Only the container is checked here; elements are checked by
    `as_number_list`.
    """
    if isinstance(values, (str, bytes, bytearray)):
        return False
    if isinstance(values, np.ndarray):
        return values.ndim == 1
    if isinstance(values, pd.Series):
        return True
    return isinstance(values, Sequence)


def as_number_list(values: Any, operation: str) -> List[Any]:
    """
    Validate a numeric sequence and return its elements as a plain list.

    **Functionally**:
    - numpy arrays and pandas Series are unpacked with `.tolist()`, which
      yields native Python scalars.
    - Every element is checked before the list is returned, so callers never
      see a partially processed input.

    Args:
        values: Candidate sequence of numbers.
        operation: Name of the calling operation, used in error messages.

    Returns:
        List of the sequence's elements, in order.

    Raises:
        InvalidArgumentType: If values is not an accepted sequence type.
        InvalidElementType: If any element is not a real number.
    """
    if not is_number_sequence_container(values):
        raise InvalidArgumentType(
            f"{operation}: input must be a sequence of numbers, "
            f"got {type(values).__name__}"
        )

    if isinstance(values, (np.ndarray, pd.Series)):
        items = values.tolist()
    else:
        items = list(values)

    for index, item in enumerate(items):
        if not is_real_number(item):
            raise InvalidElementType(
                f"{operation}: all elements must be numbers, "
                f"element {index} is {item!r} ({type(item).__name__})"
            )

    return items


def require_integral(value: Any, name: str, operation: str) -> int:
    """
    Check that value is an integer and return it as a Python int.

    Raises:
        InvalidArgumentType: If value is not integral.
    """
    if not is_integral(value):
        raise InvalidArgumentType(
            f"{operation}: {name} must be an integer, "
            f"got {value!r} ({type(value).__name__})"
        )
    return int(value)
