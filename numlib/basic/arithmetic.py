"""
Approximate equality and sequence reductions.

This module provides the arithmetic building blocks: tolerance-based
equality, left-to-right sum and product, the right-to-left "subtraction"
reduction, and squaring.

All reductions validate the whole input first (see numlib.basic.validation),
so a single bad element fails the call without a partial result.
"""

from typing import Any, Optional, Sequence

from numlib.basic.errors import EmptyInput
from numlib.basic.validation import as_number_list
from numlib.config.settings import NumericSettings, get_settings


def nearly_equals(
    a: float,
    b: float,
    tolerance: Optional[float] = None,
    settings: Optional[NumericSettings] = None,
) -> bool:
    """
    Test whether two values are equal within a tolerance.

    **Conceptual**: Floating-point results carry rounding error, so
    0.1 + 0.2 == 0.3 is False in IEEE-754 doubles. Comparing with an explicit
    error bound answers the question the caller actually meant.

    **Mathematical**: Returns True iff |a - b| <= tol, where tol is the
    per-call tolerance if it is given and non-zero, else settings.epsilon.

    **Functionally**:
    - tolerance=None or tolerance=0 falls back to epsilon.
    - Never modifies settings.

    Args:
        a: A number.
        b: A number.
        tolerance: Optional per-call tolerance overriding epsilon.
        settings: Settings supplying epsilon; defaults to get_settings().

    Returns:
        Whether a and b are nearly equal.
    """
    if not tolerance:
        tolerance = (settings or get_settings()).epsilon
    return abs(a - b) <= tolerance


def compute_sum(values: Sequence[float]) -> float:
    """
    Sum the numbers in a sequence, left to right.

    **Edge cases**:
    - Empty sequence returns 0.

    Args:
        values: Sequence of numbers.

    Returns:
        Sum of the numbers.

    Raises:
        InvalidArgumentType: If values is not a sequence.
        InvalidElementType: If any element is not a number.
    """
    items = as_number_list(values, "sum")

    total = 0
    for item in items:
        total = total + item
    return total


def compute_subtraction(values: Sequence[float]) -> float:
    """
    Subtract the elements of a sequence from one another, starting at the end.

    **Mathematical**: The accumulator starts at the LAST element and every
    preceding element is subtracted in reverse index order:
        result = x[n-1] - x[n-2] - ... - x[0]
    e.g. [5, 3, 1, -1] -> -1 - 1 - 3 - 5 = -10.

    **Edge cases**:
    - Single element returns that element.
    - Empty sequence raises EmptyInput (there is no last element to start from).

    Args:
        values: Sequence of numbers.

    Returns:
        The difference.

    Raises:
        InvalidArgumentType: If values is not a sequence.
        InvalidElementType: If any element is not a number.
        EmptyInput: If values is empty.
    """
    items = as_number_list(values, "subtraction")
    if not items:
        raise EmptyInput("subtraction: input must contain at least one number")

    total = items[-1]
    for index in range(len(items) - 2, -1, -1):
        total -= items[index]
    return total


def compute_product(values: Sequence[float]) -> float:
    """
    Multiply the elements of a sequence, left to right from the first element.

    **Edge cases**:
    - Empty sequence raises EmptyInput rather than returning an implicit 1.

    Args:
        values: Sequence of numbers.

    Returns:
        The product.

    Raises:
        InvalidArgumentType: If values is not a sequence.
        InvalidElementType: If any element is not a number.
        EmptyInput: If values is empty.
    """
    items = as_number_list(values, "product")
    if not items:
        raise EmptyInput("product: input must contain at least one number")

    total = items[0]
    for item in items[1:]:
        total = total * item
    return total


def compute_square(x: Any) -> Any:
    """Return x * x. No validation; non-finite inputs give non-finite results."""
    return x * x
