"""
Greatest common divisor and least common multiple.

gcd keeps a deliberately non-mathematical fallback for zero arguments:
if either operand is zero (or NaN), the result is 1. lcm builds on it, which
is why lcm never divides by zero.
"""

import math
import numbers
from typing import Union

from numlib.basic.errors import InvalidArgumentType
from numlib.basic.validation import is_integral, is_real_number

Number = Union[int, float]


def _truthy(value: Number) -> bool:
    # NaN is falsy here, as it is for JavaScript-style number coercion
    if isinstance(value, numbers.Real) and math.isnan(value):
        return False
    return bool(value)


def compute_gcd(a: Number, b: Number) -> Number:
    """
    Calculate the greatest common divisor of two numbers (Euclid).

    **Fallback rules** (applied before the loop):
        b <- b if a and b are both non-zero, else 0
        a <- a if b is non-zero, else 1
    So gcd(0, x), gcd(x, 0) and gcd(0, 0) all return 1.

    **Functionally**:
    - The loop runs a, b <- b, a % b until b is 0.
    - The absolute value of the final a is returned, so the sign of the
      inputs never matters.

    Args:
        a: A number.
        b: A number.

    Returns:
        Greatest common divisor of a and b (1 under the fallback rules).

    Raises:
        InvalidArgumentType: If a or b is not a real number (strings and
                             booleans included).
    """
    for name, value in (("a", a), ("b", b)):
        if not is_real_number(value):
            raise InvalidArgumentType(
                f"gcd: {name} must be a number, got {value!r} ({type(value).__name__})"
            )

    b = b if (_truthy(b) and _truthy(a)) else 0
    a = a if b else 1

    while b:
        a, b = b, a % b

    return abs(a)


def compute_lcm(a: Number, b: Number) -> Number:
    """
    Calculate the least common multiple of two numbers.

    **Mathematical**: lcm(a, b) = |a * b| / gcd(a, b)

    **Edge cases**:
    - gcd never returns 0 (see compute_gcd), so there is no division by zero;
      lcm(0, x) is 0.
    - Integer inputs give an int result; any float input gives a float.

    Args:
        a: A number.
        b: A number.

    Returns:
        Least common multiple of a and b.

    Raises:
        InvalidArgumentType: If a or b is not a real number.
    """
    divisor = compute_gcd(a, b)
    if is_integral(a) and is_integral(b):
        return abs(a * b) // divisor
    return abs(a * b) / divisor
