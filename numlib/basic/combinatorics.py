"""
Combinatorics: binomial coefficients and factorials.

Both functions work on Python ints, so results are exact.
"""

from typing import Dict

from numlib.basic.errors import InvalidArgument
from numlib.basic.validation import require_integral


def compute_binomial(n: int, k: int) -> int:
    """
    Calculate the binomial coefficient C(n, k) ("n choose k").

    **Conceptual**: The number of ways to choose k items from n without
    regard to order.

    **Mathematical**: Pascal's rule
        C(n, k) = C(n-1, k-1) + C(n-1, k)
    with base cases
        C(n, 0) = 1   for n >= 0
        C(0, k) = 0   for k > 0
    Evaluated naively the recursion is exponential in n. Instead a table
    (n -> {k -> C(n, k)}) is filled bottom-up, one row of Pascal's triangle
    at a time, in O(n * k) and with no recursion, so large n is fine. Only
    the newest row is kept once the next one is built. The table is built
    fresh for each call and discarded when it returns.

    **Edge cases**:
    - k > n returns 0.

    Args:
        n: Number of available items (non-negative integer).
        k: Number chosen (non-negative integer).

    Returns:
        C(n, k) as an int.

    Raises:
        InvalidArgumentType: If n or k is not an integer.
        InvalidArgument: If n or k is negative.
    """
    n = require_integral(n, "n", "binomial")
    k = require_integral(k, "k", "binomial")
    if n < 0 or k < 0:
        raise InvalidArgument(
            f"binomial: n and k must be non-negative, got n={n}, k={k}"
        )

    memo: Dict[int, Dict[int, int]] = {0: {0: 1}}

    # Fill row by row; row m only needs the columns that can still reach k
    for m in range(1, n + 1):
        previous = memo[m - 1]
        row = {0: 1}
        for j in range(max(1, k - (n - m)), min(k, m) + 1):
            row[j] = previous.get(j - 1, 0) + previous.get(j, 0)
        memo[m] = row
        del memo[m - 1]

    return memo[n].get(k, 0)


def compute_factorial(n: int) -> int:
    """
    Compute n! iteratively as the product 2 * 3 * ... * n.

    **Edge cases**:
    - 0! and 1! are both 1.
    - No overflow handling is needed: Python ints grow as required.

    Args:
        n: Non-negative integer.

    Returns:
        n! as an int.

    Raises:
        InvalidArgumentType: If n is not an integer.
        InvalidArgument: If n is negative.
    """
    n = require_integral(n, "n", "factorial")
    if n < 0:
        raise InvalidArgument(f"factorial: n must be non-negative, got {n}")

    result = 1
    i = 2
    while i <= n:
        result *= i
        i += 1
    return result
