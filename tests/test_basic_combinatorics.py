"""
Tests for numlib/basic/combinatorics.py

Known binomial coefficients and factorials are checked directly; larger
values are checked against scipy and the standard library.
"""

import math

import numpy as np
import pytest
from scipy.special import comb

from numlib.basic.combinatorics import compute_binomial, compute_factorial
from numlib.basic.errors import InvalidArgument, InvalidArgumentType


def test_compute_binomial_known_values():
    """Test a few hand-checkable coefficients."""
    assert compute_binomial(5, 2) == 10
    assert compute_binomial(10, 3) == 120
    assert compute_binomial(4, 4) == 1


def test_compute_binomial_base_cases():
    """Test C(n, 0) = 1 and C(0, k) = 0 for k > 0."""
    assert compute_binomial(0, 0) == 1
    assert compute_binomial(7, 0) == 1
    assert compute_binomial(0, 3) == 0


def test_compute_binomial_k_greater_than_n_is_zero():
    """Test that choosing more items than available gives 0."""
    assert compute_binomial(3, 5) == 0


def test_compute_binomial_symmetry():
    """Test C(n, k) == C(n, n - k) for all 0 <= k <= n."""
    for n in range(0, 16):
        for k in range(0, n + 1):
            assert compute_binomial(n, k) == compute_binomial(n, n - k)


def test_compute_binomial_matches_scipy():
    """Test against scipy's exact binomial coefficient."""
    for n in range(0, 25):
        for k in range(0, n + 2):
            assert compute_binomial(n, k) == comb(n, k, exact=True)


def test_compute_binomial_large_n_is_exact():
    """Test a value that would take forever without memoization."""
    assert compute_binomial(200, 100) == math.comb(200, 100)


def test_compute_binomial_accepts_numpy_integers():
    """Test that numpy integer scalars are accepted."""
    assert compute_binomial(np.int64(6), np.int32(3)) == 20


def test_compute_binomial_rejects_negative_arguments():
    """Test the negative-input policy."""
    with pytest.raises(InvalidArgument, match="non-negative"):
        compute_binomial(-1, 0)
    with pytest.raises(InvalidArgument):
        compute_binomial(5, -2)


def test_compute_binomial_rejects_non_integers():
    """Test that fractional arguments are refused."""
    with pytest.raises(InvalidArgumentType):
        compute_binomial(5.5, 2)
    with pytest.raises(InvalidArgumentType):
        compute_binomial(5, True)


def test_compute_binomial_large_n_small_k():
    """Test that large n does not hit the recursion limit."""
    assert compute_binomial(1500, 2) == 1124250
    assert compute_binomial(1500, 1498) == 1124250


def test_compute_binomial_large_n_and_k():
    """Test a wide table (n = 2000, k = 1000) against math.comb."""
    assert compute_binomial(2000, 1000) == math.comb(2000, 1000)


def test_compute_factorial_known_values():
    """Test small factorials."""
    assert compute_factorial(5) == 120
    assert compute_factorial(0) == 1
    assert compute_factorial(1) == 1


def test_compute_factorial_large_value_is_exact():
    """Test that large factorials do not lose precision."""
    assert compute_factorial(20) == 2432902008176640000
    assert compute_factorial(50) == math.factorial(50)


def test_compute_factorial_rejects_negative():
    """Test the negative-input policy."""
    with pytest.raises(InvalidArgument):
        compute_factorial(-1)


def test_compute_factorial_rejects_non_integer():
    """Test that fractional arguments are refused."""
    with pytest.raises(InvalidArgumentType):
        compute_factorial(2.5)
