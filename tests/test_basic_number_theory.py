"""
Tests for numlib/basic/number_theory.py

Covers ordinary gcd/lcm values as well as the zero/NaN fallback rules.
"""

import math

import pytest

from numlib.basic.errors import InvalidArgumentType
from numlib.basic.number_theory import compute_gcd, compute_lcm


def test_compute_gcd_known_values():
    """Test ordinary gcd values."""
    assert compute_gcd(12, 8) == 4
    assert compute_gcd(8, 12) == 4
    assert compute_gcd(7, 13) == 1
    assert compute_gcd(21, 14) == 7


def test_compute_gcd_ignores_sign():
    """Test that the result is always non-negative."""
    assert compute_gcd(-12, 8) == 4
    assert compute_gcd(12, -8) == 4
    assert compute_gcd(-12, -8) == 4


def test_compute_gcd_zero_fallback_returns_one():
    """Test that a zero operand triggers the fallback and yields 1."""
    assert compute_gcd(0, 5) == 1
    assert compute_gcd(5, 0) == 1
    assert compute_gcd(0, 0) == 1


def test_compute_gcd_nan_counts_as_zero():
    """Test that NaN triggers the same fallback as zero."""
    assert compute_gcd(math.nan, 4) == 1
    assert compute_gcd(4, math.nan) == 1


def test_compute_gcd_floats():
    """Test Euclid on exactly representable floats."""
    assert compute_gcd(2.5, 5.0) == 2.5


def test_compute_lcm_known_values():
    """Test ordinary lcm values."""
    assert compute_lcm(4, 6) == 12
    assert compute_lcm(3, 5) == 15
    assert compute_lcm(-4, 6) == 12


def test_compute_lcm_integers_stay_integers():
    """Test that integer inputs give an int result."""
    result = compute_lcm(4, 6)
    assert isinstance(result, int)


def test_compute_lcm_with_zero_is_zero():
    """Test that gcd's fallback keeps lcm away from division by zero."""
    assert compute_lcm(0, 5) == 0
    assert compute_lcm(0, 0) == 0


def test_compute_lcm_floats():
    """Test lcm on floats."""
    assert compute_lcm(2.5, 5.0) == 5.0


def test_compute_gcd_rejects_non_numbers():
    """Test that strings and booleans raise InvalidArgumentType, not a bare TypeError."""
    with pytest.raises(InvalidArgumentType, match="gcd: a must be a number"):
        compute_gcd("12", "8")
    with pytest.raises(InvalidArgumentType, match="gcd: b must be a number"):
        compute_gcd(12, "8")
    with pytest.raises(InvalidArgumentType):
        compute_gcd(True, 4)
    with pytest.raises(InvalidArgumentType):
        compute_gcd(None, 4)


def test_compute_lcm_rejects_non_numbers():
    """Test that lcm validates through gcd before multiplying."""
    with pytest.raises(InvalidArgumentType):
        compute_lcm("4", 6)
    with pytest.raises(InvalidArgumentType):
        compute_lcm(4, [6])
