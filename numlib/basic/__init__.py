"""
Basic numeric helpers: reductions, combinatorics, number theory, random
selection, extrema and ranges.
"""

from numlib.basic.arithmetic import (
    compute_product,
    compute_square,
    compute_subtraction,
    compute_sum,
    nearly_equals,
)
from numlib.basic.combinatorics import compute_binomial, compute_factorial
from numlib.basic.errors import (
    EmptyInput,
    InvalidArgument,
    InvalidArgumentType,
    InvalidElementType,
    NumlibError,
)
from numlib.basic.number_theory import compute_gcd, compute_lcm
from numlib.basic.sampling import select_random, shuffle_in_place
from numlib.basic.sequences import find_max, find_min, generate_range
from numlib.basic.toolkit import NumericUtilities

__all__ = [
    "NumericUtilities",
    "nearly_equals",
    "compute_sum",
    "compute_subtraction",
    "compute_product",
    "compute_square",
    "compute_binomial",
    "compute_factorial",
    "compute_gcd",
    "compute_lcm",
    "select_random",
    "shuffle_in_place",
    "find_max",
    "find_min",
    "generate_range",
    "NumlibError",
    "InvalidArgumentType",
    "InvalidElementType",
    "EmptyInput",
    "InvalidArgument",
]
