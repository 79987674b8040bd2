"""
numlib: basic numeric utility functions.

Array reductions (sum, subtraction, product), combinatorics (factorial,
binomial), number theory (gcd, lcm), random selection and shuffling,
extrema, range generation and approximate equality.

Import the helpers from numlib.basic, or bind them to a settings object via
NumericUtilities.
"""

from numlib.basic import *  # noqa: F401,F403
from numlib.basic import __all__ as _basic_all
from numlib.config.settings import NumericSettings, get_settings, reset_settings

__all__ = list(_basic_all) + ["NumericSettings", "get_settings", "reset_settings"]

__version__ = "0.1.0"
