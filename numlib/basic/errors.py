"""
Exception types raised by the numeric helpers.

**Conceptual**: Every helper validates its input before doing any work. When
validation fails the call aborts with one of the exceptions below and no
partial result is returned. Bad input is always a caller bug, never a
transient condition, so nothing here is retried.

The classes also inherit from the matching builtin (TypeError / ValueError)
so callers that only know the builtins can still catch them.
"""


class NumlibError(Exception):
    """Base class for all numlib errors."""
    pass


class InvalidArgumentType(NumlibError, TypeError):
    """
    Raised when an argument is not of the expected container or scalar type.

    **Examples**: passing a string or a dict where a sequence of numbers is
    expected, or a float where an integer count is required.
    """
    pass


class InvalidElementType(NumlibError, TypeError):
    """
    Raised when a sequence contains an element that is not a real number.

    The message names the offending index and value so the caller can find
    it quickly.
    """
    pass


class EmptyInput(NumlibError, ValueError):
    """Raised when an operation needs at least one element but got none."""
    pass


class InvalidArgument(NumlibError, ValueError):
    """
    Raised when a numeric argument violates a documented precondition.

    **Examples**: a negative factorial argument, or asking for more distinct
    random elements than the population holds.
    """
    pass
