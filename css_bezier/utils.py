"""
Validation and number formatting helpers.
"""

import math
from numbers import Real

from .constants import AXES
from .errors import OutOfRange


def is_real(value):
    """True for int/float-like values, excluding bool."""
    return isinstance(value, Real) and not isinstance(value, bool)


def check_unit_interval(name, value):
    """
    Validate that ``value`` lies in the closed interval [0, 1].

    NaN fails every comparison and is therefore rejected as well.

    Returns:
        float: The value converted to float
    """
    if not is_real(value) or not (0 <= value <= 1):
        raise OutOfRange(name, value)
    return float(value)


def check_epsilon(epsilon):
    """Validate a tolerance: finite and strictly positive."""
    if not is_real(epsilon) or not math.isfinite(epsilon) or not epsilon > 0:
        raise OutOfRange('epsilon', epsilon, domain="that is finite and greater than 0")
    return float(epsilon)


def check_axis(axis):
    if axis not in AXES:
        raise ValueError(f"axis must be one of {AXES}, got {axis!r}")
    return axis


def snap_to_unit(value, tolerance):
    """Pull values that miss [0, 1] by at most ``tolerance`` onto the bound."""
    if -tolerance <= value < 0:
        return 0.0
    if 1 < value <= 1 + tolerance:
        return 1.0
    return value


def format_number(value):
    """
    Format a coordinate for the CSS functional notation.

    Uses the shortest representation that converts back to the same float,
    dropping a trailing '.0' so integral values read as CSS writes them.

    Args:
        value: Numeric value to format

    Returns:
        str: Formatted number
    """
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    if text == '-0':
        text = '0'
    return text
