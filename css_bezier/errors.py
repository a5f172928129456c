"""
Exceptions raised by the timing-curve engine.
"""


class BezierError(Exception):
    """Base class for every error raised by css_bezier."""


class OutOfRange(BezierError, ValueError):
    """
    A scalar argument lies outside the domain the operation accepts.

    Args:
        name: Name of the offending argument (e.g. 'p1x', 't', 'epsilon')
        value: The rejected value
        domain: Human readable description of the accepted domain
    """

    def __init__(self, name, value, domain="between 0 and 1"):
        self.name = name
        self.value = value
        self.domain = domain
        super().__init__(f"'{name}' must be a number {domain}, got {value!r}")


class DegenerateDivision(BezierError, ArithmeticError):
    """
    Subdivision point falls on the boundary of an axis, so the sub-curves
    cannot be re-normalised onto (0, 0)-(1, 1).
    """

    def __init__(self, t, point):
        self.t = t
        self.point = tuple(point)
        super().__init__(
            f"cannot divide at t={t!r}: division point {self.point} "
            f"lies on the boundary of an axis"
        )
