"""
Cubic Bézier timing curve from (0, 0) to (1, 1).

Only the two interior control points are stored. Each axis is the cubic
polynomial ((a*t + b)*t + c)*t whose coefficients are computed once at
construction and shared by evaluation, inversion and subdivision.
"""

import numpy as np
from scipy.special import comb

from .constants import (
    X_AXIS,
    Y_AXIS,
    DEFAULT_EPSILON,
    NORMALIZATION_TOLERANCE,
    PRESETS,
    LINEAR,
    EASE,
    EASE_IN,
    EASE_OUT,
    EASE_IN_OUT,
)
from .de_casteljau import cubic_auxiliary_points
from .errors import OutOfRange, DegenerateDivision
from .solver import solve_monotonic
from .utils import (
    is_real,
    check_unit_interval,
    check_epsilon,
    check_axis,
    snap_to_unit,
    format_number,
)


def bernstein_basis(ts, degree=3):
    """
    Bernstein basis functions of the given degree.

    Args:
        ts: Parameters, shape (n,)
        degree: Polynomial degree

    Returns:
        np.ndarray: (n, degree+1) matrix, row i holds B_{j,degree}(ts[i])
    """
    ts = np.asarray(ts, dtype=float).reshape(-1)
    basis = np.zeros((ts.shape[0], degree + 1))
    for j in range(degree + 1):
        basis[:, j] = comb(degree, j) * (ts ** j) * ((1 - ts) ** (degree - j))
    return basis


class CubicBezier:
    """
    Immutable cubic Bézier curve used as a CSS timing function.

    Args:
        p1x, p1y: First interior control point, each in [0, 1]
        p2x, p2y: Second interior control point, each in [0, 1]

    Raises:
        OutOfRange: If any coordinate lies outside [0, 1]
    """

    __slots__ = ('_p1', '_p2', '_coefficients')

    def __init__(self, p1x, p1y, p2x, p2y):
        p1x = check_unit_interval('p1x', p1x)
        p1y = check_unit_interval('p1y', p1y)
        p2x = check_unit_interval('p2x', p2x)
        p2y = check_unit_interval('p2y', p2y)

        coefficients = {}
        for axis, p1, p2 in ((X_AXIS, p1x, p2x), (Y_AXIS, p1y, p2y)):
            c = 3.0 * p1
            b = 3.0 * (p2 - p1) - c
            a = 1.0 - c - b
            coefficients[axis] = (a, b, c)

        object.__setattr__(self, '_p1', (p1x, p1y))
        object.__setattr__(self, '_p2', (p2x, p2y))
        object.__setattr__(self, '_coefficients', coefficients)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    @classmethod
    def linear(cls):
        return cls(*LINEAR)

    @classmethod
    def ease(cls):
        return cls(*EASE)

    @classmethod
    def ease_in(cls):
        return cls(*EASE_IN)

    @classmethod
    def ease_out(cls):
        return cls(*EASE_OUT)

    @classmethod
    def ease_in_out(cls):
        return cls(*EASE_IN_OUT)

    @classmethod
    def preset(cls, name):
        """Curve for a CSS easing keyword such as 'ease-in-out'."""
        try:
            points = PRESETS[name]
        except KeyError:
            raise KeyError(f"unknown preset {name!r}, expected one of {sorted(PRESETS)}") from None
        return cls(*points)

    # ------------------------------------------------------------------
    # Control points
    # ------------------------------------------------------------------

    @property
    def p1x(self):
        return self._p1[0]

    @property
    def p1y(self):
        return self._p1[1]

    @property
    def p2x(self):
        return self._p2[0]

    @property
    def p2y(self):
        return self._p2[1]

    @property
    def p1(self):
        return self._p1

    @property
    def p2(self):
        return self._p2

    @property
    def control_points(self):
        """All four control points including the implicit endpoints, shape (4, 2)."""
        return np.array([(0.0, 0.0), self._p1, self._p2, (1.0, 1.0)])

    def as_tuple(self):
        return (self._p1[0], self._p1[1], self._p2[0], self._p2[1])

    def clone(self):
        return type(self)(*self.as_tuple())

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _axis_coefficients(self, axis):
        return self._coefficients[check_axis(axis)]

    def coordinate_for_t(self, t, axis):
        """Axis coordinate at t, no range check."""
        a, b, c = self._axis_coefficients(axis)
        return ((a * t + b) * t + c) * t

    def derivative_for_t(self, t, axis):
        """d(coordinate)/dt at t, no range check."""
        a, b, c = self._axis_coefficients(axis)
        return (3.0 * a * t + 2.0 * b) * t + c

    def point_for_t(self, t):
        """
        Point on the curve at parameter t.

        The endpoints are returned exactly, without evaluating the polynomial.

        Args:
            t: Parameter in [0, 1]

        Returns:
            tuple: (x, y)

        Raises:
            OutOfRange: If t lies outside [0, 1]
        """
        if is_real(t) and (t == 0 or t == 1):
            return (float(t), float(t))
        if not is_real(t) or not (0 < t < 1):
            raise OutOfRange('t', t)
        return (self.coordinate_for_t(t, X_AXIS), self.coordinate_for_t(t, Y_AXIS))

    def velocity_for_t(self, t):
        """(dx/dt, dy/dt) at parameter t in [0, 1]."""
        t = check_unit_interval('t', t)
        return (self.derivative_for_t(t, X_AXIS), self.derivative_for_t(t, Y_AXIS))

    def sample(self, ts):
        """
        Evaluate the curve at many parameters at once.

        Args:
            ts: Parameters in [0, 1], scalar or array-like

        Returns:
            np.ndarray: Points, shape (n, 2)
        """
        ts = np.atleast_1d(np.asarray(ts, dtype=float))
        bad = ~((ts >= 0) & (ts <= 1))
        if np.any(bad):
            raise OutOfRange('t', float(ts[bad][0]))
        return bernstein_basis(ts) @ self.control_points

    # ------------------------------------------------------------------
    # Inversion
    # ------------------------------------------------------------------

    def parameter_for_coordinate(self, c, axis, epsilon=DEFAULT_EPSILON):
        """
        Parameter t in [0, 1] whose axis coordinate is within epsilon of c.

        Newton's method is tried first and bisection takes over when it
        stalls. If neither meets the tolerance the last estimate is returned;
        callers sampling timing curves accept the small error.

        Args:
            c: Target coordinate in [0, 1]
            axis: 'x' or 'y'
            epsilon: Tolerance, finite and > 0

        Raises:
            OutOfRange: For a bad epsilon or a coordinate outside [0, 1]
        """
        epsilon = check_epsilon(epsilon)
        check_axis(axis)
        c = check_unit_interval(axis, c)
        t = solve_monotonic(
            lambda u: self.coordinate_for_t(u, axis),
            lambda u: self.derivative_for_t(u, axis),
            c,
            epsilon,
        )
        return min(max(t, 0.0), 1.0)

    def parameter_for_x(self, x, epsilon=DEFAULT_EPSILON):
        return self.parameter_for_coordinate(x, X_AXIS, epsilon)

    def parameter_for_y(self, y, epsilon=DEFAULT_EPSILON):
        return self.parameter_for_coordinate(y, Y_AXIS, epsilon)

    def y_for_x(self, x, epsilon=DEFAULT_EPSILON):
        """Eased progress for elapsed progress x, i.e. the timing function itself."""
        t = self.parameter_for_x(x, epsilon)
        if x == 0 or x == 1:
            return float(x)
        return self.coordinate_for_t(t, Y_AXIS)

    # ------------------------------------------------------------------
    # Subdivision
    # ------------------------------------------------------------------

    def auxiliary_points(self, t):
        """
        De Casteljau points for 0 < t < 1.

        Returns:
            dict: 'i0', 'i1', 'i2', 'j0', 'j1', 'k' mapped to (x, y) tuples;
            'k' is the point on the curve at t
        """
        if not is_real(t) or not (0 < t < 1):
            raise OutOfRange('t', t, domain="strictly between 0 and 1")
        points = cubic_auxiliary_points(self._p1, self._p2, t)
        return {name: (float(p[0]), float(p[1])) for name, p in points.items()}

    def divide_at_parameter(self, t):
        """
        Split the curve at t into two curves, each rescaled to (0, 0)-(1, 1).

        Args:
            t: Parameter in [0, 1]

        Returns:
            (left, right): Curves covering [0, t] and [t, 1]

        Raises:
            OutOfRange: If t lies outside [0, 1], or a piece is not a valid
                timing curve
            DegenerateDivision: If the division point lies on an axis bound
        """
        if not is_real(t) or not (0 <= t <= 1):
            raise OutOfRange('t', t)
        if t == 0:
            return type(self).linear(), self.clone()
        if t == 1:
            return self.clone(), type(self).linear()

        points = cubic_auxiliary_points(self._p1, self._p2, t)
        k = points['k']
        if not np.all(np.isfinite(k)) or np.any((k <= 0) | (k >= 1)):
            raise DegenerateDivision(t, (float(k[0]), float(k[1])))

        left_p1 = points['i0'] / k
        left_p2 = points['j0'] / k
        right_p1 = (points['j1'] - k) / (1 - k)
        right_p2 = (points['i2'] - k) / (1 - k)

        return (
            self._from_normalized(left_p1, left_p2),
            self._from_normalized(right_p1, right_p2),
        )

    def divide_at_x(self, x, epsilon=DEFAULT_EPSILON):
        return self.divide_at_parameter(self.parameter_for_x(x, epsilon))

    def divide_at_y(self, y, epsilon=DEFAULT_EPSILON):
        return self.divide_at_parameter(self.parameter_for_y(y, epsilon))

    @classmethod
    def _from_normalized(cls, p1, p2):
        coords = [snap_to_unit(float(v), NORMALIZATION_TOLERANCE)
                  for v in (p1[0], p1[1], p2[0], p2[1])]
        return cls(*coords)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, CubicBezier):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __reduce__(self):
        return (type(self), self.as_tuple())

    def __repr__(self):
        return "CubicBezier({}, {}, {}, {})".format(*(repr(v) for v in self.as_tuple()))

    def __str__(self):
        return "cubic-bezier({})".format(", ".join(format_number(v) for v in self.as_tuple()))
