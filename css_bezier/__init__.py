"""
CSS Timing Curves using Cubic Bézier Curves

This package models the cubic Bézier curve from (0, 0) to (1, 1) used by CSS
transition and animation timing functions. A curve can be evaluated at a
parameter, inverted from an x or y coordinate back to its parameter, and
divided at a parameter into two curves of the same family.
"""

from .bezier import CubicBezier, bernstein_basis
from .de_casteljau import (
    de_casteljau_levels,
    de_casteljau_split,
    cubic_auxiliary_points
)
from .solver import newton, bisect, solve_monotonic
from .errors import BezierError, OutOfRange, DegenerateDivision
from .visualization import (
    beautify_unit_axes,
    plot_timing_curve,
    plot_division,
    save_figure
)
from .utils import format_number
from . import constants

__all__ = [
    # Core classes
    'CubicBezier',
    'bernstein_basis',

    # De Casteljau functions
    'de_casteljau_levels',
    'de_casteljau_split',
    'cubic_auxiliary_points',

    # Root finding
    'newton',
    'bisect',
    'solve_monotonic',

    # Errors
    'BezierError',
    'OutOfRange',
    'DegenerateDivision',

    # Visualization functions
    'beautify_unit_axes',
    'plot_timing_curve',
    'plot_division',
    'save_figure',

    # Utility functions
    'format_number',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
