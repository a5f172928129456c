"""
Numerical parameters and preset control points for the timing-curve engine.
"""

# Axis names accepted by the coordinate/derivative/inversion functions
X_AXIS = 'x'
Y_AXIS = 'y'
AXES = (X_AXIS, Y_AXIS)

# Inversion (Newton phase)
NEWTON_ITERATIONS = 8
DERIVATIVE_GUARD = 1e-6  # below this |dx/dt| Newton is abandoned

# Inversion (bisection phase)
# Halving [0, 1] reaches float resolution after ~60 steps
BISECTION_MAX_ITERATIONS = 100

# Tolerance used when the caller does not pass one
DEFAULT_EPSILON = 1e-6

# Re-normalised sub-curve coordinates this close outside [0, 1] are snapped
NORMALIZATION_TOLERANCE = 1e-12

# CSS easing keywords -> (p1x, p1y, p2x, p2y)
# linear is the diagonal with x(t) = y(t) = t; CSS writes it as (0, 0, 1, 1)
LINEAR = (1 / 3, 1 / 3, 2 / 3, 2 / 3)
EASE = (0.25, 0.1, 0.25, 1.0)
EASE_IN = (0.42, 0.0, 1.0, 1.0)
EASE_OUT = (0.0, 0.0, 0.58, 1.0)
EASE_IN_OUT = (0.42, 0.0, 0.58, 1.0)

PRESETS = {
    'linear': LINEAR,
    'ease': EASE,
    'ease-in': EASE_IN,
    'ease-out': EASE_OUT,
    'ease-in-out': EASE_IN_OUT,
}
