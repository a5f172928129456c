"""
Root finding for monotonic curve axes.

Inverting a timing curve means finding t with coordinate(t) == target.
Newton's method converges in a handful of steps for well-behaved curves;
bisection takes over when the derivative gets too flat or Newton runs out of
iterations. Neither phase raises on non-convergence: the last estimate is
returned and callers treat it as approximate.
"""

from .constants import NEWTON_ITERATIONS, DERIVATIVE_GUARD, BISECTION_MAX_ITERATIONS


def newton(f, df, target, seed, epsilon, max_iterations=NEWTON_ITERATIONS,
           derivative_guard=DERIVATIVE_GUARD):
    """
    Newton iteration for f(t) = target.

    Args:
        f: Function of t
        df: Derivative of f
        target: Value to reach
        seed: Initial estimate
        epsilon: Accepted |f(t) - target|
        max_iterations: Newton steps before giving up
        derivative_guard: Give up when |df(t)| falls below this

    Returns:
        float or None: t within tolerance, or None when Newton did not converge
    """
    t = seed
    for _ in range(max_iterations):
        residual = f(t) - target
        if abs(residual) < epsilon:
            return t
        slope = df(t)
        if abs(slope) < derivative_guard:
            return None
        t = t - residual / slope
    return None


def bisect(f, target, seed, epsilon, max_iterations=BISECTION_MAX_ITERATIONS):
    """
    Bisection on [0, 1] for a monotonic increasing f.

    The first probe is ``seed`` itself; seeds outside [0, 1] are answered
    with the nearest bound since f cannot reach the target in between.

    Returns:
        float: t within tolerance, or the last probe if the bracket collapsed
        before the tolerance was met
    """
    lo, hi = 0.0, 1.0
    t = seed
    if t < lo:
        return lo
    if t > hi:
        return hi

    iterations = 0
    while lo < hi and iterations < max_iterations:
        value = f(t)
        if abs(value - target) < epsilon:
            return t
        if target > value:
            lo = t
        else:
            hi = t
        t = (hi - lo) * 0.5 + lo
        iterations += 1
    return t


def solve_monotonic(f, df, target, epsilon):
    """
    Find t in [0, 1] with f(t) close to target: Newton first, then bisection.

    Both phases are seeded with the target, which is a good first guess for
    a curve running from (0, 0) to (1, 1).
    """
    t = newton(f, df, target, target, epsilon)
    if t is not None:
        return t
    return bisect(f, target, target, epsilon)
