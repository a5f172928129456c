"""
De Casteljau subdivision of cubic control polygons.
"""

import numpy as np


def de_casteljau_levels(P, tau):
    """
    Run De Casteljau's algorithm on a control polygon.

    Each level interpolates consecutive points of the previous one at
    ``tau`` as ``a + tau * (b - a)``, so an axis whose points are equal
    reproduces them exactly.

    Args:
        P: Control points, shape (N+1, dim)
        tau: Division parameter

    Returns:
        list: N+1 arrays; level r has shape (N+1-r, dim). Level 0 is P and
        the last level holds the single point on the curve at tau.
    """
    W = np.array(P, dtype=float)
    if W.ndim != 2:
        raise ValueError("control points must be (N+1, dim)")
    levels = [W]
    for _ in range(1, W.shape[0]):
        W = W[:-1] + tau * (W[1:] - W[:-1])
        levels.append(W)
    return levels


def de_casteljau_split(P, tau):
    """
    Split a control polygon at ``tau``.

    Returns:
        (left, right): Control polygons of the pieces covering [0, tau] and
        [tau, 1], both shaped like P
    """
    levels = de_casteljau_levels(P, tau)
    left = np.array([W[0] for W in levels])
    right = np.array([W[-1] for W in reversed(levels)])
    return left, right


def cubic_auxiliary_points(p1, p2, tau):
    """
    Named intermediate points of a cubic from (0, 0) to (1, 1).

    Args:
        p1, p2: Interior control points as (x, y)
        tau: Division parameter

    Returns:
        dict: 'i0', 'i1', 'i2' (first level), 'j0', 'j1' (second level) and
        'k' (the point on the curve), each a length-2 numpy array
    """
    P = np.array([(0.0, 0.0), p1, p2, (1.0, 1.0)], dtype=float)
    _, first, second, third = de_casteljau_levels(P, tau)
    return {
        'i0': first[0],
        'i1': first[1],
        'i2': first[2],
        'j0': second[0],
        'j1': second[1],
        'k': third[0],
    }
