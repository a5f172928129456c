"""
Matplotlib figures for timing curves and their subdivisions.
"""

import numpy as np
import matplotlib.pyplot as plt


def beautify_unit_axes(ax, show_grid=True):
    """
    Square [0, 1] axes with light styling.

    Args:
        ax: 2D matplotlib axes
        show_grid: Whether to show grid lines
    """
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(-0.05, 1.05)
    ax.set_aspect('equal')
    ax.grid(show_grid, color='0.9')
    ax.tick_params(axis='both', which='major', labelsize=8)
    ax.set_xlabel('x (elapsed)')
    ax.set_ylabel('y (eased)')


def plot_timing_curve(curve, ax=None, samples=200, color='#3498DB', show_control_polygon=True, label=None):
    """
    Plot a timing curve on the unit square.

    Args:
        curve: CubicBezier to draw
        ax: Axes to draw on (a new figure is created if None)
        samples: Number of parameter samples
        color: Line color
        show_control_polygon: Draw the dashed control polygon and points
        label: Legend label (defaults to the CSS notation)

    Returns:
        matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5), constrained_layout=True)

    pts = curve.sample(np.linspace(0, 1, samples))
    ax.plot(pts[:, 0], pts[:, 1], '-', color=color, lw=2.0, label=label or str(curve))

    if show_control_polygon:
        P = curve.control_points
        ax.plot(P[:, 0], P[:, 1], '--', color=color, alpha=0.55, lw=1.0, marker='o', ms=4)

    beautify_unit_axes(ax)
    return ax


def plot_division(curve, t, samples=200, verbose=False):
    """
    Show a curve split at parameter t.

    The left panel draws both pieces mapped back onto the original curve,
    the other two panels draw each piece in its own (0, 0)-(1, 1) frame.

    Args:
        curve: CubicBezier to divide
        t: Division parameter
        samples: Number of parameter samples per piece
        verbose: Print the resulting curves

    Returns:
        matplotlib Figure object
    """
    left, right = curve.divide_at_parameter(t)
    kx, ky = curve.point_for_t(t)
    k = np.array([kx, ky])

    us = np.linspace(0, 1, samples)
    left_global = left.sample(us) * k
    right_global = k + right.sample(us) * (1 - k)

    if verbose:
        print(f"Dividing {curve} at t={t}")
        print(f"  division point: ({kx:.6f}, {ky:.6f})")
        print(f"  left:  {left}")
        print(f"  right: {right}")

    fig, axes = plt.subplots(1, 3, figsize=(15, 5), constrained_layout=True)

    ax = axes[0]
    plot_timing_curve(curve, ax=ax, samples=samples, color='0.6')
    ax.plot(left_global[:, 0], left_global[:, 1], '-', color='#E74C3C', lw=2.5, label='left piece')
    ax.plot(right_global[:, 0], right_global[:, 1], '-', color='#F39C12', lw=2.5, label='right piece')
    ax.plot([kx], [ky], 'ko', ms=6)
    ax.set_title(f"t = {t:g}")
    ax.legend(fontsize=8, loc='lower right')

    plot_timing_curve(left, ax=axes[1], samples=samples, color='#E74C3C')
    axes[1].set_title('left (normalized)')
    plot_timing_curve(right, ax=axes[2], samples=samples, color='#F39C12')
    axes[2].set_title('right (normalized)')

    for ax in axes[1:]:
        ax.legend(fontsize=8, loc='lower right')

    return fig


def save_figure(fig, path, dpi=150, verbose=False):
    """Save a figure and close it."""
    fig.savefig(path, dpi=dpi)
    plt.close(fig)
    if verbose:
        print(f"[Figure saved] {path}")
