"""Tests for the matplotlib helpers."""

import matplotlib.pyplot as plt
import numpy as np

from css_bezier import CubicBezier, plot_timing_curve, plot_division, save_figure


def test_plot_timing_curve_creates_axes():
    ax = plot_timing_curve(CubicBezier.ease(), samples=50)
    curve_line, polygon = ax.get_lines()
    assert curve_line.get_label() == 'cubic-bezier(0.25, 0.1, 0.25, 1)'
    np.testing.assert_allclose(polygon.get_xydata(), CubicBezier.ease().control_points)
    assert ax.get_xlim() == (-0.05, 1.05)
    plt.close(ax.figure)


def test_plot_timing_curve_without_polygon():
    fig, ax = plt.subplots()
    returned = plot_timing_curve(CubicBezier.ease_out(), ax=ax, show_control_polygon=False, label='out')
    assert returned is ax
    assert [line.get_label() for line in ax.get_lines()] == ['out']
    plt.close(fig)


def test_plot_division_pieces_end_at_division_point(capsys):
    curve = CubicBezier.ease_in_out()
    fig = plot_division(curve, 0.3, samples=40, verbose=True)
    assert len(fig.axes) == 3
    lines = {line.get_label(): line for line in fig.axes[0].get_lines()}
    k = curve.point_for_t(0.3)
    np.testing.assert_allclose(lines['left piece'].get_xydata()[-1], k, atol=1e-12)
    np.testing.assert_allclose(lines['right piece'].get_xydata()[0], k, atol=1e-12)
    assert 'division point' in capsys.readouterr().out
    plt.close(fig)


def test_save_figure(tmp_path, capsys):
    fig = plot_division(CubicBezier.ease(), 0.5)
    target = tmp_path / 'division.png'
    save_figure(fig, target, verbose=True)
    assert target.exists()
    assert '[Figure saved]' in capsys.readouterr().out
