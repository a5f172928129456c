"""
Command line interface for evaluating, inverting, dividing and plotting
timing curves.

Usage:
    css-bezier point ease 0.5
    css-bezier solve 0.42,0,0.58,1 --x 0.3 --epsilon 1e-9
    css-bezier divide ease-in --t 0.5
    css-bezier plot ease --divide-at 0.4 --output ease.png

CURVE is a preset keyword (linear, ease, ease-in, ease-out, ease-in-out) or
four comma-separated numbers p1x,p1y,p2x,p2y.
"""

import argparse
import sys

from .bezier import CubicBezier
from .constants import PRESETS, DEFAULT_EPSILON
from .errors import BezierError
from .utils import format_number


def parse_curve(text):
    """argparse type for CURVE arguments."""
    if text in PRESETS:
        return CubicBezier.preset(text)
    parts = text.split(',')
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"expected a preset ({', '.join(PRESETS)}) or four comma-separated numbers, got {text!r}"
        )
    try:
        values = [float(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"control points must be numbers, got {text!r}") from None
    try:
        return CubicBezier(*values)
    except BezierError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser():
    parser = argparse.ArgumentParser(
        prog='css-bezier',
        description='Cubic Bézier timing curves from (0, 0) to (1, 1)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--verbose', action='store_true', help='Print intermediate values')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('point', help='Point on the curve at parameter t')
    p.add_argument('curve', type=parse_curve)
    p.add_argument('t', type=float)

    p = sub.add_parser('solve', help='Parameter for an x or y coordinate')
    p.add_argument('curve', type=parse_curve)
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument('--x', type=float)
    target.add_argument('--y', type=float)
    p.add_argument('--epsilon', type=float, default=DEFAULT_EPSILON)

    p = sub.add_parser('divide', help='Split the curve in two')
    p.add_argument('curve', type=parse_curve)
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument('--t', type=float)
    target.add_argument('--x', type=float)
    target.add_argument('--y', type=float)
    p.add_argument('--epsilon', type=float, default=DEFAULT_EPSILON)

    p = sub.add_parser('plot', help='Save a figure of the curve')
    p.add_argument('curve', type=parse_curve)
    p.add_argument('--divide-at', type=float, default=None, metavar='T')
    p.add_argument('--output', required=True)
    return parser


def _run(args, out):
    curve = args.curve
    if args.verbose:
        print(f"Curve: {curve}", file=out)

    if args.command == 'point':
        x, y = curve.point_for_t(args.t)
        print(f"{format_number(x)} {format_number(y)}", file=out)

    elif args.command == 'solve':
        if args.x is not None:
            t = curve.parameter_for_x(args.x, args.epsilon)
            reached = curve.coordinate_for_t(t, 'x')
        else:
            t = curve.parameter_for_y(args.y, args.epsilon)
            reached = curve.coordinate_for_t(t, 'y')
        if args.verbose:
            print(f"  coordinate at t: {format_number(reached)}", file=out)
        print(format_number(t), file=out)

    elif args.command == 'divide':
        if args.t is not None:
            left, right = curve.divide_at_parameter(args.t)
        elif args.x is not None:
            left, right = curve.divide_at_x(args.x, args.epsilon)
        else:
            left, right = curve.divide_at_y(args.y, args.epsilon)
        print(left, file=out)
        print(right, file=out)

    elif args.command == 'plot':
        import matplotlib
        matplotlib.use('Agg')
        from .visualization import plot_timing_curve, plot_division, save_figure

        if args.divide_at is None:
            fig = plot_timing_curve(curve).figure
        else:
            fig = plot_division(curve, args.divide_at, verbose=args.verbose)
        save_figure(fig, args.output, verbose=args.verbose)


def main(argv=None, out=None):
    """
    Entry point of the ``css-bezier`` command.

    Returns:
        int: Exit status (0 on success, 2 on invalid input)
    """
    out = out if out is not None else sys.stdout
    args = build_parser().parse_args(argv)
    try:
        _run(args, out)
    except BezierError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0
