import matplotlib

matplotlib.use("Agg")

import pytest

from css_bezier import CubicBezier


@pytest.fixture
def ease():
    return CubicBezier.ease()


@pytest.fixture
def ease_in():
    return CubicBezier.ease_in()


# Curves whose control points increase along both axes; every piece of
# such a curve is again a valid timing curve.
MONOTONE_CURVES = [
    (0.25, 0.1, 0.25, 1.0),
    (0.42, 0.0, 1.0, 1.0),
    (0.0, 0.0, 0.58, 1.0),
    (0.42, 0.0, 0.58, 1.0),
    (0.1, 0.3, 0.9, 0.6),
    (0.0, 0.0, 0.0, 0.0),
]


@pytest.fixture(params=MONOTONE_CURVES, ids=lambda p: "cubic-bezier(%s,%s,%s,%s)" % p)
def monotone_curve(request):
    return CubicBezier(*request.param)
