import numpy as np
from enum import Enum
from typing import NamedTuple
from numba import njit

from hullsim.commons.types import DEFAULTS

INT, FLOAT = DEFAULTS
from hullsim.utils import typing  # noqa: E402


class Point(NamedTuple):
    x: float
    y: float

    def __str__(self):
        return f"({self.x:g}, {self.y:g})"


class Orientation(Enum):
    CLOCKWISE = -1
    COLINEAR = 0
    COUNTERCLOCKWISE = 1


class HullType(Enum):
    """
    Which half of the hull a recursive call works on.

    The lower hull is computed by the upper-hull code on points reflected in
    the x axis, `sign` is the factor applied to y for that reflection.
    """
    UPPER = 1
    LOWER = -1

    @property
    def sign(self):
        return self.value

    def reflect(self, point):
        """ map a point between world space and the frame this half is computed in """
        return Point(point.x, self.sign * point.y)


# API functions

@njit
def cross_product(ax, ay, bx, by, cx, cy):
    """
    Calculates the 2D cross product (z-component) of vectors ab and ac.
    This determines the orientation of the triplet (a, b, c).
    A positive value means a counter-clockwise turn (left turn).
    A negative value means a clockwise turn (right turn).
    A zero value means the points are colinear.
    """
    return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)


def orientation(a, b, c):
    """
    Classifies the turn a -> b -> c.

    Cross products within `DEFAULTS.tolerance` of zero are COLINEAR, which
    includes every triple with coincident points.
    """
    return _classify(cross_product(a[0], a[1], b[0], b[1], c[0], c[1]))


def orientation_along(p, q, a, b):
    """
    Classifies b against the line through a running parallel to p -> q.

    COUNTERCLOCKWISE means b lies to the left of that line, i.e. above it
    when p.x < q.x. Only coordinate differences enter the cross product, so
    integer inputs are compared exactly. `orientation(a, b, c)` is
    `orientation_along(a, b, a, c)`.
    """
    return _classify(cross_product(0.0, 0.0, q[0] - p[0], q[1] - p[1], b[0] - a[0], b[1] - a[1]))


def squared_distance(a, b):
    return (b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2


def as_point_set(points, name="points"):
    """
    Converts array-like input into an immutable tuple of Points.

    Coordinates are rounded through the configured float precision so both
    algorithms see identical values.
    """
    array = typing.sanitize_points(points, name, FLOAT)
    return tuple(Point(float(x), float(y)) for x, y in array.tolist())


def as_array(points):
    """ (n, 2) float array of a sequence of Points """
    return np.array(points, dtype=np.float64).reshape(len(points), 2)


# private helper functions

def _classify(value):
    if value > DEFAULTS.tolerance:
        return Orientation.COUNTERCLOCKWISE
    if value < -DEFAULTS.tolerance:
        return Orientation.CLOCKWISE
    return Orientation.COLINEAR
