import pytest
import numpy as np

from hullsim.commons.types import DEFAULTS
from hullsim.geometry import (
    HullType,
    Orientation,
    Point,
    as_array,
    as_point_set,
    cross_product,
    orientation,
    orientation_along,
    squared_distance,
)


@pytest.mark.parametrize(
    "a, b, c, expected",
    [
        ((0, 0), (1, 0), (2, 0), Orientation.COLINEAR),
        ((0, 0), (1, 0), (1, 1), Orientation.COUNTERCLOCKWISE),
        ((0, 0), (1, 1), (1, 0), Orientation.CLOCKWISE),
        ((0.0, 0.0), (2.5, 2.5), (-1.0, -1.0), Orientation.COLINEAR),
        ((3, 3), (3, 3), (3, 3), Orientation.COLINEAR),
        ((3, 3), (3, 3), (4, 7), Orientation.COLINEAR),
    ],
)
def test_orientation(a, b, c, expected):
    assert orientation(Point(*a), Point(*b), Point(*c)) is expected


def test_orientation_reversal_flips_sign(rng):
    for a, b, c in rng.uniform(-10, 10, size=(50, 3, 2)):
        forward = orientation(a, b, c)
        backward = orientation(a, c, b)
        assert forward.value == -backward.value


def test_cross_product_is_twice_triangle_area():
    assert cross_product(0.0, 0.0, 4.0, 0.0, 0.0, 3.0) == 12.0
    assert cross_product(0.0, 0.0, 0.0, 3.0, 4.0, 0.0) == -12.0


def test_orientation_tolerance(restore_tolerance):
    a, b, c = Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 1e-6)
    assert orientation(a, b, c) is Orientation.COUNTERCLOCKWISE
    DEFAULTS.update_tolerance(1e-5)
    assert orientation(a, b, c) is Orientation.COLINEAR
    # the boundary value itself is colinear
    DEFAULTS.update_tolerance(1e-6)
    assert orientation(a, b, c) is Orientation.COLINEAR


@pytest.mark.parametrize("tolerance, error", [(-1.0, ValueError), (np.inf, ValueError), ("0", TypeError)])
def test_bad_tolerance(tolerance, error, restore_tolerance):
    with pytest.raises(error):
        DEFAULTS.update_tolerance(tolerance)


def test_squared_distance():
    assert squared_distance(Point(1, 1), Point(4, 5)) == 25


def test_hull_type_reflect():
    p = Point(2.0, 3.0)
    assert HullType.UPPER.reflect(p) == p
    assert HullType.LOWER.reflect(p) == Point(2.0, -3.0)
    assert HullType.LOWER.reflect(HullType.LOWER.reflect(p)) == p
    assert HullType.UPPER.sign == 1 and HullType.LOWER.sign == -1


@pytest.mark.parametrize(
    "points",
    [
        [(0, 0), (1, 2)],
        ((0.5, 1.5), (2.0, -1.0)),
        np.array([[0, 0], [1, 2]]),
        np.array([[0.5, 1.5], [2.0, -1.0]], dtype=np.float32),
        [Point(0, 0), Point(1, 2)],
    ],
)
def test_as_point_set(points):
    point_set = as_point_set(points)
    assert isinstance(point_set, tuple)
    assert all(isinstance(p, Point) for p in point_set)
    assert all(isinstance(p.x, float) and isinstance(p.y, float) for p in point_set)
    assert np.allclose(as_array(point_set), np.asarray(points, dtype=np.float64))


def test_as_point_set_keeps_order_and_duplicates():
    points = [(1, 1), (0, 0), (1, 1)]
    assert as_point_set(points) == (Point(1.0, 1.0), Point(0.0, 0.0), Point(1.0, 1.0))


@pytest.mark.parametrize(
    "points, error",
    [
        ([], ValueError),
        (np.empty((0, 2)), ValueError),
        (5, TypeError),
        ("abc", TypeError),
        ([(0, 0), (1,)], ValueError),
        ([(0, 0), (1, 2, 3)], ValueError),
        (np.zeros((3, 3)), ValueError),
        ([(0, 0), (np.nan, 1)], ValueError),
        ([(0, 0), (np.inf, 1)], ValueError),
        (np.array([[0, 0], [np.nan, 1]]), ValueError),
        ([(0, 0), ("a", 1)], TypeError),
        ([(0, 0), (True, 1)], TypeError),
        (np.array([["a", "b"]]), TypeError),
    ],
)
def test_as_point_set_rejects(points, error):
    with pytest.raises(error):
        as_point_set(points)


def test_orientation_along_matches_orientation(rng):
    for a, b, c in rng.uniform(-10, 10, size=(50, 3, 2)):
        assert orientation_along(a, b, a, c) is orientation(a, b, c)


def test_orientation_along_large_coordinates():
    """ a gap of 2 at a magnitude of 1e6 is still resolved """
    p, q = Point(1.0, 1.0), Point(1e6, -1.0)
    assert orientation_along(p, q, p, Point(999999.0, -1.0)) is Orientation.CLOCKWISE
    # parallel line through another point
    assert orientation_along(p, q, Point(0.0, 5.0), Point(999999.0, 4.0)) is Orientation.COUNTERCLOCKWISE
    assert orientation_along(p, q, Point(0.0, 5.0), Point(999999.0, 2.0)) is Orientation.CLOCKWISE
    assert orientation_along(p, q, Point(0.0, 0.0), Point(999999.0, -2.0)) is Orientation.COLINEAR
    assert orientation_along(p, q, Point(0.0, 0.0), Point(-999999.0, 2.0)) is Orientation.COLINEAR
