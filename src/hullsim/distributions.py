"""
Point-set generators for feeding the hull algorithms.

All return an (n, 2) float array. Sizes scale with sqrt(n) so point density
stays roughly constant as n grows. Coordinates of the randomised
distributions are rounded to integers, so duplicates and colinear runs are
common, which is deliberate test material for the algorithms.
"""
import numpy as np

from hullsim.utils import typing

# golden angle in radians, used for the fibonacci spiral
GOLDEN_ANGLE = np.pi * (3.0 - np.sqrt(5.0))


# API functions

def fibonacci_spiral(n, spacing=100.0):
    """
    Evenly spread points along a golden-angle spiral.
    """
    _sanitize_count(n)
    index = np.arange(n, dtype=np.float64) + 0.5
    angle = index * GOLDEN_ANGLE
    radius = spacing * np.sqrt(index)
    return np.round(np.column_stack((np.cos(angle) * radius, np.sin(angle) * radius)))


def square_area(n, rng=None):
    """
    Uniform integer points in a square centred on the origin.
    """
    _sanitize_count(n)
    rng = np.random.default_rng() if rng is None else rng
    half_side = _radius(n)
    return np.round(rng.uniform(-half_side, half_side, size=(n, 2)))


def circle_area(n, rng=None):
    """
    Uniform integer points in a disk, by rejection sampling from the square.
    """
    _sanitize_count(n)
    rng = np.random.default_rng() if rng is None else rng
    radius = _radius(n)
    points = np.empty((0, 2), dtype=np.float64)
    while points.shape[0] < n:
        draw = np.round(rng.uniform(-radius, radius, size=(2 * n, 2)))
        draw = draw[(draw ** 2).sum(axis=1) <= radius ** 2]
        points = np.concatenate((points, draw), axis=0)
    return points[:n]


def circle_perimeter(n, rng=None):
    """
    Integer points on (rounded onto) a circle at uniformly random angles.
    """
    _sanitize_count(n)
    rng = np.random.default_rng() if rng is None else rng
    angle = rng.uniform(0.0, 2 * np.pi, size=n)
    radius = _radius(n)
    return np.round(np.column_stack((np.cos(angle) * radius, np.sin(angle) * radius)))


def uniform_disk(n, radius=1.0, rng=None):
    """
    Continuous uniform points strictly inside a disk of `radius`.
    """
    _sanitize_count(n)
    typing.sanitize_range(radius, "radius", gt=0)
    rng = np.random.default_rng() if rng is None else rng
    # random() is in [0, 1), so r < radius
    r = radius * np.sqrt(rng.random(n))
    theta = rng.uniform(0.0, 2 * np.pi, size=n)
    return np.column_stack((r * np.cos(theta), r * np.sin(theta)))


DISTRIBUTIONS = {
    "fibonacci": fibonacci_spiral,
    "circle_area": circle_area,
    "circle_perimeter": circle_perimeter,
    "square_area": square_area,
    "uniform_disk": uniform_disk,
}


# private helper functions

def _sanitize_count(n):
    typing.sanitize_type(n, "integer", "n")
    typing.sanitize_range(n, "n", ge=1)


def _radius(n):
    return 100.0 * np.sqrt(n - 0.5)
