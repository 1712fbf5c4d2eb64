import numpy as np
from numba import njit

from hullsim.geometry import as_array, cross_product


# API functions

def hull_area(hull):
    """ area enclosed by a hull; 0 for hulls of fewer than 3 vertices """
    return _shoelace_area(as_array(hull))


def hull_perimeter(hull):
    """ length of the closed boundary; twice the length for a segment """
    return _perimeter(as_array(hull))


def contains_points(hull, points, atol=1e-9):
    """
    Whether each point lies on or inside `hull`.

    `hull` must be counterclockwise, as both algorithms return it. Points
    within `atol` (scaled by edge length) of the boundary count as inside.
    Degenerate hulls contain only the points of their vertex or segment.
    """
    return _contains(as_array(hull), np.asarray(points, dtype=np.float64).reshape(-1, 2), atol)


def is_hull_vertex(hull, points):
    """ mask of the points that are vertices of `hull` """
    vertices = set((p[0], p[1]) for p in hull)
    return np.array([(float(p[0]), float(p[1])) in vertices for p in points], dtype=np.bool_)


# private helper functions

@njit
def _shoelace_area(vertices):
    """
    Calculates the area of a polygon given its vertices using the Shoelace formula.
    The points must be ordered (e.g., clockwise or counter-clockwise).
    """
    n = vertices.shape[0]
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += vertices[i, 0] * vertices[j, 1]
        area -= vertices[j, 0] * vertices[i, 1]
    return abs(area) / 2.0


@njit
def _perimeter(vertices):
    n = vertices.shape[0]
    if n < 2:
        return 0.0
    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += np.hypot(vertices[j, 0] - vertices[i, 0], vertices[j, 1] - vertices[i, 1])
    return total


@njit
def _contains(vertices, points, atol):
    n = vertices.shape[0]
    inside = np.ones(points.shape[0], dtype=np.bool_)
    for k in range(points.shape[0]):
        px = points[k, 0]
        py = points[k, 1]
        if n == 1:
            inside[k] = abs(px - vertices[0, 0]) <= atol and abs(py - vertices[0, 1]) <= atol
            continue
        # a segment is walked there and back, so both sides are tested
        for i in range(n):
            j = (i + 1) % n
            ax = vertices[i, 0]
            ay = vertices[i, 1]
            bx = vertices[j, 0]
            by = vertices[j, 1]
            length = np.hypot(bx - ax, by - ay)
            if cross_product(ax, ay, bx, by, px, py) < -atol * max(length, 1.0):
                inside[k] = False
                break
        if inside[k] and n == 2:
            # within the strip along the segment, now clip to its ends
            lo_x = min(vertices[0, 0], vertices[1, 0]) - atol
            hi_x = max(vertices[0, 0], vertices[1, 0]) + atol
            lo_y = min(vertices[0, 1], vertices[1, 1]) - atol
            hi_y = max(vertices[0, 1], vertices[1, 1]) + atol
            inside[k] = lo_x <= px <= hi_x and lo_y <= py <= hi_y
    return inside
