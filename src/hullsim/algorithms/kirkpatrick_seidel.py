"""
Kirkpatrick–Seidel ("the ultimate planar convex hull algorithm").

Divide and conquer on the median x coordinate, but the bridge over the split
is found *before* recursing, and the recursion only continues on the points
left of the bridge's left end and right of its right end. Points under the
bridge are never looked at again, which gives O(n log h) for h hull vertices.
"""
from hullsim.events import ClearScreen, PartOfHull, TextComment, VerticalLine
from hullsim.geometry import HullType, Orientation, orientation
from hullsim.operators.bridge import find_bridge
from hullsim.operators.selection import median


# API functions

def kirkpatrick_seidel(points, recorder):
    """
    Convex hull of `points`, counterclockwise from the leftmost point
    (bottommost on ties).

    Degenerate inputs give degenerate hulls: one point for coincident input,
    the two extremes for colinear input.
    """
    points = tuple(points)
    if len(points) == 0:
        raise ValueError("'points' must contain at least one point")
    recorder.record(ClearScreen(), TextComment(f"Running Kirkpatrick-Seidel on {len(points)} points"))

    upper = upper_hull(points, recorder, HullType.UPPER)
    recorder.record(TextComment("Added upper hull"))
    lower = upper_hull(points, recorder, HullType.LOWER)
    recorder.record(TextComment("Added lower hull"))

    hull = merge_hulls(upper, lower, recorder)
    recorder.record(TextComment("Kirkpatrick-Seidel is complete"))
    return hull


def upper_hull(points, recorder, hull_type=HullType.UPPER):
    """
    One half of the hull as a left-to-right chain in world coordinates.

    The chain runs from the leftmost to the rightmost point of the half, ties
    on x broken towards the half (topmost for UPPER, bottommost for LOWER).
    """
    frame = [hull_type.reflect(p) for p in points]
    leftmost = min(frame, key=lambda p: (p.x, -p.y))
    rightmost = max(frame, key=lambda p: (p.x, p.y))

    if leftmost == rightmost:
        recorder.record(TextComment(
            f"Single point {hull_type.name.lower()} hull found, returning {hull_type.reflect(leftmost)}"
        ))
        return [hull_type.reflect(leftmost)]

    # anything sharing an x with an end point is beneath it
    between = [p for p in frame if leftmost.x < p.x < rightmost.x]
    chain = connect(leftmost, rightmost, [leftmost, rightmost] + between, recorder, hull_type)
    return [hull_type.reflect(p) for p in _drop_colinear(chain)]


def connect(first, last, points, recorder, hull_type=HullType.UPPER):
    """
    Upper hull chain from `first` to `last`, both included.

    `first` and `last` must be the unique leftmost and rightmost members of
    `points`. Every recursive call gets freshly built point lists.
    """
    split_x = median(p.x for p in points)
    recorder.record(VerticalLine(split_x), TextComment(f"Found the median at {split_x:g}"))

    left, right = find_bridge(points, split_x, recorder, hull_type)

    chain = []
    if left == first:
        chain.append(left)
    else:
        left_points = [left] + [p for p in points if p.x < left.x]
        chain.extend(connect(first, left, left_points, recorder, hull_type))

    if right == last:
        chain.append(right)
    else:
        right_points = [right] + [p for p in points if p.x > right.x]
        chain.extend(connect(right, last, right_points, recorder, hull_type))
    return chain


def merge_hulls(upper, lower, recorder):
    """
    Joins the two halves into one counterclockwise boundary.

    Both chains run left to right. Where the halves end on the same point the
    junction is kept once; where they end on different points of one vertical
    line that vertical edge is part of the hull.
    """
    hull = list(lower)
    tail = list(reversed(upper))

    if upper[-1] != lower[-1]:
        recorder.record(
            PartOfHull(lower[-1], upper[-1]),
            TextComment(f"Adding right vertical edge between {lower[-1]} and {upper[-1]}"),
        )
    else:
        tail = tail[1:]

    if upper[0] != lower[0]:
        # a lone point on each half is a single vertical segment, already drawn
        if len(upper) > 1 or len(lower) > 1:
            recorder.record(
                PartOfHull(upper[0], lower[0]),
                TextComment(f"Adding left vertical edge between {upper[0]} and {lower[0]}"),
            )
    elif tail:
        tail = tail[:-1]

    hull.extend(tail)
    return tuple(hull)


# private helper functions

def _drop_colinear(chain):
    """
    removes chain vertices lying on the segment between their neighbours
    """
    kept = []
    for p in chain:
        while len(kept) >= 2 and orientation(kept[-2], kept[-1], p) is Orientation.COLINEAR:
            kept.pop()
        kept.append(p)
    return kept
