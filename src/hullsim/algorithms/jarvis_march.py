from hullsim.events import ClearScreen, PartOfHull, Temporary, TextComment
from hullsim.geometry import Orientation, orientation, squared_distance


def jarvis_march(points, recorder):
    """
    Convex hull of `points` by gift wrapping, O(n * h).

    Starts from the lowest point (leftmost on ties) and walks the boundary
    counterclockwise: the next vertex is the point with nothing to the right
    of the edge towards it. Of several colinear candidates the farthest wins,
    so points inside a hull edge are never vertices.

    Each wrapping step is one frame: a Temporary event per point compared,
    then the PartOfHull edge that was accepted.
    """
    points = tuple(points)
    if len(points) == 0:
        raise ValueError("'points' must contain at least one point")
    recorder.record(ClearScreen(), TextComment(f"Running Jarvis March on {len(points)} points"))

    start = min(points, key=lambda p: (p.y, p.x))
    hull = [start]
    current = start

    # each step adds a distinct vertex, so n steps always suffice
    for _ in range(len(points)):
        candidate = next((p for p in points if p != current), None)
        if candidate is None:
            recorder.record(TextComment(f"All points coincide, the hull is {start}"))
            return (start,)

        step = []
        for point in points:
            if point == current or point == candidate:
                continue
            step.append(Temporary(current, point))
            turn = orientation(current, candidate, point)
            if turn is Orientation.CLOCKWISE or (
                turn is Orientation.COLINEAR
                and squared_distance(current, point) > squared_distance(current, candidate)
            ):
                candidate = point

        step.append(PartOfHull(current, candidate))
        current = candidate
        if current == start:
            step.append(TextComment("Found all points of the hull"))
            recorder.record(*step)
            return tuple(hull)

        step.append(TextComment(f"Added {current} to the hull, looking for the least counterclockwise turn"))
        recorder.record(*step)
        hull.append(current)

    raise RuntimeError(f"gift wrapping from {start} did not close after {len(points)} steps")
