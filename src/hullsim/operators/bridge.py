from hullsim.events import PartOfHull, Temporary, TextComment
from hullsim.geometry import HullType, Orientation, Point, orientation_along
from hullsim.operators.selection import median


# API functions

def find_bridge(points, split_x, recorder, hull_type=HullType.UPPER):
    """
    Finds the upper hull edge crossing the vertical line x = `split_x`.

    `points` must hold at least one point with x <= split_x and one with
    x > split_x. Returns `(left, right)` with left.x <= split_x < right.x and
    no point strictly above the line through them. Points on that line never
    end up as endpoints unless they are its leftmost / rightmost point.

    Prune and search: the candidates are paired, the pair of median slope K
    is found, and the supporting line of slope K is tested. If it touches
    both sides it is the bridge. Otherwise the bridge slope lies on one side
    of K and every pair on the other side loses a point, so each round
    removes at least a quarter of the candidates.

    Slopes only pick the median pair. Every comparison against K is an
    orientation test along that pair's direction, so integer coordinates are
    decided exactly.

    Points are in the frame of `hull_type` (reflected for the lower hull);
    events are emitted in world coordinates.
    """
    candidates = list(points)
    while True:
        if len(candidates) < 2:
            raise RuntimeError(f"bridge search over x = {split_x} lost one of its sides")
        if len(candidates) == 2:
            left, right = sorted(candidates)
            if not left.x <= split_x < right.x:
                raise RuntimeError(f"bridge candidates {left} and {right} do not straddle x = {split_x}")
            break

        pairs, kept = _pair_up(candidates)
        if not pairs:
            # only vertical pairs this round, each already gave up its lower point
            candidates = kept
            continue

        p_k, q_k, slope = median(pairs, key=_slope)
        left, right = _supporting_points(candidates, p_k, q_k)
        recorder.record(
            _candidate_segment(candidates, left, slope, hull_type),
            TextComment(f"Testing the supporting line of slope {hull_type.sign * slope:g}"),
        )

        if left.x <= split_x < right.x:
            break
        if right.x <= split_x:
            # line touches left of the split only: the bridge is less steep
            for p, q, _ in pairs:
                if orientation_along(p_k, q_k, p, q) is Orientation.CLOCKWISE:
                    kept.append(p)
                kept.append(q)
        else:
            # line touches right of the split only: the bridge is steeper
            for p, q, _ in pairs:
                kept.append(p)
                if orientation_along(p_k, q_k, p, q) is Orientation.COUNTERCLOCKWISE:
                    kept.append(q)
        candidates = kept

    world_left, world_right = hull_type.reflect(left), hull_type.reflect(right)
    recorder.record(
        PartOfHull(world_left, world_right),
        TextComment(f"Found the bridge points {world_left} and {world_right}"),
    )
    return left, right


# private helper functions

def _slope(pair):
    return pair[2]


def _pair_up(candidates):
    """
    Splits candidates into x-ordered pairs with their slopes.

    Pairs sharing an x coordinate keep only their higher point, which goes
    straight back into the candidate list alongside any unpaired point.
    """
    pairs = []
    kept = []
    if len(candidates) % 2:
        kept.append(candidates[-1])
    for i in range(0, len(candidates) - 1, 2):
        p, q = candidates[i], candidates[i + 1]
        if p.x > q.x:
            p, q = q, p
        if p.x == q.x:
            kept.append(p if p.y > q.y else q)
        else:
            pairs.append((p, q, (q.y - p.y) / (q.x - p.x)))
    return pairs, kept


def _supporting_points(candidates, p_k, q_k):
    """
    Leftmost and rightmost candidates on the highest line parallel to p_k -> q_k.

    p_k.x < q_k.x, so a point to the left of the current line lies above it.
    """
    left = right = candidates[0]
    for p in candidates[1:]:
        side = orientation_along(p_k, q_k, left, p)
        if side is Orientation.COUNTERCLOCKWISE:
            left = right = p
        elif side is Orientation.COLINEAR:
            if p.x < left.x:
                left = p
            if p.x > right.x:
                right = p
    return left, right


def _candidate_segment(candidates, anchor, slope, hull_type):
    """ the tested supporting line, clipped to the candidates' x range """
    lo = min(p.x for p in candidates)
    hi = max(p.x for p in candidates)
    start = Point(lo, anchor.y + slope * (lo - anchor.x))
    end = Point(hi, anchor.y + slope * (hi - anchor.x))
    return Temporary(hull_type.reflect(start), hull_type.reflect(end))
