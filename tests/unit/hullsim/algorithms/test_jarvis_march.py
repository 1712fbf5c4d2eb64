import pytest

from hullsim.algorithms.jarvis_march import jarvis_march
from hullsim.events import ClearScreen, EventRecorder, PartOfHull, Temporary, TextComment
from hullsim.geometry import Orientation, Point, as_point_set, orientation


# tests
@pytest.mark.parametrize(
    "points, expected",
    [
        ([(0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.5)], [(0, 0), (1, 0), (1, 1), (0, 1)]),
        ([(2, 3), (0, 0), (2, 0), (4, 0)], [(0, 0), (4, 0), (2, 3)]),
        ([(0, 0), (3, 3), (1, 1), (2, 2)], [(0, 0), (3, 3)]),
        ([(0, 2), (0, 0), (0, 1)], [(0, 0), (0, 2)]),
        ([(5, 5)], [(5, 5)]),
        ([(5, 5), (5, 5), (5, 5)], [(5, 5)]),
        ([(1, 1), (0, 0)], [(0, 0), (1, 1)]),
        ([(3, 0), (0, 0), (1, 0), (2, 0), (1, 2)], [(0, 0), (3, 0), (1, 2)]),
    ],
)
def test_scenarios(points, expected, recorder):
    """
    hull is counterclockwise from the lowest (leftmost on ties) point
    """
    hull = jarvis_march(as_point_set(points), recorder)
    assert hull == as_point_set(expected)


def test_hull_is_strictly_convex(random_points, grid_points, recorder):
    for points in (random_points, grid_points):
        hull = jarvis_march(points, recorder)
        n = len(hull)
        assert n >= 3
        for i in range(n):
            assert orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) is Orientation.COUNTERCLOCKWISE
        assert hull[0] == min(points, key=lambda p: (p.y, p.x))


def test_empty_raises(recorder):
    with pytest.raises(ValueError):
        jarvis_march((), recorder)


def test_one_frame_per_wrapping_step(unit_square, recorder):
    hull = jarvis_march(unit_square, recorder)
    frames = recorder.frames
    assert frames[0] == (ClearScreen(), TextComment("Running Jarvis March on 4 points"))

    steps = frames[1:]
    assert len(steps) == len(hull)
    for i, step in enumerate(steps):
        # two comparisons per step for four distinct points
        assert [type(e) for e in step] == [Temporary, Temporary, PartOfHull, TextComment]
        assert step[2] == PartOfHull(hull[i], hull[(i + 1) % len(hull)])
        assert all(e.start == hull[i] for e in step[:2])
    assert steps[0][-1] == TextComment("Added (1, 0) to the hull, looking for the least counterclockwise turn")
    assert steps[-1][-1] == TextComment("Found all points of the hull")


def test_temporary_edges_cover_other_points(random_points, recorder):
    jarvis_march(random_points, recorder)
    for step in recorder.frames[1:]:
        temporaries = [e for e in step if isinstance(e, Temporary)]
        assert len(temporaries) == len(random_points) - 2


def test_coincident_points_comment(recorder):
    assert jarvis_march(as_point_set([(1, 2)] * 3), recorder) == (Point(1, 2),)
    assert recorder.frames[-1] == (TextComment("All points coincide, the hull is (1, 2)"),)


def test_colinear_candidates_prefer_farthest(recorder):
    """ points inside hull edges are passed over for the far end """
    points = as_point_set([(0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (3, 2), (0, 2), (0, 1)])
    assert jarvis_march(points, recorder) == as_point_set([(0, 0), (3, 0), (3, 2), (0, 2)])


def test_deterministic(grid_points):
    first, second = EventRecorder(), EventRecorder()
    assert jarvis_march(grid_points, first) == jarvis_march(grid_points, second)
    assert first.frames == second.frames
