from dataclasses import dataclass
from enum import Enum

from hullsim.algorithms.jarvis_march import jarvis_march
from hullsim.algorithms.kirkpatrick_seidel import kirkpatrick_seidel
from hullsim.events import EventRecorder
from hullsim.geometry import Point, as_point_set
from hullsim.utils import typing
from hullsim.utils.logger import EventLogger


class Algorithm(Enum):
    JARVIS_MARCH = "jarvis_march"
    KIRKPATRICK_SEIDEL = "kirkpatrick_seidel"


# every engine takes (points, recorder) and returns the hull as a tuple of Points
HULL_ALGORITHMS = {
    Algorithm.JARVIS_MARCH: jarvis_march,
    Algorithm.KIRKPATRICK_SEIDEL: kirkpatrick_seidel,
}


@dataclass(frozen=True)
class HullComputation:
    hull: tuple[Point, ...]
    events: tuple
    frames: tuple
    algorithm: Algorithm


def compute_hull(
    points,
    algorithm: Algorithm | str = Algorithm.KIRKPATRICK_SEIDEL,
    recorder: EventRecorder | None = None,
    log_prefix: str | None = None,
    save_freq: int = 100,
) -> HullComputation:
    """
    Computes the convex hull of `points` with the selected algorithm.

    Args:
        points: array-like of (x, y) pairs, at least one.
        algorithm (Algorithm | str): which engine to run.
        recorder (EventRecorder | None): receives the construction events.
            A fresh recorder is used when omitted; pass a `NullRecorder` for
            silent batch computation.
        log_prefix (str | None): if given, the events and the hull are written
            to `<log_prefix>-events.csv` and `<log_prefix>-hull.csv`.
        save_freq (int): frames buffered between writes of the event log.

    Returns:
        HullComputation: the hull (counterclockwise) and the recorded log.
    """
    # sanitize inputs
    algorithm = typing.sanitize_choice(algorithm, Algorithm, "algorithm")
    typing.sanitize_type(recorder, (EventRecorder, "none"), "recorder")
    typing.sanitize_type(log_prefix, (str, "none"), "log_prefix")
    point_set = as_point_set(points)
    recorder = EventRecorder() if recorder is None else recorder

    hull = HULL_ALGORITHMS[algorithm](point_set, recorder)

    if log_prefix is not None:
        logger = EventLogger(log_prefix, save_freq)
        logger.log_frames(recorder.frames)
        logger.finalize(hull)

    return HullComputation(hull, recorder.events, recorder.frames, algorithm)
