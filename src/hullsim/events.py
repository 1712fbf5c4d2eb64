"""
Construction events emitted by the hull algorithms.

Each algorithm writes into an `EventRecorder` that it is handed explicitly.
Events are grouped into frames, one frame per step of the animation, and are
only ever appended. The algorithms never read them back.
"""
import pandas as pd
from dataclasses import dataclass
from typing import ClassVar

from hullsim.geometry import Point


@dataclass(frozen=True)
class PartOfHull:
    """ an edge that is final """
    start: Point
    end: Point
    kind: ClassVar[str] = "part_of_hull"

    def as_row(self):
        return (self.kind, self.start.x, self.start.y, self.end.x, self.end.y, "")


@dataclass(frozen=True)
class Temporary:
    """ a candidate edge under consideration """
    start: Point
    end: Point
    kind: ClassVar[str] = "temporary"

    def as_row(self):
        return (self.kind, self.start.x, self.start.y, self.end.x, self.end.y, "")


@dataclass(frozen=True)
class VerticalLine:
    """ the x coordinate a divide-and-conquer step currently splits on """
    x: float
    kind: ClassVar[str] = "vertical_line"

    def as_row(self):
        return (self.kind, self.x, "", self.x, "", "")


@dataclass(frozen=True)
class ClearScreen:
    kind: ClassVar[str] = "clear_screen"

    def as_row(self):
        return (self.kind, "", "", "", "", "")


@dataclass(frozen=True)
class TextComment:
    text: str
    kind: ClassVar[str] = "text_comment"

    def as_row(self):
        return (self.kind, "", "", "", "", self.text)


EVENT_TYPES = (PartOfHull, Temporary, VerticalLine, ClearScreen, TextComment)
EVENT_COLUMNS = ["frame", "kind", "x0", "y0", "x1", "y1", "text"]


class EventRecorder:
    """
    In-memory, append-only log of construction events.

    One recorder belongs to exactly one algorithm invocation.
    """
    def __init__(self):
        self._frames = []

    def record(self, *events):
        """
        Appends one frame holding `events`, in the given order.
        Empty calls are ignored so callers can record conditionally built frames.
        """
        for event in events:
            if not isinstance(event, EVENT_TYPES):
                raise TypeError(f"'event' expected one of {EVENT_TYPES}. Got: {type(event)}")
        if events:
            self._frames.append(tuple(events))

    @property
    def frames(self):
        return tuple(self._frames)

    @property
    def events(self):
        return tuple(event for frame in self._frames for event in frame)

    def replay(self, upto=None):
        """
        Yields frames in recording order, stopping after frame `upto` if given.
        """
        for index, frame in enumerate(self._frames):
            if upto is not None and index > upto:
                return
            yield frame

    def rows(self):
        """ flat (frame, kind, x0, y0, x1, y1, text) rows, see EVENT_COLUMNS """
        return [(index,) + event.as_row() for index, frame in enumerate(self._frames) for event in frame]

    def to_dataframe(self):
        return pd.DataFrame(self.rows(), columns=EVENT_COLUMNS)

    def __len__(self):
        return sum(len(frame) for frame in self._frames)

    def __iter__(self):
        return iter(self.events)

    def __repr__(self):
        return f"EventRecorder({len(self._frames)} frames, {len(self)} events)"


class NullRecorder(EventRecorder):
    """
    Recorder for silent batch computation; drops everything it is given.
    """
    def record(self, *events):
        pass
