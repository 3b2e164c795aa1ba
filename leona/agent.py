import math
from abc import ABC, abstractmethod
from typing import Callable, List, NamedTuple, Optional

from .utils import logger

DEFAULT_COLOR = '#0000FF'


class Segment(NamedTuple):
    "A line drawn by a single move while the pen was down"
    color: str
    start_x: float
    start_y: float
    end_x: float
    end_y: float


class Agent(ABC):
    """The commands a parse tree can issue.

    Implement this to draw with something other than ``Turtle``.
    """

    @abstractmethod
    def move_by(self, distance: int) -> None:
        "Advance along the current heading. A negative distance moves backward"

    @abstractmethod
    def rotate_by(self, degrees: int) -> None:
        "Add to the current heading. Left turns are positive, right turns negative"

    @abstractmethod
    def pen_up(self) -> None:
        pass

    @abstractmethod
    def pen_down(self) -> None:
        pass

    @abstractmethod
    def set_color(self, color: str) -> None:
        pass


class Turtle(Agent):
    """A drawing agent that records the segments it draws.

    Parameters:
        x, y: Starting position (default: the origin)
        heading: Starting heading in degrees, 0 pointing east
        pen_is_down: Whether moves draw from the start (default: False)
        color: Starting color (default: ``#0000FF``)
        on_segment: Called with every ``Segment`` as soon as it is drawn
    """

    segments: List[Segment]

    def __init__(self, x: float=0.0, y: float=0.0, heading: int=0, pen_is_down: bool=False,
                 color: str=DEFAULT_COLOR, on_segment: Optional[Callable[[Segment], None]]=None) -> None:
        self.x = x
        self.y = y
        self.heading = heading
        self.pen_is_down = pen_is_down
        self.color = color
        self.on_segment = on_segment
        self.segments = []

    def __repr__(self):
        return 'Turtle(x=%r, y=%r, heading=%r, pen_is_down=%r, color=%r)' % (
            self.x, self.y, self.heading, self.pen_is_down, self.color)

    def move_by(self, distance):
        turn = math.radians(self.heading)
        new_x = self.x + distance * math.cos(turn)
        new_y = self.y + distance * math.sin(turn)

        if self.pen_is_down:
            segment = Segment(self.color, self.x, self.y, new_x, new_y)
            self.segments.append(segment)
            if self.on_segment is not None:
                self.on_segment(segment)

        self.x = new_x
        self.y = new_y

    def rotate_by(self, degrees):
        self.heading += degrees

    def pen_up(self):
        self.pen_is_down = False

    def pen_down(self):
        self.pen_is_down = True

    def set_color(self, color):
        logger.debug("Color changed from %s to %s", self.color, color)
        self.color = color


def format_segment(segment: Segment) -> str:
    "Renders a segment as ``COLOR X0 Y0 X1 Y1``"
    return ' '.join([segment.color] + [repr(float(v)) for v in segment[1:]])
