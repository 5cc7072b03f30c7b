import collections
import math

import numpy

_PointBase = collections.namedtuple('Point', ['x', 'y', 'pressure', 'time'])

class Point(_PointBase):
    """Immutable stroke sample: a position, the pen pressure and the capture time.

    pressure and time default to zero, so Point(x, y) is a purely geometric point.
    """
    __slots__ = ()

    def __new__(cls, x, y, pressure=0.0, time=0.0):
        return super().__new__(cls, float(x), float(y), float(pressure), float(time))

    def distance_to(self, other):
        """Euclidean distance in the x,y plane to any object with x and y attributes."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def with_position(self, x, y):
        """Return a copy of this point moved to (x, y), keeping pressure and time."""
        return Point(x, y, self.pressure, self.time)


def as_point(p):
    """Convert an arbitrary record with x, y, pressure and time attributes into a Point.

    Records lacking pressure or time are treated as having zero for those fields."""
    if isinstance(p, Point):
        return p
    return Point(p.x, p.y, getattr(p, 'pressure', 0), getattr(p, 'time', 0))

def points_to_array(points):
    """Return the x,y coordinates of a sequence of point records as an
    array of shape (n, 2). The array is always a fresh copy."""
    return numpy.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)

def array_to_points(xy, pressure=0.0, time=0.0):
    """Build a list of Points from an array of shape (n, 2), giving every
    point the same pressure and time."""
    return [Point(x, y, pressure, time) for x, y in numpy.asarray(xy, dtype=float)]
