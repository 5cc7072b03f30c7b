"""Bezier curves: single cubic stroke segments and curves of arbitrary degree.

A stroke segment is a Curve: a cubic Bezier between two consecutive stroke
points, with control points chosen (see control_points) so that consecutive
segments share tangents, and a width that tapers linearly from start_width to
end_width.

Curves of arbitrary degree are given directly as lists of point records and
evaluated with De Casteljau's algorithm (bezier_curve) or the explicit
Bernstein polynomial form (bernstein_curve).
"""

import collections
import collections.abc
import logging

import numpy
from scipy import special

from . import control_points
from . import geometry
from ..point import as_point, array_to_points, points_to_array

logger = logging.getLogger(__name__)

# number of polyline segments used to approximate the length of a Curve
LENGTH_STEPS = 10

def cubic_point(t, start, c1, c2, end):
    """Evaluate one coordinate of a cubic Bezier curve at parameter t.

    t may be a scalar or an array; values outside [0, 1] extrapolate the same
    polynomial rather than being clamped."""
    u = 1.0 - t
    return (start * u * u * u
        + 3.0 * c1 * u * u * t
        + 3.0 * c2 * u * t * t
        + end * t * t * t)


class Curve(collections.namedtuple('Curve', ['start_point', 'control1', 'control2',
        'end_point', 'start_width', 'end_width'])):
    """One cubic Bezier segment of a stroke, with a linear width taper.

    The curve runs from start_point to end_point; control1 is the handle
    leaving start_point and control2 the handle arriving at end_point."""
    __slots__ = ()

    @classmethod
    def from_points(cls, points, widths):
        """Build the segment between the middle two points of a 4-point window.

        Parameters:
        points: four consecutive stroke points P0, P1, P2, P3. The curve runs
            from P1 to P2; P0 and P3 only shape the tangents at its ends.
        widths: (start, end) pair, or a mapping with 'start' and 'end' keys.
        """
        if len(points) != 4:
            raise ValueError(f'A curve segment needs exactly 4 points, got {len(points)}.')
        start_width, end_width = _unpack_widths(widths)
        p0, p1, p2, p3 = points
        control1 = control_points.calculate_control_points(p0, p1, p2).c2
        control2 = control_points.calculate_control_points(p1, p2, p3).c1
        return cls(as_point(p1), control1, control2, as_point(p2),
            start_width, end_width)

    point = staticmethod(cubic_point)

    def control_polygon(self):
        """Return the start, control and end points as an array of shape (4, 2)."""
        return points_to_array([self.start_point, self.control1, self.control2, self.end_point])

    def evaluate(self, t):
        """Return the x,y position(s) on the curve at parameter(s) t.

        For scalar t, returns an array of shape (2,); for an array of m
        parameter values, an array of shape (m, 2)."""
        t = numpy.asarray(t, dtype=float)
        polygon = self.control_polygon()
        start = polygon[0]
        # evaluate relative to the start point so a curve whose points all
        # coincide evaluates to exactly that point
        (_, _), (ax, ay), (bx, by), (ex, ey) = polygon - start
        x = cubic_point(t, 0, ax, bx, ex)
        y = cubic_point(t, 0, ay, by, ey)
        return start + numpy.stack([x, y], axis=-1)

    def length(self, steps=LENGTH_STEPS):
        """Approximate the arc length as the length of the polyline through
        steps+1 evenly spaced parameter values."""
        t = numpy.arange(steps + 1) / steps
        length = geometry.polyline_length(self.evaluate(t))
        if length == 0:
            logger.debug('zero-length curve at (%g, %g)', self.start_point.x, self.start_point.y)
        return length

    def width_at(self, t):
        """Stroke width at parameter t, linearly interpolated between the end widths."""
        return self.start_width + (self.end_width - self.start_width) * t

    def sample(self, num_points):
        """Return num_points Points evenly spaced in t from the start to the end
        of the curve, inclusive. Pressure and time are those of start_point."""
        if num_points < 2:
            raise ValueError('At least 2 points are needed to sample a curve.')
        xy = self.evaluate(numpy.linspace(0, 1, num_points))
        return array_to_points(xy, self.start_point.pressure, self.start_point.time)


def _unpack_widths(widths):
    if isinstance(widths, collections.abc.Mapping):
        return float(widths['start']), float(widths['end'])
    start, end = widths
    return float(start), float(end)

def _check_points(points):
    if len(points) == 0:
        raise ValueError('A Bezier curve needs at least one point.')

def de_casteljau(xy, t):
    """Evaluate the Bezier curve with control points xy (shape (n+1, d)) at t.

    t may be a scalar, giving an array of shape (d,), or an array of m values,
    giving an array of shape (m, d). xy is never modified."""
    xy = numpy.asarray(xy, dtype=float)
    t = numpy.asarray(t, dtype=float)[..., numpy.newaxis, numpy.newaxis]
    new_points = numpy.broadcast_to(xy, t.shape[:-2] + xy.shape).copy()
    n = len(xy) - 1
    for r in range(1, n + 1):
        # right-hand side is evaluated before assignment, so each level
        # only sees the previous level's points
        new_points[..., :n-r+1, :] = (1 - t) * new_points[..., :n-r+1, :] + t * new_points[..., 1:n-r+2, :]
    return new_points[..., 0, :]

def bezier_curve(points, t):
    """Evaluate the Bezier curve defined by a list of point records at parameter t.

    The curve has degree len(points)-1. Only x and y are interpolated: the
    returned Point carries the pressure and time of points[0].

    t must be a scalar; use de_casteljau to evaluate many parameters at once."""
    _check_points(points)
    if numpy.ndim(t) != 0:
        raise ValueError('bezier_curve takes a scalar t; use de_casteljau for arrays of parameters.')
    x, y = de_casteljau(points_to_array(points), t)
    first = as_point(points[0])
    return first.with_position(x, y)

def bernstein_curve(points, t_values):
    """Evaluate the Bezier curve defined by a list of point records at each of
    the parameters in t_values, using the Bernstein polynomial basis.

    Returns an array of shape (len(t_values), 2)."""
    _check_points(points)
    xy = points_to_array(points)
    n = len(xy) - 1
    i = numpy.arange(n + 1)
    t = numpy.asarray(t_values, dtype=float)[:, numpy.newaxis]
    basis = special.comb(n, i) * t**i * (1 - t)**(n - i)
    return basis @ xy
