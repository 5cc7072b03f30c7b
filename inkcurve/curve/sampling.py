"""Turn Bezier curve definitions into point sequences ready for rendering.

 - generate_bezier_points: points evenly spaced in the curve parameter t.
 - generate_uniform_bezier_points: points approximately evenly spaced along
   the curve, picked out of a dense parametric sampling.
 - generate_bezier_curve_by_segments: split a long point sequence into
   overlapping windows, treat each as a Bezier curve, and resample each
   approximately uniformly.

All functions take lists of point records (objects with x, y, pressure and
time attributes) and return new lists of Points; x and y are interpolated,
pressure and time are those of the first point of the curve.
"""

import logging

import numpy

from . import bezier
from . import geometry
from ..point import array_to_points, as_point, points_to_array

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 100
DENSE_STEPS = 1000
DEFAULT_SEGMENT_SIZE = 4

def generate_bezier_points(points, steps=DEFAULT_STEPS, endpoint=False):
    """Evaluate a Bezier curve at evenly spaced parameter values.

    Parameters:
    points: control points of the curve (at least one).
    steps: number of parameter intervals; the parameters are i/steps for
        i in range(steps).
    endpoint: if True, also evaluate the curve at t=1, giving steps+1 points.

    Returns a list of Points, as bezier.bezier_curve would give for each t."""
    if steps < 1:
        raise ValueError('steps must be at least 1.')
    if len(points) == 0:
        raise ValueError('A Bezier curve needs at least one point.')
    num_t = steps + 1 if endpoint else steps
    t = numpy.arange(num_t) / steps
    xy = bezier.de_casteljau(points_to_array(points), t)
    first = as_point(points[0])
    return array_to_points(xy, first.pressure, first.time)

def generate_uniform_bezier_points(points, num_points=DEFAULT_STEPS):
    """Resample a Bezier curve to approximately evenly spaced points.

    The curve is densely sampled (DENSE_STEPS points), then walked from the
    start: a dense point is kept whenever the distance travelled since the last
    kept point reaches total_length / (num_points - 1). The first dense point is
    always kept. Because only dense points are kept, the spacing is only
    approximately uniform, and the output may be shorter than num_points (the
    final point of the curve is not forced in). It is never longer.

    Parameters:
    points: control points of the curve (at least one).
    num_points: desired number of output points (at least 2).

    Returns a list of between 1 and num_points Points."""
    if num_points < 2:
        raise ValueError('num_points must be at least 2.')
    dense_points = generate_bezier_points(points, DENSE_STEPS)
    lengths = geometry.segment_lengths(points_to_array(dense_points))
    target_length = lengths.sum() / (num_points - 1)

    uniform_points = [dense_points[0]]
    current_length = 0
    for dense_point, segment_length in zip(dense_points[1:], lengths):
        if len(uniform_points) >= num_points:
            break
        current_length += segment_length
        if current_length >= target_length:
            uniform_points.append(dense_point)
            current_length = 0
    logger.debug('resampled %d-point curve to %d of %d requested points',
        len(points), len(uniform_points), num_points)
    return uniform_points

def generate_bezier_curve_by_segments(points, segment_size=DEFAULT_SEGMENT_SIZE, steps=DEFAULT_STEPS):
    """Treat a long point sequence as a chain of Bezier curves and resample each.

    Windows of segment_size points are taken starting every segment_size-1
    points, so consecutive windows share their boundary point; the last window
    may be shorter. Each window is resampled independently with
    generate_uniform_bezier_points(window, steps), and the results are
    concatenated in order. There is no length normalization across windows.

    Returns a list of Points."""
    if segment_size < 2:
        raise ValueError('segment_size must be at least 2.')
    curve_points = []
    for i in range(0, len(points) - 1, segment_size - 1):
        segment_points = points[i:i+segment_size]
        curve_points.extend(generate_uniform_bezier_points(segment_points, steps))
    return curve_points
