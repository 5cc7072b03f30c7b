import numpy

from . import geometry
from . import sampling
from ..point import array_to_points, as_point, points_to_array

def linear_resample_polyline(points, num_points):
    """Resample a piecewise linear curve to contain a given number of
    equally-spaced points, using linear interpolation.

    Parameters:
    points: array of n points x,y; shape=(n,2)
    num_points: number of output points in array.

    Returns a resampled array, of shape (num_points,2). The first and last
    output points are the first and last input points (up to the duplicate
    tolerance of geometry.filter_dup_points, which removes repeated points so
    that the cumulative distances increase strictly). A polyline of zero length
    resamples to num_points copies of its first point."""
    points = geometry.filter_dup_points(points)
    distances = geometry.cumulative_distances(points, unit=True)
    if distances[-1] == 0:
        return numpy.repeat(points[:1], num_points, axis=0)
    sample_positions = numpy.linspace(0, 1, num_points)
    x = numpy.interp(sample_positions, distances, points[:,0])
    y = numpy.interp(sample_positions, distances, points[:,1])
    return numpy.transpose([x,y])

def exact_uniform_bezier_points(points, num_points=sampling.DEFAULT_STEPS):
    """Resample a Bezier curve to exactly num_points points, equally spaced
    along the dense polyline approximation of the curve and including both of
    its ends.

    Unlike sampling.generate_uniform_bezier_points, output points are
    interpolated between dense samples rather than picked from them.
    Pressure and time are those of points[0]."""
    if num_points < 2:
        raise ValueError('num_points must be at least 2.')
    dense_points = sampling.generate_bezier_points(points, sampling.DENSE_STEPS, endpoint=True)
    xy = linear_resample_polyline(points_to_array(dense_points), num_points)
    first = as_point(points[0])
    return array_to_points(xy, first.pressure, first.time)
