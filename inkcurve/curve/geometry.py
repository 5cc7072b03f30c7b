import numpy

def segment_lengths(points):
    """Return the lengths of the n-1 line segments of a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions"""
    points = numpy.asarray(points, dtype=float)
    return numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1))

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths.

    A zero-length polyline has all-zero distances whether or not unit is set."""
    distances = numpy.concatenate([[0], numpy.add.accumulate(segment_lengths(points))])
    if unit and distances[-1] > 0:
        distances /= distances[-1]
    return distances

def polyline_length(points):
    """Total length of a polyline of shape (n,m)."""
    return float(segment_lengths(points).sum())

def filter_dup_points(points):
    """Return a polyline with no duplicate or near-duplicate consecutive points.
    The first point is always kept."""
    points = numpy.asarray(points, dtype=float)
    moved = ~numpy.isclose(points[1:], points[:-1]).all(axis=1)
    return points[numpy.concatenate([[True], moved])]
