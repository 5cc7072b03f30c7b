"""Control points that make consecutive cubic segments of a stroke join smoothly.

For three consecutive stroke points s1, s2, s3, the two chord midpoints are
shifted together so that the segment joining them passes through s2. The
shifted midpoints are the control points on either side of s2: the incoming
segment ends with c1 -> s2 and the outgoing one starts with s2 -> c2, so both
share the tangent direction c2 - c1, which is parallel to s3 - s1.

The point along the midpoint segment that is moved onto s2 splits it in the
ratio of the chord lengths, so a short chord gets a proportionally short
handle.
"""

import collections
import logging

from .. import point

logger = logging.getLogger(__name__)

ControlPoints = collections.namedtuple('ControlPoints', ['c1', 'c2'])

def calculate_control_points(s1, s2, s3):
    """Return the control points on either side of the joint point s2.

    Parameters:
    s1, s2, s3: consecutive stroke points (any objects with x and y attributes).

    Returns ControlPoints(c1, c2) where c1 is the handle of the segment ending
    at s2 and c2 the handle of the segment starting at s2. Coincident input
    points give c1 == c2 == s2."""
    m1x, m1y = (s1.x + s2.x) / 2.0, (s1.y + s2.y) / 2.0
    m2x, m2y = (s2.x + s3.x) / 2.0, (s2.y + s3.y) / 2.0

    l1 = ((s1.x - s2.x)**2 + (s1.y - s2.y)**2)**0.5
    l2 = ((s2.x - s3.x)**2 + (s2.y - s3.y)**2)**0.5

    if l1 + l2 == 0:
        logger.debug('coincident control point triple at (%g, %g)', s2.x, s2.y)
        k = 0
    else:
        k = l2 / (l1 + l2)
    cmx = m2x + (m1x - m2x) * k
    cmy = m2y + (m1y - m2y) * k

    tx = s2.x - cmx
    ty = s2.y - cmy
    return ControlPoints(point.Point(m1x + tx, m1y + ty), point.Point(m2x + tx, m2y + ty))

def control_points_for_window(points):
    """Calculate control points for a window of exactly three stroke points."""
    if len(points) != 3:
        raise ValueError(f'Control points need exactly 3 points, got {len(points)}.')
    return calculate_control_points(*points)
