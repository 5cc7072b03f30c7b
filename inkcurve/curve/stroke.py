import logging
import numbers

from . import bezier

logger = logging.getLogger(__name__)

def curves_from_stroke(points, widths):
    """Chain a captured stroke into cubic Curve segments.

    A 4-point window is slid along the stroke one point at a time; each window
    P[i]..P[i+3] gives the segment from P[i+1] to P[i+2]. A stroke of n points
    therefore yields n-3 curves, and its first and last points only shape the
    tangents of the first and last segments.

    Parameters:
    points: the stroke's points, at least 4.
    widths: a single (start, end) width pair used for every segment, or a
        sequence with one width pair per segment.

    Returns a list of n-3 Curves."""
    if len(points) < 4:
        raise ValueError(f'A stroke needs at least 4 points to form a curve, got {len(points)}.')
    num_curves = len(points) - 3
    if _is_width_pair(widths):
        widths = [widths] * num_curves
    elif len(widths) != num_curves:
        raise ValueError(f'Expected {num_curves} width pairs for {len(points)} points, got {len(widths)}.')
    curves = [bezier.Curve.from_points(points[i:i+4], w) for i, w in enumerate(widths)]
    logger.debug('built %d curves from %d stroke points', len(curves), len(points))
    return curves

def stroke_length(curves):
    """Approximate total length of a chain of Curves."""
    return sum(curve.length() for curve in curves)

def _is_width_pair(widths):
    if hasattr(widths, 'keys'):
        return True
    return len(widths) == 2 and all(isinstance(w, numbers.Real) for w in widths)
