"""Test chaining a whole stroke into curve segments.

Tests for inkcurve.curve.stroke:
    - One curve per 4-point window, running between the middle points
    - Consecutive curves share endpoints and tangent directions
    - Shared or per-segment width pairs
    - Total stroke length

Run:
    pytest tests/test_stroke.py -v
"""

import numpy
import pytest

from inkcurve import point
from inkcurve.curve import bezier
from inkcurve.curve import stroke

P = point.Point

STROKE = [P(0, 0), P(1, 2), P(2, 3), P(4, 3), P(5, 1), P(6, 0)]


def test_curves_from_stroke():
    curves = stroke.curves_from_stroke(STROKE, (1, 2))
    assert len(curves) == 3
    for i, curve in enumerate(curves):
        assert curve == bezier.Curve.from_points(STROKE[i:i+4], (1, 2))
        assert curve.start_point == STROKE[i+1]
        assert curve.end_point == STROKE[i+2]


def test_curves_join_smoothly():
    curves = stroke.curves_from_stroke(STROKE, {'start': 1, 'end': 1})
    for incoming, outgoing in zip(curves[:-1], curves[1:]):
        assert incoming.end_point == outgoing.start_point
        into = incoming.control_polygon()
        out_of = outgoing.control_polygon()
        t_in = into[3] - into[2]
        t_out = out_of[1] - out_of[0]
        assert t_in[0]*t_out[1] - t_in[1]*t_out[0] == pytest.approx(0, abs=1e-9)
        assert numpy.dot(t_in, t_out) > 0


def test_per_segment_widths():
    widths = [(1, 2), (2, 3), (3, 1)]
    curves = stroke.curves_from_stroke(STROKE, widths)
    assert [(c.start_width, c.end_width) for c in curves] == widths


def test_width_count_mismatch():
    with pytest.raises(ValueError, match="width pairs"):
        stroke.curves_from_stroke(STROKE, [(1, 2), (2, 3)])


def test_too_few_points():
    with pytest.raises(ValueError, match="at least 4 points"):
        stroke.curves_from_stroke(STROKE[:3], (1, 1))


def test_stroke_length():
    curves = stroke.curves_from_stroke(STROKE, (1, 1))
    assert stroke.stroke_length(curves) == pytest.approx(sum(c.length() for c in curves))
    assert stroke.stroke_length([]) == 0
