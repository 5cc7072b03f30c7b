'''
# inkcurve

Smooth cubic curves for freehand ink strokes: fit Bezier segments through
captured pen/touch points, then sample, resample and measure them for
rendering.

Point
-----
 - point: the immutable stroke sample (x, y, pressure, time) and conversions
   between lists of point records and numpy arrays.

Curve
-----
Functions for computations over stroke curves, approximated as series of points (polylines) or Bezier curves.
 - curve.control_points: control points that give consecutive segments of a stroke matching tangents.
 - curve.bezier: the cubic stroke segment (Curve), and De Casteljau / Bernstein evaluation of curves of any degree.
 - curve.sampling: parametric and approximately arc-length-uniform sampling of Bezier curves, also window by window over long point sequences.
 - curve.interpolate: exactly uniform resampling of polylines and Bezier curves.
 - curve.stroke: chain a whole captured stroke into Curve segments and measure it.
 - curve.geometry: basic algorithms for polyline curves.

'''
