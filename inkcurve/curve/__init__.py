'''
Curve
-----
Functions for computations over stroke curves, approximated as series of points (polylines) or Bezier curves.
 - curve.control_points: control points that give consecutive segments of a stroke matching tangents.
 - curve.bezier: the cubic stroke segment (Curve), and De Casteljau / Bernstein evaluation of curves of any degree.
 - curve.sampling: parametric and approximately arc-length-uniform sampling of Bezier curves.
 - curve.interpolate: exactly uniform resampling of polylines and Bezier curves.
 - curve.stroke: chain a whole captured stroke into Curve segments.
 - curve.geometry: basic algorithms for polyline curves.
 '''
