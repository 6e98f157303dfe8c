"""Core flattening algorithms for curveflat.

This module contains:

- Cubic Bezier evaluation, splitting and adaptive flattening
- Conic (rational quadratic) evaluation, splitting and flattening
- Circular arc approximation by cubic Bezier curves
- Sink protocols and recorders receiving the decomposers' output
- Polyline helpers built on top of the decomposers

All functions are:
- Stateless between calls (each call owns its own progress tracker)
- Synchronous, with recursion depth bounded by the minimum-progress floor

Key functions:
- decompose_cubic / decompose_conic: Emit line segments to a line sink
- decompose_arc: Emit cubics to a curve sink
- evaluate_cubic / evaluate_conic: Position and unit tangent at t
- split_cubic / split_conic: Subdivide at t
- flatten_cubic / flatten_conic / flatten_quadratic / flatten_arc:
  Return polylines
"""

from curveflat.core._progress import MIN_PROGRESS, ProgressTracker
from curveflat.core.arc import (
    arc_error_normalized,
    arc_max_angle_for_tolerance_normalized,
    arc_segment,
    arc_segments_needed,
    decompose_arc,
)
from curveflat.core.conic import (
    ConicCoefficients,
    conic_too_curvy,
    decompose_conic,
    evaluate_conic,
    split_conic,
)
from curveflat.core.cubic import (
    cubic_coefficients,
    cubic_too_curvy,
    decompose_cubic,
    evaluate_cubic,
    split_cubic,
)
from curveflat.core.flatten import (
    arc_to_cubics,
    flatten_arc,
    flatten_conic,
    flatten_cubic,
    flatten_quadratic,
)
from curveflat.core.sinks import CurveRecorder, CurveSink, LineSink, SegmentRecorder

__all__ = [
    # Progress
    "MIN_PROGRESS",
    "ProgressTracker",
    # Sinks
    "CurveRecorder",
    "CurveSink",
    "LineSink",
    "SegmentRecorder",
    # Cubic
    "cubic_coefficients",
    "cubic_too_curvy",
    "decompose_cubic",
    "evaluate_cubic",
    "split_cubic",
    # Conic
    "ConicCoefficients",
    "conic_too_curvy",
    "decompose_conic",
    "evaluate_conic",
    "split_conic",
    # Arc
    "arc_error_normalized",
    "arc_max_angle_for_tolerance_normalized",
    "arc_segment",
    "arc_segments_needed",
    "decompose_arc",
    # Polylines
    "arc_to_cubics",
    "flatten_arc",
    "flatten_conic",
    "flatten_cubic",
    "flatten_quadratic",
]
