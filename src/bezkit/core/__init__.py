"""Core path algorithms for bezkit.

This module contains the core algorithms for:

- Segment math (evaluation, extrema, arc length, splitting)
- Path operations (extrema insertion, interpolation)
- Section partitioning (corner detection)
- Dash layout (pattern generation, boundary points, dash runs)

All functions are pure apart from add_points_at_extrema, which modifies
the path it is given.

Key functions:
- evaluate: Point on a segment at parameter t
- extrema: Parameters of horizontal and vertical tangents
- length: Arc length from parameter 0 to t
- parameter_for_length: Parameter at a given arc length
- split_segment: Split a segment at parameters
- add_points_at_extrema: Insert points at extrema of a whole path
- interpolate: Blend two matching paths
- mark_corners: Tag corner points of a subpath
- build_sections: Partition a subpath at corners
- build_dash_points: Dash boundary points for one section
- split_dash_runs: Cut dash points into separate dashes

Key classes:
- DashPattern: Dash/gap length sequences (basic or aligned)
- DashConverter: Converts a dashed stroke into dash paths
"""

from bezkit.core.curve import (
    evaluate,
    extrema,
    length,
    length_along_segment,
    parameter_for_length,
    segment,
    segment_full_length,
    segment_length,
    speed_coefficients,
    split_segment,
)
from bezkit.core.dash_points import build_dash_points, split_dash_runs
from bezkit.core.dasher import DashPattern
from bezkit.core.path_ops import (
    add_points_at_extrema,
    interpolate,
    interpolate_many,
    interpolate_point,
)
from bezkit.core.processor import DashAlignmentProbe, DashConverter
from bezkit.core.sections import build_sections, mark_corners, turn_angle

__all__ = [
    # Processor classes
    "DashAlignmentProbe",
    "DashConverter",
    # Dash classes
    "DashPattern",
    # Path operations
    "add_points_at_extrema",
    "build_dash_points",
    "build_sections",
    # Curve functions
    "evaluate",
    "extrema",
    "interpolate",
    "interpolate_many",
    "interpolate_point",
    "length",
    "length_along_segment",
    "mark_corners",
    "parameter_for_length",
    "segment",
    "segment_full_length",
    "segment_length",
    "speed_coefficients",
    "split_dash_runs",
    "split_segment",
    "turn_angle",
]
