"""Domain models for bezkit.

This module contains the core domain models representing points, paths,
sections and dashes. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any host application or fontTools details

Key classes:
- Point: An anchor with two control handles
- PointTags: Per-pass annotations keyed by point index
- Subpath: One open or closed run of points
- PathModel: A simple or compound path
- Section: A corner-delimited run of a subpath
- DashPoint: A point of a dash sequence
- DashedPath: Dash paths produced from a dashed stroke
"""

from bezkit.domain.path import PathKind, PathModel, SegmentFilter, Subpath
from bezkit.domain.point import Coordinate, Point, PointTags, PointType
from bezkit.domain.section import DashedPath, DashPoint, Section

__all__: list[str] = [
    # Enums
    "PathKind",
    "PointType",
    # Core types
    "Coordinate",
    "Point",
    "PointTags",
    "SegmentFilter",
    "Subpath",
    "PathModel",
    "Section",
    "DashPoint",
    "DashedPath",
]
