"""Section and dash types.

This module defines the short-lived models used while converting a dashed
stroke into separate dash paths.
"""

from dataclasses import dataclass, field

from bezkit.config.settings import StrokeStyle
from bezkit.domain.path import Subpath
from bezkit.domain.point import Point


@dataclass
class Section:
    """A corner-delimited run of one subpath.

    Consecutive sections share their boundary point.

    Attributes:
        points: Points of the section, both boundary points included
        segment_lengths: Arc length of the segment starting at each point
        length: Total arc length of the section
    """

    points: list[Point] = field(default_factory=list)
    segment_lengths: list[float] = field(default_factory=list)
    length: float = 0.0

    def add_segment(self, start: Point, segment_length: float) -> None:
        """Append a segment's start point and its length.

        Args:
            start: First point of the segment
            segment_length: Arc length of the segment
        """
        self.points.append(start)
        self.segment_lengths.append(segment_length)
        self.length += segment_length


@dataclass(frozen=True, slots=True)
class DashPoint:
    """A point of a dash sequence.

    Attributes:
        point: The path point (possibly created by splitting a segment)
        end_of_dash: The point closes a dash
        end_of_section: The point is the last of its section
    """

    point: Point
    end_of_dash: bool = False
    end_of_section: bool = False


@dataclass
class DashedPath:
    """Result of converting a dashed stroke into separate dash paths.

    Attributes:
        subpaths: One open subpath per dash
        stroke: Stroke presentation for the dash paths
    """

    subpaths: list[Subpath]
    stroke: StrokeStyle = field(default_factory=StrokeStyle)

    @property
    def dash_count(self) -> int:
        """Number of dashes."""
        return len(self.subpaths)
