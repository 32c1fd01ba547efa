"""Core point types for path representation.

This module defines the fundamental point types used throughout bezkit:
- Point: An anchor with its two control handles
- PointType: Enum for corner or smooth points
- PointTags: Transient annotations attached to points during one pass
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

Coordinate = tuple[float, float]


class PointType(Enum):
    """Point type on a path.

    Points can be:
    - CORNER: Handles move independently (or are absent)
    - SMOOTH: Handles are collinear through the anchor
    """

    CORNER = auto()
    SMOOTH = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """An anchor point with two control handles.

    Handles are absolute coordinates, not offsets. A handle equal to the
    anchor means the adjacent segment has no curvature on that side.

    Immutable and hashable; use ``dataclasses.replace`` to derive
    modified copies.

    Attributes:
        anchor: Point the path passes through
        left_handle: Control point shaping the incoming segment
        right_handle: Control point shaping the outgoing segment
        point_type: Corner or smooth
    """

    anchor: Coordinate
    left_handle: Coordinate
    right_handle: Coordinate
    point_type: PointType = PointType.CORNER

    @classmethod
    def at(cls, x: float, y: float, point_type: PointType = PointType.CORNER) -> "Point":
        """Create a point whose handles sit on its anchor.

        Args:
            x: X coordinate
            y: Y coordinate
            point_type: Type of point

        Returns:
            Point with degenerate handles
        """
        anchor = (float(x), float(y))
        return cls(anchor, anchor, anchor, point_type)

    @property
    def x(self) -> float:
        """X coordinate of the anchor."""
        return self.anchor[0]

    @property
    def y(self) -> float:
        """Y coordinate of the anchor."""
        return self.anchor[1]

    def has_left_handle(self) -> bool:
        """Check whether the incoming handle is off the anchor."""
        return self.left_handle != self.anchor

    def has_right_handle(self) -> bool:
        """Check whether the outgoing handle is off the anchor."""
        return self.right_handle != self.anchor

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with anchor, left, right, and type fields
        """
        return {
            "anchor": list(self.anchor),
            "left": list(self.left_handle),
            "right": list(self.right_handle),
            "type": self.point_type.value
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with anchor, left, right, and type fields

        Returns:
            Point instance
        """
        return cls(
            anchor=(float(data["anchor"][0]), float(data["anchor"][1])),
            left_handle=(float(data["left"][0]), float(data["left"][1])),
            right_handle=(float(data["right"][0]), float(data["right"][1])),
            point_type=PointType(data["type"])
        )


@dataclass
class PointTags:
    """Annotations for a point, valid only within the pass that set them.

    Tags are kept in a mapping keyed by point index rather than on the
    points themselves.

    Attributes:
        angle: Signed turn angle at the anchor in degrees
        end_of_section: The anchor is a corner that ends a section
        end_of_dash: The point closes a dash
        length_to_next: Arc length of the segment starting at the point
    """

    angle: float | None = None
    end_of_section: bool = False
    end_of_dash: bool = False
    length_to_next: float | None = None
