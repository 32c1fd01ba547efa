"""Path representation.

This module defines the path domain models: a Subpath is one continuous
open or closed run of points, and a PathModel holds one (simple path) or
several (compound path) subpaths.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from bezkit.domain.point import Point

# (subpath index, segment index) -> process this segment?
SegmentFilter = Callable[[int, int], bool]


class PathKind(Enum):
    """Whether a path holds one subpath or several."""

    SINGLE = auto()
    COMPOUND = auto()


@dataclass
class Subpath:
    """One continuous sequence of points.

    A closed subpath stores no duplicate of its first point; the closing
    segment from the last point back to the first is implicit.

    Attributes:
        points: Points in path order
        closed: Whether the subpath is closed
    """

    points: list[Point]
    closed: bool = False

    def segments(self) -> list[tuple[Point, Point]]:
        """Get (start, end) point pairs for every segment.

        Returns:
            List of point pairs, the closing segment last
        """
        pairs = list(zip(self.points, self.points[1:]))
        if self.closed and self.points:
            pairs.append((self.points[-1], self.points[0]))
        return pairs

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the subpath
        """
        return {
            "points": [p.to_dict() for p in self.points],
            "closed": self.closed
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subpath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a subpath

        Returns:
            Subpath instance
        """
        points = [Point.from_dict(p) for p in data["points"]]
        return cls(points=points, closed=bool(data.get("closed", False)))


@dataclass
class PathModel:
    """A simple or compound path.

    The kind is resolved once when the model is built and is not
    re-inspected by the algorithms, which always work per subpath.

    Attributes:
        subpaths: Subpaths in drawing order
        kind: SINGLE or COMPOUND (resolved from the subpath count if None)
    """

    subpaths: list[Subpath]
    kind: PathKind | None = field(default=None)

    def __post_init__(self) -> None:
        if self.kind is None:
            self.kind = PathKind.COMPOUND if len(self.subpaths) > 1 else PathKind.SINGLE

    @classmethod
    def from_subpaths(cls, subpaths: list[Subpath]) -> "PathModel":
        """Build a path from host subpaths, resolving its kind once.

        Args:
            subpaths: Subpaths in drawing order

        Returns:
            PathModel of kind SINGLE for one subpath, COMPOUND otherwise
        """
        kind = PathKind.COMPOUND if len(subpaths) > 1 else PathKind.SINGLE
        return cls(subpaths=list(subpaths), kind=kind)

    @classmethod
    def from_points(cls, points: list[Point], closed: bool = False) -> "PathModel":
        """Build a simple path from a point list.

        Args:
            points: Points of the single subpath
            closed: Whether the subpath is closed

        Returns:
            PathModel with one subpath
        """
        return cls(subpaths=[Subpath(points=list(points), closed=closed)], kind=PathKind.SINGLE)

    @property
    def point_count(self) -> int:
        """Total number of points across subpaths."""
        return sum(len(s.points) for s in self.subpaths)

    def add_points_at_extrema(self, selected: SegmentFilter | None = None) -> int:
        """Insert points at the horizontal and vertical extrema of every segment.

        Modifies the model in place.

        Args:
            selected: Optional predicate choosing which segments to process

        Returns:
            Number of points added
        """
        from bezkit.core.path_ops import add_points_at_extrema

        return add_points_at_extrema(self, selected)

    def interpolate(self, other: "PathModel", t: float) -> "PathModel":
        """Interpolate between this path and another at parameter t."""
        from bezkit.core.path_ops import interpolate

        return interpolate(self, other, t)

    def interpolate_many(self, other: "PathModel", count: int) -> list["PathModel"]:
        """Make evenly spaced interpolations between this path and another."""
        from bezkit.core.path_ops import interpolate_many

        return interpolate_many(self, other, count)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the path
        """
        return {
            "subpaths": [s.to_dict() for s in self.subpaths],
            "kind": self.kind.name if self.kind else None
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathModel":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            PathModel instance
        """
        subpaths = [Subpath.from_dict(s) for s in data["subpaths"]]
        kind = PathKind[data["kind"]] if data.get("kind") else None
        return cls(subpaths=subpaths, kind=kind)
