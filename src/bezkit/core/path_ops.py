"""Whole-path operations built on segment math.

Key functions:
- add_points_at_extrema: Insert points at every horizontal/vertical extremum
- interpolate: Blend two topologically matching paths
- interpolate_many: Evenly spaced blends between two paths
"""

from dataclasses import replace

from bezkit.core.curve import extrema, segment, split_segment
from bezkit.domain import Coordinate, PathModel, Point, SegmentFilter, Subpath
from bezkit.exceptions import IncompatibleTopologyError


def add_points_at_extrema(model: PathModel, selected: SegmentFilter | None = None) -> int:
    """Insert points at the x and y extrema of every segment, in place.

    Every inserted point sits exactly on a true extremum, so the adjacent
    segments are extremum free and a second call adds nothing.

    Args:
        model: Path to modify
        selected: Optional predicate (subpath index, segment index) -> bool;
            rejected segments are left untouched

    Returns:
        Number of points added across all subpaths
    """
    added = 0
    for subpath_idx, subpath in enumerate(model.subpaths):
        before = len(subpath.points)
        subpath.points = _split_at_extrema(subpath, subpath_idx, selected)
        added += len(subpath.points) - before
    return added


def _split_at_extrema(
    subpath: Subpath, subpath_idx: int, selected: SegmentFilter | None
) -> list[Point]:
    points = list(subpath.points)
    if not points or (len(points) < 2 and not subpath.closed):
        return points

    if subpath.closed:
        # Logical closing point, folded back below
        points.append(points[0])

    result: list[Point] = []
    last_pair = len(points) - 2

    for i in range(len(points) - 1):
        p1, p2 = points[i], points[i + 1]
        t_values = extrema(segment(p1, p2))

        if not t_values or (selected is not None and not selected(subpath_idx, i)):
            result.append(p1)
            if i == last_pair:
                result.append(p2)
            continue

        split = split_segment(p1, p2, t_values)
        points[i] = split[0]
        points[i + 1] = split[-1]
        result.extend(split)
        if i != last_pair:
            result.pop()

    if subpath.closed:
        closing = result.pop()
        result[0] = replace(result[0], left_handle=closing.left_handle)

    return result


def _lerp(a: Coordinate, b: Coordinate, t: float) -> Coordinate:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def interpolate_point(p1: Point, p2: Point, t: float) -> Point:
    """Interpolate anchor and handles between two points.

    Args:
        p1: Point at t = 0 (its type is kept)
        p2: Point at t = 1
        t: Interpolation parameter

    Returns:
        New point
    """
    return Point(
        anchor=_lerp(p1.anchor, p2.anchor, t),
        left_handle=_lerp(p1.left_handle, p2.left_handle, t),
        right_handle=_lerp(p1.right_handle, p2.right_handle, t),
        point_type=p1.point_type,
    )


def interpolate(a: PathModel, b: PathModel, t: float) -> PathModel:
    """Interpolate between the first subpaths of two paths.

    Args:
        a: Path at t = 0 (point types and closed flag come from here)
        b: Path at t = 1
        t: Interpolation parameter

    Returns:
        New simple path

    Raises:
        IncompatibleTopologyError: If the first subpaths differ in point count
    """
    first = a.subpaths[0] if a.subpaths else Subpath(points=[])
    second = b.subpaths[0] if b.subpaths else Subpath(points=[])

    if len(first.points) != len(second.points):
        raise IncompatibleTopologyError(len(first.points), len(second.points))

    points = [interpolate_point(p1, p2, t) for p1, p2 in zip(first.points, second.points)]
    return PathModel.from_points(points, closed=first.closed)


def interpolate_many(a: PathModel, b: PathModel, count: int) -> list[PathModel]:
    """Make ``count`` interpolations at t = k / (count + 1) for k = 1..count."""
    return [interpolate(a, b, (k + 1) / (count + 1)) for k in range(count)]
