"""Converters between fonttools pens and domain models.

This module handles the conversion between fonttools pen recordings and
our domain models (PathModel, Subpath, Point), in both directions.
"""

from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment

from bezkit.domain import Coordinate, PathModel, Point, PointType, Subpath
from bezkit.exceptions import PathDataError

# Cross product below this counts as collinear when classifying smooth points
SMOOTH_TOLERANCE = 1e-6


def recording_to_path(
    recording: list[tuple[str, tuple[Any, ...]]], source: str = "<recording>"
) -> PathModel:
    """Convert a RecordingPen recording to a PathModel.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ()) / ('endPath', ())

    Lines become segments with handles on their anchors and quadratic
    segments are raised to cubic. A closing point that repeats the start
    anchor is folded back onto the first point.

    Args:
        recording: List of drawing commands from RecordingPen
        source: Name of the data source, used in error messages

    Returns:
        PathModel with one subpath per contour

    Raises:
        PathDataError: If the recording holds a command that cannot be converted
    """
    subpaths: list[Subpath] = []
    current: list[Point] = []

    def finish(closed: bool) -> None:
        nonlocal current
        if not current:
            return
        if closed and len(current) > 1 and current[-1].anchor == current[0].anchor:
            closing = current.pop()
            current[0] = Point(
                current[0].anchor, closing.left_handle, current[0].right_handle
            )
        subpaths.append(Subpath(points=[_classify(p) for p in current], closed=closed))
        current = []

    for command, args in recording:
        if command == "moveTo":
            finish(closed=False)
            current.append(Point.at(*args[0]))

        elif command == "lineTo":
            _require_start(current, command, source)
            current.append(Point.at(*args[0]))

        elif command == "curveTo":
            _require_start(current, command, source)
            for c1, c2, pt in decomposeSuperBezierSegment(list(args)):
                _add_cubic(current, c1, c2, pt)

        elif command == "qCurveTo":
            _require_start(current, command, source)
            if args[-1] is None:
                raise PathDataError(
                    source, "quadratic contours without on-curve points are not supported"
                )
            for control, pt in decomposeQuadraticSegment(list(args)):
                start = current[-1].anchor
                c1 = _toward(start, control, 2 / 3)
                c2 = _toward(pt, control, 2 / 3)
                _add_cubic(current, c1, c2, pt)

        elif command == "closePath":
            finish(closed=True)

        elif command == "endPath":
            finish(closed=False)

        else:
            raise PathDataError(source, f"unsupported pen command '{command}'")

    finish(closed=False)
    return PathModel.from_subpaths(subpaths)


def draw_path(model: PathModel, pen: Any) -> None:
    """Draw a PathModel onto any fontTools pen.

    Segments whose facing handles both sit on their anchors are drawn as
    lines, all others as cubic curves. Closed subpaths draw their closing
    segment explicitly when it is curved.

    Args:
        model: Path to draw
        pen: Object following the fontTools pen protocol
    """
    for subpath in model.subpaths:
        if not subpath.points:
            continue

        pen.moveTo(subpath.points[0].anchor)
        for p1, p2 in zip(subpath.points, subpath.points[1:]):
            _draw_segment(pen, p1, p2)

        if subpath.closed:
            last, first = subpath.points[-1], subpath.points[0]
            if last.has_right_handle() or first.has_left_handle():
                _draw_segment(pen, last, first)
            pen.closePath()
        else:
            pen.endPath()


def _draw_segment(pen: Any, p1: Point, p2: Point) -> None:
    if not p1.has_right_handle() and not p2.has_left_handle():
        pen.lineTo(p2.anchor)
    else:
        pen.curveTo(p1.right_handle, p2.left_handle, p2.anchor)


def _require_start(current: list[Point], command: str, source: str) -> None:
    if not current:
        raise PathDataError(source, f"'{command}' before 'moveTo'")


def _add_cubic(current: list[Point], c1: Coordinate, c2: Coordinate, pt: Coordinate) -> None:
    previous = current[-1]
    current[-1] = Point(previous.anchor, previous.left_handle, _as_float(c1), previous.point_type)
    anchor = _as_float(pt)
    current.append(Point(anchor, _as_float(c2), anchor))


def _toward(origin: Coordinate, target: Coordinate, factor: float) -> Coordinate:
    return (
        origin[0] + factor * (target[0] - origin[0]),
        origin[1] + factor * (target[1] - origin[1]),
    )


def _as_float(pt: Coordinate) -> Coordinate:
    return (float(pt[0]), float(pt[1]))


def _classify(point: Point) -> Point:
    """Mark a point smooth when its handles are collinear through the anchor."""
    if not (point.has_left_handle() and point.has_right_handle()):
        return point

    ax, ay = point.anchor
    lx, ly = point.left_handle[0] - ax, point.left_handle[1] - ay
    rx, ry = point.right_handle[0] - ax, point.right_handle[1] - ay

    cross = lx * ry - ly * rx
    dot = lx * rx + ly * ry
    scale = (lx * lx + ly * ly) ** 0.5 * (rx * rx + ry * ry) ** 0.5

    if dot < 0 and abs(cross) <= SMOOTH_TOLERANCE * scale:
        return Point(point.anchor, point.left_handle, point.right_handle, PointType.SMOOTH)
    return point
