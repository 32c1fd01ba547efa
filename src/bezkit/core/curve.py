"""Cubic Bezier segment math.

This module provides the pure functions every path operation is built on:
- Point evaluation
- Extrema (horizontal and vertical tangent parameters)
- Arc length measurement and length-to-parameter search
- Segment splitting at arbitrary parameters

A segment is described by four control points
``(p1.anchor, p1.right_handle, p2.left_handle, p2.anchor)``.

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from dataclasses import replace

from bezkit.core._quadrature import integrate
from bezkit.domain import Coordinate, Point, PointType
from bezkit.exceptions import InvalidInputError

Segment = tuple[Coordinate, Coordinate, Coordinate, Coordinate]

# Below this a derivative coefficient is treated as zero
COEFFICIENT_EPSILON = 1e-12
# Roots this close to 0 or 1 are endpoint extrema
PARAMETER_EPSILON = 1e-9
LENGTH_TOLERANCE = 0.001
SEARCH_ITERATIONS = 30


def segment(p1: Point, p2: Point) -> Segment:
    """Get the four control points of the segment from p1 to p2.

    Args:
        p1: Point at start of segment
        p2: Point at end of segment

    Returns:
        Tuple (anchor1, right_handle1, left_handle2, anchor2)
    """
    return (p1.anchor, p1.right_handle, p2.left_handle, p2.anchor)


def evaluate(q: Segment, t: float) -> Coordinate:
    """Evaluate a cubic Bezier segment at parameter t.

    Args:
        q: Segment control points
        t: Parameter in range 0..1

    Returns:
        (x, y) coordinates on the curve

    Examples:
        >>> q = ((0.0, 0.0), (0.0, 0.0), (10.0, 0.0), (10.0, 0.0))
        >>> evaluate(q, 0.5)
        (5.0, 0.0)
    """
    u = 1 - t
    return (
        u * u * u * q[0][0] + 3 * u * t * (u * q[1][0] + t * q[2][0]) + t * t * t * q[3][0],
        u * u * u * q[0][1] + 3 * u * t * (u * q[1][1] + t * q[2][1]) + t * t * t * q[3][1],
    )


def extrema(q: Segment) -> list[float]:
    """Find the parameters where the segment's x or y tangent is zero.

    Each axis is handled independently: the cubic is differentiated to a
    quadratic a*t^2 + b*t + c and its roots inside (0, 1) are kept.

    Roots whose curve point coincides with an end anchor are dropped. A
    retracted end handle puts a derivative root on the anchor itself, and
    roundoff can move that root just inside the unit interval.

    Args:
        q: Segment control points

    Returns:
        Ascending, distinct parameters strictly inside (0, 1). Straight
        segments return [].
    """
    xs = [c[0] for c in q]
    ys = [c[1] for c in q]
    # Distances below this are the same position
    tolerance = PARAMETER_EPSILON * max(max(xs) - min(xs), max(ys) - min(ys))

    t_values: list[float] = []

    for axis in (0, 1):
        v0, v1, v2, v3 = q[0][axis], q[1][axis], q[2][axis], q[3][axis]
        b = 6 * v0 - 12 * v1 + 6 * v2
        a = -3 * v0 + 9 * v1 - 9 * v2 + 3 * v3
        c = 3 * v1 - 3 * v0

        if abs(a) < COEFFICIENT_EPSILON:
            if abs(b) < COEFFICIENT_EPSILON:
                continue
            candidates = [-c / b]
        else:
            discriminant = b * b - 4 * c * a
            if discriminant < 0:
                continue
            # Cancellation-free form of the quadratic formula
            half = -0.5 * (b + math.copysign(discriminant ** 0.5, b))
            candidates = [half / a, c / half] if half != 0 else [-b / (2 * a)]

        for t in candidates:
            if not PARAMETER_EPSILON < t < 1 - PARAMETER_EPSILON:
                continue
            x, y = evaluate(q, t)
            if _near(x, y, q[0], tolerance) or _near(x, y, q[3], tolerance):
                continue
            t_values.append(t)

    distinct: list[float] = []
    for t in sorted(t_values):
        if not distinct or t - distinct[-1] > PARAMETER_EPSILON:
            distinct.append(t)
    return distinct


def _near(x: float, y: float, anchor: Coordinate, tolerance: float) -> bool:
    return abs(x - anchor[0]) <= tolerance and abs(y - anchor[1]) <= tolerance


def speed_coefficients(q: Segment) -> tuple[float, float, float, float, float]:
    """Get the quartic coefficients of the squared speed |B'(t)|^2 / 9.

    Computed once per segment and reused by the length functions.

    Args:
        q: Segment control points

    Returns:
        Coefficients (k0..k4) from the t^4 term down to the constant
    """
    m = (
        q[3][0] - q[0][0] + 3 * (q[1][0] - q[2][0]),
        q[0][0] - 2 * q[1][0] + q[2][0],
        q[1][0] - q[0][0],
    )
    n = (
        q[3][1] - q[0][1] + 3 * (q[1][1] - q[2][1]),
        q[0][1] - 2 * q[1][1] + q[2][1],
        q[1][1] - q[0][1],
    )
    return (
        m[0] * m[0] + n[0] * n[0],
        4 * (m[0] * m[1] + n[0] * n[1]),
        2 * ((m[0] * m[2] + n[0] * n[2]) + 2 * (m[1] * m[1] + n[1] * n[1])),
        4 * (m[1] * m[2] + n[1] * n[2]),
        m[2] * m[2] + n[2] * n[2],
    )


def length(k: Sequence[float], t: float) -> float:
    """Arc length of a segment from parameter 0 to t.

    Args:
        k: Speed coefficients (see speed_coefficients)
        t: Parameter in range 0..1

    Returns:
        Length in path units
    """
    return integrate(k, t)


def length_along_segment(q: Segment) -> float:
    """Total arc length of a segment."""
    return length(speed_coefficients(q), 1.0)


def segment_length(p1: Point, p2: Point) -> float:
    """Total arc length of the segment between two points."""
    return length_along_segment(segment(p1, p2))


def segment_full_length(q: Segment, k: Sequence[float] | None = None) -> float:
    """Total arc length of a segment, reusing coefficients when given."""
    if k is None:
        k = speed_coefficients(q)
    return length(k, 1.0)


def parameter_for_length(
    q: Segment,
    target: float,
    k: Sequence[float] | None = None,
    tolerance: float = LENGTH_TOLERANCE,
    iterations: int = SEARCH_ITERATIONS,
) -> float:
    """Find the parameter at a given arc length along a segment.

    Bisects [0, 1] until the measured length is within ``tolerance`` of
    the target or ``iterations`` steps have been made.

    Special cases:
    - target == 0 returns the segment's full length, not a parameter
      (same value as segment_full_length)
    - target < 0 is measured back from the end of the segment; a result
      still below zero gives 0
    - target beyond the segment length gives 1

    Args:
        q: Segment control points
        target: Arc length from the start of the segment
        k: Precomputed speed coefficients
        tolerance: Accepted absolute length error
        iterations: Maximum bisection steps

    Returns:
        Parameter in range 0..1 (or the full length when target == 0)
    """
    if k is None:
        k = speed_coefficients(q)
    full_length = length(k, 1.0)

    if target == 0:
        return full_length
    if target < 0:
        target += full_length
        if target < 0:
            return 0.0
    elif target > full_length:
        return 1.0

    t0, t1 = 0.0, 1.0
    t = 0.5
    for _ in range(iterations):
        t = t0 + (t1 - t0) / 2
        error = target - length(k, t)
        if abs(error) < tolerance:
            break
        if error < 0:
            t1 = t
        else:
            t0 = t

    return t


def split_segment(p1: Point | None, p2: Point | None, t_values: Sequence[float]) -> list[Point]:
    """Split the segment between two points at each parameter.

    Each returned piece reproduces the original curve over its parameter
    range. Straight segments (both handles on their anchors) are divided
    with plain corner points.

    Args:
        p1: Point at start of segment
        p2: Point at end of segment
        t_values: Ascending parameters strictly inside (0, 1)

    Returns:
        [p1', *boundary_points, p2'] where p1' and p2' are the original
        endpoints with their facing handle rescaled to the first and last
        piece

    Raises:
        InvalidInputError: If p1 or p2 is missing
    """
    if p1 is None or p2 is None:
        raise InvalidInputError("split_segment: supplied point is undefined")
    if not t_values:
        return [p1, p2]

    q = segment(p1, p2)
    params = [0.0, *t_values, 1.0]
    straight = q[0] == q[1] and q[2] == q[3]

    boundaries: list[Point] = []
    for j in range(1, len(params) - 1):
        if straight:
            x, y = evaluate(q, params[j])
            boundaries.append(Point.at(x, y))
        else:
            boundaries.append(_divide_at(q, params[j - 1], params[j], params[j + 1]))

    first = replace(p1, right_handle=_scale_handle(p1.anchor, p1.right_handle, t_values[0]))
    last = replace(p2, left_handle=_scale_handle(p2.anchor, p2.left_handle, 1 - t_values[-1]))

    return [first, *boundaries, last]


def _scale_handle(anchor: Coordinate, handle: Coordinate, factor: float) -> Coordinate:
    return (
        anchor[0] + (handle[0] - anchor[0]) * factor,
        anchor[1] + (handle[1] - anchor[1]) * factor,
    )


def _ratio(numerator: float, denominator: float) -> float:
    # A piece of zero parameter width has no handle
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _divide_at(q: Segment, t0: float, t1: float, t2: float) -> Point:
    """Make the smooth point at t1 joining pieces [t0, t1] and [t1, t2]."""
    anchor = evaluate(q, t1)
    right = _tangent_handle(q, 1, t1, anchor, _ratio(t2 - t1, 1 - t1))
    left = _tangent_handle(q, 0, t1, anchor, _ratio(t1 - t0, t1))
    return Point(anchor, left, right, PointType.SMOOTH)


def _tangent_handle(
    q: Segment, side: int, t: float, anchor: Coordinate, magnification: float
) -> Coordinate:
    """Handle at t from the de Casteljau quadratic of q[side..side+2].

    side 0 gives the left handle of the piece [0, t], side 1 the right
    handle of the piece [t, 1]; magnification rescales it to a shorter piece.
    """
    a, b, c = q[side], q[side + 1], q[side + 2]
    handle = (
        t * (t * (a[0] - 2 * b[0] + c[0]) + 2 * (b[0] - a[0])) + a[0],
        t * (t * (a[1] - 2 * b[1] + c[1]) + 2 * (b[1] - a[1])) + a[1],
    )
    return _scale_handle(anchor, handle, magnification)
