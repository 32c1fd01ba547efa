"""Dash boundary points and dash runs.

build_dash_points walks a section and splits its segments wherever a dash
or gap ends, producing the ordered point sequence of every dash in the
section. split_dash_runs cuts such a sequence into separate open subpaths,
one per dash, joining half dashes that meet at a corner.
"""

from collections import deque
from collections.abc import Sequence
from dataclasses import replace

from bezkit.core.curve import (
    LENGTH_TOLERANCE,
    SEARCH_ITERATIONS,
    parameter_for_length,
    segment,
    split_segment,
)
from bezkit.domain import DashPoint, Point, Section, Subpath

# Lengths this small are treated as zero
LENGTH_EPSILON = 1e-9


def build_dash_points(
    section: Section,
    dash_run: Sequence[float],
    aligned: bool = False,
    tolerance: float = LENGTH_TOLERANCE,
    iterations: int = SEARCH_ITERATIONS,
    epsilon: float = LENGTH_EPSILON,
) -> list[DashPoint]:
    """Materialize the dash boundaries of one section.

    The run is consumed left to right, alternating dash and gap. Each length
    that ends inside the current segment splits it; a length reaching past
    the segment end is carried into the next segment. Only points inside a
    dash are emitted, so the result holds each dash's start, its interior
    path points, and its end (flagged ``end_of_dash``).

    Args:
        section: Section with its points and segment lengths
        dash_run: Alternating dash and gap lengths, starting with a dash
        aligned: The final run entry ends on the section end and is not
            split explicitly
        tolerance: Length error accepted when locating a boundary
        iterations: Maximum search steps when locating a boundary
        epsilon: Length below which an entry counts as zero

    Returns:
        Dash points for the section; the last is always flagged end_of_dash
        and end_of_section
    """
    if not dash_run or len(section.points) < 2:
        return []

    pending = deque(dash_run)
    if aligned:
        pending.pop()

    points = list(section.points)
    # [point, end_of_dash] pairs
    output: list[list] = [[points[0], False]]
    in_dash = True

    for idx, seg_len in enumerate(section.segment_lengths):
        p1, p2 = points[idx], points[idx + 1]
        advance = 0.0

        while pending and advance + pending[0] < seg_len - epsilon:
            length = pending.popleft()

            if length <= epsilon:
                if in_dash:
                    output[-1][1] = True
                else:
                    output.append([p1, False])
                in_dash = not in_dash
                continue

            t = parameter_for_length(
                segment(p1, p2), length, tolerance=tolerance, iterations=iterations
            )
            first, boundary, last = split_segment(p1, p2, [t])

            if in_dash:
                # Dash ends here; trim the outgoing handle of its last point
                output[-1][0] = first
            output.append([boundary, in_dash])

            p1, p2 = boundary, last
            points[idx + 1] = last
            advance += length
            in_dash = not in_dash

        if in_dash:
            output.append([p2, False])

        if pending:
            pending[0] -= seg_len - advance

    output[-1][1] = True
    dash_points = [DashPoint(point=point, end_of_dash=flag) for point, flag in output]
    dash_points[-1] = replace(dash_points[-1], end_of_section=True)
    return dash_points


def split_dash_runs(
    dash_points: Sequence[DashPoint], closed: bool = False, aligned: bool = False
) -> list[Subpath]:
    """Cut a dash point sequence into one open subpath per dash.

    A dash ends at a point flagged end_of_dash. A section end followed by a
    point with the same anchor is merged with it (the later point takes the
    earlier incoming handle) and the dash continues, which joins half dashes
    across a corner. Equal anchors inside a section stay separate dashes.
    For a closed aligned path the sequence is rotated first so the half dash
    at the seam joins the final one.

    Args:
        dash_points: Output of build_dash_points for every section in order
        closed: Whether the source subpath is closed
        aligned: Whether dashes were aligned to corners

    Returns:
        Open subpaths, one per dash
    """
    stack = deque(dash_points)

    if closed and aligned and stack:
        _rotate_while(stack, lambda p: not p.end_of_dash)
        _rotate_while(stack, lambda p: p.end_of_dash)

    runs: list[Subpath] = []
    while stack:
        run: list[Point] = []
        while stack:
            current = stack.popleft()
            point = current.point

            if current.end_of_section and stack and point.anchor == stack[0].point.anchor:
                incoming = point.left_handle
                current = stack.popleft()
                run.append(replace(current.point, left_handle=incoming))
                continue

            run.append(point)
            if current.end_of_dash:
                break
        runs.append(Subpath(points=run, closed=False))

    return runs


def _rotate_while(stack: deque, predicate) -> None:
    # Bounded to one full cycle
    for _ in range(len(stack)):
        if not predicate(stack[0]):
            return
        stack.rotate(-1)
