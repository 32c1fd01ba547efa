"""Corner detection and section partitioning.

A section is a run of a subpath between two corners (or the ends of an
open subpath). Dash alignment fits one dash pattern per section so dashes
meet at corners.

Key functions:
- turn_angle: Signed angle at a vertex
- mark_corners: Tag each point with its turn angle and corner flag
- build_sections: Split a subpath into sections with their arc lengths
"""

import math

from bezkit.core.curve import segment_length
from bezkit.domain import Coordinate, PointTags, Section, Subpath

DEFAULT_CORNER_ANGLE = 135.0


def turn_angle(a: Coordinate, b: Coordinate, c: Coordinate) -> float:
    """Signed angle ABC in degrees.

    Args:
        a: Point before the vertex
        b: Vertex
        c: Point after the vertex

    Returns:
        Angle in range -180..180; +-180 means a straight continuation

    Examples:
        >>> turn_angle((0, 0), (10, 0), (10, 10))
        -90.0
    """
    ab = (b[0] - a[0], b[1] - a[1])
    cb = (b[0] - c[0], b[1] - c[1])
    dot = ab[0] * cb[0] + ab[1] * cb[1]
    cross = ab[0] * cb[1] - ab[1] * cb[0]
    return math.degrees(math.atan2(cross, dot))


def mark_corners(
    subpath: Subpath, corner_angle: float = DEFAULT_CORNER_ANGLE
) -> dict[int, PointTags]:
    """Tag the corner points of a subpath.

    The angle at each anchor is taken between its two handles. A handle
    sitting on its anchor is replaced by the neighbouring anchor so straight
    segments use the line direction. The endpoints of an open subpath are
    never corners.

    Args:
        subpath: Subpath to inspect
        corner_angle: Angles sharper than this (in degrees) are corners

    Returns:
        Tags keyed by point index; every index has an entry
    """
    points = subpath.points
    count = len(points)
    tags = {i: PointTags() for i in range(count)}

    for i, point in enumerate(points):
        if not subpath.closed and i in (0, count - 1):
            continue

        previous = points[i - 1]
        following = points[(i + 1) % count]

        a = point.left_handle if point.has_left_handle() else previous.anchor
        c = point.right_handle if point.has_right_handle() else following.anchor

        angle = turn_angle(a, point.anchor, c)
        tags[i].angle = angle
        tags[i].end_of_section = abs(angle) < corner_angle

    return tags


def build_sections(
    subpath: Subpath,
    tags: dict[int, PointTags] | None = None,
    for_alignment: bool = False,
    single_loop: bool = False,
) -> list[Section]:
    """Partition a subpath into corner-delimited sections.

    A closed subpath being aligned is first rotated to start on a corner so
    no section straddles the seam. Consecutive sections share their boundary
    point. The segment length of every pair is recorded on the section and,
    when tags are given, as ``length_to_next`` on the start point's tags.

    Args:
        subpath: Subpath to partition
        tags: Corner tags from mark_corners (no corners if None)
        for_alignment: Whether sections are used for aligned dashes
        single_loop: The subpath is known to be one unbroken closed loop

    Returns:
        Sections in path order; empty for subpaths with fewer than 2 points
    """
    count = len(subpath.points)
    if count < 2:
        return []

    tags = tags if tags is not None else {}
    order = list(range(count))

    if subpath.closed and for_alignment and not single_loop:
        corners = [i for i in order if tags.get(i, PointTags()).end_of_section]
        if corners:
            order = order[corners[0]:] + order[:corners[0]]

    if subpath.closed:
        order.append(order[0])

    sections = [Section()]
    last_pair = len(order) - 2

    for i in range(len(order) - 1):
        idx1, idx2 = order[i], order[i + 1]
        p1, p2 = subpath.points[idx1], subpath.points[idx2]
        section = sections[-1]

        length = segment_length(p1, p2)
        section.add_segment(p1, length)
        if idx1 in tags:
            tags[idx1].length_to_next = length

        is_corner = idx2 in tags and tags[idx2].end_of_section
        if is_corner or i == last_pair:
            section.points.append(p2)
            if is_corner and i != last_pair:
                sections.append(Section())

    return sections
