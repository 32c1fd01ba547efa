"""Integration tests for extrema insertion on real path data.

Tests the path data and SVG round trip around extrema insertion to verify:
- Inserted points survive writing and reading back
- Compound SVG documents are processed subpath by subpath
- Interpolating processed paths keeps their structure
"""

import math
from pathlib import Path

import pytest

from bezkit.core import add_points_at_extrema, extrema, interpolate_many, segment
from bezkit.io import read_path_data, read_svg_file, read_svg_string, to_path_data, write_svg

KAPPA = 4 * (math.sqrt(2) - 1) / 3


def diagonal_circle_data(radius: float) -> str:
    """SVG path data of a circle whose anchors sit on the diagonals."""
    d = radius * math.sqrt(0.5)
    h = KAPPA * d
    corners = [(d, d), (-d, d), (-d, -d), (d, -d)]
    parts = [f"M{d} {d}"]
    for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1]):
        # Handles follow the counter-clockwise tangent at each anchor
        c1 = (x1 - y1 / d * h, y1 + x1 / d * h)
        c2 = (x2 + y2 / d * h, y2 - x2 / d * h)
        parts.append(f"C{c1[0]} {c1[1]} {c2[0]} {c2[1]} {x2} {y2}")
    return " ".join(parts) + " Z"


LEAF_SVG = """<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M0 0 C20 -30 60 -30 80 0 C60 30 20 30 0 0 Z"/>
  <path d="M100 0 C100 40 140 40 140 0"/>
  <path d="M200 0 L240 0 L240 40 Z"/>
</svg>
"""


class TestCircleExtrema:
    """Extrema on a circle drawn from its diagonals."""

    @pytest.fixture
    def circle_data(self) -> str:
        return diagonal_circle_data(50.0)

    def test_adds_axis_points(self, circle_data: str) -> None:
        """The circle gains one point per axis extremum."""
        model = read_path_data(circle_data)

        assert model.point_count == 4
        assert model.add_points_at_extrema() == 4

        anchors = [p.anchor for p in model.subpaths[0].points[1::2]]
        assert anchors == [
            pytest.approx((0.0, 50.0), abs=0.01),
            pytest.approx((-50.0, 0.0), abs=0.01),
            pytest.approx((0.0, -50.0), abs=0.01),
            pytest.approx((50.0, 0.0), abs=0.01),
        ]

    def test_round_trip(self, circle_data: str) -> None:
        """Written path data reads back with the same anchors."""
        model = read_path_data(circle_data)
        add_points_at_extrema(model)

        restored = read_path_data(to_path_data(model))

        assert restored.subpaths[0].closed
        assert restored.point_count == 8
        for original, read_back in zip(model.subpaths[0].points, restored.subpaths[0].points):
            assert read_back.anchor == pytest.approx(original.anchor, abs=0.001)

    def test_segments_extremum_free(self, circle_data: str) -> None:
        """No segment keeps an interior extremum."""
        model = read_path_data(circle_data)
        add_points_at_extrema(model)

        for p1, p2 in model.subpaths[0].segments():
            assert extrema(segment(p1, p2)) == []


class TestSvgDocument:
    """Extrema on a multi-path SVG document."""

    def test_compound_document(self, tmp_path: Path) -> None:
        """Each subpath is processed and the document round trips."""
        model = read_svg_string(LEAF_SVG)
        assert len(model.subpaths) == 3

        added = add_points_at_extrema(model)
        # Leaf: top and bottom; arch: its top; triangle: nothing
        assert added == 3
        assert [len(s.points) for s in model.subpaths] == [4, 3, 3]

        output = tmp_path / "extrema.svg"
        write_svg([model], output)
        restored = read_svg_file(output)

        assert [len(s.points) for s in restored.subpaths] == [4, 3, 3]
        assert [s.closed for s in restored.subpaths] == [True, False, True]

    def test_interpolate_processed_paths(self) -> None:
        """Two processed arches blend point by point."""
        low = read_path_data("M0 0 C0 10 10 10 10 0")
        high = read_path_data("M0 0 C0 30 10 30 10 0")
        add_points_at_extrema(low)
        add_points_at_extrema(high)

        middle = interpolate_many(low, high, 1)[0]

        assert middle.point_count == 3
        assert middle.subpaths[0].points[1].anchor == pytest.approx((5.0, 15.0))
