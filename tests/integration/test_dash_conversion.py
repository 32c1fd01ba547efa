"""Integration tests for the dash conversion pipeline.

Tests the full conversion from path data to dash paths to verify:
- Aligned dashes meet at corners and path ends
- Curved paths get dashes of the requested arc length
- Dash documents are valid SVG that reads back
"""

from pathlib import Path

import pytest

from bezkit.config import AlignmentMode, BezkitSettings, StrokeStyle
from bezkit.core import DashConverter, segment_length
from bezkit.domain import PathModel, Subpath
from bezkit.io import read_path_data, read_svg_file, write_svg

# Circle of radius 100 drawn with four quarter curves
CIRCLE = (
    "M100 0 C100 55.228 55.228 100 0 100 C-55.228 100 -100 55.228 -100 0 "
    "C-100 -55.228 -55.228 -100 0 -100 C55.228 -100 100 -55.228 100 0 Z"
)
RECTANGLE = "M0 0 L30 0 L30 10 L0 10 Z"


def dash_length(dash: Subpath) -> float:
    """Arc length of one dash."""
    return sum(segment_length(p1, p2) for p1, p2 in zip(dash.points, dash.points[1:]))


@pytest.fixture
def converter() -> DashConverter:
    """Converter with a dash 4, gap 2 default pattern."""
    settings = BezkitSettings()
    settings.dash.pattern = [4.0, 2.0]
    return DashConverter(settings)


class TestAlignedRectangle:
    """Aligned dashes on a 30x10 rectangle."""

    @pytest.fixture
    def dashed(self, converter: DashConverter):
        return converter.convert(read_path_data(RECTANGLE), alignment=AlignmentMode.ALIGNED)

    def test_dash_count(self, dashed) -> None:
        """Four middle dashes per long side, one per short side, four corners."""
        assert dashed.dash_count == 4 + 4 + 1 + 1 + 4

    def test_corner_dashes(self, dashed) -> None:
        """Each corner is covered by a dash of two half dashes."""
        corner_dashes = [d for d in dashed.subpaths if len(d.points) == 3]

        assert sorted(d.points[1].anchor for d in corner_dashes) == [
            (0.0, 0.0),
            (0.0, 10.0),
            (30.0, 0.0),
            (30.0, 10.0),
        ]
        for dash in corner_dashes:
            assert dash_length(dash) == pytest.approx(4.0, abs=0.01)

    def test_long_side_unscaled(self, dashed) -> None:
        """A side fitting the pattern exactly keeps the pattern lengths."""
        bottom = [
            d for d in dashed.subpaths
            if len(d.points) == 2 and all(p.y == pytest.approx(0.0) for p in d.points)
        ]

        assert len(bottom) == 4
        assert [dash_length(d) for d in bottom] == pytest.approx([4.0] * 4, abs=0.01)

    def test_open_subpaths(self, dashed) -> None:
        """Dashes are open subpaths."""
        assert not any(d.closed for d in dashed.subpaths)


class TestCurvedDashes:
    """Dashes along a circle."""

    def test_basic_dash_lengths(self) -> None:
        """Basic dashes have the pattern's arc length."""
        dashed = DashConverter().convert(read_path_data(CIRCLE), pattern=[12, 6])

        assert dashed.dash_count == 35
        for dash in dashed.subpaths:
            assert dash_length(dash) == pytest.approx(12.0, abs=0.01)

    def test_aligned_loop_even(self) -> None:
        """A loop without corners gets whole, equal dashes all round."""
        dashed = DashConverter().convert(
            read_path_data(CIRCLE), pattern=[12, 6], alignment=AlignmentMode.ALIGNED
        )

        lengths = [dash_length(d) for d in dashed.subpaths]
        assert dashed.dash_count == 35
        assert max(lengths) - min(lengths) < 0.01
        assert lengths[0] == pytest.approx(12.0, abs=0.1)

    def test_dashes_cross_anchors(self) -> None:
        """Dashes spanning an anchor keep it as an interior point."""
        dashed = DashConverter().convert(read_path_data(CIRCLE), pattern=[12, 6])

        interior = [p.anchor for d in dashed.subpaths for p in d.points[1:-1]]
        assert (0.0, 100.0) in interior or (-100.0, 0.0) in interior or (0.0, -100.0) in interior


class TestDashDocument:
    """Dash paths written to SVG."""

    def test_write_and_read_back(self, converter: DashConverter, tmp_path: Path) -> None:
        """Every dash becomes a stroked path element."""
        stroke = StrokeStyle(width=2.0, color="#333")
        dashed = converter.convert(read_path_data("M0 0 L20 0"), stroke=stroke)

        output = tmp_path / "dashes.svg"
        write_svg([PathModel.from_points(d.points) for d in dashed.subpaths], output, dashed.stroke)
        restored = read_svg_file(output)

        text = output.read_text(encoding="utf-8")
        assert text.count("<path ") == 4
        assert 'stroke="#333"' in text
        assert len(restored.subpaths) == 4
        assert [s.points[0].x for s in restored.subpaths] == pytest.approx([0, 6, 12, 18], abs=0.01)
