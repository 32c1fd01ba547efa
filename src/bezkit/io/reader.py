"""Path readers for SVG data.

This module loads SVG path data and SVG documents through fontTools'
svgLib and converts the drawing into domain models.
"""

from pathlib import Path

from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib import SVGPath
from fontTools.svgLib.path import parse_path

from bezkit.domain import PathModel
from bezkit.exceptions import PathDataError
from bezkit.io.converter import recording_to_path


def read_path_data(path_data: str) -> PathModel:
    """Parse an SVG path ``d`` attribute.

    Args:
        path_data: SVG path data, e.g. "M0 0 C 10 0 10 10 0 10 Z"

    Returns:
        PathModel with one subpath per contour

    Raises:
        PathDataError: If the path data cannot be parsed
    """
    pen = RecordingPen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError) as e:
        raise PathDataError("path data", str(e) or type(e).__name__) from e
    return recording_to_path(pen.value, source="path data")


def read_svg_file(svg_path: Path) -> PathModel:
    """Read every path of an SVG file into one PathModel.

    Args:
        svg_path: Path to the SVG document

    Returns:
        PathModel holding the subpaths of all path elements

    Raises:
        FileNotFoundError: If the file does not exist
        PathDataError: If the document or its path data cannot be parsed
    """
    if not svg_path.exists():
        raise FileNotFoundError(f"SVG file not found: {svg_path}")

    try:
        svg = SVGPath(str(svg_path))
    except SyntaxError as e:
        raise PathDataError(str(svg_path), str(e)) from e
    return _draw_svg(svg, str(svg_path))


def read_svg_string(data: str | bytes) -> PathModel:
    """Read every path of an SVG document held in memory."""
    try:
        svg = SVGPath.fromstring(data)
    except SyntaxError as e:
        raise PathDataError("<svg string>", str(e)) from e
    return _draw_svg(svg, "<svg string>")


def _draw_svg(svg: SVGPath, source: str) -> PathModel:
    pen = RecordingPen()
    try:
        svg.draw(pen)
    except (ValueError, IndexError) as e:
        raise PathDataError(source, str(e) or type(e).__name__) from e
    return recording_to_path(pen.value, source=source)
