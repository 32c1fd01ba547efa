"""Path writers for SVG output.

This module renders domain models as SVG path data through fontTools'
SVGPathPen, and writes small SVG documents for inspecting results.
"""

from pathlib import Path
from xml.sax.saxutils import quoteattr

from fontTools.pens.svgPathPen import SVGPathPen

from bezkit.config import StrokeCap, StrokeStyle
from bezkit.domain import PathModel
from bezkit.io.converter import draw_path

# Host stroke cap names mapped to SVG's
_SVG_CAPS = {
    StrokeCap.BUTT: "butt",
    StrokeCap.ROUND: "round",
    StrokeCap.PROJECTING: "square",
}


def format_number(value: float) -> str:
    """Format a coordinate compactly with at most three decimals.

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(-0.0001)
        '0'
    """
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def to_path_data(model: PathModel) -> str:
    """Render a PathModel as SVG path data.

    Args:
        model: Path to render

    Returns:
        SVG path ``d`` attribute value
    """
    pen = SVGPathPen(None, ntos=format_number)
    draw_path(model, pen)
    return pen.getCommands()


def write_svg(paths: list[PathModel], output: Path, stroke: StrokeStyle | None = None) -> None:
    """Write paths into a minimal SVG document.

    Each path becomes one unfilled ``<path>`` element with the stroke
    attributes applied; a style without a color is written unstroked.

    Args:
        paths: Paths to write
        output: Output file path
        stroke: Stroke style (defaults if None)
    """
    stroke = stroke or StrokeStyle()
    attributes = " ".join([
        'fill="none"',
        f"stroke={quoteattr(stroke.color or 'none')}",
        f'stroke-width="{format_number(stroke.width)}"',
        f'stroke-linecap="{_SVG_CAPS[stroke.cap]}"',
        f'stroke-linejoin="{stroke.join.value}"',
        f'stroke-miterlimit="{format_number(stroke.miter_limit)}"',
    ])

    lines = ['<svg xmlns="http://www.w3.org/2000/svg">']
    for model in paths:
        lines.append(f'  <path d="{to_path_data(model)}" {attributes}/>')
    lines.append("</svg>")

    output.write_text("\n".join(lines) + "\n", encoding="utf-8")
