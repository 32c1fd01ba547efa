"""Path I/O layer for bezkit.

This module handles reading and writing paths using fonttools. It
provides a clean abstraction layer between fonttools pens, SVG path data
and the domain models.

Key responsibilities:
- Parse SVG path data and SVG documents
- Convert pen recordings to domain models
- Draw domain models onto any fonttools pen
- Render SVG path data and inspection documents

Key functions:
- read_path_data: Parse an SVG ``d`` attribute
- read_svg_file / read_svg_string: Read all paths of an SVG document
- recording_to_path: RecordingPen value to PathModel
- draw_path: PathModel onto a pen
- to_path_data: PathModel to SVG path data
- write_svg: Write paths to an SVG file
"""

from bezkit.io.converter import draw_path, recording_to_path
from bezkit.io.reader import read_path_data, read_svg_file, read_svg_string
from bezkit.io.writer import format_number, to_path_data, write_svg

__all__ = [
    "draw_path",
    "format_number",
    "read_path_data",
    "read_svg_file",
    "read_svg_string",
    "recording_to_path",
    "to_path_data",
    "write_svg",
]
