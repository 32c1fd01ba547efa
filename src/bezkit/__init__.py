"""bezkit - Cubic Bezier path geometry.

bezkit locates extrema, measures and parameterizes arc length, splits
curves, partitions paths at corners, lays out dash patterns the way
vector editors align dashes to corners, and interpolates between paths.

Example:
    $ bezkit dash "M0 0 L100 0 L100 100" --pattern 12,6 --align

This prints one SVG path per dash, with dashes centered on the corner and
both path ends.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
