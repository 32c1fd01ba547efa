"""Dashed stroke conversion.

This module coordinates the full dash conversion workflow: for each subpath
of a path it detects corners, partitions the subpath into sections, lays a
dash pattern along each section and cuts the result into one open subpath
per dash.

Key components:
- DashAlignmentProbe: Host callback answering whether dashes are aligned
- DashConverter: Main orchestrator class for dash conversion
"""

from collections.abc import Sequence
from typing import Protocol

import structlog

from bezkit.config import AlignmentMode, BezkitSettings, StrokeStyle, get_default_settings
from bezkit.core.dash_points import build_dash_points, split_dash_runs
from bezkit.core.dasher import DashPattern
from bezkit.core.sections import build_sections, mark_corners
from bezkit.domain import DashedPath, DashPoint, PathModel, Subpath
from bezkit.exceptions import InvalidInputError, MissingDependencyError, NoSectionsError
from bezkit.utils import OperationLogger, OperationStats


class DashAlignmentProbe(Protocol):
    """Answers whether a path's existing dashes are aligned to corners.

    Returning None means the path has no dashed stroke, which is treated
    as not aligned.
    """

    def __call__(self, model: PathModel) -> bool | None: ...


class DashConverter:
    """Converts a dashed stroke into separate dash paths.

    Manages the complete workflow:
    1. Build the dash pattern and resolve the alignment mode
    2. Mark corners (aligned mode only)
    3. Partition each subpath into sections
    4. Lay dash lengths along each section and split out boundary points
    5. Cut the points into one open subpath per dash

    Example:
        settings = BezkitSettings()
        converter = DashConverter(settings)
        dashed = converter.convert(model, pattern=[4, 2], alignment=AlignmentMode.ALIGNED)
    """

    def __init__(
        self,
        settings: BezkitSettings | None = None,
        alignment_probe: DashAlignmentProbe | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize dash converter.

        Args:
            settings: Settings providing the default pattern, alignment,
                stroke and geometry tolerances
            alignment_probe: Host callback used for AlignmentMode.INFER
            logger: Structured logger (the "bezkit" logger if None)
        """
        self.settings = settings or get_default_settings()
        self.alignment_probe = alignment_probe
        self.logger = logger or structlog.get_logger("bezkit")
        self.operation_logger = OperationLogger(self.logger)

    @property
    def stats(self) -> OperationStats:
        """Statistics accumulated over every conversion."""
        return self.operation_logger.stats

    def convert(
        self,
        model: PathModel,
        pattern: Sequence[float] | None = None,
        alignment: AlignmentMode | None = None,
        stroke: StrokeStyle | None = None,
    ) -> DashedPath:
        """Convert a path's dashed stroke into dash paths.

        Args:
            model: Path carrying the dashed stroke
            pattern: Dash/gap lengths (settings pattern if None)
            alignment: Layout mode (settings alignment if None)
            stroke: Stroke style for the dash paths (settings stroke if None)

        Returns:
            DashedPath with one open subpath per dash

        Raises:
            MissingDependencyError: If no dash pattern can be built from the
                pattern, or INFER is requested without a probe
            NoSectionsError: If a subpath yields no sections
        """
        dasher = self._make_dasher(pattern if pattern is not None else self.settings.dash.pattern)
        aligned = self._resolve_alignment(model, alignment or self.settings.dash.alignment)
        stroke = stroke or self.settings.stroke

        self.logger.debug(
            "Converting dashed stroke",
            subpaths=len(model.subpaths),
            pattern=dasher.pattern,
            aligned=aligned,
        )

        dashes: list[Subpath] = []
        for subpath_idx, subpath in enumerate(model.subpaths):
            dashes.extend(self._convert_subpath(subpath, subpath_idx, dasher, aligned))

        self.operation_logger.log_path_complete(len(dashes))
        return DashedPath(subpaths=dashes, stroke=stroke)

    def _make_dasher(self, pattern: Sequence[float]) -> DashPattern:
        try:
            return DashPattern(pattern)
        except InvalidInputError as e:
            self.operation_logger.log_error("dash_pattern", e)
            raise MissingDependencyError(
                "DashPattern", f"could not build from {list(pattern)}"
            ) from e

    def _resolve_alignment(self, model: PathModel, alignment: AlignmentMode) -> bool:
        if alignment == AlignmentMode.INFER:
            if self.alignment_probe is None:
                raise MissingDependencyError(
                    "DashAlignmentProbe", "alignment INFER needs a probe to query the host"
                )
            return bool(self.alignment_probe(model))
        return alignment == AlignmentMode.ALIGNED

    def _convert_subpath(
        self,
        subpath: Subpath,
        subpath_idx: int,
        dasher: DashPattern,
        aligned: bool,
    ) -> list[Subpath]:
        geometry = self.settings.geometry
        tags = mark_corners(subpath, geometry.corner_angle) if aligned else None

        sections = build_sections(subpath, tags, for_alignment=aligned)
        if not sections:
            error = NoSectionsError(subpath_idx)
            self.operation_logger.log_error(f"subpath {subpath_idx}", error)
            raise error

        single_loop = subpath.closed and len(sections) == 1
        self.operation_logger.log_sections(subpath_idx, len(sections), single_loop)

        dash_points: list[DashPoint] = []
        for section in sections:
            if aligned:
                run = dasher.aligned_pattern(section.length, single_loop)
            else:
                run = dasher.basic_pattern(section.length)
            if not run:
                continue

            points = build_dash_points(
                section,
                run,
                aligned,
                tolerance=geometry.length_tolerance,
                iterations=geometry.search_iterations,
            )
            dash_points.extend(points)

        runs = split_dash_runs(dash_points, closed=subpath.closed, aligned=aligned)
        self.operation_logger.log_dashes(subpath_idx, len(runs))
        return runs
