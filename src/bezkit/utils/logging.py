"""Logging utilities for bezkit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class OperationStats:
    """Statistics from path operations."""

    paths_processed: int = 0
    sections_found: int = 0
    dashes_created: int = 0
    points_added: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bezkit")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class OperationLogger:
    """Logger for tracking path operations and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()

    def log_sections(self, subpath_idx: int, count: int, single_loop: bool) -> None:
        """Log section partitioning of one subpath."""
        self._logger.debug(
            "Sections built",
            subpath=subpath_idx,
            sections=count,
            single_loop=single_loop,
        )
        self._stats.sections_found += count

    def log_dashes(self, subpath_idx: int, count: int) -> None:
        """Log dashes produced for one subpath."""
        self._logger.debug("Dashes created", subpath=subpath_idx, dashes=count)
        self._stats.dashes_created += count

    def log_path_complete(self, dashes: int) -> None:
        """Log a finished dash conversion."""
        self._logger.info("Dashed stroke converted", dashes=dashes)
        self._stats.paths_processed += 1

    def log_extrema(self, points_added: int, subpaths: int) -> None:
        """Log extrema insertion on one path."""
        self._logger.info("Points added at extrema", points=points_added, subpaths=subpaths)
        self._stats.paths_processed += 1
        self._stats.points_added += points_added

    def log_interpolation(self, steps: int, point_count: int) -> None:
        """Log interpolation between two paths."""
        self._logger.info("Paths interpolated", steps=steps, points=point_count)
        self._stats.paths_processed += steps

    def log_error(self, source: str, error: Exception) -> None:
        """Log an operation error."""
        self._logger.error(
            "Path operation failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((source, str(error)))

    @property
    def stats(self) -> OperationStats:
        """Get current operation statistics."""
        return self._stats
