"""Tests for logging configuration and operation statistics."""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest

from bezkit.utils import OperationLogger, configure_logging


@pytest.fixture
def root_handlers() -> Generator[list[logging.Handler], None, None]:
    """Restore the root logger's handlers after the test."""
    root_logger = logging.getLogger()
    saved = list(root_logger.handlers)
    yield saved
    for handler in root_logger.handlers:
        if handler not in saved:
            handler.close()
    root_logger.handlers = saved


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_handler(self, root_handlers, tmp_path: Path) -> None:
        """A log file gets its own handler at the file level."""
        log_file = tmp_path / "bezkit.log"

        configure_logging(log_file=log_file, file_level="INFO", quiet=True)

        added = [h for h in logging.getLogger().handlers if h not in root_handlers]
        assert len(added) == 1
        assert isinstance(added[0], logging.FileHandler)
        assert added[0].level == logging.INFO
        assert log_file.exists()

    def test_console_handler(self, root_handlers) -> None:
        """Without quiet a console handler is attached at the console level."""
        configure_logging(console_level="ERROR")

        added = [h for h in logging.getLogger().handlers if h not in root_handlers]
        assert len(added) == 1
        assert added[0].level == logging.ERROR

    def test_quiet_without_file(self, root_handlers) -> None:
        """Quiet mode without a file adds no handlers."""
        configure_logging(quiet=True)
        assert logging.getLogger().handlers == root_handlers


class TestOperationLogger:
    """Tests for OperationLogger statistics."""

    @pytest.fixture
    def operation_logger(self) -> OperationLogger:
        return OperationLogger(Mock())

    def test_dash_events(self, operation_logger: OperationLogger) -> None:
        """Section and dash counts accumulate."""
        operation_logger.log_sections(0, 4, single_loop=False)
        operation_logger.log_dashes(0, 8)
        operation_logger.log_path_complete(8)

        stats = operation_logger.stats
        assert stats.sections_found == 4
        assert stats.dashes_created == 8
        assert stats.paths_processed == 1

    def test_extrema_and_interpolation(self, operation_logger: OperationLogger) -> None:
        """Extrema count points, interpolation counts every created path."""
        operation_logger.log_extrema(4, subpaths=1)
        operation_logger.log_interpolation(3, point_count=2)

        assert operation_logger.stats.points_added == 4
        assert operation_logger.stats.paths_processed == 1 + 3

    def test_errors(self, operation_logger: OperationLogger) -> None:
        """Errors are counted with their source."""
        operation_logger.log_error("subpath 2", ValueError("bad"))

        assert operation_logger.stats.error_count == 1
        assert operation_logger.stats.errors == [("subpath 2", "bad")]
