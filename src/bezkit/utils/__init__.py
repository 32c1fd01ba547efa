"""Utility functions for bezkit.

This module provides utility functions including:

- Logging setup and configuration
- Operation statistics
"""

from bezkit.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
]
