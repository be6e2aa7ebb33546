"""Utility functions for curvestrip.

This module provides utility functions including:

- Logging setup and configuration
- Tessellation statistics
"""

from curvestrip.utils.logging import (
    TessellationLogger,
    TessellationStats,
    configure_logging,
)

__all__ = [
    "TessellationLogger",
    "TessellationStats",
    "configure_logging",
]
