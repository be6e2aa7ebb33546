"""Logging utilities for curvestrip."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class TessellationStats:
    """Statistics from a tessellation run."""

    curve_count: int = 0
    vertex_count: int = 0
    curve_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def max_curve_time_ms(self) -> float | None:
        """Slowest single curve, if any curve was processed."""
        return max(self.curve_timings_ms) if self.curve_timings_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output goes to stderr because stdout carries the encoded image.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_curvestrip", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._curvestrip = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler._curvestrip = True  # type: ignore[attr-defined]
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

    logger = structlog.get_logger("curvestrip")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class TessellationLogger:
    """Logger for tracking tessellation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = TessellationStats()

    def log_document_loaded(self, curve_count: int, width: int, height: int) -> None:
        """Log a freshly read document."""
        self._logger.info(
            "Document loaded",
            curves=curve_count,
            width=width,
            height=height,
        )

    def log_curve_complete(
        self,
        curve_index: int,
        kind: str,
        vertices: int,
        duration_ms: float,
    ) -> None:
        """Log a successfully tessellated curve."""
        self._logger.debug(
            "Curve tessellated",
            curve=curve_index,
            kind=kind,
            vertices=vertices,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.curve_count += 1
        self._stats.vertex_count += vertices
        self._stats.curve_timings_ms.append(duration_ms)

    def log_curve_error(self, curve_index: int, error: Exception) -> None:
        """Log a curve that could not be tessellated."""
        self._logger.error(
            "Curve tessellation failed",
            curve=curve_index,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> TessellationStats:
        """Get current tessellation statistics."""
        return self._stats
