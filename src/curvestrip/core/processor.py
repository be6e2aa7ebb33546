"""Document-level tessellation orchestration.

This module tessellates every curve of a document, either in-process or
across worker processes with ProcessPoolExecutor.

Key components:
- tessellate_curve: Top-level picklable function for parallel execution
- CurveProcessor: Orchestrates a whole document and collects statistics
"""

import time
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor
from dataclasses import replace
from typing import Any

import structlog

from curvestrip.config import CurvestripSettings
from curvestrip.core.tessellator import tessellate
from curvestrip.domain import (
    BezierShape,
    CatmullRomShape,
    Curve,
    Document,
    LineStrip,
    Point2,
)
from curvestrip.exceptions import ERRORS_BY_KIND, ErrorKind, TessellationError
from curvestrip.utils import TessellationLogger, TessellationStats


def tessellate_curve(curve_index: int, curve_dict: dict[str, Any]) -> dict[str, Any]:
    """Tessellate a single serialized curve.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        curve_index: Position of the curve in its document
        curve_dict: Serialized curve (from Curve.to_dict())

    Returns:
        Dictionary containing either:
        - Success: {"curve_index": int, "positions": [[x, y], ...], "duration_ms": float}
        - Error: {"curve_index": int, "error": str, "kind": str}
    """
    start_time = time.perf_counter()
    curve = Curve.from_dict(curve_dict)

    try:
        positions = tessellate(curve.shape)
    except TessellationError as e:
        return {
            "curve_index": curve_index,
            "error": e.reason,
            "kind": e.kind.value,
        }

    return {
        "curve_index": curve_index,
        "positions": [p.to_tuple() for p in positions],
        "duration_ms": (time.perf_counter() - start_time) * 1000,
    }


def _apply_samples_override(curve: Curve, samples: int | None) -> Curve:
    if samples is None or not isinstance(curve.shape, (BezierShape, CatmullRomShape)):
        return curve
    return replace(curve, shape=replace(curve.shape, samples=samples))


class CurveProcessor:
    """Tessellates the curves of a document into line strips.

    Curves share no state, so they may be spread over worker processes;
    the returned strips are always in document order. The first failing curve
    (lowest index) aborts the run and no strips are returned.

    Example:
        processor = CurveProcessor(CurvestripSettings())
        strips = processor.process(document)
    """

    def __init__(
        self,
        config: CurvestripSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            config: Settings containing tessellation options
            logger: Bound logger (defaults to the "curvestrip" logger)
        """
        self.config = config
        self.logger = logger if logger is not None else structlog.get_logger("curvestrip")
        self.tessellation_logger = TessellationLogger(self.logger)

    @property
    def stats(self) -> TessellationStats:
        """Statistics of the most recent run."""
        return self.tessellation_logger.stats

    def process(
        self,
        document: Document,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> list[LineStrip]:
        """Tessellate every curve of a document.

        Args:
            document: Document to tessellate
            max_workers: Worker processes (None = use config)
            progress_callback: Optional callback(completed, total)

        Returns:
            One LineStrip per curve, in document order

        Raises:
            TessellationError: For the first curve that violates an invariant,
                with its curve_index set
        """
        if max_workers is None:
            max_workers = self.config.tessellation.max_workers

        self.tessellation_logger = TessellationLogger(self.logger)
        stats = self.tessellation_logger.stats
        stats.start_time = time.time()

        self.tessellation_logger.log_document_loaded(
            len(document), document.canvas.width, document.canvas.height
        )

        override = self.config.tessellation.samples_override
        curves = [_apply_samples_override(c, override) for c in document.curves]
        tasks = [(i, c.to_dict()) for i, c in enumerate(curves)]

        results: list[dict[str, Any]] = []

        if max_workers > 1 and len(tasks) > 1:
            self.logger.info(
                "Starting parallel tessellation",
                curve_count=len(tasks),
                max_workers=max_workers,
            )
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                # map() yields in submission order, which keeps document order
                for result in executor.map(
                    tessellate_curve,
                    [i for i, _ in tasks],
                    [d for _, d in tasks],
                ):
                    results.append(result)
                    if progress_callback is not None:
                        progress_callback(len(results), len(tasks))
        else:
            for i, curve_dict in tasks:
                results.append(tessellate_curve(i, curve_dict))
                if progress_callback is not None:
                    progress_callback(len(results), len(tasks))

        strips = self._collect(curves, results)

        stats.end_time = time.time()
        self.logger.info(
            "Tessellation complete",
            curves=stats.curve_count,
            vertices=stats.vertex_count,
            duration_seconds=round(stats.duration_seconds, 4),
        )
        return strips

    def _collect(
        self, curves: list[Curve], results: list[dict[str, Any]]
    ) -> list[LineStrip]:
        """Turn worker results back into line strips, raising on the first error."""
        strips: list[LineStrip] = []

        for curve, result in zip(curves, results, strict=True):
            curve_index = result["curve_index"]

            if "error" in result:
                error_cls = ERRORS_BY_KIND[ErrorKind(result["kind"])]
                error = error_cls(result["error"]).with_curve_index(curve_index)
                self.tessellation_logger.log_curve_error(curve_index, error)
                raise error

            positions = [Point2(x, y) for x, y in result["positions"]]
            self.tessellation_logger.log_curve_complete(
                curve_index=curve_index,
                kind=curve.shape.kind,
                vertices=len(positions),
                duration_ms=result["duration_ms"],
            )
            strips.append(LineStrip(positions=positions, color=curve.color))

        return strips
