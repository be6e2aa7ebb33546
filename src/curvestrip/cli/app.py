"""CLI application entry point for curvestrip.

This module provides the main CLI interface using Typer.
"""

import sys
import time
from pathlib import Path
from typing import Annotated

import typer

from curvestrip import __version__
from curvestrip.cli.output import (
    console,
    print_document_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from curvestrip.cli.status import ExitCode
from curvestrip.config import (
    CurvestripSettings,
    LoggingConfig,
    RenderConfig,
    TessellationConfig,
)
from curvestrip.core import CurveProcessor
from curvestrip.exceptions import DocumentError, RenderError, TessellationError
from curvestrip.io import DocumentReader, ImageWriter, InputFormat, OutputFormat
from curvestrip.utils import configure_logging

app = typer.Typer(
    name="curvestrip",
    help="Tessellate Bezier and Catmull-Rom curves and render them to an image.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Curvestrip[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    input_format: Annotated[
        InputFormat,
        typer.Argument(help="Format of the curve document (json|toml)", show_default=False),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Argument(help="Output encoding (png|webp|json)", show_default=False),
    ],
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--input-file",
            "-i",
            help="Read the document from a file instead of stdin",
        ),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output-file",
            "-o",
            help="Write the result to a file instead of stdout",
        ),
    ] = None,
    samples: Annotated[
        int | None,
        typer.Option(
            "--samples",
            "-s",
            help="Override the sample count of every Bezier and Catmull-Rom curve",
            min=2,
        ),
    ] = None,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Worker processes used to tessellate curves",
            min=1,
        ),
    ] = 1,
    line_width: Annotated[
        int,
        typer.Option(
            "--line-width",
            "-w",
            help="Stroke width in pixels (1-64)",
            min=1,
            max=64,
        ),
    ] = 1,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="No console output except errors",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Read a curve document, tessellate every curve and render the result.

    The document is read from stdin and the encoded image written to stdout
    unless --input-file / --output-file are given.

    Example:
        curvestrip toml png < drawing.toml > drawing.png
    """
    start = time.perf_counter()

    try:
        settings = CurvestripSettings(
            tessellation=TessellationConfig(
                max_workers=workers,
                samples_override=samples,
            ),
            render=RenderConfig(line_width=line_width),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
        )
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except (OSError, ValueError, AttributeError) as e:
        print_error("Cannot initialize logging", details=str(e))
        raise typer.Exit(code=ExitCode.LOGGING) from None

    if not quiet:
        print_header(__version__)
        print_step("Reading document")

    source = str(input_file) if input_file is not None else "<stdin>"
    reader = DocumentReader(input_format)
    try:
        if input_file is not None:
            document = reader.read_path(input_file)
        else:
            document = reader.read_stream(sys.stdin.buffer)
    except DocumentError as e:
        print_error(f"Could not read document from {source}", details=e.reason)
        raise typer.Exit(code=ExitCode.INPUT) from None
    except OSError as e:
        print_error(f"Could not read {source}", details=str(e))
        raise typer.Exit(code=ExitCode.IO) from None

    if not quiet:
        print_document_info(source, input_format.value, len(document), document.canvas.size)
        print_step("Tessellating")

    processor = CurveProcessor(settings, logger=logger)
    try:
        strips = processor.process(document)
    except TessellationError as e:
        print_error(str(e), details=f"kind: {e.kind.value}")
        raise typer.Exit(code=ExitCode.CURVE) from None

    if not quiet:
        print_step("Rendering")

    try:
        data = ImageWriter(document.canvas, settings.render).write(strips, output_format)
    except RenderError as e:
        print_error(e.reason)
        raise typer.Exit(code=ExitCode.OUTPUT) from None

    destination = str(output_file) if output_file is not None else "<stdout>"
    try:
        if output_file is not None:
            output_file.write_bytes(data)
        else:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
    except OSError as e:
        print_error(f"Could not write {destination}", details=str(e))
        raise typer.Exit(code=ExitCode.IO) from None

    logger.info("Render finished", output=destination, bytes=len(data))

    if not quiet:
        print_success(
            destination=destination,
            output_format=output_format.value,
            size_bytes=len(data),
            curves=processor.stats.curve_count,
            vertices=processor.stats.vertex_count,
            total_time_s=time.perf_counter() - start,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
