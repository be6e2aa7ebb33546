"""Rich console output helpers for the CLI.

All output goes to stderr: stdout is reserved for the encoded image.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Curvestrip[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(source: str, input_format: str, curves: int, size: tuple[int, int]) -> None:
    """Print document information.

    Args:
        source: File path or "<stdin>"
        input_format: Document format (json, toml)
        curves: Number of curves in the document
        size: Canvas (width, height)
    """
    line = Text("  ")
    line.append(source)
    line.append(f" ({input_format})")
    console.print(line)
    console.print(f"  {curves} curves {SYM_DOT} {size[0]}x{size[1]} canvas")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


def print_success(
    destination: str,
    output_format: str,
    size_bytes: int,
    curves: int,
    vertices: int,
    total_time_s: float,
) -> None:
    """Print success message with summary.

    Args:
        destination: Output path or "<stdout>"
        output_format: Output encoding (png, webp, json)
        size_bytes: Encoded size
        curves: Number of curves tessellated
        vertices: Total number of vertices produced
        total_time_s: Total run time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(destination, style="bold")
    line.append(f" ({output_format}, {size_bytes:,} bytes)")
    console.print(line)
    console.print(f"  {curves} curves {SYM_DOT} {vertices:,} vertices")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
