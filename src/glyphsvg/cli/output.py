"""Rich console output for the glyphsvg CLI.

Everything here prints to stderr; stdout is reserved for the SVG document.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console(stderr=True)

MARK_STEP = "→"
MARK_DONE = "✓"
MARK_FAIL = "✗"
MARK_WARN = "!"


def print_header(version: str) -> None:
    console.print(f"\n[bold]glyphsvg[/bold] [dim]{version}[/dim]")


def print_step(message: str) -> None:
    """Announce the next stage of a render."""
    console.print(f"[cyan]{MARK_STEP}[/cyan] {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int | None) -> None:
    """Show the loaded font as a two-column summary."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    # Paths may contain markup characters
    table.add_row("font", Text(font_path))
    table.add_row("format", font_type)
    table.add_row("glyphs", str(glyph_count))
    table.add_row("units/em", str(upm) if upm else "unknown")
    console.print(table)


def _format_duration(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.2f}s"
    return f"{seconds * 1000:.1f}ms"


def print_success(
    output_path: str | None,
    total_time_s: float,
    placed: int,
    defined: int,
    view_box: str,
) -> None:
    """Summarize a finished render.

    Args:
        output_path: Written SVG file, or None when the SVG went to stdout
        total_time_s: Render duration in seconds
        placed: Number of ``<use>`` placements
        defined: Number of ``<symbol>`` definitions
        view_box: The document's viewBox
    """
    target = Text(output_path or "stdout", style="bold")
    console.print(
        Text.assemble(
            (f"{MARK_DONE} ", "green"),
            "wrote ",
            target,
            f" in {_format_duration(total_time_s)}",
        )
    )
    console.print(
        f"  [dim]symbols[/dim] {defined}  [dim]uses[/dim] {placed}  "
        f"[dim]viewBox[/dim] {view_box}"
    )


def print_warning(message: str) -> None:
    console.print(Text.assemble((f"{MARK_WARN} ", "bold yellow"), message))


def print_error(message: str, details: str | None = None) -> None:
    """Report a failure, with an optional hint on the following line."""
    console.print(Text.assemble((f"{MARK_FAIL} ", "bold red"), message))
    if details:
        console.print(Text(f"  {details}", style="dim"))
