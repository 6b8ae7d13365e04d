"""CLI application entry point for glyphsvg.

This module provides the main CLI interface using Typer.
"""

import sys
import warnings
from pathlib import Path
from typing import Annotated

import typer

from glyphsvg import __version__
from glyphsvg.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_success,
    print_warning,
)
from glyphsvg.config import (
    GlyphSvgSettings,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
)
from glyphsvg.core.renderer import OutlineRenderer
from glyphsvg.exceptions import (
    EmptyInputWarning,
    FontLoadError,
    GlyphSvgError,
    MalformedContourError,
)
from glyphsvg.io import FontReader, parse_features, parse_variations

# Create the Typer app
app = typer.Typer(
    name="glyphsvg",
    help="Render text with a TrueType font as a deduplicated, normalized SVG document.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphsvg[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Text to render",
            show_default=False,
        ),
    ],
    testcase: Annotated[
        str,
        typer.Option(
            "--testcase",
            "-t",
            help="Test case identifier used as symbol id prefix",
        ),
    ] = "test",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: stdout)",
        ),
    ] = None,
    variation: Annotated[
        list[str] | None,
        typer.Option(
            "--variation",
            help="Variation axis setting TAG=VALUE, repeatable (e.g. wght=700)",
        ),
    ] = None,
    feature: Annotated[
        list[str] | None,
        typer.Option(
            "--feature",
            help="OpenType feature: TAG, -TAG or TAG=VALUE, repeatable",
        ),
    ] = None,
    upm: Annotated[
        int,
        typer.Option(
            "--upm",
            help="Units per em of the output coordinate space",
            min=16,
            max=16384,
        ),
    ] = 1000,
    flip_y: Annotated[
        bool,
        typer.Option(
            "--flip-y",
            help="Flip placements vertically for y-down viewers",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Worker processes for decoding unique glyphs",
            min=1,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
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
    """Render TEXT with INPUT_FONT as an SVG document.

    Each distinct glyph is defined once as a <symbol>; every glyph of the
    shaped text is placed with a <use> reference.

    Example:
        glyphsvg NotoSans-Regular.ttf "Hello" -t HELLO-1 -o HELLO-1.svg
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input file not found: {input_font}",
            details="Please provide a path to a TrueType font file.",
        )
        raise typer.Exit(code=1)

    show_progress = verbose and not quiet

    try:
        variations = parse_variations(variation or [])
        features = parse_features(feature or [])
    except GlyphSvgError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValueError as e:
        print_error(f"Invalid feature setting: {e}")
        raise typer.Exit(code=1)

    settings = GlyphSvgSettings(
        render=RenderConfig(target_upm=upm, flip_y=flip_y),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
            quiet=quiet,
        ),
    )

    if show_progress:
        print_header(__version__)

    try:
        if show_progress:
            print_step("Loading font")
            try:
                with FontReader(input_font) as reader:
                    print_font_info(
                        font_path=str(input_font),
                        font_type=reader.format,
                        glyph_count=reader.glyph_count,
                        upm=reader.units_per_em,
                    )
            except GlyphSvgError:
                raise
            except Exception as e:
                raise FontLoadError(str(input_font), str(e)) from e
            print_step("Rendering")

        renderer = OutlineRenderer(settings)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", EmptyInputWarning)
            try:
                result = renderer.render(
                    input_font,
                    text,
                    testcase=testcase,
                    variations=variations,
                    features=features,
                )
            except (GlyphSvgError, FileNotFoundError):
                raise
            except Exception as e:
                raise FontLoadError(str(input_font), str(e)) from e

        if not quiet:
            for warning in caught:
                print_warning(str(warning.message))

        svg = renderer.to_svg(result, testcase)
        if output is None:
            sys.stdout.write(svg)
        else:
            output.write_text(svg, encoding="utf-8")

        if show_progress:
            print_success(
                output_path=str(output) if output else None,
                total_time_s=result.stats.duration_seconds,
                placed=result.stats.placed_count,
                defined=result.stats.defined_count,
                view_box=result.viewport.to_view_box(),
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except MalformedContourError as e:
        print_error(str(e), details="No output written.")
        raise typer.Exit(code=1)
    except GlyphSvgError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
