"""CLI application entry point for glyphpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphpath import __version__
from glyphpath.cli.output import console, print_error, print_result
from glyphpath.config import GlyphPathSettings, LoadConfig, LoggingConfig, LogLevel
from glyphpath.core import GlyphExtractor, format_path
from glyphpath.exceptions import (
    FontFormatError,
    FontLoadError,
    GlyphNotFoundError,
    GlyphPathError,
    LibraryInitError,
)

# Create the Typer app
app = typer.Typer(
    name="glyphpath",
    help="Print the vector outline of a font glyph as MoveTo/LineTo/QuadTo commands.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"glyphpath v{__version__}", highlight=False)
        raise typer.Exit()


def character_callback(value: str) -> str:
    """Reject an empty character argument."""
    if not value:
        raise typer.BadParameter("expected a character")
    return value


@app.command()
def extract(
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a TrueType font file",
            show_default=False,
        ),
    ],
    character: Annotated[
        str,
        typer.Argument(
            help="Character whose glyph outline to print",
            callback=character_callback,
            show_default=False,
        ),
    ],
    face_index: Annotated[
        int,
        typer.Option(
            "--face-index",
            "-i",
            help="Face to open in font collections",
            min=0,
        ),
    ] = 0,
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
    """Extract the outline of CHARACTER from FONT_PATH in font design units.

    Coordinates are printed unscaled and unhinted, one line per path
    segment, grouped by contour.

    Example:
        glyphpath DejaVuSans.ttf o
    """
    try:
        level = LogLevel(log_level.upper())
    except ValueError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = GlyphPathSettings(
        load=LoadConfig(face_index=face_index),
        logging=LoggingConfig(log_file=log_file, log_level=level),
    )

    try:
        extractor = GlyphExtractor(settings)
        if len(character) > 1:
            extractor.logger.debug(
                "Only the first character is used", argument=character
            )
        character = character[0]

        path = extractor.extract(font_path, character)

    except LibraryInitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except FontFormatError as e:
        print_error(
            f"The font file could be opened but its format is unsupported: {e.path}"
        )
        raise typer.Exit(code=1)
    except FontLoadError as e:
        print_error(f"Could not open or process font file: {e.path}", details=e.reason)
        raise typer.Exit(code=1)
    except GlyphNotFoundError as e:
        print_error(f"Glyph not found for character '{e.character}'.")
        raise typer.Exit(code=1)
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)

    print_result(character, str(font_path), format_path(path, settings.format))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
