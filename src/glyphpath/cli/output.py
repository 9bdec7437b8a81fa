"""Rich console output helpers for the CLI.

Extraction results go to stdout exactly as rendered; errors go to stderr.
"""

from rich.console import Console
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

SYM_ERR = "✗"  # Error


def print_result(character: str, font_path: str, rendered_path: str) -> None:
    """Print the extraction banner and the rendered path to stdout.

    Written with ``Console.out`` so that no markup, highlighting or
    wrapping touches the fixed-width layout.

    Args:
        character: Extracted character
        font_path: Path of the font it came from
        rendered_path: Output of the path formatter (newline-terminated)
    """
    console.out(
        f"// Successfully extracted vector data for character '{character}' from {font_path}.",
        highlight=False,
    )
    console.out(rendered_path, end="", highlight=False)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message to stderr.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Text keeps brackets in paths and characters from being read as markup
    line = Text()
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    err_console.print(line, soft_wrap=True)
    if details:
        err_console.print(Text(f"  {details}"), soft_wrap=True)
