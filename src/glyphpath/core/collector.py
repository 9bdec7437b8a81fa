"""Outline traversal handlers.

FreeType walks a glyph outline and calls one handler per drawing command,
passing the user context given to ``Outline.decompose`` as the last
argument. The context here is the GlyphPath being filled; the handlers
themselves hold no state.

Each handler returns a FreeType status code. Any nonzero value makes
FreeType stop the traversal and report that code as the decomposition
error.
"""

import logging
from typing import Any

import freetype

from glyphpath.domain import Coordinate, GlyphPath
from glyphpath.exceptions import OutlineDecomposeError, OutlineProtocolError

logger = logging.getLogger(__name__)

CONTINUE = 0
ABORT = -1


def on_move_to(to: Any, path: GlyphPath) -> int:
    """Start a new contour at ``to``."""
    path.move_to(Coordinate.of(to))
    return CONTINUE


def on_line_to(to: Any, path: GlyphPath) -> int:
    """Append a line segment to the open contour."""
    try:
        path.line_to(Coordinate.of(to))
    except OutlineProtocolError as e:
        logger.error("Outline traversal out of order: %s", e)
        return ABORT
    return CONTINUE


def on_quadratic_to(control: Any, to: Any, path: GlyphPath) -> int:
    """Append a quadratic Bezier (conic) segment to the open contour."""
    try:
        path.quadratic_to(Coordinate.of(control), Coordinate.of(to))
    except OutlineProtocolError as e:
        logger.error("Outline traversal out of order: %s", e)
        return ABORT
    return CONTINUE


def on_cubic_to(control1: Any, control2: Any, to: Any, path: GlyphPath) -> int:  # noqa: ARG001
    """Accept a cubic segment without recording it.

    TrueType outlines are quadratic only, so FreeType never calls this for
    the fonts glyphpath reads. It exists to complete the handler set.
    """
    return CONTINUE


HANDLERS = {
    "move_to": on_move_to,
    "line_to": on_line_to,
    "conic_to": on_quadratic_to,
    "cubic_to": on_cubic_to,
}


def collect_outline(outline: Any, character: str) -> GlyphPath:
    """Walk a FreeType outline into a new GlyphPath.

    The path is only returned when the traversal completes; on failure it
    is dropped along with whatever contours it had collected.

    Args:
        outline: FreeType outline (``face.glyph.outline``)
        character: Character the outline belongs to, for error messages

    Returns:
        Collected GlyphPath

    Raises:
        OutlineDecomposeError: If FreeType or a handler reports an error
    """
    path = GlyphPath()
    try:
        outline.decompose(path, **HANDLERS)
    except freetype.FT_Exception as e:
        raise OutlineDecomposeError(character, str(e)) from e
    return path
