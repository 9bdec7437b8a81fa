"""Path segment types for glyph outlines.

This module defines the drawing commands a glyph outline is made of:
- Coordinate: An (x, y) position in font design units
- MoveTo: Starts a contour
- LineTo: Straight segment to a point
- QuadraticTo: Quadratic Bezier segment through a control point
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A position in unscaled font design units.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: int
    y: int

    @classmethod
    def of(cls, point: Any) -> "Coordinate":
        """Build a coordinate from any object exposing ``x`` and ``y``.

        FreeType hands its callbacks ``FT_Vector`` structures whose fields
        are C longs; those are copied into plain ints here.

        Args:
            point: Object with ``x`` and ``y`` attributes

        Returns:
            Coordinate instance
        """
        return cls(int(point.x), int(point.y))

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Begin a new contour at ``to``."""

    to: Coordinate


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``to``."""

    to: Coordinate


@dataclass(frozen=True, slots=True)
class QuadraticTo:
    """Quadratic Bezier segment from the current point through ``control`` to ``to``."""

    control: Coordinate
    to: Coordinate


Segment = Union[MoveTo, LineTo, QuadraticTo]
