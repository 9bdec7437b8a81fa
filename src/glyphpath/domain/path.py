"""Contour and glyph path containers.

A GlyphPath holds the contours of one glyph in the order the font library
reported them. Each Contour starts with a single MoveTo followed by
LineTo/QuadraticTo segments.
"""

from dataclasses import dataclass, field

from glyphpath.domain.segment import Coordinate, LineTo, MoveTo, QuadraticTo, Segment
from glyphpath.exceptions import OutlineProtocolError


@dataclass
class Contour:
    """One closed loop of a glyph outline.

    Attributes:
        segments: Drawing commands, starting with a MoveTo
    """

    segments: list[Segment] = field(default_factory=list)

    @property
    def start(self) -> Coordinate:
        """Return the point the contour was opened at."""
        first = self.segments[0]
        assert isinstance(first, MoveTo)
        return first.to

    def is_well_formed(self) -> bool:
        """Check that the contour is non-empty and only its first segment is a MoveTo."""
        if not self.segments or not isinstance(self.segments[0], MoveTo):
            return False
        return all(isinstance(s, (LineTo, QuadraticTo)) for s in self.segments[1:])

    def __len__(self) -> int:
        return len(self.segments)


@dataclass
class GlyphPath:
    """The outline of a glyph as an ordered list of contours.

    Attributes:
        contours: Contours in traversal order
    """

    contours: list[Contour] = field(default_factory=list)

    def move_to(self, to: Coordinate) -> None:
        """Open a new contour starting at ``to``."""
        self.contours.append(Contour(segments=[MoveTo(to)]))

    def line_to(self, to: Coordinate) -> None:
        """Append a straight segment to the open contour.

        Raises:
            OutlineProtocolError: If no contour has been opened yet
        """
        self._open_contour("line").segments.append(LineTo(to))

    def quadratic_to(self, control: Coordinate, to: Coordinate) -> None:
        """Append a quadratic Bezier segment to the open contour.

        Raises:
            OutlineProtocolError: If no contour has been opened yet
        """
        self._open_contour("quadratic").segments.append(QuadraticTo(control, to))

    def is_empty(self) -> bool:
        """Check if the path has no contours (e.g. a space glyph)."""
        return not self.contours

    @property
    def segment_count(self) -> int:
        """Total number of segments across all contours."""
        return sum(len(c) for c in self.contours)

    def _open_contour(self, kind: str) -> Contour:
        if not self.contours:
            raise OutlineProtocolError(f"{kind} segment received before any move_to")
        return self.contours[-1]

    def __len__(self) -> int:
        return len(self.contours)
