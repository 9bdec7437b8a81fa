"""Domain models for glyphpath.

This module contains the path model a glyph outline is collected into.
All segment types are immutable (frozen dataclasses); the containers are
filled during a single outline traversal and not modified afterwards.

Key classes:
- Coordinate: A position in font design units
- MoveTo, LineTo, QuadraticTo: Path segments
- Contour: One closed loop of segments
- GlyphPath: All contours of a glyph
"""

from glyphpath.domain.path import Contour, GlyphPath
from glyphpath.domain.segment import Coordinate, LineTo, MoveTo, QuadraticTo, Segment

__all__: list[str] = [
    # Segments
    "Coordinate",
    "MoveTo",
    "LineTo",
    "QuadraticTo",
    "Segment",
    # Containers
    "Contour",
    "GlyphPath",
]
