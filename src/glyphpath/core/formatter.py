"""Text rendering of glyph paths.

Output layout (default widths)::

    // Extracted Glyph Path:
       Contour # 1
          MoveTo (  100,   -20)
          LineTo (  300,   -20)
          QuadTo (  400,     0) (  400,   100)

Rendering is a pure function of the GlyphPath and the FormatConfig.
"""

from glyphpath.config import FormatConfig
from glyphpath.domain import Coordinate, GlyphPath, LineTo, MoveTo, QuadraticTo, Segment

PATH_HEADER = "// Extracted Glyph Path:"


class PathFormatter:
    """Renders a GlyphPath as fixed-width text, one line per segment."""

    def __init__(self, config: FormatConfig | None = None) -> None:
        self.config = config or FormatConfig()

    def format(self, path: GlyphPath) -> str:
        """Render the whole path.

        Args:
            path: Collected glyph path (may be empty)

        Returns:
            Newline-terminated text
        """
        return "".join(f"{line}\n" for line in self.lines(path))

    def lines(self, path: GlyphPath) -> list[str]:
        """Render the path as a list of lines without terminators."""
        lines = [PATH_HEADER]
        contour_pad = " " * self.config.contour_indent
        for ordinal, contour in enumerate(path.contours, start=1):
            lines.append(f"{contour_pad}Contour #{ordinal:>{self.config.ordinal_width}}")
            lines.extend(self.format_segment(segment) for segment in contour.segments)
        return lines

    def format_segment(self, segment: Segment) -> str:
        """Render a single segment line, including its indent."""
        pad = " " * self.config.segment_indent
        if isinstance(segment, MoveTo):
            return f"{pad}MoveTo {self.format_coordinate(segment.to)}"
        if isinstance(segment, LineTo):
            return f"{pad}LineTo {self.format_coordinate(segment.to)}"
        if isinstance(segment, QuadraticTo):
            return (
                f"{pad}QuadTo {self.format_coordinate(segment.control)} "
                f"{self.format_coordinate(segment.to)}"
            )
        raise TypeError(f"Unknown segment type: {type(segment).__name__}")

    def format_coordinate(self, point: Coordinate) -> str:
        """Render ``(x, y)`` with each value right-justified."""
        width = self.config.coordinate_width
        return f"({point.x:>{width}}, {point.y:>{width}})"


def format_path(path: GlyphPath, config: FormatConfig | None = None) -> str:
    """Render a glyph path with the given (or default) layout."""
    return PathFormatter(config).format(path)
