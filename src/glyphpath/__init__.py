"""glyphpath - Dump the vector outline of a font glyph as path commands.

glyphpath loads a single character glyph from a TrueType font in unscaled
font design units and prints its outline as a sequence of MoveTo, LineTo
and QuadTo commands grouped by contour.

Example:
    $ glyphpath DejaVuSans.ttf o

This prints the two contours of the letter 'o' (outer ring and inner hole).
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
