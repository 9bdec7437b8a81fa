"""Font I/O layer for glyphpath.

This module handles opening fonts and loading glyph outlines using
freetype-py. It is the only place FreeType types are touched; everything
above it works with the domain models.

Key responsibilities:
- Initialize the FreeType library
- Open font faces and map characters to glyphs
- Load glyphs unscaled and unhinted
- Reject glyphs that are not scalable outlines

Key classes:
- FontFace: Open a face and extract glyph outlines
"""

from glyphpath.io.reader import FontFace, freetype_library

__all__ = [
    "FontFace",
    "freetype_library",
]
