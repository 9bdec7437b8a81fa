"""Core processing for glyphpath.

This module contains the outline pipeline:

- Outline collection (FreeType traversal handlers filling a GlyphPath)
- Path formatting (fixed-width text rendering)
- Extraction orchestration (FreeType resource scoping and error mapping)

Key functions:
- on_move_to, on_line_to, on_quadratic_to, on_cubic_to: Traversal handlers
- collect_outline: Decompose a FreeType outline into a GlyphPath
- format_path: Render a GlyphPath as text

Key classes:
- PathFormatter: Configurable text renderer
- GlyphExtractor: Runs the full extraction for one character
"""

from glyphpath.core.collector import (
    HANDLERS,
    collect_outline,
    on_cubic_to,
    on_line_to,
    on_move_to,
    on_quadratic_to,
)
from glyphpath.core.extractor import GlyphExtractor
from glyphpath.core.formatter import PATH_HEADER, PathFormatter, format_path

__all__ = [
    "HANDLERS",
    "PATH_HEADER",
    # Extraction
    "GlyphExtractor",
    # Formatting
    "PathFormatter",
    "collect_outline",
    "format_path",
    # Traversal handlers
    "on_cubic_to",
    "on_line_to",
    "on_move_to",
    "on_quadratic_to",
]
