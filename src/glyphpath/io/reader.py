"""FreeType font access for glyphpath.

This module wraps the freetype-py binding behind a small reader that maps
FreeType failures onto the glyphpath exception hierarchy. Resources are
scoped: the library handle is obtained before the face is opened, and the
face is released before control leaves the reader's context.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import freetype

from glyphpath.exceptions import (
    FontFormatError,
    FontLoadError,
    GlyphFormatError,
    GlyphLoadError,
    GlyphNotFoundError,
    LibraryInitError,
)

# FT_Err_Unknown_File_Format
UNKNOWN_FILE_FORMAT = 0x02

# Unscaled, unhinted: coordinates stay in font design units.
LOAD_FLAGS = freetype.FT_LOAD_NO_SCALE | freetype.FT_LOAD_NO_HINTING


@contextmanager
def freetype_library() -> Iterator[Any]:
    """Initialize the process-wide FreeType library handle.

    freetype-py keeps a single library handle per process and frees it at
    interpreter exit, so leaving this context releases nothing itself.

    Yields:
        The FT_Library handle

    Raises:
        LibraryInitError: If FreeType could not be initialized
    """
    try:
        handle = freetype.get_handle()
    except freetype.FT_Exception as e:
        raise LibraryInitError(str(e)) from e
    yield handle


class FontFace:
    """Opens a font face with FreeType and loads glyph outlines.

    Example:
        with freetype_library(), FontFace(Path("font.ttf")) as face:
            outline = face.load_outline("o")
    """

    def __init__(self, font_path: Path, face_index: int = 0) -> None:
        """Initialize the face reader.

        Args:
            font_path: Path to the font file
            face_index: Face to open inside the file
        """
        self._font_path = font_path
        self._face_index = face_index
        self._face: freetype.Face | None = None

    def load(self) -> None:
        """Open the font face.

        Raises:
            FontLoadError: If the file is missing, unreadable or corrupt
            FontFormatError: If FreeType does not recognise the file format
        """
        if not self._font_path.is_file():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._face = freetype.Face(str(self._font_path), self._face_index)
        except freetype.FT_Exception as e:
            if e.errcode == UNKNOWN_FILE_FORMAT:
                raise FontFormatError(
                    str(self._font_path),
                    "the file could be opened but its format is unsupported",
                ) from e
            raise FontLoadError(str(self._font_path), str(e)) from e

    @property
    def face(self) -> freetype.Face:
        """Return the open FreeType face.

        Raises:
            RuntimeError: If the face has not been loaded yet
        """
        if self._face is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._face

    @property
    def format(self) -> str:
        """Return the FreeType font format name (e.g. 'TrueType', 'CFF')."""
        name = self.face.get_format()
        if isinstance(name, bytes):
            return name.decode("ascii", errors="replace")
        return str(name)

    @property
    def family_name(self) -> str:
        """Return the font family name, or an empty string."""
        name = self.face.family_name
        if isinstance(name, bytes):
            return name.decode("utf-8", errors="replace")
        return name or ""

    @property
    def units_per_em(self) -> int:
        """Return the face's units per em."""
        return self.face.units_per_EM

    @property
    def glyph_count(self) -> int:
        """Return the number of glyphs in the face."""
        return self.face.num_glyphs

    def glyph_index(self, character: str) -> int:
        """Map a character to its glyph index.

        Raises:
            GlyphNotFoundError: If the character map has no entry for it
        """
        index = self.face.get_char_index(ord(character))
        if index == 0:
            raise GlyphNotFoundError(character)
        return index

    def load_outline(self, character: str) -> Any:
        """Load the glyph for ``character`` in font units and return its outline.

        Raises:
            GlyphNotFoundError: If the character has no glyph
            GlyphLoadError: If FreeType fails to load the glyph
            GlyphFormatError: If the glyph is not a scalable outline
        """
        index = self.glyph_index(character)

        try:
            self.face.load_glyph(index, LOAD_FLAGS)
        except freetype.FT_Exception as e:
            raise GlyphLoadError(character, str(e)) from e

        slot = self.face.glyph
        if slot.format != freetype.FT_GLYPH_FORMAT_OUTLINE:
            raise GlyphFormatError(character, f"glyph format is {slot.format:#x}")

        return slot.outline

    def close(self) -> None:
        """Release the FreeType face."""
        # freetype-py frees the FT_Face when the last reference goes away.
        self._face = None

    def __enter__(self) -> "FontFace":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
