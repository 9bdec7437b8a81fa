"""Glyph extraction pipeline.

Runs the scoped FreeType sequence for one character: library, face,
glyph lookup, glyph load, outline check and decomposition. Every failure
is raised as a GlyphPathError subclass after the face and library scopes
have been left in reverse order.
"""

from pathlib import Path

from glyphpath.config import GlyphPathSettings, get_default_settings
from glyphpath.core.collector import collect_outline
from glyphpath.domain import GlyphPath
from glyphpath.io import FontFace, freetype_library
from glyphpath.utils import configure_logging

# FreeType formats whose outlines are cubic; their curves are not collected.
CUBIC_FORMATS = frozenset({"CFF", "Type 1", "CID Type 1"})


class GlyphExtractor:
    """Extracts the outline of a single character glyph from a font file."""

    def __init__(self, settings: GlyphPathSettings | None = None) -> None:
        """Initialize the extractor.

        Args:
            settings: Application settings (defaults if None)
        """
        self.settings = settings or get_default_settings()
        self.logger = configure_logging(
            log_file=self.settings.logging.log_file,
            console_level=self.settings.logging.log_level.value,
            file_level=self.settings.logging.file_log_level.value,
        )

    def extract(self, font_path: Path, character: str) -> GlyphPath:
        """Extract the glyph path for ``character``.

        Args:
            font_path: Path to the font file
            character: A single character

        Returns:
            The complete GlyphPath of the glyph

        Raises:
            LibraryInitError: If FreeType cannot be initialized
            FontError: If the font cannot be opened
            GlyphError: If the glyph is missing, fails to load or is not an outline
            OutlineDecomposeError: If the outline traversal fails
        """
        face_index = self.settings.load.face_index
        self.logger.debug(
            "Extracting glyph",
            font=str(font_path),
            character=character,
            codepoint=f"U+{ord(character):04X}",
            face_index=face_index,
        )

        with freetype_library(), FontFace(font_path, face_index) as face:
            self.logger.debug(
                "Font opened",
                font=str(font_path),
                family=face.family_name,
                format=face.format,
                glyphs=face.glyph_count,
                upm=face.units_per_em,
            )
            if face.format in CUBIC_FORMATS:
                self.logger.warning(
                    "Font has cubic outlines; curve segments will be skipped",
                    font=str(font_path),
                    format=face.format,
                )

            outline = face.load_outline(character)
            path = collect_outline(outline, character)

        self.logger.info(
            "Glyph extracted",
            character=character,
            contours=len(path),
            segments=path.segment_count,
        )
        return path
