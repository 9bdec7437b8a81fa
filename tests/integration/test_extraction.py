"""End-to-end extraction tests against a generated TrueType font.

The fixture font is built with fontTools; FreeType then reads it back and
the handlers collect its outlines.
"""

import pytest

from conftest import L_STEM, O_INNER, O_OUTER
from glyphpath.config import GlyphPathSettings, LoadConfig
from glyphpath.core import GlyphExtractor, format_path
from glyphpath.domain import Coordinate, LineTo, MoveTo, QuadraticTo
from glyphpath.exceptions import (
    FontError,
    FontFormatError,
    FontLoadError,
    GlyphNotFoundError,
)


def to_segments(commands: list) -> list:
    """Turn fixture (kind, points) tuples into domain segments."""
    segments = []
    for kind, *points in commands:
        coords = [Coordinate(*p) for p in points]
        if kind == "move":
            segments.append(MoveTo(coords[0]))
        elif kind == "line":
            segments.append(LineTo(coords[0]))
        else:
            segments.append(QuadraticTo(coords[0], coords[1]))
    return segments


@pytest.fixture
def extractor() -> GlyphExtractor:
    """Extractor with default settings."""
    return GlyphExtractor()


class TestGlyphExtractor:
    """Tests for GlyphExtractor on real fonts."""

    def test_o_has_outer_ring_and_hole(self, extractor, test_font):
        """Test 'o' yields two quadratic contours in font order."""
        path = extractor.extract(test_font, "o")

        assert len(path) == 2
        assert all(c.is_well_formed() for c in path.contours)
        assert path.contours[0].segments == to_segments(O_OUTER)
        assert path.contours[1].segments == to_segments(O_INNER)

    def test_l_closes_with_line_to_start(self, extractor, test_font):
        """Test the traversal ends each contour back at its start point."""
        path = extractor.extract(test_font, "l")

        assert len(path) == 1
        contour = path.contours[0]
        assert contour.segments == to_segments(L_STEM)
        assert contour.segments[-1].to == contour.start

    def test_negative_design_units_kept(self, extractor, test_font):
        """Test coordinates below the baseline survive unscaled."""
        path = extractor.extract(test_font, "l")
        assert path.contours[0].start == Coordinate(100, -50)

    def test_space_has_no_contours(self, extractor, test_font):
        """Test a blank glyph is a valid, empty path."""
        path = extractor.extract(test_font, " ")

        assert path.is_empty()
        assert format_path(path) == "// Extracted Glyph Path:\n"

    def test_unmapped_character(self, extractor, test_font):
        """Test a character missing from the cmap raises GlyphNotFoundError."""
        with pytest.raises(GlyphNotFoundError) as exc_info:
            extractor.extract(test_font, "z")
        assert exc_info.value.character == "z"

    def test_missing_file(self, extractor, tmp_path):
        """Test a missing file is reported as unreadable."""
        with pytest.raises(FontLoadError):
            extractor.extract(tmp_path / "missing.ttf", "o")

    def test_not_a_font(self, extractor, not_a_font):
        """Test an unrecognised file is reported as unsupported format."""
        with pytest.raises(FontFormatError) as exc_info:
            extractor.extract(not_a_font, "o")
        assert exc_info.value.path == str(not_a_font)

    def test_format_and_load_errors_are_distinct(self, extractor, tmp_path, not_a_font):
        """Test the two font-open failures are different error types."""
        errors = []
        for path in (tmp_path / "missing.ttf", not_a_font):
            with pytest.raises(FontError) as exc_info:
                extractor.extract(path, "o")
            errors.append(type(exc_info.value))

        assert errors == [FontLoadError, FontFormatError]

    def test_face_index_out_of_range(self, test_font):
        """Test requesting a face the file does not have fails to open."""
        extractor = GlyphExtractor(GlyphPathSettings(load=LoadConfig(face_index=3)))
        with pytest.raises(FontError):
            extractor.extract(test_font, "o")

    def test_repeat_extraction_is_identical(self, extractor, test_font):
        """Test two runs over the same glyph produce the same text."""
        first = format_path(extractor.extract(test_font, "o"))
        second = format_path(extractor.extract(test_font, "o"))
        assert first == second
