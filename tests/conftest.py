"""Shared fixtures: a small TrueType font built with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000

# Expected FreeType traversal of the fixture glyphs, as
# (kind, points) tuples in font units.
O_OUTER = [
    ("move", (250, 0)),
    ("quad", (450, 0), (450, 200)),
    ("quad", (450, 400), (250, 400)),
    ("quad", (50, 400), (50, 200)),
    ("quad", (50, 0), (250, 0)),
]
O_INNER = [
    ("move", (250, 100)),
    ("quad", (150, 100), (150, 200)),
    ("quad", (150, 300), (250, 300)),
    ("quad", (350, 300), (350, 200)),
    ("quad", (350, 100), (250, 100)),
]
L_STEM = [
    ("move", (100, -50)),
    ("line", (200, -50)),
    ("line", (200, 700)),
    ("line", (100, 700)),
    ("line", (100, -50)),
]


def _draw(pen: TTGlyphPen, commands: list) -> None:
    """Replay (kind, points) commands into a pen, one contour per move."""
    for kind, *points in commands:
        if kind == "move":
            pen.moveTo(points[0])
        elif kind == "line":
            if points[0] != commands[0][1]:
                pen.lineTo(points[0])
        elif kind == "quad":
            pen.qCurveTo(*points)
    pen.closePath()


def _glyph(*contours: list):
    pen = TTGlyphPen(None)
    for contour in contours:
        _draw(pen, contour)
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Write a TrueType font with glyphs for ' ', 'l' and 'o'."""
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "l", "o"])
    fb.setupCharacterMap({0x20: "space", 0x6C: "l", 0x6F: "o"})
    fb.setupGlyf(
        {
            ".notdef": _glyph(L_STEM),
            "space": TTGlyphPen(None).glyph(),
            "l": _glyph(L_STEM),
            "o": _glyph(O_OUTER, O_INNER),
        }
    )
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (500, getattr(glyf[name], "xMin", 0)) for name in fb.font.getGlyphOrder()}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "GlyphPathTest", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def test_font(tmp_path_factory) -> Path:
    """Path to the generated TrueType test font."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "GlyphPathTest.ttf")


@pytest.fixture
def not_a_font(tmp_path) -> Path:
    """A readable file that no FreeType driver recognises."""
    path = tmp_path / "notes.ttf"
    path.write_text("This is not a font file.\n" * 20, encoding="utf-8")
    return path
