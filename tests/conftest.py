"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from ids_errors import UnsupportedCharacterError


class SquareOutlineProvider:
    """Draws every character as a square filling the whole box."""

    units_per_em = 1000
    ascender = 1000

    def __init__(self, missing=""):
        self.missing = set(missing)
        self.calls = []

    def get_path(self, character, x, y, font_size):
        if character in self.missing:
            raise UnsupportedCharacterError(character)
        self.calls.append(character)
        top = y - font_size
        return f"M {x} {top} L {x + font_size} {top} L {x + font_size} {y} L {x} {y} Z"


@pytest.fixture
def square_provider() -> SquareOutlineProvider:
    return SquareOutlineProvider()


# tiny font: 口 is a box from (100, 0) to (900, 800) on a 1000 unit em
TEST_UPM = 1000
TEST_ASCENT = 900
TEST_DESCENT = -100


def _box_glyph(x0, y0, x1, y1):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()
    return pen.glyph()


@pytest.fixture(scope="session")
def box_font_path(tmp_path_factory):
    fb = FontBuilder(TEST_UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "kou", "gun"])
    fb.setupCharacterMap({0x20: "space", ord("口"): "kou", ord("丨"): "gun"})
    fb.setupGlyf({
        ".notdef": _box_glyph(50, 0, 450, 800),
        "space": TTGlyphPen(None).glyph(),
        "kou": _box_glyph(100, 0, 900, 800),
        "gun": _box_glyph(450, -50, 550, 850),
    })
    fb.setupHorizontalMetrics({
        ".notdef": (500, 50),
        "space": (500, 0),
        "kou": (1000, 100),
        "gun": (1000, 450),
    })
    fb.setupHorizontalHeader(ascent=TEST_ASCENT, descent=TEST_DESCENT)
    fb.setupOS2(
        sTypoAscender=TEST_ASCENT,
        sTypoDescender=TEST_DESCENT,
        usWinAscent=TEST_ASCENT,
        usWinDescent=-TEST_DESCENT,
    )
    fb.setupNameTable({"familyName": "IdsTest", "styleName": "Regular"})
    fb.setupPost()

    path = tmp_path_factory.mktemp("fonts") / "ids-test.ttf"
    fb.save(str(path))
    return path
