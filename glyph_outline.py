"""
Glyph outlines from a TrueType/OpenType font, as SVG path data.

Coordinates come out in SVG space: y grows downward, origin at the
requested (x, baseline) point, one em scaled to `font_size`.
"""

import logging
from typing import NamedTuple

from fontTools.ttLib import TTFont
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen

from ids_errors import UnsupportedCharacterError

logger = logging.getLogger(__name__)

PATH_DIGITS = 2


class GlyphOutline(NamedTuple):
    path: str
    ascender: float
    units_per_em: int


def format_number(value, digits=PATH_DIGITS):
    text = f"{value:.{digits}f}".rstrip('0').rstrip('.')
    return '0' if text in ('', '-0') else text


class FontOutlineProvider:

    def __init__(self, font):
        self.font = font
        self.glyph_set = font.getGlyphSet()
        self.cmap = font.getBestCmap() or {}
        self.units_per_em = font['head'].unitsPerEm
        self.ascender = font['hhea'].ascent

    @classmethod
    def from_file(cls, path):
        logger.info("Loading font %s", path)
        return cls(TTFont(path))

    def has_character(self, character):
        return ord(character) in self.cmap

    def get_path(self, character, x, y, font_size, digits=PATH_DIGITS):
        """Outline of `character` with its baseline origin at (x, y)."""
        glyph_name = self.cmap.get(ord(character))
        if glyph_name is None:
            raise UnsupportedCharacterError(character)

        scale = font_size / self.units_per_em
        pen = SVGPathPen(self.glyph_set, ntos=lambda v: format_number(v, digits))
        # flip y, font units grow upward
        self.glyph_set[glyph_name].draw(TransformPen(pen, (scale, 0, 0, -scale, x, y)))
        return pen.getCommands()

    def get_outline(self, character, font_size):
        return GlyphOutline(
            self.get_path(character, 0, 0, font_size),
            self.ascender,
            self.units_per_em,
        )
