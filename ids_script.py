import asyncio
import logging

import svgwrite

from glyph_outline import FontOutlineProvider
from ids_builder import IdsComposer
from ids_config import RenderOptions
from part_tables import DEFAULT_TABLES

logger = logging.getLogger(__name__)

# Paths are always filled black, RenderOptions.color is not applied yet.
FILL_COLOR = 'black'


class IdsToSvg:

    def __init__(self, provider, options=None, tables=DEFAULT_TABLES):
        self.options = options or RenderOptions()
        self.composer = IdsComposer(provider, tables, self.options.max_depth)
        if self.options.color != FILL_COLOR:
            logger.warning(
                "color %r is accepted but not applied, glyphs are drawn %s",
                self.options.color, FILL_COLOR,
            )

    @property
    def font_size(self):
        return self.options.font_size

    @property
    def color(self):
        return self.options.color

    @classmethod
    def from_font_sync(cls, path, options=None):
        return cls(FontOutlineProvider.from_file(path), options)

    @classmethod
    async def from_font_async(cls, path, options=None):
        # font parsing is blocking, keep it off the event loop
        loop = asyncio.get_running_loop()
        provider = await loop.run_in_executor(None, FontOutlineProvider.from_file, path)
        return cls(provider, options)

    def path_list_from_ids(self, ids):
        return self.composer.path_list_from_ids(ids, self.font_size)

    def drawing_from_ids(self, ids):
        path_list = self.path_list_from_ids(ids)
        dwg = svgwrite.Drawing(size=(self.font_size, self.font_size), debug=False)
        for path in path_list:
            dwg.add(dwg.path(d=path, fill=FILL_COLOR))
        return dwg

    def svg_from_ids(self, ids):
        return self.drawing_from_ids(ids).tostring()
