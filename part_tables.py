from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, NamedTuple

from ids_config import DEFAULT_FONT_SIZE


class PartPosition(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'


# Radicals that only get a narrow slice of the box when sitting next to a
# full sized part, e.g. the 王 in 理 or the 宀 in 字.
SMALL_PARTS = frozenset(
    '王丿亻彳氵冫讠言扌忄犭纟糹钅釒饣飠礻衤阝卩刂'
    '口日月目田石火木禾米女子土山巾弓歹车马牛贝足'
    '宀冖艹亠罒灬心皿'
)

# Small parts that still need 2/3 of the box to stay readable.
UNSHRINK_PARTS = frozenset('日月目石火木禾米女车马足')

# Variant outlines are authored on a box of this size and scaled at use.
VARIANT_REFERENCE_SIZE = DEFAULT_FONT_SIZE

VARIANT_PATHS = {
    PartPosition.LEFT: {
        # 光 squeezed to the left half, as in 辉
        '光': 'M 22 6 L 26 6 L 26 30 L 22 30 Z '
              'M 10 12 L 13 11 L 18 24 L 15 25 Z '
              'M 36 11 L 39 12 L 32 25 L 29 24 Z '
              'M 6 30 L 42 30 L 42 34 L 6 34 Z '
              'M 16 34 L 20 34 C 19 50 14 60 6 67 L 4 65 C 11 58 15 48 16 34 Z '
              'M 28 34 L 32 34 L 32 60 C 32 63 33 64 36 64 L 42 64 L 42 68 '
              'L 34 68 C 30 68 28 66 28 62 Z',
        # 火 as the narrow 火 radical, as in 灯
        '火': 'M 18 8 L 22 8 L 22 36 C 22 50 16 60 6 68 L 4 66 C 12 58 18 48 18 36 Z '
              'M 8 22 L 11 21 L 15 38 L 12 39 Z '
              'M 31 18 L 34 20 L 27 34 L 24 32 Z '
              'M 22 42 L 25 40 C 28 48 32 56 38 64 L 35 66 C 29 58 25 50 22 42 Z',
    },
    PartPosition.DOWN: {
        # 心 flattened under another part, as in 思
        '心': 'M 12 54 L 16 52 C 19 58 21 62 24 64 L 21 67 C 17 63 14 59 12 54 Z '
              'M 26 46 L 30 46 L 30 62 C 30 65 32 66 36 66 L 50 66 C 54 66 55 64 56 58 '
              'L 60 60 C 59 67 56 70 50 70 L 35 70 C 29 70 26 68 26 62 Z '
              'M 34 44 L 37 42 C 40 45 42 48 44 52 L 41 54 C 39 50 37 47 34 44 Z '
              'M 54 46 L 57 44 C 61 48 64 52 67 57 L 64 59 C 61 54 58 50 54 46 Z',
    },
}


class PartTables(NamedTuple):
    small_parts: FrozenSet[str]
    unshrink_parts: FrozenSet[str]
    variant_paths: Mapping[PartPosition, Mapping[str, str]]

    def is_small(self, character):
        return character in self.small_parts

    def is_unshrink(self, character):
        return character in self.unshrink_parts

    def variant_path(self, character, position):
        """Hand drawn outline for `character` at `position`, or None."""
        if position is None:
            return None
        return self.variant_paths.get(position, {}).get(character)


def freeze_variants(variants):
    return MappingProxyType({
        pos: MappingProxyType(dict(paths)) for pos, paths in variants.items()
    })


DEFAULT_TABLES = PartTables(
    small_parts=SMALL_PARTS,
    unshrink_parts=UNSHRINK_PARTS,
    variant_paths=freeze_variants(VARIANT_PATHS),
)
