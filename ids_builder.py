from svgpathtools import parse_path
from svgpathtools import Path, Line, QuadraticBezier, CubicBezier, Arc
from enum import Enum
import logging
from typing import List, NamedTuple, Optional

from ids_config import DEFAULT_MAX_DEPTH
from ids_errors import MalformedSequenceError, StackDepthExceededError
from part_tables import DEFAULT_TABLES, PartPosition, VARIANT_REFERENCE_SIZE

logger = logging.getLogger(__name__)

ROUND_DIGITS = 2

# inner part of a surround is drawn at this fraction of the box
SURROUND_SCALE = 0.65


class CompositionOp(Enum):
    LEFT_RIGHT = '⿰'
    ABOVE_BELOW = '⿱'
    LEFT_MID_RIGHT = '⿲'
    ABOVE_MID_BELOW = '⿳'
    FULL_SURROUND = '⿴'
    SURROUND_FROM_ABOVE = '⿵'
    SURROUND_FROM_BELOW = '⿶'
    SURROUND_FROM_LEFT = '⿷'
    SURROUND_FROM_UPPER_LEFT = '⿸'
    SURROUND_FROM_UPPER_RIGHT = '⿹'
    SURROUND_FROM_LOWER_LEFT = '⿺'
    OVERLAID = '⿻'
    SURROUND_FROM_RIGHT = '⿼'
    SURROUND_FROM_LOWER_RIGHT = '⿽'

    @classmethod
    def from_char(cls, char):
        """Operator for `char`, or None if `char` is a leaf component."""
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def arity(self):
        return OPERAND_ARITY[self]

    def layout(self, font_size, first, following, tables=DEFAULT_TABLES):
        """
        Dimension profiles for this operator's children.
        - first: the token right after the operator
        - following: the token right after the whole first operand ('' if none)
        """
        return _LAYOUTS[self](self, font_size, first, following, tables)


OPERAND_ARITY = {op: 2 for op in CompositionOp}
OPERAND_ARITY[CompositionOp.LEFT_MID_RIGHT] = 3
OPERAND_ARITY[CompositionOp.ABOVE_MID_BELOW] = 3


def operand_arity(char):
    """Number of operands `char` takes, 0 for a leaf."""
    op = CompositionOp.from_char(char)
    return 0 if op is None else op.arity


class DimensionProfile(NamedTuple):
    x: float
    y: float
    sx: float
    sy: float
    pos: Optional[PartPosition] = None


class PathLayer(NamedTuple):
    path_list: List[str]
    dims: DimensionProfile


class RenderedResult(NamedTuple):
    path_list: List[str]
    remaining_characters: List[str]


def skip_one_character(characters):
    """
    Drops one complete sub-expression from the front of `characters` and
    returns the rest. Nothing is rendered. Running off the end returns [].
    """
    pending = 1
    i = 0
    while pending and i < len(characters):
        pending += operand_arity(characters[i]) - 1
        i += 1
    return characters[i:]


# --- Layout rules ---

def _split_spans(first, following, tables, narrow):
    """(start, extent) fractions along the split axis for both halves."""
    first_small = tables.is_small(first)
    following_small = tables.is_small(following)

    if first_small and not following_small:
        # e.g. 王 in 理
        if tables.is_unshrink(first):
            return [(0, 2/3), (1/3, 2/3)]
        return [(0, narrow), (1/3, 2/3)]
    elif following_small and not first_small:
        if tables.is_unshrink(following):
            return [(0, 2/3), (1/3, 2/3)]
        return [(0, 2/3), (2/3, 1/3)]
    else:
        return [(0, 1/2), (1/2, 1/2)]


def _left_right(op, font_size, first, following, tables):
    spans = _split_spans(first, following, tables, narrow=1.2/3)
    logger.debug("%s %s|%s -> widths %s", op.value, first, following, [e for _, e in spans])
    return [
        DimensionProfile(font_size * spans[0][0], 0, spans[0][1], 1, PartPosition.LEFT),
        DimensionProfile(font_size * spans[1][0], 0, spans[1][1], 1, PartPosition.RIGHT),
    ]


def _above_below(op, font_size, first, following, tables):
    spans = _split_spans(first, following, tables, narrow=1/3)
    logger.debug("%s %s|%s -> heights %s", op.value, first, following, [e for _, e in spans])
    return [
        DimensionProfile(0, font_size * spans[0][0], 1, spans[0][1], PartPosition.UP),
        DimensionProfile(0, font_size * spans[1][0], 1, spans[1][1], PartPosition.DOWN),
    ]


def _thirds_across(op, font_size, first, following, tables):
    return [DimensionProfile(font_size * i / 3, 0, 1/3, 1) for i in range(3)]


def _thirds_down(op, font_size, first, following, tables):
    return [DimensionProfile(0, font_size * i / 3, 1, 1/3) for i in range(3)]


# where the shrunk inner part starts, as a fraction of the box
SURROUND_OFFSETS = {
    CompositionOp.SURROUND_FROM_UPPER_LEFT: (1/3, 1/3),
    CompositionOp.SURROUND_FROM_LOWER_LEFT: (1/3, 0),
    CompositionOp.SURROUND_FROM_UPPER_RIGHT: (0, 1/3),
    CompositionOp.SURROUND_FROM_LOWER_RIGHT: (0, 0),
    CompositionOp.SURROUND_FROM_ABOVE: (0.17, 0.19),
    CompositionOp.SURROUND_FROM_LEFT: (0.19, 0.17),
    CompositionOp.SURROUND_FROM_BELOW: (0.17, 0.1),
    CompositionOp.SURROUND_FROM_RIGHT: (0.1, 0.17),
    CompositionOp.FULL_SURROUND: (0.175, 0.16),
}


def _surround(op, font_size, first, following, tables):
    fx, fy = SURROUND_OFFSETS[op]
    return [
        DimensionProfile(0, 0, 1, 1),
        DimensionProfile(fx * font_size, fy * font_size, SURROUND_SCALE, SURROUND_SCALE),
    ]


def _overlaid(op, font_size, first, following, tables):
    return [DimensionProfile(0, 0, 1, 1), DimensionProfile(0, 0, 1, 1)]


_LAYOUTS = {op: _surround for op in SURROUND_OFFSETS}
_LAYOUTS.update({
    CompositionOp.LEFT_RIGHT: _left_right,
    CompositionOp.ABOVE_BELOW: _above_below,
    CompositionOp.LEFT_MID_RIGHT: _thirds_across,
    CompositionOp.ABOVE_MID_BELOW: _thirds_down,
    CompositionOp.OVERLAID: _overlaid,
})


# --- Path transforms ---

def _round_point(z, digits):
    return complex(round(z.real, digits), round(z.imag, digits))


def round_path(p, digits=ROUND_DIGITS):
    """Copy of `p` with every coordinate rounded to `digits` places."""
    segments = []
    for seg in p:
        if isinstance(seg, Line):
            segments.append(Line(_round_point(seg.start, digits), _round_point(seg.end, digits)))
        elif isinstance(seg, QuadraticBezier):
            segments.append(QuadraticBezier(
                _round_point(seg.start, digits),
                _round_point(seg.control, digits),
                _round_point(seg.end, digits),
            ))
        elif isinstance(seg, CubicBezier):
            segments.append(CubicBezier(
                _round_point(seg.start, digits),
                _round_point(seg.control1, digits),
                _round_point(seg.control2, digits),
                _round_point(seg.end, digits),
            ))
        elif isinstance(seg, Arc):
            segments.append(Arc(
                _round_point(seg.start, digits),
                _round_point(seg.radius, digits),
                seg.rotation,
                seg.large_arc,
                seg.sweep,
                _round_point(seg.end, digits),
            ))
        else:
            raise ValueError(f"Unknown path segment: {seg!r}")
    return Path(*segments)


def transform_path(path_str, scale_x=1, scale_y=1, x=0, y=0, digits=ROUND_DIGITS):
    """Scale about the origin, then translate, then round."""
    if not path_str.strip():
        return ''
    p = parse_path(path_str)
    p = p.scaled(scale_x, scale_y)
    p = p.translated(complex(x, y))
    return round_path(p, digits).d()


def path_list_from_combining_path_layers(path_layers):
    """
    Flattens the layers into one list, layer order kept, so later layers
    paint over earlier ones.
    """
    combined = []
    for layer in path_layers:
        d = layer.dims
        for path in layer.path_list:
            combined.append(transform_path(path, d.sx, d.sy, d.x, d.y))
    return combined


# --- Decomposition ---

class IdsComposer:
    """
    Walks an IDS token list and renders it to a list of SVG path strings.

    provider must have `ascender`, `units_per_em` and
    `get_path(character, x, y, font_size)`.
    """

    def __init__(self, provider, tables=DEFAULT_TABLES, max_depth=DEFAULT_MAX_DEPTH):
        self.provider = provider
        self.tables = tables
        self.max_depth = max_depth

    def path_list_from_ids(self, ids, font_size):
        characters = list(ids)
        result = self.decompose(characters, font_size)
        if result.remaining_characters:
            raise MalformedSequenceError(
                f"Unused characters after a complete IDS: {''.join(result.remaining_characters)!r}"
            )
        return result.path_list

    def layout(self, characters, font_size):
        """Dimension profiles for the operator at the front of `characters`."""
        op = CompositionOp.from_char(characters[0]) if characters else None
        if op is None:
            raise MalformedSequenceError("IDS does not start with a composition operator")
        first = characters[1] if len(characters) > 1 else ''
        rest = skip_one_character(characters[1:])
        following = rest[0] if rest else ''
        return op.layout(font_size, first, following, self.tables)

    def decompose(self, characters, font_size, position=None, depth=0):
        if depth > self.max_depth:
            raise StackDepthExceededError(self.max_depth)
        if not characters:
            raise MalformedSequenceError("IDS ended where an operand was expected")

        char = characters[0]
        op = CompositionOp.from_char(char)
        if op is None:
            return RenderedResult(
                self.path_list_from_single_character(char, font_size, position),
                characters[1:],
            )

        dims = self.layout(characters, font_size)
        logger.debug("%s at depth %d: %s", op.name, depth, dims)

        path_layers = []
        remainders = characters[1:]
        for child_dims in dims:
            result = self.decompose(remainders, font_size, child_dims.pos, depth + 1)
            path_layers.append(PathLayer(result.path_list, child_dims))
            remainders = result.remaining_characters

        return RenderedResult(path_list_from_combining_path_layers(path_layers), remainders)

    def path_list_from_single_character(self, character, font_size, position=None):
        variant = self.tables.variant_path(character, position)
        if variant is not None:
            logger.debug("using %s variant of %s", position.name, character)
            ratio = font_size / VARIANT_REFERENCE_SIZE
            return [transform_path(variant, ratio, ratio)]

        # put the top of the em box at the top of the target box
        font_scale = font_size / self.provider.units_per_em
        baseline = font_size - (self.provider.ascender * font_scale - font_size)
        return [self.provider.get_path(character, 0, baseline, font_size)]
