import argparse
import logging
import sys

from fontTools.ttLib import TTLibError

from ids_config import RenderOptions, DEFAULT_FONT_SIZE, DEFAULT_COLOR, DEFAULT_MAX_DEPTH
from ids_script import IdsToSvg

logger = logging.getLogger("ids_svg")


def build_parser():
    ap = argparse.ArgumentParser(description="Render an Ideographic Description Sequence to SVG.")
    ap.add_argument("font", help="TrueType/OpenType font with the component glyphs")
    ap.add_argument("ids", help="IDS to render, e.g. ⿰王⿱丿⿻乚龷")
    ap.add_argument("-o", "--output", help="write the SVG here instead of stdout")
    ap.add_argument("--size", type=float, default=DEFAULT_FONT_SIZE, help="box size in px")
    ap.add_argument("--color", default=DEFAULT_COLOR)
    ap.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, help="max operator nesting")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = RenderOptions(font_size=args.size, color=args.color, max_depth=args.max_depth)
        ids_to_svg = IdsToSvg.from_font_sync(args.font, options)
        svg = ids_to_svg.svg_from_ids(args.ids)
    except (ValueError, OSError, TTLibError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as file:
            file.write(svg)
        logger.info("Wrote %s", args.output)
    else:
        print(svg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
