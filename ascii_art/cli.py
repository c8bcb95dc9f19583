import argparse
import logging
import sys

from ascii_art.config import DEFAULT_RAMP, LOG_FORMAT, LOG_LEVEL
from ascii_art.render.ascii import convert_to_ascii
from ascii_art.render.charsets import get_ramp, ramp_names
from ascii_art.render.dimensions import DimensionState, Driver
from ascii_art.render.errors import ImageDecodeError
from ascii_art.render.export import save_text
from ascii_art.render.loading import load_source_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ascii-art-cli", description="Convert an image to ASCII art.")
    p.add_argument("input", help="image file")
    p.add_argument("-W", "--width", help="output width in characters (10-200, default 200)")
    p.add_argument("-H", "--height", help="output height in lines (10-200); derived from the image when omitted")
    p.add_argument("--ramp", default=DEFAULT_RAMP, choices=ramp_names(), help=f"glyph ramp (default {DEFAULT_RAMP})")
    p.add_argument("--no-lock", action="store_true", help="do not keep the image aspect ratio")
    p.add_argument("-o", "--output", help="write to this .txt file instead of stdout")
    return p


def main(argv=None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO), format=LOG_FORMAT)
    p = build_parser()
    args = p.parse_args(argv)

    try:
        source = load_source_image(args.input)
    except ImageDecodeError as e:
        p.error(str(e))

    # Both sides given explicitly: honour them as-is.
    locked = not args.no_lock and not (args.width and args.height)
    dims = DimensionState(locked=locked).image_loaded(source.width, source.height)
    if args.width:
        dims = dims.edit(args.width, Driver.WIDTH)
    if args.height:
        dims = dims.edit(args.height, Driver.HEIGHT)

    art = convert_to_ascii(source, dims.width, dims.height, get_ramp(args.ramp))

    if args.output:
        try:
            path = save_text(art, args.output)
        except OSError as e:
            print("Error: cannot write output:", e, file=sys.stderr)
            return 1
        logger.info("wrote %dx%d art to %s", dims.width, dims.height, path)
    else:
        sys.stdout.write(art)
    return 0


if __name__ == "__main__":
    sys.exit(main())
