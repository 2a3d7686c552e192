"""Command line entry point.

Examples::

    visiprint "hello world"                 # sha256 of the text, text art
    visiprint --hex 16:27:ac:a5:76:28:2d    # fingerprint bytes as printed
    visiprint --file key.pub --frame --title RSA
    visiprint "hello" --png out.png --scale 8 --palette grey
"""

import argparse
import logging
import sys
from typing import List, Optional

from visiprint.config import DEFAULT_HEIGHT, DEFAULT_NUM_LEVELS, DEFAULT_WIDTH
from visiprint.errors import InvalidDimensions, PaletteTooSmall
from visiprint.logging_config import setup_logging
from visiprint.palettes import DEFAULT_CHARACTERS, PALETTE_REGISTRY
from visiprint.renderer.image import ImageRenderer
from visiprint.renderer.text import render_framed_text, render_text
from visiprint.types import Color, ColorTable
from visiprint.utils.color import is_color
from visiprint.utils.digest import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    digest,
    parse_hex_fingerprint,
)
from visiprint.walk import generate

logger = logging.getLogger(__name__)


def parse_color(text: str) -> Color:
    """Parse ``R,G,B`` into a colour triple (argparse ``type``)."""
    try:
        parts = tuple(int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid colour {text!r}, expected R,G,B")
    if not is_color(parts):
        raise argparse.ArgumentTypeError(
            f"invalid colour {text!r}, expected three values in 0..255"
        )
    return (parts[0], parts[1], parts[2])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="visiprint",
        description="Render a randomart fingerprint of a digest.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="Text to hash and fingerprint")
    source.add_argument("--hex", help="Fingerprint bytes in hex, used as is")
    source.add_argument("--file", help="File whose contents are hashed")

    parser.add_argument(
        "--algorithm",
        default=DEFAULT_ALGORITHM,
        choices=ALGORITHMS,
        help="Digest for text/file input (default: %(default)s)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Use text/file bytes directly instead of hashing them",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--levels", type=int, default=DEFAULT_NUM_LEVELS)
    parser.add_argument(
        "--chars",
        default=DEFAULT_CHARACTERS,
        help="Character palette, one character per level (default: %(default)r)",
    )
    parser.add_argument("--frame", action="store_true", help="Draw a border")
    parser.add_argument("--title", help="Title shown in the border")
    parser.add_argument("--png", help="Also write the image to this path")
    parser.add_argument("--scale", type=float, default=8.0)
    parser.add_argument(
        "--palette",
        default="default",
        choices=sorted(PALETTE_REGISTRY),
        help="Named colour table for --png",
    )
    parser.add_argument(
        "--color",
        dest="colors",
        action="append",
        type=parse_color,
        help="Custom colour table entry R,G,B (repeat, level 0 first)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def read_input(args: argparse.Namespace) -> bytes:
    if args.hex is not None:
        return parse_hex_fingerprint(args.hex)
    if args.file is not None:
        with open(args.file, "rb") as f:
            data = f.read()
    else:
        data = args.text.encode("utf-8")
    if args.raw:
        return data
    return digest(data, args.algorithm)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        data = read_input(args)
        logger.info(f"Fingerprinting {len(data)} bytes: {data.hex()}")
        grid = generate(
            data, num_levels=args.levels, width=args.width, height=args.height
        )
        if args.frame or args.title:
            art = render_framed_text(grid, args.chars, title=args.title)
        else:
            art = render_text(grid, args.chars)
        if args.png:
            colors: ColorTable = args.colors or PALETTE_REGISTRY[args.palette]
            ImageRenderer(colors=colors, scale=args.scale).render(grid).save(args.png)
            logger.info(f"Wrote {args.png}")
    except (InvalidDimensions, PaletteTooSmall, ValueError, OSError) as e:
        print(f"visiprint: error: {e}", file=sys.stderr)
        return 2

    print(art)
    return 0


if __name__ == "__main__":
    sys.exit(main())
