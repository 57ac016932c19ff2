from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from . import __version__
from .png_job import PngJobBuilder, PngSettings
from .protocol.encoding import MAX_STORED_BLOCK
from .protocol.job import DEFAULT_BACKGROUND
from .protocol.types import Raster
from .rendering import PATTERNS, build_pattern
from .transport import FileTransport

DEFAULT_OUTPUT = "rawpng_demo.png"
DEFAULT_SIZE = 256


def parse_background(value: str) -> Optional[Tuple[int, int, int]]:
    if value.lower() == "none":
        return None
    parts = value.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError("Background must be R,G,B or 'none'")
    try:
        r, g, b = (int(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid background '{value}'") from exc
    return r, g, b


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rawpng",
        description="rawpng: write RGBA images as PNG using uncompressed DEFLATE blocks.",
    )
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT, help=f"Output path (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE, help="Demo image width")
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE, help="Demo image height")
    parser.add_argument("--pattern", choices=PATTERNS, default="gradient", help="Demo pattern to draw")
    parser.add_argument("--image", metavar="PATH", help="Re-encode an existing image instead of drawing a pattern")
    parser.add_argument("--resize-width", type=int, help="Scale --image to this width")
    parser.add_argument(
        "--background",
        type=parse_background,
        default=DEFAULT_BACKGROUND,
        help="bKGD color as three 16-bit values R,G,B, or 'none' to omit the chunk",
    )
    parser.add_argument("--no-srgb", action="store_true", help="Omit the sRGB chunk")
    parser.add_argument(
        "--max-block",
        type=int,
        default=MAX_STORED_BLOCK,
        help=f"Largest stored DEFLATE block (1-{MAX_STORED_BLOCK})",
    )
    parser.add_argument("--no-atomic", action="store_true", help="Write directly instead of via a temporary file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> PngSettings:
    settings = PngSettings(background=args.background, max_block_size=args.max_block)
    if args.no_srgb:
        settings.srgb_intent = None
    if args.resize_width is not None:
        settings.resize_width = args.resize_width
    return settings


def build_raster(args: argparse.Namespace, settings: PngSettings) -> Raster:
    if args.image:
        return PngJobBuilder(settings).load(args.image)
    return build_pattern(args.pattern, args.width, args.height)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    print(f"rawpng - version {__version__}")
    try:
        settings = build_settings(args)
        raster = build_raster(args, settings)
        print(f"Writing to file {args.output}")
        transport = FileTransport(args.output, atomic=not args.no_atomic)
        written = transport.write(raster, settings)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    print(f"Wrote {written} bytes ({raster.width}x{raster.height})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
