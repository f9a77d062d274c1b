"""
Palette Studio command line interface.

    palette-studio describe "#2563eb" "#dc2626" --classify
    palette-studio random --seed 7
    palette-studio -o palettes.json extract photo.png -k 5
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from palette_studio import __version__
from palette_studio.config import config
from palette_studio.schemas import PaletteStyle
from palette_studio.services.colors.conversions import MalformedColorError
from palette_studio.services.colors.extraction import KMeansColorExtractor
from palette_studio.services.colors.palette import build_palette
from palette_studio.services.export import (
    BUNDLE_FILENAME, build_palette_export, palette_filename, to_json
)
from palette_studio.services.orchestrator import PaletteOrchestrator
from palette_studio.utils.logging import configure_logging, get_logger

EXIT_OK = 0
EXIT_INVALID_INPUT = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-studio",
        description="Describe, synthesize and extract color palettes."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None,
                        help=f"Log level (default: {config.LOG_LEVEL})")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write the JSON document to this file, or into this "
                             "directory, instead of stdout")

    subparsers = parser.add_subparsers(dest="command", required=True)

    describe = subparsers.add_parser("describe", help="Describe the given hex colors")
    describe.add_argument("colors", nargs="+", metavar="HEX", help="Colors as #rrggbb")
    describe.add_argument("--classify", action="store_true",
                          help="Attach the nearest Tailwind swatch class")
    describe.add_argument("--strict", action=argparse.BooleanOptionalAction,
                          default=config.STRICT_HEX_PARSING,
                          help="Fail on malformed colors instead of using black")
    describe.add_argument("--title", default=None, help="Palette title")

    random_cmd = subparsers.add_parser("random", help="Synthesize a random balanced palette")
    random_cmd.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")

    extract = subparsers.add_parser("extract", help="Extract a palette from an image")
    extract.add_argument("image", type=Path, help="Image file (PNG, JPEG, ...)")
    extract.add_argument("-k", type=int, default=config.EXTRACT_K, help="Number of colors")
    extract.add_argument("--seed", type=int, default=config.EXTRACT_SEED,
                         help="Seed for sampling and clustering")

    return parser


def _emit(document_json: str, output: Optional[Path], default_name: str) -> None:
    if output is None:
        sys.stdout.write(document_json + "\n")
    else:
        if output.is_dir():
            output = output / default_name
        output.write_text(document_json + "\n", encoding="utf-8")
        get_logger().info(f"Wrote {output}")


def _run(args: argparse.Namespace) -> Tuple[str, str]:
    """Return the JSON document and its default file name."""
    if args.command == "describe":
        colors = build_palette(args.colors, with_classification=args.classify, strict=args.strict)
        style = PaletteStyle.TAILWIND if args.classify else PaletteStyle.MATERIAL
        document = build_palette_export(colors, style, title=args.title)
        return to_json(document), palette_filename(document.title)

    if args.command == "random":
        result = PaletteOrchestrator().random_palette(args.seed)
        return to_json(result.to_bundle()), BUNDLE_FILENAME

    # extract
    extractor = KMeansColorExtractor(k=args.k, rng_seed=args.seed)
    image_bytes = args.image.read_bytes()
    result = PaletteOrchestrator(extractor=extractor).from_image(image_bytes)
    return to_json(result.to_bundle()), BUNDLE_FILENAME


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log = configure_logging(args.log_level) if args.log_level else get_logger()

    try:
        document_json, default_name = _run(args)
        _emit(document_json, args.output, default_name)
    except MalformedColorError as e:
        log.error(str(e))
        return EXIT_INVALID_INPUT
    except (OSError, ValueError, RuntimeError) as e:
        log.error(f"Palette generation failed: {str(e)}")
        return EXIT_INVALID_INPUT

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
