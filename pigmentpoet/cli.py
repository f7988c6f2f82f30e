import argparse
import os
import random

import structlog

from .core.config import get_settings
from .core.logging import configure_logging
from .errors import PigmentError
from .export import export_json, print_palette
from .imaging import fit_within, open_image
from .matcher import load_default_matcher
from .palette import (
    Palette,
    RuleKind,
    extract_palette,
    load_palette_from_json,
    palette_from_rule,
    random_palette,
)
from .palette.extract import extract_palette_kmeans

log = structlog.get_logger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate color palette images from photos, base colors or palette JSON files"
    )
    parser.add_argument(
        "image_path",
        nargs="?",
        default=None,
        help="Path to the source image",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: next to the input, else OUTPUT_DIR)",
    )
    parser.add_argument(
        "--base",
        metavar="HEX",
        help="Base color for a harmonic palette, e.g. '#336699'",
    )
    parser.add_argument(
        "--rule",
        default="complementary",
        help="Harmonic rule used with --base (complementary, triadic, analogous, "
        "split-complementary, tetradic, monochromatic)",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Generate a harmonic palette from a random base color and rule",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --random and the k-means extractor",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Re-render a palette JSON file written by a previous run",
    )
    parser.add_argument(
        "--name",
        help="Output file stem (default: derived from the input)",
    )
    parser.add_argument(
        "--colors",
        type=int,
        default=None,
        help="Number of colors to extract from an image (2-256, default: PALETTE_SIZE)",
    )
    parser.add_argument(
        "--algorithm",
        choices=["median-cut", "kmeans"],
        default="median-cut",
        help="Extraction algorithm for images",
    )
    parser.add_argument(
        "--with-source",
        action="store_true",
        help="Show the source photo above the swatches",
    )
    parser.add_argument("--no-hex", action="store_true", help="Hide hex codes")
    parser.add_argument("--no-names", action="store_true", help="Hide color names")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")

    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    # Validate arguments
    modes = [m for m in (args.image_path, args.base, args.random, args.from_palette) if m]
    if len(modes) > 1:
        parser.error("Use only one of image_path, --base, --random or --from-palette")
    if not modes:
        parser.error("One of image_path, --base, --random or --from-palette is required")

    try:
        rule = RuleKind.parse(args.rule)
    except ValueError as exc:
        parser.error(str(exc))

    matcher = load_default_matcher()
    try:
        if args.from_palette:
            _run_from_palette(args, matcher, settings)
        elif args.image_path:
            _run_from_image(args, matcher, settings)
        elif args.base:
            palette = palette_from_rule(args.base, rule, matcher)
            _export(args, palette, args.name or args.base.lstrip("#").upper(), _output_dir(args, None, settings))
        else:
            palette = random_palette(matcher, random.Random(args.seed))
            name = args.name or palette.hex_codes[0].lstrip("#")
            _export(args, palette, name, _output_dir(args, None, settings))
    except PigmentError as exc:
        log.error("palette_failed", code=exc.code, error=str(exc))
        parser.exit(1, f"error: {exc}\n")
    return 0


def _output_dir(args, input_path, settings):
    if args.output:
        return args.output
    if input_path:
        return os.path.dirname(input_path) or "."
    return str(settings.output_dir)


def _run_from_palette(args, matcher, settings):
    """Re-render an exported palette JSON file."""
    palette_path = args.from_palette
    print(f"Loading palette: {palette_path}")

    palette, source_file = load_palette_from_json(palette_path, matcher)
    name = args.name or os.path.splitext(os.path.basename(palette_path))[0]
    _export(args, palette, name, _output_dir(args, palette_path, settings), source_file=source_file)


def _run_from_image(args, matcher, settings):
    """Extract a palette from an image file."""
    image_path = args.image_path
    n = args.colors or settings.palette_size
    print(f"Analyzing: {image_path}")

    image = fit_within(open_image(image_path), settings.max_image_px)
    if args.algorithm == "kmeans":
        colors = extract_palette_kmeans(image, n, seed=args.seed or 0)
    else:
        colors = extract_palette(image, n)
    palette = Palette.from_colors(colors, matcher)

    name = args.name or os.path.splitext(os.path.basename(image_path))[0]
    _export(
        args,
        palette,
        name,
        _output_dir(args, image_path, settings),
        source=image if args.with_source else None,
        source_file=os.path.basename(image_path),
    )


def _export(args, palette, name, output_dir, source=None, source_file=None):
    os.makedirs(output_dir, exist_ok=True)
    print_palette(palette)

    image_path = os.path.join(output_dir, f"{name}.jpg")
    json_path = os.path.join(output_dir, f"{name}.json")

    data = palette.to_image(show_hex=not args.no_hex, show_names=not args.no_names, source=source)
    with open(image_path, "wb") as f:
        f.write(data)
    export_json(palette, json_path, source_file=source_file)
    log.info("palette_written", image=image_path, colors=len(palette.colors), rule=palette.label)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {image_path}")
    print(f"  - {json_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
