#!/usr/bin/env python3
"""
Extract a named color palette from one or more images.

Usage:
    python extract_palette.py -i photo.jpg
    python extract_palette.py -i images/ --size small --json
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from palette import Palette, PaletteSettings
from quantizer import PaletteSize
from samples import Sample

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.gif', '.bmp'}

SIZE_CHOICES = {
    'micro': PaletteSize.MICRO,
    'small': PaletteSize.SMALL,
    'default': PaletteSize.DEFAULT,
    'large': PaletteSize.LARGE,
}


def find_images(paths: list[str]) -> list[Path]:
    """Expand directories into the image files they contain; keep files as given."""
    images = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            images.extend(sorted(p for p in path.iterdir()
                                 if p.suffix.lower() in IMAGE_EXTENSIONS))
        else:
            images.append(path)
    return images


def format_sample(sample: Sample) -> str:
    title = sample.title_text_color.to_hex() if sample.title_text_color else '-'
    body = sample.body_text_color.to_hex() if sample.body_text_color else '-'
    return f"{sample.rgb.to_hex()}  pop={sample.population:<7} title={title} body={body}"


def print_palette(name: str, palette: Palette, elapsed: float):
    print(f"{name} ({len(palette.samples)} samples, {elapsed:.2f}s)")
    for variation, sample in palette.named_samples().items():
        print(f"  {variation:<14} {format_sample(sample) if sample else '(none)'}")
    print("  samples:")
    for sample in palette.samples:
        print(f"    {format_sample(sample)}")


def main():
    parser = argparse.ArgumentParser(
        description='Extract vibrant/muted palette variations from images.'
    )
    parser.add_argument(
        '--input', '-i',
        required=True,
        nargs='+',
        help='Image files or directories containing images'
    )
    parser.add_argument(
        '--size',
        choices=list(SIZE_CHOICES),
        default='default',
        help='Maximum palette size: micro=2, small=8, default=16, large=24'
    )
    parser.add_argument(
        '--no-filter',
        action='store_true',
        help='Keep near-black, near-white and red-band colors'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON instead of text'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    images = find_images(args.input)
    if not images:
        print(f"No images found in {', '.join(args.input)}", file=sys.stderr)
        sys.exit(2)

    settings = PaletteSettings(palette_size=SIZE_CHOICES[args.size])
    filters = () if args.no_filter else None

    results = []
    failed = []

    for image_path in images:
        try:
            start = time.perf_counter()
            palette = Palette.from_image(image_path, settings, filters)
            elapsed = time.perf_counter() - start
        except Exception as e:
            error_msg = f"{type(e).__name__}: {e}"
            print(f"{image_path.name} → ERROR: {error_msg}", file=sys.stderr)
            failed.append((image_path.name, error_msg))
            continue

        if args.json:
            results.append({'image': str(image_path), **palette.to_dict()})
        else:
            print_palette(image_path.name, palette, elapsed)

    if args.json:
        print(json.dumps(results, indent=2))

    if failed:
        print(f"Failed ({len(failed)}):", file=sys.stderr)
        for name, error in failed:
            print(f"  - {name}: {error}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
