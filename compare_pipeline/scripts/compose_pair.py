from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from api.services.compose_pipeline import (
    DEFAULT_MARGIN,
    DEFAULT_QUALITY,
    DEFAULT_WIDTH,
    OUTPUT_NAME,
    run_pipeline,
)


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _quality(text: str) -> int:
    value = int(text)
    if not 1 <= value <= 95:
        raise argparse.ArgumentTypeError(f"must be between 1 and 95, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Put two JPEG images side by side (or stacked) into one JPEG")
    parser.add_argument("-m", "--margin", type=_non_negative_int, default=DEFAULT_MARGIN, help=f"Margin between images in pixels (default: {DEFAULT_MARGIN})")
    parser.add_argument("-w", "--width", type=_positive_int, default=DEFAULT_WIDTH, help=f"Output width in pixels (default: {DEFAULT_WIDTH})")
    parser.add_argument("-v", "--vertical", action="store_true", help="Stack vertically instead of horizontally")
    parser.add_argument("-o", "--output", default=OUTPUT_NAME, help=f"Output file (default: {OUTPUT_NAME})")
    parser.add_argument("-q", "--quality", type=_quality, default=DEFAULT_QUALITY, help=f"JPEG quality (default: {DEFAULT_QUALITY})")
    parser.add_argument("img1", help="First image")
    parser.add_argument("img2", help="Second image")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        out_path = run_pipeline(
            Path(args.img1),
            Path(args.img2),
            out_path=Path(args.output),
            margin=args.margin,
            width=args.width,
            vertical=bool(args.vertical),
            quality=args.quality,
        )
    except (OSError, ValueError) as e:
        raise SystemExit(f"error: {e}")
    print(f"Saved: {out_path}")


if __name__ == "__main__":
    main()
