"""
Command-line interface for the region finder.

Usage:
    python -m region_finder find <image_path> --target R,G,B [--output json|visual]
    python -m region_finder find <image_path> --pick X,Y [--min-region 50]
    python -m region_finder --help
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)


def setup_argparse() -> argparse.ArgumentParser:
    """Set up argument parser."""
    parser = argparse.ArgumentParser(
        prog="region_finder",
        description="Find connected regions of a target color in an image",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    find_parser = subparsers.add_parser(
        "find",
        help="Find regions matching a target color",
    )
    # Absent unless given, so a top-level -v is not overwritten
    find_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )
    find_parser.add_argument(
        "image_path",
        type=str,
        help="Path to the input image",
    )

    target_group = find_parser.add_mutually_exclusive_group(required=True)
    target_group.add_argument(
        "--target",
        type=str,
        help="Target color as R,G,B or #RRGGBB",
    )
    target_group.add_argument(
        "--pick",
        type=str,
        help="Use the color at pixel X,Y as the target",
    )

    find_parser.add_argument(
        "--output",
        "-o",
        choices=["json", "visual"],
        default="json",
        help="Output format (default: json)",
    )
    find_parser.add_argument(
        "--output-path",
        type=str,
        help="Output file path (for visual mode)",
    )
    find_parser.add_argument(
        "--config",
        type=str,
        help="YAML configuration file",
    )
    find_parser.add_argument(
        "--max-color-diff",
        type=int,
        help="Maximum per-channel color difference (default: 20)",
    )
    find_parser.add_argument(
        "--min-region",
        type=int,
        help="Minimum region size in pixels (default: 50)",
    )
    find_parser.add_argument(
        "--include-points",
        action="store_true",
        help="Include every region pixel in JSON output",
    )
    find_parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for region colors (visual mode)",
    )

    return parser


def _parse_point(value: str):
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Point must look like X,Y, got {value!r}")
    return int(parts[0]), int(parts[1])


def cmd_find(args) -> int:
    """Handle find command."""
    from region_finder.config.finder_config import RegionFinderConfig
    from region_finder.regions.finder import RegionFinder
    from region_finder.regions.metrics import region_stats
    from region_finder.regions.models import Color

    # Validate input path
    image_path = Path(args.image_path)
    if not image_path.exists():
        print(f"Error: Image not found: {image_path}", file=sys.stderr)
        return 1

    # Load image
    image = cv2.imread(str(image_path))
    if image is None:
        print(f"Error: Could not load image: {image_path}", file=sys.stderr)
        return 1

    h, w = image.shape[:2]
    logger.info(f"Image loaded: {w}x{h}")

    try:
        config = RegionFinderConfig.from_yaml(args.config) if args.config else RegionFinderConfig()
        config = RegionFinderConfig(
            max_color_diff=config.max_color_diff if args.max_color_diff is None else args.max_color_diff,
            min_region=config.min_region if args.min_region is None else args.min_region,
        )

        finder = RegionFinder(image, config=config)

        if args.target is not None:
            target = Color.from_string(args.target)
        else:
            x, y = _parse_point(args.pick)
            target = finder.color_at(x, y)
    except (ValueError, IndexError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    regions = finder.find_regions(target)
    largest = finder.largest_region()
    logger.info(f"Found {len(regions)} regions for target {target.to_hex()}")

    if args.output == "json":
        output = {
            "image_dimensions": {"width": w, "height": h},
            "config": config.to_dict(),
            "result": regions.to_dict(include_points=args.include_points),
            "largest_region": region_stats(largest) if largest is not None else None,
        }
        print(json.dumps(output, indent=2))

    elif args.output == "visual":
        rng = np.random.default_rng(args.seed)
        vis = finder.recolor_image(rng).data.copy()

        # Box the largest region
        if largest is not None:
            x_min, y_min, x_max, y_max = largest.bounding_box
            cv2.rectangle(vis, (x_min, y_min), (x_max, y_max), (255, 255, 255), 1)
            cv2.putText(
                vis,
                f"largest: {largest.size}px",
                (x_min, max(y_min - 5, 10)),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.4,
                (255, 255, 255),
                1,
            )

        output_path = args.output_path
        if output_path is None:
            output_path = str(image_path.stem) + "_recolored.png"

        if not cv2.imwrite(output_path, vis):
            print(f"Error: Could not write image: {output_path}", file=sys.stderr)
            return 1
        print(f"Recolored image saved to: {output_path}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_argparse()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help exits 0, usage errors exit 1
        return 0 if e.code in (0, None) else 1

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "find":
        return cmd_find(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
