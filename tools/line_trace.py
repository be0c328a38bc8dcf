from __future__ import annotations

"""Command line access to the integer line walkers.

Prints the lattice points of the segment between two integer coordinates::

    gridline-trace 0 1 6 4 --format json

Defaults for the end point handling and the output format come from the
packaged ``line_config.yaml`` and may be overridden with ``--config``.
"""

import argparse
import json
from typing import List, Optional, Sequence

import yaml

from gridline.src.core.point import Point
from gridline.src.utils import config_loader
from gridline.src.utils.logger import get_logger
from gridline.src.walker.helpers import line_points


def format_points(points: List[Point], output_format: str) -> str:
    """Return ``points`` rendered as ``text`` lines or a ``json`` list."""
    if output_format == "json":
        return json.dumps([[p.x, p.y] for p in points])
    return "\n".join(f"{p.x} {p.y}" for p in points)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List the integer points on a line segment")
    parser.add_argument("x0", type=int)
    parser.add_argument("y0", type=int)
    parser.add_argument("x1", type=int)
    parser.add_argument("y1", type=int)
    ends = parser.add_mutually_exclusive_group()
    ends.add_argument("--inclusive", dest="inclusive", action="store_true", default=None, help="include the end point")
    ends.add_argument("--exclusive", dest="inclusive", action="store_false", help="stop before the end point")
    parser.add_argument("--format", choices=config_loader.OUTPUT_FORMATS, default=None, help="output format")
    parser.add_argument("--config", help="YAML or JSON file overriding the packaged defaults")
    parser.add_argument("--show-config", action="store_true", help="print the runtime configuration first")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = dict(config_loader.LINE_CONFIG)
    if args.config:
        try:
            config.update(config_loader.load_config(args.config))
            config_loader.validate_line_config(config)
        except (ValueError, OSError, yaml.YAMLError) as exc:
            parser.error(f"invalid config {args.config}: {exc}")

    level = config.get("log_level", "WARNING").upper()
    get_logger("gridline", config.get("log_file"), level)
    logger = get_logger("line_trace", config.get("log_file"), level)

    if args.inclusive is not None:
        config["inclusive"] = args.inclusive
    if args.format:
        config["output_format"] = args.format
    if args.show_config:
        config_loader.print_runtime_config(config)

    start = (args.x0, args.y0)
    end = (args.x1, args.y1)
    points = line_points(start, end, inclusive=config.get("inclusive", config_loader.DEFAULT_INCLUSIVE))
    logger.info("%d points between %s and %s", len(points), start, end)

    output = format_points(points, config.get("output_format", config_loader.DEFAULT_OUTPUT_FORMAT))
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
