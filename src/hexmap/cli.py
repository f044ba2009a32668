"""hexmap command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import structlog

from .adjacency import adjacency_edges
from .pipeline import DEFAULT_MAP, HexMap, MapConfig, MapPipeline


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
        cache_logger_on_first_use=False,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Random hex map generator")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate a map and print a summary")
    generate.add_argument("--width", type=int, default=DEFAULT_MAP.width)
    generate.add_argument("--height", type=int, default=DEFAULT_MAP.height)
    generate.add_argument("--regions", type=int, default=DEFAULT_MAP.num_regions)
    generate.add_argument("--passes", type=int, default=DEFAULT_MAP.relaxation_passes)
    generate.add_argument("--seed", type=int)
    generate.add_argument("--render-out", dest="render_path")
    generate.add_argument("--region-ids", action="store_true",
                          help="Label each hex with its region id when rendering")
    generate.add_argument("--show-adjacency", action="store_true")
    generate.add_argument("--verbose", "-v", action="store_true")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "generate":
        _cmd_generate(args)


def _cmd_generate(args) -> None:
    configure_logging(args.verbose)

    config = MapConfig(
        width=args.width,
        height=args.height,
        num_regions=args.regions,
        relaxation_passes=args.passes,
        seed=args.seed,
    )
    try:
        pipeline = MapPipeline(config)
    except ValueError as exc:
        print(exc)
        raise SystemExit(1)

    hex_map = pipeline.run()
    for line in _summary_lines(hex_map):
        print(line)

    if args.show_adjacency:
        for line in _adjacency_lines(hex_map):
            print(line)

    if args.render_path:
        from .render import render_png
        render_png(hex_map, args.render_path, show_region_ids=args.region_ids)
        print(f"Saved {args.render_path}")


def _summary_lines(hex_map: HexMap) -> List[str]:
    grid = hex_map.grid
    sizes = hex_map.region_map.sizes()
    lines = [
        f"{grid.width}x{grid.height} grid, {len(sizes)} regions "
        f"({len(hex_map.region_map.empty_regions())} empty), "
        f"{len(adjacency_edges(hex_map.adjacency))} borders",
    ]
    for region, size in enumerate(sizes):
        lines.append(
            f"  region {region}: {size} hexes, {hex_map.terrains[region].name.lower()}"
        )
    return lines


def _adjacency_lines(hex_map: HexMap) -> List[str]:
    return [
        f"{region}: " + "".join(f"{n}," for n in sorted(neigh))
        for region, neigh in sorted(hex_map.adjacency.items())
    ]


if __name__ == "__main__":
    main()
