#!/usr/bin/env python3
"""Demo: generate a random hex map and render it to PNG.

Prints the region sizes, the terrain chosen for each region and the
region adjacency list, then writes a preview image.

Usage:
    python scripts/demo_map.py                          # default output
    python scripts/demo_map.py --seed 7 --regions 12    # customise
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hexmap import (
    MapConfig,
    MapPipeline,
    render_png,
    validate_region_map,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Random hex map demo")
    parser.add_argument("--width", type=int, default=16, help="Grid columns (default: 16)")
    parser.add_argument("--height", type=int, default=9, help="Grid rows (default: 9)")
    parser.add_argument("--regions", type=int, default=18, help="Number of regions (default: 18)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--out", type=str, default="exports/map.png", help="Output PNG path")
    parser.add_argument("--dpi", type=int, default=150, help="Output DPI (default: 150)")
    args = parser.parse_args()

    config = MapConfig(
        width=args.width,
        height=args.height,
        num_regions=args.regions,
        seed=args.seed,
    )

    print(f"Generating {args.width}x{args.height} map with {args.regions} regions …")
    pipe = MapPipeline(
        config,
        after=lambda name, i, n: print(f"  [{i + 1}/{n}] {name}"),
    )
    hex_map = pipe.run()

    result = validate_region_map(hex_map.region_map, hex_map.grid)
    if not result.ok:
        print("Validation errors:")
        for e in result.errors:
            print(f"  • {e}")
        raise SystemExit(1)

    sizes = hex_map.region_map.sizes()
    for region, size in enumerate(sizes):
        neighbours = ",".join(str(n) for n in sorted(hex_map.adjacency[region]))
        print(
            f"  region {region:2d}: {size:3d} hexes  "
            f"{hex_map.terrains[region].name.lower():6s} [{neighbours}]"
        )
    print(f"  {len(hex_map.edge_decals())} border decals")

    out = Path(args.out)
    print(f"Rendering to {out} …")
    render_png(hex_map, out, dpi=args.dpi)
    print("Done ✓")


if __name__ == "__main__":
    main()
