"""hexmap — random hex maps from relaxed regions and greedy terrain colouring.

Public API is organised into layers:

- **Core** — models, hex lattice
- **Generation** — region partitioning, adjacency, terrain assignment
- **Edges** — border terrain rules and tile placement
- **Pipeline** — configuration and one-call generation
- **Rendering** — PNG preview (requires matplotlib)
"""

__version__ = "0.1.0"

# ── Core ────────────────────────────────────────────────────────────
from .models import (
    Direction,
    Hex,
    HexMapError,
    InvalidRegionError,
    OutOfBoundsError,
    Terrain,
)
from .hexgrid import HexGrid

# ── Generation ──────────────────────────────────────────────────────
from .regions import (
    RegionMap,
    RegionValidation,
    check_region_map,
    partition_regions,
    validate_region_map,
)
from .adjacency import AdjacencyList, adjacency_edges, build_adjacency
from .terrain import TerrainAssignment, color_terrains, hex_terrains

# ── Edges ───────────────────────────────────────────────────────────
from .edges import BORDER_TERRAINS, edge_terrain, edge_tile_index
from .tiles import EdgeDecal, FillTile, edge_decals, fill_tiles

# ── Pipeline ────────────────────────────────────────────────────────
from .pipeline import DEFAULT_MAP, HexMap, MapConfig, MapPipeline, generate_map

# ── Rendering (requires matplotlib) ────────────────────────────────
from .render import render_png

__all__ = [
    # Core
    "Direction",
    "Hex",
    "HexMapError",
    "InvalidRegionError",
    "OutOfBoundsError",
    "Terrain",
    "HexGrid",
    # Generation
    "RegionMap",
    "RegionValidation",
    "check_region_map",
    "partition_regions",
    "validate_region_map",
    "AdjacencyList",
    "adjacency_edges",
    "build_adjacency",
    "TerrainAssignment",
    "color_terrains",
    "hex_terrains",
    # Edges
    "BORDER_TERRAINS",
    "edge_terrain",
    "edge_tile_index",
    "EdgeDecal",
    "FillTile",
    "edge_decals",
    "fill_tiles",
    # Pipeline
    "DEFAULT_MAP",
    "HexMap",
    "MapConfig",
    "MapPipeline",
    "generate_map",
    # Rendering
    "render_png",
]
