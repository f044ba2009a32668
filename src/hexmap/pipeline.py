"""Map pipeline — partition, connect and colour in one call.

Runs the three generation stages in order, each one consuming the
previous stage's output:

1. ``partition`` — :func:`regions.partition_regions`
2. ``adjacency`` — :func:`adjacency.build_adjacency`
3. ``terrain`` — :func:`terrain.color_terrains`

Usage
-----
>>> from hexmap.pipeline import MapConfig, generate_map
>>> hex_map = generate_map(MapConfig(seed=7))
>>> tiles = hex_map.fill_tiles()

Events are logged through structlog at debug level.  The package never
configures structlog itself; hosts do (see :func:`hexmap.cli.configure_logging`).
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import structlog

from .adjacency import AdjacencyList, build_adjacency
from .hexgrid import HexGrid
from .models import Terrain
from .regions import DEFAULT_RELAXATION_PASSES, RegionMap, partition_regions
from .terrain import TerrainAssignment, color_terrains, hex_terrains
from .tiles import EdgeDecal, FillTile, edge_decals, fill_tiles

log = structlog.get_logger(__name__)


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════


@dataclass
class MapConfig:
    """All tuneable parameters for map generation.

    Attributes
    ----------
    width : int
        Grid columns.
    height : int
        Grid rows.
    num_regions : int
        Number of region ids to partition into.
    relaxation_passes : int
        Assign/re-centre rounds before the final assignment.
    seed : int | None
        Seed for the generator's own :class:`random.Random`.  *None*
        seeds from the operating system.
    """

    width: int = 16
    height: int = 9
    num_regions: int = 18
    relaxation_passes: int = DEFAULT_RELAXATION_PASSES
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise ``ValueError`` if any parameter is out of range."""
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.num_regions < 1:
            raise ValueError("num_regions must be >= 1")
        if self.relaxation_passes < 0:
            raise ValueError("relaxation_passes must be >= 0")


DEFAULT_MAP = MapConfig()


# ═══════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class HexMap:
    """A generated map: regions, their graph and their terrains."""

    grid: HexGrid
    region_map: RegionMap
    adjacency: AdjacencyList
    terrains: TerrainAssignment
    hex_terrains: Tuple[Terrain, ...]

    def terrain_at(self, index: int) -> Terrain:
        return self.hex_terrains[index]

    def fill_tiles(self) -> List[FillTile]:
        return fill_tiles(self.grid, self.hex_terrains)

    def edge_decals(self) -> List[EdgeDecal]:
        return edge_decals(self.grid, self.hex_terrains)


# ═══════════════════════════════════════════════════════════════════
# Pipeline
# ═══════════════════════════════════════════════════════════════════

Hook = Callable[[str, int, int], None]
"""Signature for before/after hooks: ``(stage_name, stage_index, total_stages)``."""

STAGE_NAMES = ("partition", "adjacency", "terrain")


class MapPipeline:
    """Runs the generation stages for one :class:`MapConfig`.

    Parameters
    ----------
    config : MapConfig
        Generation parameters.
    before : Hook | None
        Called *before* each stage.
    after : Hook | None
        Called *after* each stage.

    Wall-clock seconds per stage from the latest :meth:`run` are kept in
    :attr:`elapsed`.
    """

    def __init__(
        self,
        config: MapConfig = DEFAULT_MAP,
        *,
        before: Optional[Hook] = None,
        after: Optional[Hook] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.elapsed: Dict[str, float] = {}
        self._before = before
        self._after = after

    def run(self, rng: Optional[random.Random] = None) -> HexMap:
        """Generate a map, drawing random centres from *rng*.

        When *rng* is *None* a fresh generator seeded with
        ``config.seed`` is used, so equal seeds give identical maps.
        """
        cfg = self.config
        if rng is None:
            rng = random.Random(cfg.seed)

        grid = HexGrid(cfg.width, cfg.height)
        self.elapsed = {}
        log.debug(
            "generating map",
            width=cfg.width,
            height=cfg.height,
            num_regions=cfg.num_regions,
            seed=cfg.seed,
        )

        region_map = self._stage(
            0,
            lambda: partition_regions(
                grid, cfg.num_regions, rng, passes=cfg.relaxation_passes
            ),
        )
        adjacency = self._stage(1, lambda: build_adjacency(grid, region_map))
        terrains = self._stage(2, lambda: color_terrains(adjacency))

        hex_map = HexMap(
            grid=grid,
            region_map=region_map,
            adjacency=adjacency,
            terrains=terrains,
            hex_terrains=hex_terrains(region_map, terrains),
        )
        log.debug(
            "map generated",
            empty_regions=len(region_map.empty_regions()),
            seconds=round(sum(self.elapsed.values()), 6),
        )
        return hex_map

    def _stage(self, idx: int, fn):
        name = STAGE_NAMES[idx]
        total = len(STAGE_NAMES)
        if self._before:
            self._before(name, idx, total)

        t0 = time.perf_counter()
        out = fn()
        dt = time.perf_counter() - t0

        self.elapsed[name] = dt
        log.debug("stage finished", stage=name, seconds=round(dt, 6))

        if self._after:
            self._after(name, idx, total)
        return out

    def __repr__(self) -> str:
        return f"MapPipeline({self.config!r})"


def generate_map(
    config: MapConfig = DEFAULT_MAP,
    rng: Optional[random.Random] = None,
) -> HexMap:
    """Convenience wrapper: ``MapPipeline(config).run(rng)``."""
    return MapPipeline(config).run(rng)
