"""Region partitioning — splitting the hex lattice into numbered regions.

This module provides the :class:`RegionMap` value object and
:func:`partition_regions`, a Lloyd-style relaxation that assigns every hex
of a :class:`HexGrid` to exactly one region.

Algorithm
---------
1. Draw ``num_regions`` random centres (duplicates are allowed).
2. Repeat ``passes`` times: assign each hex to its closest centre, then
   move each centre to the integer centroid of its hexes.
3. Assign each hex to its closest centre one final time.

A region that loses all of its hexes keeps its last centre.  It is never
re-seeded, so the finished map may have fewer non-empty regions than
requested.

Validation helpers
------------------
- :func:`validate_region_map` — report holes, out-of-range ids and size
  mismatches without raising.
- :func:`check_region_map` — the same checks, raising
  :class:`InvalidRegionError` on the first failure.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import structlog

from .hexgrid import HexGrid
from .models import Hex, InvalidRegionError, OutOfBoundsError

log = structlog.get_logger(__name__)

DEFAULT_RELAXATION_PASSES = 4


# ═══════════════════════════════════════════════════════════════════
# Data model
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RegionMap:
    """Region id for every array index of a grid.

    Parameters
    ----------
    num_regions : int
        Size of the region-id domain; ids run ``0 .. num_regions - 1``.
    region_ids : tuple[int, ...]
        ``region_ids[index]`` is the region owning that hex.
    centers : tuple[Hex, ...]
        Final region centres, one per region id (empty when the map was
        built by hand).
    """

    num_regions: int
    region_ids: Tuple[int, ...]
    centers: Tuple[Hex, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.region_ids)

    def region_of(self, index: int) -> int:
        """Return the region that owns array *index*."""
        if not 0 <= index < len(self.region_ids):
            raise OutOfBoundsError(
                f"Index {index} outside [0, {len(self.region_ids)})"
            )
        return self.region_ids[index]

    def hexes_in(self, region: int) -> List[int]:
        """Array indices owned by *region*, ascending."""
        if not 0 <= region < self.num_regions:
            raise InvalidRegionError(
                f"Region {region} outside [0, {self.num_regions})"
            )
        return [i for i, r in enumerate(self.region_ids) if r == region]

    def sizes(self) -> List[int]:
        """Number of hexes per region id."""
        counts = [0] * self.num_regions
        for index, r in enumerate(self.region_ids):
            if not 0 <= r < self.num_regions:
                raise InvalidRegionError(
                    f"Hex {index} has region {r} outside [0, {self.num_regions})"
                )
            counts[r] += 1
        return counts

    def empty_regions(self) -> List[int]:
        """Region ids that own no hexes (absorbed during relaxation)."""
        return [r for r, n in enumerate(self.sizes()) if n == 0]

    def __repr__(self) -> str:
        sizes = ", ".join(f"{r}={n}" for r, n in enumerate(self.sizes()))
        return f"RegionMap([{sizes}])"


# ═══════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════

@dataclass
class RegionValidation:
    """Result of :func:`validate_region_map`."""

    ok: bool
    errors: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok


def validate_region_map(
    region_map: RegionMap,
    grid: Optional[HexGrid] = None,
) -> RegionValidation:
    """Check that *region_map* is total and its ids are in range.

    Parameters
    ----------
    region_map : RegionMap
        The map to validate.
    grid : HexGrid, optional
        If given, the map must hold exactly one entry per grid hex.
    """
    errors: List[str] = []

    if region_map.num_regions < 1:
        errors.append(f"num_regions must be >= 1, got {region_map.num_regions}")

    if grid is not None and len(region_map) != grid.size:
        errors.append(
            f"Region map covers {len(region_map)} hexes, grid has {grid.size}"
        )

    bad = [
        (i, r)
        for i, r in enumerate(region_map.region_ids)
        if not isinstance(r, int) or not 0 <= r < region_map.num_regions
    ]
    if bad:
        errors.append(
            f"Region ids out of range ({len(bad)}): "
            + ", ".join(f"{i}->{r!r}" for i, r in bad[:5])
            + ("…" if len(bad) > 5 else "")
        )

    if region_map.centers and len(region_map.centers) != region_map.num_regions:
        errors.append(
            f"Expected {region_map.num_regions} centres, "
            f"got {len(region_map.centers)}"
        )

    return RegionValidation(ok=len(errors) == 0, errors=errors)


def check_region_map(region_map: RegionMap, grid: Optional[HexGrid] = None) -> None:
    """Raise :class:`InvalidRegionError` unless *region_map* is valid."""
    result = validate_region_map(region_map, grid)
    if not result.ok:
        raise InvalidRegionError("; ".join(result.errors))


# ═══════════════════════════════════════════════════════════════════
# Relaxation
# ═══════════════════════════════════════════════════════════════════

def find_closest_region(
    grid: HexGrid,
    h: Tuple[int, int],
    centers: Sequence[Tuple[int, int]],
) -> int:
    """Index of the centre nearest *h*; the lowest index wins ties."""
    best_region = -1
    best_dist = 0
    for region, center in enumerate(centers):
        dist = grid.distance(h, center)
        if best_region < 0 or dist < best_dist:
            best_region = region
            best_dist = dist
    return best_region


def compute_centers(
    grid: HexGrid,
    region_ids: Sequence[int],
    previous: Sequence[Hex],
) -> List[Hex]:
    """Integer centroid of each region's hexes.

    Coordinates are truncated toward zero.  A region with no hexes keeps
    its entry from *previous*.
    """
    n = len(previous)
    sum_x = [0] * n
    sum_y = [0] * n
    counts = [0] * n

    for index, region in enumerate(region_ids):
        hx, hy = grid.to_hex(index)
        sum_x[region] += hx
        sum_y[region] += hy
        counts[region] += 1

    centers: List[Hex] = []
    for region in range(n):
        if counts[region] == 0:
            # Not re-seeded: the old centre still competes in later passes,
            # so an absorbed region can win hexes back or stay empty.
            centers.append(previous[region])
        else:
            # sums are non-negative, so floor division truncates toward zero
            centers.append(Hex(sum_x[region] // counts[region],
                               sum_y[region] // counts[region]))
    return centers


def _assign_all(grid: HexGrid, centers: Sequence[Hex]) -> List[int]:
    return [find_closest_region(grid, h, centers) for h in grid.hexes()]


def partition_regions(
    grid: HexGrid,
    num_regions: int,
    rng: Optional[random.Random] = None,
    *,
    passes: int = DEFAULT_RELAXATION_PASSES,
) -> RegionMap:
    """Split *grid* into *num_regions* regions by discrete relaxation.

    Parameters
    ----------
    grid : HexGrid
    num_regions : int
        Number of region ids to produce.  Some may end up empty.
    rng : random.Random, optional
        Source of the initial centres.  If *None* a deterministic
        default is used.
    passes : int
        Number of assign/re-centre rounds before the final assignment.
    """
    if num_regions < 1:
        raise ValueError("num_regions must be >= 1")
    if passes < 0:
        raise ValueError("passes must be >= 0")

    if rng is None:
        rng = random.Random(42)

    centers = [grid.random_hex(rng) for _ in range(num_regions)]
    log.debug("initial centres drawn", num_regions=num_regions, centers=centers)

    for i in range(passes):
        region_ids = _assign_all(grid, centers)
        centers = compute_centers(grid, region_ids, centers)
        log.debug(
            "relaxation pass",
            index=i,
            empty=num_regions - len(set(region_ids)),
        )

    region_map = RegionMap(
        num_regions=num_regions,
        region_ids=tuple(_assign_all(grid, centers)),
        centers=tuple(centers),
    )
    log.debug("regions partitioned", empty_regions=region_map.empty_regions())
    return region_map
