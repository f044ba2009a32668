"""Terrain assignment — greedy colouring of the region graph.

Regions are visited in increasing id order.  Each one takes the lowest
:class:`Terrain` not already used by a neighbour with a *smaller* id;
neighbours with larger ids have not been coloured yet and are ignored.
When all terrains are taken the region falls back to ``GRASS``, which can
leave two adjacent regions with the same terrain.
"""

from __future__ import annotations

from typing import Dict, Mapping, Set, Tuple

from .adjacency import AdjacencyList
from .models import InvalidRegionError, Terrain
from .regions import RegionMap

TerrainAssignment = Dict[int, Terrain]

FALLBACK_TERRAIN = Terrain.GRASS


def color_terrains(adjacency: AdjacencyList) -> TerrainAssignment:
    """Assign a terrain to every region id in *adjacency*."""
    num_regions = len(adjacency)
    for region in range(num_regions):
        if region not in adjacency:
            raise InvalidRegionError(
                f"Adjacency list has no entry for region {region}"
            )

    assignment: TerrainAssignment = {}
    for region in range(num_regions):
        used: Set[Terrain] = set()
        for neighbor in adjacency[region]:
            if not 0 <= neighbor < num_regions:
                raise InvalidRegionError(
                    f"Region {region} lists neighbour {neighbor} "
                    f"outside [0, {num_regions})"
                )
            if neighbor < region:
                used.add(assignment[neighbor])

        assignment[region] = next(
            (t for t in Terrain if t not in used),
            FALLBACK_TERRAIN,
        )

    return assignment


def hex_terrains(
    region_map: RegionMap,
    assignment: Mapping[int, Terrain],
) -> Tuple[Terrain, ...]:
    """Expand a per-region assignment to one terrain per array index."""
    try:
        return tuple(assignment[r] for r in region_map.region_ids)
    except KeyError as exc:
        raise InvalidRegionError(f"No terrain assigned to region {exc.args[0]}") from exc
