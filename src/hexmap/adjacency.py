from __future__ import annotations

from typing import Dict, FrozenSet, List, Set, Tuple

from .hexgrid import HexGrid
from .regions import RegionMap, check_region_map

AdjacencyList = Dict[int, FrozenSet[int]]


def build_adjacency(grid: HexGrid, region_map: RegionMap) -> AdjacencyList:
    """Return region adjacency based on hexes that touch across a border.

    Every region id gets an entry, including regions that own no hexes.
    """
    check_region_map(region_map, grid)

    neighbors: Dict[int, Set[int]] = {r: set() for r in range(region_map.num_regions)}
    for index, region in enumerate(region_map.region_ids):
        for n in grid.neighbors(index):
            other = region_map.region_ids[n]
            if other != region:
                neighbors[region].add(other)
                neighbors[other].add(region)

    return {region: frozenset(neigh) for region, neigh in neighbors.items()}


def adjacency_edges(adjacency: AdjacencyList) -> List[Tuple[int, int]]:
    """Return each undirected region edge once as ``(low, high)``, sorted."""
    edges = {
        (min(r, s), max(r, s))
        for r, neigh in adjacency.items()
        for s in neigh
    }
    return sorted(edges)
