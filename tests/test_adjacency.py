from __future__ import annotations

import random

import pytest

from hexmap import (
    HexGrid,
    InvalidRegionError,
    RegionMap,
    adjacency_edges,
    build_adjacency,
    partition_regions,
)


def test_region_adjacency_on_a_row():
    # 3x1 row: hex 0 touches 1, hex 1 touches 2, hexes 0 and 2 do not touch
    grid = HexGrid(3, 1)
    adjacency = build_adjacency(grid, RegionMap(4, (0, 1, 2)))

    assert adjacency == {
        0: frozenset({1}),
        1: frozenset({0, 2}),
        2: frozenset({1}),
        3: frozenset(),
    }


def test_same_region_has_no_self_loop():
    grid = HexGrid(3, 1)
    adjacency = build_adjacency(grid, RegionMap(2, (0, 0, 1)))

    assert adjacency == {0: frozenset({1}), 1: frozenset({0})}


def test_single_region():
    grid = HexGrid(4, 4)
    adjacency = build_adjacency(grid, RegionMap(1, (0,) * 16))

    assert adjacency == {0: frozenset()}


@pytest.mark.parametrize("seed", [0, 1, 17, 256])
def test_symmetric_and_loop_free(seed):
    grid = HexGrid(16, 9)
    region_map = partition_regions(grid, 18, random.Random(seed))
    adjacency = build_adjacency(grid, region_map)

    assert sorted(adjacency) == list(range(18))
    for region, neighbors in adjacency.items():
        assert region not in neighbors
        for other in neighbors:
            assert region in adjacency[other]
    for region in region_map.empty_regions():
        assert adjacency[region] == frozenset()


def test_matches_hex_level_borders():
    grid = HexGrid(8, 6)
    region_map = partition_regions(grid, 5, random.Random(3))
    adjacency = build_adjacency(grid, region_map)

    expected = set()
    for index in range(grid.size):
        for n in grid.neighbors(index):
            a, b = region_map.region_ids[index], region_map.region_ids[n]
            if a != b:
                expected.add((min(a, b), max(a, b)))
    assert set(adjacency_edges(adjacency)) == expected


def test_adjacency_edges_sorted_pairs():
    adjacency = {
        0: frozenset({1}),
        1: frozenset({0, 2}),
        2: frozenset({1}),
        3: frozenset(),
    }
    assert adjacency_edges(adjacency) == [(0, 1), (1, 2)]


def test_rejects_out_of_range_region():
    with pytest.raises(InvalidRegionError):
        build_adjacency(HexGrid(3, 1), RegionMap(2, (0, 1, 2)))


def test_rejects_map_with_hole():
    with pytest.raises(InvalidRegionError):
        build_adjacency(HexGrid(3, 1), RegionMap(2, (0, 1)))
