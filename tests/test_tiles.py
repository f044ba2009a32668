from __future__ import annotations

import pytest

from hexmap import (
    Direction,
    EdgeDecal,
    FillTile,
    Hex,
    HexGrid,
    InvalidRegionError,
    Terrain,
    edge_decals,
    edge_terrain,
    fill_tiles,
)


def test_fill_tiles_in_index_order():
    grid = HexGrid(2, 2)
    terrains = (Terrain.GRASS, Terrain.WATER, Terrain.SNOW, Terrain.DIRT)
    tiles = fill_tiles(grid, terrains)

    assert tiles == [
        FillTile(Hex(0, 0), Terrain.GRASS),
        FillTile(Hex(1, 0), Terrain.WATER),
        FillTile(Hex(0, 1), Terrain.SNOW),
        FillTile(Hex(1, 1), Terrain.DIRT),
    ]


def test_decals_on_both_sides_of_a_border():
    grid = HexGrid(2, 1)
    decals = edge_decals(grid, (Terrain.GRASS, Terrain.WATER))

    assert decals == [
        EdgeDecal(Hex(0, 0), Direction.SE, Terrain.SAND),
        EdgeDecal(Hex(1, 0), Direction.NW, Terrain.SAND),
    ]
    assert [d.tile_index for d in decals] == [14, 17]


def test_no_decals_for_uniform_map():
    grid = HexGrid(4, 3)
    assert edge_decals(grid, (Terrain.SWAMP,) * grid.size) == []


def test_decals_match_edge_rule():
    grid = HexGrid(5, 4)
    terrains = tuple(Terrain(i % 6) for i in range(grid.size))
    for decal in edge_decals(grid, terrains):
        index = grid.to_index(*decal.hex)
        n = grid.neighbor(index, decal.direction)
        assert n is not None
        assert decal.border == edge_terrain(terrains[index], terrains[n])


def test_rejects_wrong_length():
    with pytest.raises(InvalidRegionError):
        fill_tiles(HexGrid(2, 2), (Terrain.GRASS,))
    with pytest.raises(InvalidRegionError):
        edge_decals(HexGrid(2, 2), (Terrain.GRASS,) * 5)
