"""Tile placement — what a renderer should draw, and where.

The generator never touches pixels.  Instead it hands the rendering host
two kinds of records:

- :class:`FillTile` — the base terrain tile for one hex.
- :class:`EdgeDecal` — a border decal on one side of a hex, drawn on top
  of the fill tile where its neighbour has a different terrain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .edges import edge_terrain, edge_tile_index
from .hexgrid import HexGrid
from .models import Direction, Hex, InvalidRegionError, Terrain


@dataclass(frozen=True)
class FillTile:
    hex: Hex
    terrain: Terrain


@dataclass(frozen=True)
class EdgeDecal:
    """Border decal for the side of *hex* facing *direction*."""

    hex: Hex
    direction: Direction
    border: Terrain

    @property
    def tile_index(self) -> int:
        return edge_tile_index(self.border, self.direction)


def _check_terrains(grid: HexGrid, terrains: Sequence[Terrain]) -> None:
    if len(terrains) != grid.size:
        raise InvalidRegionError(
            f"Expected {grid.size} hex terrains, got {len(terrains)}"
        )


def fill_tiles(grid: HexGrid, terrains: Sequence[Terrain]) -> List[FillTile]:
    """One fill tile per hex, in array-index order."""
    _check_terrains(grid, terrains)
    return [FillTile(h, terrains[i]) for i, h in enumerate(grid.hexes())]


def edge_decals(grid: HexGrid, terrains: Sequence[Terrain]) -> List[EdgeDecal]:
    """Border decals for every hex side that faces a different terrain.

    Hexes are visited in array-index order and directions in
    :class:`Direction` order.  Sides on the map boundary get no decal.
    """
    _check_terrains(grid, terrains)
    decals: List[EdgeDecal] = []
    for index, h in enumerate(grid.hexes()):
        own = terrains[index]
        for direction in Direction:
            n = grid.neighbor(index, direction)
            if n is None:
                continue
            border = edge_terrain(own, terrains[n])
            if border is not None:
                decals.append(EdgeDecal(h, direction, border))
    return decals
