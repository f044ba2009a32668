"""Border rules between neighbouring terrains.

Where two different terrains meet, a border decal is drawn on the hex
side between them.  :func:`edge_terrain` picks which terrain the decal is
made of and :func:`edge_tile_index` numbers the decal variants, six per
border terrain (one for each :class:`Direction`).
"""

from __future__ import annotations

from typing import Optional, Tuple

from .models import NUM_DIRECTIONS, Direction, Terrain

EDGE_VARIANTS_PER_TERRAIN = NUM_DIRECTIONS

BORDER_TERRAINS: Tuple[Terrain, ...] = (Terrain.GRASS, Terrain.DIRT, Terrain.SAND)


def _exactly_one(a: Terrain, b: Terrain, terrain: Terrain) -> bool:
    return (a == terrain) != (b == terrain)


def edge_terrain(a: Terrain, b: Terrain) -> Optional[Terrain]:
    """Terrain of the border between *a* and *b*, or ``None`` if equal.

    Rules, first match wins:

    1. water on exactly one side → sand (beach)
    2. sand on exactly one side → sand
    3. dirt against grass → grass
    4. any other pair of different terrains → dirt
    """
    if _exactly_one(a, b, Terrain.WATER) or _exactly_one(a, b, Terrain.SAND):
        return Terrain.SAND
    if {a, b} == {Terrain.DIRT, Terrain.GRASS}:
        return Terrain.GRASS
    if a != b:
        return Terrain.DIRT
    return None


def edge_tile_index(border: Terrain, direction: Direction) -> int:
    """Position of a border decal in a tileset laid out terrain-major.

    ``border.ordinal * 6 + direction.ordinal``; e.g. the sand decal for
    the south side is ``2 * 6 + 3 == 15``.
    """
    return border.ordinal * EDGE_VARIANTS_PER_TERRAIN + direction.ordinal
