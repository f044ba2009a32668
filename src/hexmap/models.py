from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class HexMapError(Exception):
    """Base class for precondition violations in the map generator."""


class OutOfBoundsError(HexMapError, IndexError):
    """A hex coordinate or array index lies outside the grid."""


class InvalidRegionError(HexMapError, ValueError):
    """A region map has a hole or a region id outside ``[0, num_regions)``."""


class Hex(NamedTuple):
    hx: int
    hy: int


class Direction(Enum):
    """The six neighbour directions of a flat-topped hex, clockwise from N.

    The ordinal is part of the border-tile numbering, so the order here
    must not change.
    """

    N = 0
    NE = 1
    SE = 2
    S = 3
    SW = 4
    NW = 5

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 3) % 6)


class Terrain(Enum):
    """Terrain types in assignment order (lowest ordinal is tried first)."""

    GRASS = 0
    DIRT = 1
    SAND = 2
    WATER = 3
    SWAMP = 4
    SNOW = 5

    @property
    def ordinal(self) -> int:
        return self.value


NUM_DIRECTIONS = len(Direction)
NUM_TERRAINS = len(Terrain)
