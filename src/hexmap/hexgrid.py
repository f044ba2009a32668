"""Rectangular hex lattice with odd-q offset coordinates.

Columns are addressed by ``hx`` and rows by ``hy``; odd columns sit half
a cell lower than even ones (``hy`` grows downward).  Every cell also has
a linear array index ``hy * width + hx``, which is the storage key used by
the region and terrain stages.
"""

from __future__ import annotations

import random
from typing import Dict, Iterator, Optional, Set, Tuple

from .models import Direction, Hex, OutOfBoundsError


# Per-direction (dx, dy) offsets, keyed by column parity.
_EVEN_COLUMN_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.NE: (1, -1),
    Direction.SE: (1, 0),
    Direction.S: (0, 1),
    Direction.SW: (-1, 0),
    Direction.NW: (-1, -1),
}

_ODD_COLUMN_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.NE: (1, 0),
    Direction.SE: (1, 1),
    Direction.S: (0, 1),
    Direction.SW: (-1, 1),
    Direction.NW: (-1, 0),
}


def _to_cube(h: Hex) -> Tuple[int, int, int]:
    x = h.hx
    z = h.hy - (h.hx - (h.hx & 1)) // 2
    return x, -x - z, z


class HexGrid:
    """A ``width`` x ``height`` hex lattice.

    Parameters
    ----------
    width : int
        Number of columns (``hx`` range).
    height : int
        Number of rows (``hy`` range).
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        return self.width * self.height

    def __len__(self) -> int:
        return self.size

    def __contains__(self, h: object) -> bool:
        if not isinstance(h, tuple) or len(h) != 2:
            return False
        return self.in_bounds(h[0], h[1])

    def __repr__(self) -> str:
        return f"HexGrid(width={self.width}, height={self.height})"

    def in_bounds(self, hx: int, hy: int) -> bool:
        return 0 <= hx < self.width and 0 <= hy < self.height

    # ── coordinate conversion ───────────────────────────────────────

    def to_index(self, hx: int, hy: int) -> int:
        """Return the array index of ``(hx, hy)``."""
        if not self.in_bounds(hx, hy):
            raise OutOfBoundsError(
                f"Hex ({hx}, {hy}) outside {self.width}x{self.height} grid"
            )
        return hy * self.width + hx

    def to_hex(self, index: int) -> Hex:
        """Return the hex coordinate stored at array *index*."""
        if not 0 <= index < self.size:
            raise OutOfBoundsError(
                f"Index {index} outside [0, {self.size})"
            )
        hy, hx = divmod(index, self.width)
        return Hex(hx, hy)

    def hexes(self) -> Iterator[Hex]:
        """Iterate every coordinate in array-index order."""
        for index in range(self.size):
            yield self.to_hex(index)

    # ── metric and neighbourhood ────────────────────────────────────

    def distance(self, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        """Number of steps between two hexes on the lattice."""
        ax, ay, az = _to_cube(Hex(*a))
        bx, by, bz = _to_cube(Hex(*b))
        return max(abs(ax - bx), abs(ay - by), abs(az - bz))

    def neighbor(self, index: int, direction: Direction) -> Optional[int]:
        """Index of the neighbour in *direction*, or ``None`` if off-grid."""
        hx, hy = self.to_hex(index)
        offsets = _ODD_COLUMN_OFFSETS if hx % 2 else _EVEN_COLUMN_OFFSETS
        dx, dy = offsets[direction]
        nx, ny = hx + dx, hy + dy
        if not self.in_bounds(nx, ny):
            return None
        return ny * self.width + nx

    def neighbors(self, index: int) -> Set[int]:
        """All in-bounds neighbour indices of *index* (up to six)."""
        result: Set[int] = set()
        for direction in Direction:
            n = self.neighbor(index, direction)
            if n is not None:
                result.add(n)
        return result

    # ── sampling ────────────────────────────────────────────────────

    def random_hex(self, rng: Optional[random.Random] = None) -> Hex:
        """Uniformly random in-bounds coordinate.

        Draws from *rng* when given, otherwise from the process-wide
        :mod:`random` generator.
        """
        source = random if rng is None else rng
        hx = source.randrange(self.width)
        hy = source.randrange(self.height)
        return Hex(hx, hy)
