from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Tuple

from .models import Direction, Terrain

if TYPE_CHECKING:
    from .pipeline import HexMap

TERRAIN_COLORS: Dict[Terrain, str] = {
    Terrain.GRASS: "#6fae4a",
    Terrain.DIRT: "#9c7a4b",
    Terrain.SAND: "#e3cf8c",
    Terrain.WATER: "#3f7fbf",
    Terrain.SWAMP: "#55694a",
    Terrain.SNOW: "#eef2f5",
}


def hex_center(hx: int, hy: int, size: float = 1.0) -> Tuple[float, float]:
    """Centre of a flat-topped hex; odd columns are shifted down half a row."""
    x = size * 1.5 * hx
    y = size * math.sqrt(3) * (hy + 0.5 * (hx & 1))
    return x, y


def hex_corners(hx: int, hy: int, size: float = 1.0) -> List[Tuple[float, float]]:
    """Six corners, clockwise from the east corner (``y`` grows downward)."""
    cx, cy = hex_center(hx, hy, size)
    return [
        (cx + size * math.cos(math.radians(60 * i)),
         cy + size * math.sin(math.radians(60 * i)))
        for i in range(6)
    ]


def side_segment(
    hx: int,
    hy: int,
    direction: Direction,
    size: float = 1.0,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """End points of the side of a hex that faces *direction*."""
    corners = hex_corners(hx, hy, size)
    # N is the side between corners 4 and 5; each step clockwise adds one.
    start = (4 + direction.ordinal) % 6
    return corners[start], corners[(start + 1) % 6]


def render_png(
    hex_map: "HexMap",
    output_path: str | Path,
    hex_size: float = 1.0,
    edge_width: float = 3.0,
    outline_color: str = "#2b2b2b",
    show_edges: bool = True,
    show_region_ids: bool = False,
    dpi: int = 150,
) -> None:
    """Render a generated map to PNG.

    Requires matplotlib; imported lazily to keep core package lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    grid = hex_map.grid
    fig, ax = plt.subplots()

    for tile in hex_map.fill_tiles():
        corners = hex_corners(tile.hex.hx, tile.hex.hy, hex_size)
        ax.add_patch(Polygon(
            corners,
            closed=True,
            facecolor=TERRAIN_COLORS[tile.terrain],
            edgecolor=outline_color,
            linewidth=0.3,
        ))

    if show_edges:
        # Pull each decal slightly inside its own hex so both sides of a
        # border stay visible.
        inset = 0.12
        for decal in hex_map.edge_decals():
            (x0, y0), (x1, y1) = side_segment(
                decal.hex.hx, decal.hex.hy, decal.direction, hex_size
            )
            cx, cy = hex_center(decal.hex.hx, decal.hex.hy, hex_size)
            xs = [x0 + (cx - x0) * inset, x1 + (cx - x1) * inset]
            ys = [y0 + (cy - y0) * inset, y1 + (cy - y1) * inset]
            ax.plot(
                xs, ys,
                color=TERRAIN_COLORS[decal.border],
                linewidth=edge_width,
                solid_capstyle="round",
            )

    if show_region_ids:
        for index, h in enumerate(grid.hexes()):
            cx, cy = hex_center(h.hx, h.hy, hex_size)
            ax.text(cx, cy, str(hex_map.region_map.region_ids[index]),
                    fontsize=5, ha="center", va="center", color="#333333")

    width = hex_size * (1.5 * (grid.width - 1) + 2)
    height = hex_size * math.sqrt(3) * (grid.height + 0.5)
    ax.set_xlim(-hex_size, width - hex_size)
    ax.set_ylim(height - hex_size * math.sqrt(3) / 2, -hex_size * math.sqrt(3) / 2)
    ax.set_aspect("equal", "box")
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
