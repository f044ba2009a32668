"""Tests for the PNG preview renderer and its hex geometry."""

from __future__ import annotations

import math

import pytest

from hexmap import Direction, HexGrid, MapConfig, Terrain, generate_map
from hexmap.render import TERRAIN_COLORS, hex_center, hex_corners, side_segment


def _close(p, q):
    return math.isclose(p[0], q[0], abs_tol=1e-9) and math.isclose(p[1], q[1], abs_tol=1e-9)


class TestGeometry:
    def test_odd_columns_shifted_down(self):
        _, y_even = hex_center(0, 0)
        _, y_odd = hex_center(1, 0)
        assert y_odd == pytest.approx(y_even + math.sqrt(3) / 2)

    def test_corners_at_unit_radius(self):
        cx, cy = hex_center(2, 3)
        for x, y in hex_corners(2, 3):
            assert math.hypot(x - cx, y - cy) == pytest.approx(1.0)

    def test_neighbours_share_a_side(self):
        grid = HexGrid(6, 5)
        for index in range(grid.size):
            h = grid.to_hex(index)
            for direction in Direction:
                n = grid.neighbor(index, direction)
                if n is None:
                    continue
                other = grid.to_hex(n)
                a0, a1 = side_segment(h.hx, h.hy, direction)
                b0, b1 = side_segment(other.hx, other.hy, direction.opposite)
                assert _close(a0, b1) and _close(a1, b0)

    def test_every_terrain_has_a_colour(self):
        assert set(TERRAIN_COLORS) == set(Terrain)


class TestRenderPng:
    def test_renders_map(self, tmp_path):
        pytest.importorskip("matplotlib")
        hex_map = generate_map(MapConfig(seed=4))
        out = tmp_path / "map.png"
        from hexmap import render_png

        render_png(hex_map, out, show_region_ids=True)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_leaves_backend_alone(self, tmp_path):
        matplotlib = pytest.importorskip("matplotlib")
        before = matplotlib.get_backend()
        from hexmap import render_png

        render_png(generate_map(MapConfig(seed=5)), tmp_path / "b.png")
        assert matplotlib.get_backend() == before

    def test_renders_without_edges(self, tmp_path):
        pytest.importorskip("matplotlib")
        hex_map = generate_map(MapConfig(width=4, height=3, num_regions=3, seed=2))
        out = tmp_path / "nested" / "plain.png"
        from hexmap import render_png

        render_png(hex_map, out, show_edges=False)
        assert out.exists()
