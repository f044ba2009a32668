"""Tests for the ``hexmap`` command line."""

from __future__ import annotations

import pytest

from hexmap.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["generate"])
    assert args.width == 16
    assert args.height == 9
    assert args.regions == 18
    assert args.passes == 4
    assert args.seed is None


def test_generate_summary(capsys):
    main(["generate", "--seed", "3"])
    out = capsys.readouterr().out
    assert out.startswith("16x9 grid, 18 regions")
    assert "  region 0: " in out
    assert "  region 17: " in out


def test_generate_is_reproducible(capsys):
    main(["generate", "--seed", "12", "--show-adjacency"])
    first = capsys.readouterr().out
    main(["generate", "--seed", "12", "--show-adjacency"])
    assert capsys.readouterr().out == first


def test_show_adjacency(capsys):
    main(["generate", "--seed", "5", "--regions", "4", "--show-adjacency"])
    lines = capsys.readouterr().out.splitlines()
    adjacency_lines = [l for l in lines if l[:1].isdigit() and ": " in l]
    assert [l.split(":")[0] for l in adjacency_lines] == ["0", "1", "2", "3"]


def test_bad_config_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["generate", "--regions", "0"])
    assert exc.value.code == 1


def test_render_out(tmp_path, capsys):
    pytest.importorskip("matplotlib")
    out = tmp_path / "maps" / "map.png"
    main(["generate", "--seed", "1", "--render-out", str(out)])
    assert out.exists()
    assert f"Saved {out}" in capsys.readouterr().out
