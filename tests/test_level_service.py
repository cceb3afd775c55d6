"""Tests for map file discovery and level loading."""

from pathlib import Path

from pacmaze.service.level_service import LevelService

LEVEL = "monsters: 0\nOOOOO\nO---O\nOOOOO\n"


def test_default_map_file_lives_in_maps_dir(tmp_path):
    service = LevelService(maps_dir=tmp_path)
    assert service.resolve_map_path(None) == tmp_path / "maps.txt"


def test_bare_name_falls_back_to_maps_dir(tmp_path, monkeypatch):
    maps_dir = tmp_path / "maps"
    maps_dir.mkdir()
    (maps_dir / "extra.txt").write_text(LEVEL, encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    service = LevelService(maps_dir=maps_dir)
    assert service.resolve_map_path("extra.txt") == maps_dir / "extra.txt"
    assert len(service.load_levels("extra.txt")) == 1


def test_existing_path_is_used_as_is(tmp_path, monkeypatch):
    (tmp_path / "local.txt").write_text(LEVEL, encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    service = LevelService(maps_dir=tmp_path / "maps")
    assert service.resolve_map_path("local.txt") == Path("local.txt")


def test_load_levels_from_explicit_path(tmp_path):
    path = tmp_path / "custom.txt"
    path.write_text(LEVEL + "---\n" + LEVEL, encoding="utf-8")

    levels = LevelService(maps_dir=tmp_path).load_levels(path)
    assert len(levels) == 2
    assert levels[0] is not levels[1]
