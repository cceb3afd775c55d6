"""Tests for loading multi-level map files."""

from pathlib import Path

import pytest

from pacmaze.model.errors import MapError
from pacmaze.repository.level_repository_text import LevelRepositoryText

LEVEL_A = "name: A\nmonsters: 0\nOOOOO\nO---O\nOOOOO\n"
LEVEL_B = "name: B\nOOOOO\nO- -O\nOOOOO\n"

def write_maps(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "maps.txt"
    path.write_text(text, encoding="utf-8")
    return path

def test_loads_levels_separated_by_dashes(tmp_path):
    path = write_maps(tmp_path, LEVEL_A + "---\n" + LEVEL_B)
    levels = LevelRepositoryText(path).find_all()

    assert [level.name for level in levels] == ["A", "B"]
    assert levels[0].monster_count == 0
    assert levels[1].monster_count == 1

def test_empty_blocks_are_skipped(tmp_path):
    path = write_maps(tmp_path, "---\n" + LEVEL_A + "---\n\n---\n")
    assert len(LevelRepositoryText(path).find_all()) == 1

def test_find_all_returns_fresh_copies(tmp_path):
    repository = LevelRepositoryText(write_maps(tmp_path, LEVEL_A))
    first = repository.find_all()[0]
    first.eat_dot(1, 1)

    assert repository.find_all()[0].count_dots() == 3

def test_dimension_mismatch_is_rejected(tmp_path):
    path = write_maps(tmp_path, LEVEL_A + "---\nmonsters: 0\nOOOOOO\nO----O\nOOOOOO\n")
    with pytest.raises(MapError, match="Level 2"):
        LevelRepositoryText(path).find_all()

def test_invalid_level_reports_its_number(tmp_path):
    path = write_maps(tmp_path, LEVEL_A + "---\nspeedModifier: 9\nOOOOO\nO---O\nOOOOO\n")
    with pytest.raises(MapError, match=r"^Level 2: .*speedModifier"):
        LevelRepositoryText(path).find_all()

def test_file_without_maps_is_rejected(tmp_path):
    with pytest.raises(MapError, match="bulunamadı"):
        LevelRepositoryText(write_maps(tmp_path, "\n---\n")).find_all()

def test_missing_file_is_wrapped_in_map_error(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(MapError, match="nope.txt"):
        LevelRepositoryText(missing).find_all()

def test_windows_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(LEVEL_A.replace("\n", "\r\n").encode("utf-8"))
    levels = LevelRepositoryText(path).find_all()
    assert levels[0].width == 5

def test_bundled_maps_file_is_valid():
    path = Path(__file__).resolve().parents[1] / "maps" / "maps.txt"
    levels = LevelRepositoryText(path).find_all()

    assert len(levels) == 3
    assert {(level.width, level.height) for level in levels} == {(15, 7)}
    assert levels[1].material == "brick"
    assert levels[2].monster_starts == [(7, 5), (13, 5)]
