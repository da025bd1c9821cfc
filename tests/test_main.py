"""
Testy dla CLI (main.py).

Testuje kody wyjścia, wypisywanie ścieżki, listę scenariuszy,
zapis logu i obsługę błędów konfiguracji.
"""

import json
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import main


def test_default_scenario_finds_path(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "(detour)" in out
    assert "Ścieżka (6 kroków, koszt 3.00)" in out


def test_unreachable_scenario_exit_code(capsys):
    assert main(["--scenario", "island"]) == 1
    assert "Brak ścieżki" in capsys.readouterr().out


def test_list_scenarios(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    for scenario_id in ("neighbor", "detour", "island", "lake"):
        assert scenario_id in out


def test_unknown_scenario_is_config_error(capsys):
    assert main(["-s", "atlantis"]) == 2
    assert "Błąd konfiguracji" in capsys.readouterr().err


def test_verbose_prints_statistics(capsys):
    assert main(["-s", "neighbor", "-v"]) == 0
    out = capsys.readouterr().out
    assert "STATYSTYKI ZDARZEŃ" in out
    assert "NODE_EXPANDED" in out


def test_save_log(tmp_path, capsys):
    target = tmp_path / "out" / "search.json"
    assert main(["-s", "neighbor", "--save-log", str(target)]) == 0
    assert "Log zapisany" in capsys.readouterr().out

    with open(target, encoding="utf-8") as f:
        data = json.load(f)
    assert data["metadata"]["label"] == "neighbor"
    assert data["result"]["path"] == [[1, 0]]


def test_custom_data_dir(tmp_path, capsys):
    (tmp_path / "defaults.yaml").write_text(
        "pathfinding:\n  default_scenario: tiny\n", encoding="utf-8"
    )
    (tmp_path / "tiles.yaml").write_text("tiles:\n  stone: {cost: 2}\n", encoding="utf-8")
    (tmp_path / "scenarios.yaml").write_text(
        "scenarios:\n"
        "  tiny:\n"
        "    start: [0, 0]\n"
        "    destination: [0, 1]\n"
        "    placements:\n"
        "      - {tile: stone, coords: [[0, 0], [0, 1]]}\n",
        encoding="utf-8",
    )
    assert main(["--data", str(tmp_path)]) == 0
    assert "koszt 2.00" in capsys.readouterr().out
