"""
Testy dla ConfigLoader.

Testuje:
- Merge defaults z definicjami kafelków
- Wczytywanie scenariuszy
- Budowanie HexMap z rozmieszczeń (area / ring / line / coords)
- Pathfinding na mapach ze scenariuszy w data/
"""

import pytest
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexmap.core.config_loader import ConfigLoader, ConfiguredTile
from hexmap.core.errors import InvalidCoordinate
from hexmap.core.hex_coord import AxialCoord, CubeCoord, coord_from_list
from hexmap.core.hex_map import tile_cost
from hexmap.core.pathfinding import find_path, path_cost


DATA_PATH = Path(__file__).parent.parent / "data"


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def loader():
    """Loader na prawdziwych danych z data/."""
    return ConfigLoader(str(DATA_PATH))


@pytest.fixture
def tmp_loader(tmp_path):
    """Loader na minimalnych plikach YAML w katalogu tymczasowym."""
    (tmp_path / "defaults.yaml").write_text(
        "tile_defaults:\n"
        "  name: Tile\n"
        "  cost: 1.0\n"
        "pathfinding:\n"
        "  default_scenario: small\n",
        encoding="utf-8",
    )
    (tmp_path / "tiles.yaml").write_text(
        "tiles:\n"
        "  grass: {}\n"
        "  mud:\n"
        "    name: Mud\n"
        "    cost: 4\n"
        "  broken:\n"
        "    cost: -1\n",
        encoding="utf-8",
    )
    (tmp_path / "scenarios.yaml").write_text(
        "scenarios:\n"
        "  small:\n"
        "    start: [0, 0]\n"
        "    destination: [1, 0]\n"
        "    placements:\n"
        "      - {tile: grass, area: {center: [0, 0], radius: 1}}\n"
        "      - {tile: mud, coords: [[1, 0]]}\n",
        encoding="utf-8",
    )
    return ConfigLoader(str(tmp_path))


# ═══════════════════════════════════════════════════════════════════════════
# TEST: KAFELKI
# ═══════════════════════════════════════════════════════════════════════════

def test_tile_defaults_are_merged(loader):
    plain = loader.load_tile("plain")
    assert plain["id"] == "plain"
    assert plain["name"] == "Plain"
    assert plain["cost"] == 0.05


def test_tile_overrides_defaults(loader):
    assert loader.load_tile("expensive")["cost"] == 2.0
    assert loader.load_tile("cheap")["cost"] == 0.5


def test_empty_tile_definition_gets_all_defaults(tmp_loader):
    grass = tmp_loader.load_tile("grass")
    assert grass == {"name": "Tile", "cost": 1.0, "id": "grass"}


def test_unknown_tile_raises(loader):
    with pytest.raises(KeyError):
        loader.load_tile("lava")


def test_get_tile_ids(loader):
    assert set(loader.get_tile_ids()) == {"plain", "road", "cheap", "forest", "expensive"}
    assert set(loader.load_all_tiles().keys()) == set(loader.get_tile_ids())


def test_make_tile(tmp_loader):
    tile = tmp_loader.make_tile("mud")
    assert tile == ConfiguredTile(id="mud", name="Mud", cost=4.0)
    assert tile.pathfind_cost() == 4.0


def test_make_tile_negative_cost_raises(tmp_loader):
    with pytest.raises(ValueError):
        tmp_loader.make_tile("broken")


def test_deep_merge_nested():
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    override = {"nested": {"y": 3}, "b": 2}
    result = ConfigLoader._deep_merge(base, override)
    assert result == {"a": 1, "b": 2, "nested": {"x": 1, "y": 3}}
    assert base["nested"]["y"] == 2


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SCENARIUSZE
# ═══════════════════════════════════════════════════════════════════════════

def test_scenario_ids(loader):
    assert set(loader.get_scenario_ids()) == {"neighbor", "detour", "island", "lake"}


def test_default_scenario_exists(loader):
    default = loader.get_pathfinding_config()["default_scenario"]
    assert default in loader.get_scenario_ids()


def test_pathfinding_config_holds_default_scenario_only(loader):
    assert loader.get_pathfinding_config() == {"default_scenario": "detour"}


def test_load_scenario_fills_fields(tmp_loader):
    scenario = tmp_loader.load_scenario("small")
    assert scenario["id"] == "small"
    assert scenario["name"] == "small"
    assert len(scenario["placements"]) == 2


def test_load_scenario_returns_copy(loader):
    first = loader.load_scenario("detour")
    first["placements"].clear()
    assert loader.load_scenario("detour")["placements"]


def test_unknown_scenario_raises(loader):
    with pytest.raises(KeyError):
        loader.load_scenario("atlantis")


def test_reload_picks_up_changes(tmp_loader, tmp_path):
    assert tmp_loader.load_tile("mud")["cost"] == 4
    (tmp_path / "tiles.yaml").write_text("tiles:\n  mud: {cost: 9}\n", encoding="utf-8")
    assert tmp_loader.load_tile("mud")["cost"] == 4
    tmp_loader.reload()
    assert tmp_loader.load_tile("mud")["cost"] == 9


# ═══════════════════════════════════════════════════════════════════════════
# TEST: BUDOWANIE MAPY
# ═══════════════════════════════════════════════════════════════════════════

def test_build_map_later_placements_overwrite(tmp_loader):
    hex_map = tmp_loader.build_map(tmp_loader.load_scenario("small"))
    assert len(hex_map) == 7
    assert hex_map.get(AxialCoord(1, 0)).id == "mud"
    assert hex_map.get(AxialCoord(0, 0)).id == "grass"


def test_build_map_tiles_are_independent(tmp_loader):
    hex_map = tmp_loader.build_map(tmp_loader.load_scenario("small"))
    hex_map.get_mut(AxialCoord(0, 0)).cost = 100.0
    assert hex_map.get(AxialCoord(0, 1)).cost == 1.0


def test_placement_shapes():
    assert len(ConfigLoader.placement_coords({"tile": "x", "area": {"center": [0, 0], "radius": 2}})) == 19
    assert len(ConfigLoader.placement_coords({"tile": "x", "ring": {"center": [0, 0, 0], "radius": 2}})) == 12
    assert ConfigLoader.placement_coords({"tile": "x", "line": [[0, 0], [2, 0]]}) == [
        AxialCoord(0, 0), AxialCoord(1, 0), AxialCoord(2, 0),
    ]
    assert ConfigLoader.placement_coords({"tile": "x", "coords": [[1, -1, 0]]}) == [CubeCoord(1, -1, 0)]


def test_placement_without_shape_raises():
    with pytest.raises(ValueError):
        ConfigLoader.placement_coords({"tile": "x"})


def test_placement_with_invalid_cube_raises():
    with pytest.raises(InvalidCoordinate):
        ConfigLoader.placement_coords({"tile": "x", "coords": [[1, 1, 1]]})


def test_build_map_unknown_tile_raises(loader):
    with pytest.raises(KeyError):
        loader.build_map({"placements": [{"tile": "lava", "coords": [[0, 0]]}]})


def test_build_map_empty_scenario(loader):
    assert len(loader.build_map({})) == 0


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SCENARIUSZE Z data/
# ═══════════════════════════════════════════════════════════════════════════

def run_scenario(loader, scenario_id):
    scenario = loader.load_scenario(scenario_id)
    hex_map = loader.build_map(scenario)
    start = coord_from_list(scenario["start"])
    destination = coord_from_list(scenario["destination"])
    return hex_map, start, find_path(hex_map, start, destination, tile_cost)


def test_scenario_neighbor(loader):
    hex_map, start, path = run_scenario(loader, "neighbor")
    assert len(hex_map) == 19
    assert path == [AxialCoord(1, 0)]
    assert path_cost(hex_map, start, path, tile_cost) == pytest.approx(0.5)


def test_scenario_detour(loader):
    hex_map, start, path = run_scenario(loader, "detour")
    assert len(hex_map) == 10
    assert len(path) == 6
    assert all(hex_map.get(c).id == "cheap" for c in path)
    assert path_cost(hex_map, start, path, tile_cost) == pytest.approx(3.0)


def test_scenario_island(loader):
    hex_map, start, path = run_scenario(loader, "island")
    assert len(hex_map) == 2
    assert path is None


def test_scenario_lake(loader):
    """Las dookoła środka jest droższy niż obejście łąką."""
    hex_map, start, path = run_scenario(loader, "lake")
    assert len(hex_map) == 37
    assert path is not None
    assert path[-1] == AxialCoord(3, 0)
    assert all(hex_map.get(c).id != "forest" for c in path)
    assert path_cost(hex_map, start, path, tile_cost) < 1.5
