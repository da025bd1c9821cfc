"""
Loader konfiguracji z automatycznym uzupełnianiem wartości domyślnych.

Definicje kafelków i scenariuszy map są w plikach YAML:
- defaults.yaml: wartości bazowe kafelków i ustawienia pathfindingu
- tiles.yaml: typy kafelków (nazwa, koszt wejścia)
- scenarios.yaml: gotowe mapy testowe (start, cel, rozmieszczenie kafelków)

Logika merge (uzupełniania defaults):
    1. Wczytaj defaults.yaml - zawiera tile_defaults
    2. Wczytaj konkretną definicję (np. kafelek "forest")
    3. Brakujące klucze bierz z tile_defaults
    4. Definicja może nadpisać defaults

Przykład:
    defaults.yaml:
        tile_defaults:
            name: Tile
            cost: 0.05

    tiles.yaml:
        tiles:
            forest:
                name: Forest
                cost: 1.5
            plain:
                name: Plain
                # cost nie podane -> 0.05 z defaults

Format scenariusza:
    scenarios:
        detour:
            name: Objazd
            start: [-2, 0, 2]          # 2 liczby = axial, 3 = cube
            destination: [2, 0, -2]
            placements:                # wykonywane po kolei, później = nadpisuje
                - {tile: cheap, area: {center: [0, 0, 0], radius: 2}}
                - {tile: expensive, ring: {center: [0, 0, 0], radius: 1}}
                - {tile: road, line: [[-2, 0, 2], [2, 0, -2]]}
                - {tile: cheap, coords: [[0, 0, 0], [1, 0, -1]]}

Użycie:
    >>> loader = ConfigLoader("data/")
    >>> loader.load_tile("plain")["cost"]  # 0.05 z defaults
    0.05
    >>> hex_map = loader.build_map(loader.load_scenario("detour"))
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import yaml
import copy

from .hex_coord import AxialCoord, CubeCoord, coord_from_list
from .hex_map import HexMap, PathfindingTile
from .shapes import area, line, ring

Coord = Union[AxialCoord, CubeCoord]


@dataclass
class ConfiguredTile(PathfindingTile):
    """
    Kafelek zbudowany z definicji w tiles.yaml.

    Attributes:
        id (str): Klucz w tiles.yaml
        name (str): Nazwa do wyświetlania
        cost (float): Koszt wejścia na kafelek
    """
    id: str
    name: str
    cost: float

    def pathfind_cost(self) -> float:
        return self.cost


class ConfigLoader:
    """
    Ładuje konfigurację z plików YAML z automatycznym merge defaults.

    Attributes:
        data_path (Path): Ścieżka do folderu data/
        _defaults (Dict): Cache wczytanych defaults
        _tiles (Dict): Cache wczytanych kafelków
        _scenarios (Dict): Cache wczytanych scenariuszy

    Example:
        >>> loader = ConfigLoader("data/")
        >>> loader.load_tile("expensive")["cost"]
        2.0
    """

    def __init__(self, data_path: str = "data/"):
        """
        Inicjalizuje loader z ścieżką do danych.

        Args:
            data_path: Ścieżka do folderu z plikami YAML
        """
        self.data_path = Path(data_path)
        self._defaults: Optional[Dict] = None
        self._tiles: Optional[Dict] = None
        self._scenarios: Optional[Dict] = None

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE PLIKÓW
    # ─────────────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> Dict:
        """
        Wczytuje plik YAML.

        Raises:
            FileNotFoundError: Jeśli plik nie istnieje
        """
        filepath = self.data_path / filename
        with open(filepath, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def get_defaults(self) -> Dict:
        """
        Zwraca słownik z wartościami domyślnymi.

        Cache'uje wczytany plik - kolejne wywołania są szybkie.
        """
        if self._defaults is None:
            self._defaults = self._load_yaml("defaults.yaml")
        return self._defaults

    def get_tile_defaults(self) -> Dict:
        """Zwraca sekcję tile_defaults z defaults.yaml."""
        return self.get_defaults().get("tile_defaults", {})

    def get_pathfinding_config(self) -> Dict:
        """Zwraca sekcję pathfinding (default_scenario - scenariusz uruchamiany bez --scenario)."""
        return self.get_defaults().get("pathfinding", {})

    # ─────────────────────────────────────────────────────────────────────────
    # KAFELKI
    # ─────────────────────────────────────────────────────────────────────────

    def _get_all_tiles_raw(self) -> Dict:
        """Zwraca wszystkie surowe definicje kafelków."""
        if self._tiles is None:
            data = self._load_yaml("tiles.yaml")
            self._tiles = data.get("tiles", {})
        return self._tiles

    def load_tile(self, tile_id: str) -> Dict:
        """
        Wczytuje definicję kafelka z uzupełnionymi defaults.

        Raises:
            KeyError: Jeśli kafelek nie istnieje
        """
        tiles = self._get_all_tiles_raw()

        if tile_id not in tiles:
            raise KeyError(f"Tile '{tile_id}' not found in tiles.yaml")

        result = self._deep_merge(self.get_tile_defaults(), tiles[tile_id] or {})
        result["id"] = tile_id

        return result

    def load_all_tiles(self) -> Dict[str, Dict]:
        """Wczytuje wszystkie definicje kafelków (tile_id -> definicja)."""
        return {tid: self.load_tile(tid) for tid in self._get_all_tiles_raw().keys()}

    def get_tile_ids(self) -> List[str]:
        """Zwraca listę wszystkich ID kafelków."""
        return list(self._get_all_tiles_raw().keys())

    def make_tile(self, tile_id: str) -> ConfiguredTile:
        """
        Tworzy obiekt kafelka z definicji.

        Raises:
            KeyError: Jeśli kafelek nie istnieje
            ValueError: Jeśli koszt jest ujemny
        """
        data = self.load_tile(tile_id)
        cost = float(data.get("cost", 0.0))
        if cost < 0:
            raise ValueError(f"Tile '{tile_id}' has negative cost {cost}")
        return ConfiguredTile(id=tile_id, name=str(data.get("name", tile_id)), cost=cost)

    # ─────────────────────────────────────────────────────────────────────────
    # SCENARIUSZE
    # ─────────────────────────────────────────────────────────────────────────

    def _get_all_scenarios_raw(self) -> Dict:
        """Zwraca wszystkie surowe definicje scenariuszy."""
        if self._scenarios is None:
            data = self._load_yaml("scenarios.yaml")
            self._scenarios = data.get("scenarios", {})
        return self._scenarios

    def get_scenario_ids(self) -> List[str]:
        """Zwraca listę wszystkich ID scenariuszy."""
        return list(self._get_all_scenarios_raw().keys())

    def load_scenario(self, scenario_id: str) -> Dict:
        """
        Wczytuje definicję scenariusza.

        Raises:
            KeyError: Jeśli scenariusz nie istnieje
        """
        scenarios = self._get_all_scenarios_raw()

        if scenario_id not in scenarios:
            raise KeyError(f"Scenario '{scenario_id}' not found in scenarios.yaml")

        result = copy.deepcopy(scenarios[scenario_id])
        result["id"] = scenario_id
        result.setdefault("name", scenario_id)
        result.setdefault("placements", [])

        return result

    def build_map(self, scenario: Dict[str, Any]) -> HexMap[Coord, ConfiguredTile]:
        """
        Buduje HexMap na podstawie rozmieszczeń ze scenariusza.

        Rozmieszczenia są wykonywane po kolei - późniejsze nadpisują
        wcześniejsze (semantyka HexMap.insert).

        Raises:
            KeyError: Nieznany kafelek
            ValueError: Rozmieszczenie bez kształtu lub zła współrzędna
            InvalidCoordinate: Współrzędne cube z sumą != 0
        """
        hex_map: HexMap[Coord, ConfiguredTile] = HexMap()
        tiles: Dict[str, ConfiguredTile] = {}

        for placement in scenario.get("placements", []):
            tile_id = placement["tile"]
            if tile_id not in tiles:
                tiles[tile_id] = self.make_tile(tile_id)
            tile = tiles[tile_id]

            for coord in self.placement_coords(placement):
                hex_map.insert(coord, copy.deepcopy(tile))

        return hex_map

    @staticmethod
    def placement_coords(placement: Dict[str, Any]) -> List[Coord]:
        """
        Rozwija jedno rozmieszczenie do listy współrzędnych.

        Obsługiwane kształty: area, ring, line, coords.

        Raises:
            ValueError: Brak znanego kształtu
        """
        if "area" in placement:
            spec = placement["area"]
            return area(coord_from_list(spec["center"]), int(spec.get("radius", 0)))
        if "ring" in placement:
            spec = placement["ring"]
            return ring(coord_from_list(spec["center"]), int(spec.get("radius", 0)))
        if "line" in placement:
            a, b = placement["line"]
            return line(coord_from_list(a), coord_from_list(b))
        if "coords" in placement:
            return [coord_from_list(c) for c in placement["coords"]]
        raise ValueError(f"Placement has no shape (area/ring/line/coords): {placement}")

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Głęboko łączy dwa słowniki.

        Override nadpisuje wartości w base.
        Nested dicts są merge'owane rekurencyjnie.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    def reload(self) -> None:
        """
        Czyści cache i wymusza ponowne wczytanie plików.

        Przydatne podczas edycji plików YAML w runtime.
        """
        self._defaults = None
        self._tiles = None
        self._scenarios = None
