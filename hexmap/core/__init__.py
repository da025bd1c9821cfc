"""
Core module - podstawowe komponenty biblioteki.

Zawiera:
- AxialCoord, CubeCoord: Dwa systemy współrzędnych hexagonalnych
- shapes: Linie, pierścienie, obszary, sąsiedzi
- HexMap: Rzadka mapa współrzędna -> kafelek
- pathfinding: Algorytm Dijkstry dla HexMap
- ConfigLoader: Wczytywanie kafelków i scenariuszy z YAML
- errors: Wyjątki biblioteki
"""

from .errors import HexMapError, InvalidCoordinate, RoundingFailure, InvalidEdgeCost
from .hex_coord import (
    AxialCoord,
    CubeCoord,
    HexCoords,
    HEX_DIRECTIONS,
    CUBE_DIRECTIONS,
    axial_to_cube,
    cube_to_axial,
    coord_from_list,
    distance,
)
from .shapes import adjacent, line, line_from_center, ring, centered_ring, area, centered_area, spiral
from .hex_map import HexMap, PathfindingTile, tile_cost
from .pathfinding import PathMap, PathNode, find_path, find_path_next_step, path_cost
from .config_loader import ConfigLoader, ConfiguredTile

__all__ = [
    "HexMapError", "InvalidCoordinate", "RoundingFailure", "InvalidEdgeCost",
    "AxialCoord", "CubeCoord", "HexCoords", "HEX_DIRECTIONS", "CUBE_DIRECTIONS",
    "axial_to_cube", "cube_to_axial", "coord_from_list", "distance",
    "adjacent", "line", "line_from_center", "ring", "centered_ring",
    "area", "centered_area", "spiral",
    "HexMap", "PathfindingTile", "tile_cost",
    "PathMap", "PathNode", "find_path", "find_path_next_step", "path_cost",
    "ConfigLoader", "ConfiguredTile",
]
