"""
hexmap - algebra współrzędnych hexagonalnych i pathfinding na rzadkiej mapie.

Szybki start:
    >>> from hexmap import AxialCoord, HexMap, PathfindingTile, find_path, tile_cost
    >>> hex_map = HexMap()
    >>> hex_map.insert_area(AxialCoord(0, 0), 2, PathfindingTile())
    >>> find_path(hex_map, AxialCoord(0, 0), AxialCoord(2, 0), tile_cost)
    [AxialCoord(q=1, r=0), AxialCoord(q=2, r=0)]
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .events import SearchEvent, SearchEventType, SearchLogger

__version__ = "0.1.0"

__all__ = list(_core_all) + ["SearchEvent", "SearchEventType", "SearchLogger"]
