"""
Rzadka mapa hexagonalna (HexMap) - współrzędna -> kafelek.

HexMap przechowuje dowolne obiekty (kafelki) pod kluczami współrzędnych:
- Mapa jest rzadka: istnieją tylko wstawione pola
- Brak kafelka oznacza pole nieprzechodnie / nieustawione
- Typ współrzędnych jest dowolny (AxialCoord lub CubeCoord),
  ale jedna mapa powinna używać jednego typu

Kafelki (T) są nieprzezroczyste dla mapy. Pathfinding korzysta z nich
tylko przez funkcję kosztu podaną przez wywołującego. Dla wygody jest
PathfindingTile (stały koszt wejścia na kafelek) i gotowa funkcja
kosztu tile_cost.

Przykład użycia:
    >>> hex_map = HexMap()
    >>> hex_map.insert_area(AxialCoord(0, 0), 2, "grass")
    >>> len(hex_map)
    19
    >>> hex_map.get(AxialCoord(5, 5)) is None
    True

Wielowątkowość:
    Mapa nie jest synchronizowana. Modyfikacja z wielu wątków (lub
    modyfikacja w trakcie find_path) wymaga zewnętrznego locka.
"""

from __future__ import annotations
import copy
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from .hex_coord import C
from .shapes import adjacent, area

T = TypeVar("T")

DEFAULT_PATHFIND_COST = 0.05


class HexMap(Generic[C, T]):
    """
    Mapa współrzędna -> kafelek z semantyką nadpisywania.

    Attributes:
        _tiles (Dict[C, T]): Przechowywane kafelki

    Note:
        - Mapa jest właścicielem kafelków wstawionych przez insert_area
          (każde pole dostaje własną kopię)
        - insert nie kopiuje - wstawiony obiekt trafia do mapy
    """

    def __init__(self) -> None:
        self._tiles: Dict[C, T] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # ODCZYT
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, coord: C) -> Optional[T]:
        """
        Zwraca kafelek na danej pozycji.

        Returns:
            Optional[T]: Kafelek lub None jeśli pole jest puste
        """
        return self._tiles.get(coord)

    def get_mut(self, coord: C) -> Optional[T]:
        """
        Zwraca kafelek do modyfikacji w miejscu.

        Zwracany jest ten sam obiekt, który leży w mapie, więc zmiany
        jego atrybutów są od razu widoczne przez get(). Kafelki
        niemutowalne (str, tuple, frozen dataclass) podmienia się przez
        insert().
        """
        return self._tiles.get(coord)

    def populated_neighbors(self, coord: C) -> List[C]:
        """
        Zwraca sąsiadów, na których leży kafelek.

        Kolejność zgodna z HEX_DIRECTIONS.
        """
        return [n for n in adjacent(coord) if n in self._tiles]

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPIS
    # ─────────────────────────────────────────────────────────────────────────

    def insert(self, coord: C, tile: T) -> None:
        """Wstawia kafelek, nadpisując poprzedni na tej pozycji."""
        self._tiles[coord] = tile

    def insert_area(self, center: C, radius: int, tile: T) -> None:
        """
        Wstawia kopię kafelka na każde pole w area(center, radius).

        Każde pole dostaje niezależną kopię (copy.deepcopy), więc
        późniejsza modyfikacja jednego pola nie zmienia pozostałych.

        Raises:
            ValueError: Jeśli radius < 0
        """
        for coord in area(center, radius):
            self._tiles[coord] = copy.deepcopy(tile)

    def remove(self, coord: C) -> Optional[T]:
        """
        Usuwa kafelek z mapy.

        Returns:
            Optional[T]: Usunięty kafelek lub None jeśli pola nie było
        """
        return self._tiles.pop(coord, None)

    # ─────────────────────────────────────────────────────────────────────────
    # ITERACJA
    # ─────────────────────────────────────────────────────────────────────────

    def iterate(self) -> Iterator[Tuple[C, T]]:
        """
        Zwraca nowy, leniwy iterator par (współrzędna, kafelek).

        Każde wywołanie daje świeży iterator. Kolejność nieokreślona.
        Nie modyfikuj mapy w trakcie iteracji.
        """
        return iter(self._tiles.items())

    def coords(self) -> List[C]:
        """Zwraca listę wszystkich zajętych współrzędnych."""
        return list(self._tiles.keys())

    def __iter__(self) -> Iterator[C]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, coord: object) -> bool:
        return coord in self._tiles

    def __repr__(self) -> str:
        return f"HexMap(tiles={len(self._tiles)})"


class PathfindingTile:
    """
    Opcjonalna baza kafelka ze stałym kosztem wejścia.

    Rdzeń nie wymaga tej klasy - koszt zawsze liczy funkcja kosztu
    podana do find_path. tile_cost() jest gotową funkcją kosztu dla
    kafelków, które dziedziczą po PathfindingTile.
    """

    def pathfind_cost(self) -> float:
        """Koszt wejścia na ten kafelek."""
        return DEFAULT_PATHFIND_COST


def tile_cost(source: C, dest: C, hex_map: HexMap[C, PathfindingTile]) -> float:
    """
    Funkcja kosztu: koszt ruchu = pathfind_cost() kafelka docelowego.

    Example:
        >>> path = find_path(hex_map, start, goal, tile_cost)
    """
    return hex_map.get(dest).pathfind_cost()
