"""
Algorytm Dijkstry (uniform-cost search) dla rzadkiej mapy hexagonalnej.

Dijkstra znajduje najtańszą ścieżkę między dwoma hexami. Graf nie
istnieje jawnie - krawędziami są relacje sąsiedztwa między polami,
na których leży kafelek. Pola bez kafelka są nieprzechodnie.

Jak działa:
    1. Utrzymuj dwa rozłączne zbiory: frontier (koszt tymczasowy)
       i visited (koszt ostateczny)
    2. Dla każdego odkrytego pola pamiętaj:
       - total_cost: koszt od startu
       - prev_coords: poprzednie pole na najtańszej znanej drodze
    3. Zawsze rozwijaj pole z frontier o najniższym total_cost
    4. Gdy wybrane pole to cel, odtwórz ścieżkę po prev_coords

Stan pola:
    Nieodkryte -> Frontier(koszt, poprzednik) -> Visited(koszt ostateczny)
    Koszt w frontier może tylko maleć. Pole w visited nigdy nie wraca
    do frontier (koszty krawędzi są nieujemne).

Remisy:
    Przy równym koszcie wygrywa mniejsza współrzędna w naturalnym
    porządku ((q, r) dla axial, (q, r, s) dla cube). Dzięki temu wybór
    między równie tanimi ścieżkami jest powtarzalny.

Koszt ruchu:
    Liczy go funkcja cost_fn(source, dest, hex_map) podana przez
    wywołującego. Wywoływana tylko dla pól z kafelkiem. Wartość ujemna
    lub NaN -> InvalidEdgeCost.

Przykład użycia:
    >>> hex_map = HexMap()
    >>> hex_map.insert_area(AxialCoord(0, 0), 2, Cheap())
    >>> find_path(hex_map, AxialCoord(0, 0), AxialCoord(2, -1), tile_cost)
    [AxialCoord(q=1, r=-1), AxialCoord(q=2, r=-1)]

Edge cases:
    - Start == Goal: zwraca [] (bez tworzenia stanu wyszukiwania)
    - Brak ścieżki: zwraca None (to nie jest błąd)
    - Cel bez kafelka: nigdy nie zostanie odkryty -> None
    - Start nie musi mieć kafelka
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Generic, List, Optional, Sequence, Set, Tuple
import heapq
import math

from .errors import InvalidEdgeCost
from .hex_coord import C
from .hex_map import HexMap
from .shapes import area
from ..events.event_logger import SearchLogger

CostFn = Callable[[C, C, HexMap], float]


@dataclass
class PathNode(Generic[C]):
    """
    Węzeł wyszukiwania.

    Attributes:
        total_cost: Koszt dotarcia od startu
        prev_coords: Poprzednie pole na ścieżce (None dla startu)
    """
    total_cost: float = 0.0
    prev_coords: Optional[C] = None


class MoveOutcome(Enum):
    """Wynik oceny pojedynczego ruchu (PathMap.eval_move)."""
    DISCOVERED = auto()
    RELAXED = auto()
    UNCHANGED = auto()


class PathMap(Generic[C]):
    """
    Stan jednego wyszukiwania: węzły, frontier i visited.

    Tworzony na nowo przy każdym wywołaniu find_path, nie jest
    współdzielony między wyszukiwaniami.

    Attributes:
        frontier (Set[C]): Pola odkryte, koszt tymczasowy
        visited (Set[C]): Pola z kosztem ostatecznym
        nodes (Dict[C, PathNode]): Koszt i poprzednik każdego odkrytego pola
        step (int): Liczba rozwiniętych pól
        logger (Optional[SearchLogger]): Opcjonalny log zdarzeń

    Note:
        frontier i visited są ROZŁĄCZNE. Kopiec _heap zawiera pary
        (koszt, pole); wpisy nieaktualne (pole poza frontier albo
        koszt różny od node.total_cost) są pomijane przy odczycie.
    """

    def __init__(self, logger: Optional[SearchLogger] = None):
        self.frontier: Set[C] = set()
        self.visited: Set[C] = set()
        self.nodes: Dict[C, PathNode[C]] = {}
        self.step = 0
        self.logger = logger
        self._heap: List[Tuple[float, C]] = []

    # ─────────────────────────────────────────────────────────────────────────
    # WĘZŁY
    # ─────────────────────────────────────────────────────────────────────────

    def starting_from(self, start: C) -> PathMap[C]:
        """Inicjalizuje stan jednym węzłem startowym (koszt 0)."""
        self.add_node(start, PathNode())
        return self

    def add_node(self, coords: C, node: PathNode[C]) -> None:
        """
        Dodaje węzeł do frontier, nadpisując istniejący.

        Tylko dla pól, które NIE są w visited (start, testy).
        """
        self.visited.discard(coords)
        self.frontier.add(coords)
        self.nodes[coords] = node
        heapq.heappush(self._heap, (node.total_cost, coords))

    def get_node(self, coords: C) -> Optional[PathNode[C]]:
        """Zwraca węzeł lub None jeśli pole nie zostało odkryte."""
        return self.nodes.get(coords)

    def insert_node(self, coords: C, new_node: PathNode[C]) -> bool:
        """
        Dodaje węzeł lub podmienia istniejący, jeśli nowy jest tańszy.

        Returns:
            bool: True jeśli stan się zmienił
        """
        existing = self.nodes.get(coords)
        if existing is None:
            self.add_node(coords, new_node)
            return True

        if new_node.total_cost < existing.total_cost:
            self.nodes[coords] = new_node
            if coords in self.frontier:
                heapq.heappush(self._heap, (new_node.total_cost, coords))
            return True

        return False

    # ─────────────────────────────────────────────────────────────────────────
    # RELAKSACJA
    # ─────────────────────────────────────────────────────────────────────────

    def eval_move(self, source: C, dest: C, cost: float) -> MoveOutcome:
        """
        Ocenia ruch source -> dest o łącznym koszcie `cost`.

        Nowe pole trafia do frontier. Pole już odkryte jest
        aktualizowane tylko gdy `cost` jest ŚCIŚLE mniejszy.
        """
        existing = self.nodes.get(dest)
        if existing is None:
            self.add_node(dest, PathNode(cost, source))
            return MoveOutcome.DISCOVERED

        if self.insert_node(dest, PathNode(cost, source)):
            if self.logger is not None:
                self.logger.log_relaxed(self.step, dest, existing.total_cost, cost, source)
            return MoveOutcome.RELAXED

        return MoveOutcome.UNCHANGED

    def eval_coords(self, source: C, hex_map: HexMap, cost_fn: CostFn) -> None:
        """
        Ocenia wszystkich sąsiadów `source`, na których leży kafelek.

        Raises:
            InvalidEdgeCost: cost_fn zwróciła wartość ujemną lub NaN
        """
        source_node = self.nodes[source]
        for neighbor in hex_map.populated_neighbors(source):
            edge_cost = float(cost_fn(source, neighbor, hex_map))
            if math.isnan(edge_cost) or edge_cost < 0:
                raise InvalidEdgeCost(source, neighbor, edge_cost)

            move_cost = source_node.total_cost + edge_cost
            outcome = self.eval_move(source, neighbor, move_cost)
            if outcome is MoveOutcome.DISCOVERED and self.logger is not None:
                self.logger.log_discovered(self.step, neighbor, move_cost, source)

    # ─────────────────────────────────────────────────────────────────────────
    # WYBÓR I ODTWARZANIE
    # ─────────────────────────────────────────────────────────────────────────

    def get_next_node(self) -> Optional[C]:
        """
        Zwraca pole z frontier o najniższym koszcie (nie usuwa go).

        Remis rozstrzyga naturalny porządek współrzędnych.

        Returns:
            Optional[C]: Pole lub None jeśli frontier jest pusty
        """
        while self._heap:
            cost, coords = self._heap[0]
            if coords in self.frontier and cost == self.nodes[coords].total_cost:
                return coords
            heapq.heappop(self._heap)
        return None

    def set_coords_searched(self, coords: C) -> None:
        """Przenosi pole z frontier do visited."""
        self.frontier.discard(coords)
        self.visited.add(coords)

    def trace_path(self, dest: C) -> List[C]:
        """
        Odtwarza ścieżkę do `dest` po prev_coords.

        Returns:
            List[C]: Ścieżka od pierwszego kroku do dest (BEZ startu)
        """
        path: List[C] = []
        current: Optional[C] = dest

        while current is not None:
            node = self.nodes[current]
            if node.prev_coords is not None:
                path.append(current)
            current = node.prev_coords

        path.reverse()
        return path


def find_path(
    hex_map: HexMap,
    start: C,
    destination: C,
    cost_fn: CostFn,
    logger: Optional[SearchLogger] = None,
) -> Optional[List[C]]:
    """
    Znajduje najtańszą ścieżkę między dwoma hexami.

    Args:
        hex_map: Mapa z kafelkami (pola bez kafelka są nieprzechodnie)
        start: Pozycja startowa
        destination: Pozycja docelowa
        cost_fn: Funkcja kosztu (source, dest, hex_map) -> float >= 0
        logger: Opcjonalny SearchLogger do zapisu przebiegu

    Returns:
        Optional[List[C]]: Ścieżka od pierwszego kroku do destination
                           (bez startu). [] gdy start == destination.
                           None gdy ścieżka nie istnieje.

    Raises:
        InvalidEdgeCost: cost_fn zwróciła wartość ujemną lub NaN

    Algorithm:
        1. Frontier = {start: 0}
        2. Dopóki frontier nie jest pusty:
           a. Weź pole z najniższym kosztem
           b. Jeśli to cel - odtwórz i zwróć ścieżkę
           c. Dla każdego sąsiada z kafelkiem - dodaj lub popraw koszt
           d. Przenieś pole do visited
        3. Frontier pusty - brak ścieżki

    Complexity:
        Time: O(n log n) gdzie n = liczba odwiedzonych pól
        Space: O(n)

    Example:
        >>> find_path(hex_map, AxialCoord(0, 0), AxialCoord(1, 0), tile_cost)
        [AxialCoord(q=1, r=0)]
    """
    # Przypadek trywialny
    if start == destination:
        return []

    path_map: PathMap = PathMap(logger=logger).starting_from(start)
    if logger is not None:
        logger.log_search_start(start, destination)

    while True:
        current = path_map.get_next_node()
        if current is None:
            if logger is not None:
                logger.log_path_not_found(path_map.step, len(path_map.visited))
            return None

        path_map.step += 1
        current_node = path_map.nodes[current]
        if logger is not None:
            logger.log_expanded(path_map.step, current, current_node.total_cost)

        # Cel osiągnięty?
        if current == destination:
            path = path_map.trace_path(destination)
            if logger is not None:
                logger.log_path_found(path_map.step, path, current_node.total_cost)
            return path

        path_map.eval_coords(current, hex_map, cost_fn)
        path_map.set_coords_searched(current)


def find_path_next_step(
    hex_map: HexMap,
    start: C,
    destination: C,
    cost_fn: CostFn,
) -> Optional[C]:
    """
    Znajduje tylko następny krok na ścieżce do celu.

    Przydatne gdy obiekt porusza się krok po kroku i nie potrzebujemy
    całej ścieżki.

    Returns:
        Optional[C]: Następny hex lub None jeśli brak ścieżki/jesteśmy w celu
    """
    path = find_path(hex_map, start, destination, cost_fn)
    if not path:
        return None
    return path[0]


def path_cost(
    hex_map: HexMap,
    start: C,
    path: Sequence[C],
    cost_fn: CostFn,
) -> float:
    """
    Sumuje koszt ścieżki zwróconej przez find_path.

    Args:
        start: Pole startowe (nie ma go w `path`)
        path: Kolejne kroki ścieżki

    Returns:
        float: Suma cost_fn dla kolejnych par pól (0.0 dla pustej ścieżki)
    """
    total = 0.0
    previous = start
    for coord in path:
        total += cost_fn(previous, coord, hex_map)
        previous = coord
    return total


def get_hexes_in_range(
    center: C,
    range_: int,
    hex_map: Optional[HexMap] = None,
) -> List[C]:
    """
    Zwraca wszystkie hexy w określonym zasięgu od centrum.

    Args:
        center: Pozycja centralna
        range_: Zasięg (w krokach hex)
        hex_map: Opcjonalnie - zostaw tylko pola z kafelkiem

    Note:
        Zawiera centrum (odległość 0).
        Dla range_=1 zwraca 7 hexów (centrum + 6 sąsiadów).
    """
    result = area(center, range_)
    if hex_map is None:
        return result
    return [pos for pos in result if pos in hex_map]
