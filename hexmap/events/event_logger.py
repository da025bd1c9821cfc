"""
Logowanie przebiegu wyszukiwania ścieżki do formatu JSON.

Każdy krok algorytmu Dijkstry (rozwinięcie węzła, odkrycie sąsiada,
poprawa kosztu) może być zapisany z pełnym kontekstem. Log służy do
debugowania funkcji kosztu i do wizualizacji przeszukiwania.

Logger jest opcjonalny - find_path bez loggera nic nie zapisuje.

TYPY ZDARZEŃ:
═══════════════════════════════════════════════════════════════════

    SEARCH_START
    ─────────────────────────────────────────────────────────────
    Początek wyszukiwania.
    Data: start, destination

    NODE_EXPANDED
    ─────────────────────────────────────────────────────────────
    Węzeł wybrany z frontier (najniższy koszt), przechodzi do visited.
    Data: cost

    NODE_DISCOVERED
    ─────────────────────────────────────────────────────────────
    Nowy węzeł dodany do frontier.
    Data: cost, prev

    NODE_RELAXED
    ─────────────────────────────────────────────────────────────
    Znaleziono tańszą drogę do węzła.
    Data: old_cost, cost, prev

    PATH_FOUND
    ─────────────────────────────────────────────────────────────
    Cel osiągnięty.
    Data: path, cost

    PATH_NOT_FOUND
    ─────────────────────────────────────────────────────────────
    Frontier pusty, cel nieosiągalny.
    Data: visited

FORMAT LOGU:
═══════════════════════════════════════════════════════════════════

{
    "metadata": {
        "version": "1.0",
        "start": [0, 0],
        "destination": [2, -1],
        "timestamp": "2024-01-01T12:00:00"
    },
    "events": [
        {"step": 0, "type": "SEARCH_START", "data": {...}},
        {"step": 1, "type": "NODE_EXPANDED", "coord": [0, 0], "data": {"cost": 0.0}},
        ...
    ],
    "result": {
        "found": true,
        "path": [[1, -1], [2, -1]],
        "cost": 1.0,
        "expanded": 5
    }
}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence
from datetime import datetime
import json
from pathlib import Path


class SearchEventType(Enum):
    """Typ zdarzenia w wyszukiwaniu ścieżki."""

    SEARCH_START = auto()
    NODE_EXPANDED = auto()
    NODE_DISCOVERED = auto()
    NODE_RELAXED = auto()
    PATH_FOUND = auto()
    PATH_NOT_FOUND = auto()


def _coord_to_list(coord: Any) -> Optional[List[int]]:
    """Współrzędna -> lista do JSON (None przechodzi bez zmian)."""
    if coord is None:
        return None
    return coord.as_list()


@dataclass
class SearchEvent:
    """
    Pojedyncze zdarzenie w wyszukiwaniu.

    Attributes:
        step (int): Numer rozwinięcia, w którym zdarzenie nastąpiło
        event_type (SearchEventType): Typ zdarzenia
        coord (Optional[List[int]]): Współrzędna, której dotyczy
        data (Dict): Dodatkowe dane specyficzne dla typu zdarzenia
    """
    step: int
    event_type: SearchEventType
    coord: Optional[List[int]] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serializuje zdarzenie do słownika."""
        result: Dict[str, Any] = {
            "step": self.step,
            "type": self.event_type.name,
        }

        if self.coord is not None:
            result["coord"] = self.coord
        if self.data:
            result["data"] = self.data

        return result


class SearchLogger:
    """
    Logger zdarzeń wyszukiwania ścieżki.

    Zbiera zdarzenia z jednego lub wielu wywołań find_path i może je
    zapisać do pliku JSON. Metadane opisują ostatnie wyszukiwanie.

    Attributes:
        events (List[SearchEvent]): Lista wszystkich zdarzeń
        metadata (Dict): Metadane wyszukiwania
        result (Dict): Wynik ostatniego wyszukiwania

    Example:
        >>> logger = SearchLogger()
        >>> path = find_path(hex_map, start, goal, tile_cost, logger=logger)
        >>> logger.save("output/search.json")
    """

    def __init__(self, label: str = ""):
        """
        Inicjalizuje logger.

        Args:
            label: Opcjonalna nazwa (np. id scenariusza) zapisywana w metadanych
        """
        self.events: List[SearchEvent] = []
        self.metadata: Dict[str, Any] = {
            "version": "1.0",
            "label": label,
            "timestamp": datetime.now().isoformat(),
        }
        self.result: Dict[str, Any] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # LOGOWANIE OGÓLNE
    # ─────────────────────────────────────────────────────────────────────────

    def log(self, event: SearchEvent) -> None:
        """Dodaje zdarzenie do logu."""
        self.events.append(event)

    def log_event(
        self,
        step: int,
        event_type: SearchEventType,
        coord: Any = None,
        **data: Any,
    ) -> SearchEvent:
        """
        Tworzy i loguje zdarzenie.

        Args:
            step: Numer rozwinięcia
            event_type: Typ zdarzenia
            coord: Współrzędna (AxialCoord / CubeCoord) lub None
            **data: Dodatkowe dane

        Returns:
            SearchEvent: Utworzone zdarzenie
        """
        event = SearchEvent(
            step=step,
            event_type=event_type,
            coord=_coord_to_list(coord),
            data=dict(data),
        )
        self.log(event)
        return event

    # ─────────────────────────────────────────────────────────────────────────
    # POMOCNICZE METODY LOGOWANIA
    # ─────────────────────────────────────────────────────────────────────────

    def log_search_start(self, start: Any, destination: Any) -> None:
        """Loguje start wyszukiwania."""
        self.metadata["start"] = _coord_to_list(start)
        self.metadata["destination"] = _coord_to_list(destination)
        self.result = {}
        self.log_event(
            0,
            SearchEventType.SEARCH_START,
            start=_coord_to_list(start),
            destination=_coord_to_list(destination),
        )

    def log_expanded(self, step: int, coord: Any, cost: float) -> None:
        """Loguje rozwinięcie węzła."""
        self.log_event(step, SearchEventType.NODE_EXPANDED, coord, cost=round(cost, 4))

    def log_discovered(self, step: int, coord: Any, cost: float, prev: Any) -> None:
        """Loguje odkrycie nowego węzła."""
        self.log_event(
            step,
            SearchEventType.NODE_DISCOVERED,
            coord,
            cost=round(cost, 4),
            prev=_coord_to_list(prev),
        )

    def log_relaxed(
        self,
        step: int,
        coord: Any,
        old_cost: float,
        cost: float,
        prev: Any,
    ) -> None:
        """Loguje poprawę kosztu węzła."""
        self.log_event(
            step,
            SearchEventType.NODE_RELAXED,
            coord,
            old_cost=round(old_cost, 4),
            cost=round(cost, 4),
            prev=_coord_to_list(prev),
        )

    def log_path_found(self, step: int, path: Sequence[Any], cost: float) -> None:
        """Loguje znalezienie ścieżki."""
        path_data = [_coord_to_list(c) for c in path]
        self.result = {
            "found": True,
            "path": path_data,
            "cost": round(cost, 4),
            "expanded": step,
        }
        self.log_event(step, SearchEventType.PATH_FOUND, path=path_data, cost=round(cost, 4))

    def log_path_not_found(self, step: int, visited: int) -> None:
        """Loguje brak ścieżki."""
        self.result = {
            "found": False,
            "path": None,
            "cost": None,
            "expanded": step,
        }
        self.log_event(step, SearchEventType.PATH_NOT_FOUND, visited=visited)

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializuje cały log do słownika.

        Returns:
            Dict: Pełny log w formacie dla JSON
        """
        return {
            "metadata": self.metadata,
            "events": [e.to_dict() for e in self.events],
            "result": self.result,
        }

    def save(self, filepath: str) -> None:
        """
        Zapisuje log do pliku JSON.

        Args:
            filepath: Ścieżka do pliku (katalogi są tworzone)
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Zwraca log jako string JSON.

        Args:
            indent: Wcięcie (None = compact)
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    # ─────────────────────────────────────────────────────────────────────────
    # STATYSTYKI
    # ─────────────────────────────────────────────────────────────────────────

    def get_event_count(self) -> int:
        """Zwraca liczbę zdarzeń."""
        return len(self.events)

    def get_events_by_type(self, event_type: SearchEventType) -> List[SearchEvent]:
        """Filtruje zdarzenia po typie."""
        return [e for e in self.events if e.event_type == event_type]

    def get_events_for_coord(self, coord: Any) -> List[SearchEvent]:
        """Filtruje zdarzenia dotyczące danej współrzędnej."""
        target = _coord_to_list(coord)
        return [e for e in self.events if e.coord == target]

    def get_expanded_coords(self) -> List[List[int]]:
        """Zwraca współrzędne w kolejności rozwijania."""
        return [e.coord for e in self.get_events_by_type(SearchEventType.NODE_EXPANDED)]
