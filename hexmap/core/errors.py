"""
Wyjątki biblioteki hexmap.

Hierarchia:
    HexMapError
    ├── InvalidCoordinate   (również ValueError)
    ├── RoundingFailure     (również ArithmeticError)
    └── InvalidEdgeCost     (również ValueError)

Brak ścieżki w pathfindingu NIE jest wyjątkiem - find_path zwraca None.
Brak kafelka w mapie NIE jest wyjątkiem - HexMap.get zwraca None.
"""

from __future__ import annotations
from typing import Any, Tuple


class HexMapError(Exception):
    """Bazowa klasa wszystkich błędów biblioteki."""


class InvalidCoordinate(HexMapError, ValueError):
    """
    Współrzędne cube nie spełniają q + r + s == 0.

    Błąd programisty - nie należy go łapać i ponawiać.

    Attributes:
        components: Krotka (q, r, s) która złamała niezmiennik
    """

    def __init__(self, q: int, r: int, s: int):
        self.components: Tuple[int, int, int] = (q, r, s)
        super().__init__(f"Invalid cube coordinates: {q} + {r} + {s} != 0")


class RoundingFailure(HexMapError, ArithmeticError):
    """
    Zaokrąglenie współrzędnych ułamkowych nie dało poprawnego hexa.

    Nie powinno wystąpić dla danych z interpolacji - oznacza błąd
    wewnętrzny (np. NaN lub nieskończoność na wejściu).
    """

    def __init__(self, fractional: Tuple[float, float, float], rounded: Tuple[Any, Any, Any]):
        self.fractional = fractional
        self.rounded = rounded
        super().__init__(
            f"Unable to round fractional coordinates {fractional} to valid cube "
            f"coordinates, computed {rounded}"
        )


class InvalidEdgeCost(HexMapError, ValueError):
    """Funkcja kosztu zwróciła wartość ujemną lub NaN."""

    def __init__(self, source: Any, dest: Any, cost: float):
        self.source = source
        self.dest = dest
        self.cost = cost
        super().__init__(
            f"Edge cost from {source} to {dest} must be a non-negative number, got {cost!r}"
        )
