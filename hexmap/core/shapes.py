"""
Generatory kształtów na siatce hexagonalnej.

Wszystkie funkcje są czyste i działają na dowolnym typie współrzędnych
(AxialCoord lub CubeCoord). Obliczenia odbywają się w przestrzeni cube,
a wynik jest konwertowany z powrotem do typu argumentu.

Kształty:
    adjacent(c)      - 6 sąsiadów w kolejności HEX_DIRECTIONS
    line(a, b)       - linia prosta, distance(a, b) + 1 hexów
    ring(c, r)       - pierścień, 6 * r hexów (1 dla r = 0)
    area(c, r)       - wypełniony hexagon, 3r² + 3r + 1 hexów
    spiral(c, r)     - to samo co area, ale leniwie (generator)

Przykład użycia:
    >>> ring(AxialCoord(0, 0), 1)
    [AxialCoord(q=0, r=-1), AxialCoord(q=1, r=-1), AxialCoord(q=1, r=0),
     AxialCoord(q=0, r=1), AxialCoord(q=-1, r=1), AxialCoord(q=-1, r=0)]
    >>> len(area(CubeCoord.ZERO, 2))
    19
"""

from __future__ import annotations
from typing import Iterator, List

from .hex_coord import C, CUBE_DIRECTIONS, CubeCoord, distance


def adjacent(center: C) -> List[C]:
    """
    Zwraca 6 hexów w odległości 1 od centrum.

    Kolejność jest zawsze ta sama (HEX_DIRECTIONS), co daje
    powtarzalną iterację w pathfindingu i testach.
    """
    return center.neighbors()


def line(a: C, b: C) -> List[C]:
    """
    Zwraca listę hexów tworzących linię prostą od a do b.

    Interpolacja liniowa w przestrzeni cube w N + 1 punktach
    t = i / N (N = distance(a, b)), każdy punkt zaokrąglony
    przez CubeCoord.round.

    Returns:
        List: a jako pierwszy element, b jako ostatni, kolejne
              elementy są sąsiadami

    Example:
        >>> line(AxialCoord(0, 0), AxialCoord(3, 0))
        [AxialCoord(q=0, r=0), AxialCoord(q=1, r=0), AxialCoord(q=2, r=0), AxialCoord(q=3, r=0)]
    """
    n = distance(a, b)
    if n == 0:
        return [a]

    kind = type(a)
    start = a.to_cube()
    end = b.to_cube()
    return [kind.from_cube(start.lerp(end, i / n)) for i in range(n + 1)]


def line_from_center(end: C) -> List[C]:
    """Linia od (0, 0, 0) do `end`."""
    origin = type(end).from_cube(CubeCoord.ZERO)
    return line(origin, end)


def ring(center: C, radius: int) -> List[C]:
    """
    Zwraca wszystkie hexy w pierścieniu o danym promieniu.

    Pierścień budowany jest z 6 krawędzi. Krawędź i zaczyna się w rogu
    center + kierunek[i] * radius i idzie `radius` kroków w kierunku
    i + 2 (kolejny róg jest wtedy początkiem następnej krawędzi).

    Args:
        center: Środek pierścienia
        radius: Promień (>= 0)

    Returns:
        List: [center] dla radius = 0, inaczej 6 * radius hexów

    Raises:
        ValueError: Jeśli radius < 0
    """
    if radius < 0:
        raise ValueError(f"Radius must be at least 0, got {radius}")
    if radius == 0:
        return [center]

    kind = type(center)
    origin = center.to_cube()
    results: List[C] = []

    for direction in range(6):
        current = origin + CUBE_DIRECTIONS[direction] * radius
        step = CUBE_DIRECTIONS[(direction + 2) % 6]
        for _ in range(radius):
            results.append(kind.from_cube(current))
            current = current + step

    return results


def centered_ring(radius: int) -> List[CubeCoord]:
    """Pierścień wokół (0, 0, 0)."""
    return ring(CubeCoord.ZERO, radius)


def spiral(center: C, radius: int) -> Iterator[C]:
    """
    Generator hexów w spirali od centrum do promienia.

    Yields hexy warstwami: centrum, potem ring(1), ring(2), ...
    """
    for r in range(radius + 1):
        for hex_coord in ring(center, r):
            yield hex_coord


def area(center: C, radius: int) -> List[C]:
    """
    Zwraca wypełniony hexagon o danym promieniu.

    Suma pierścieni 0..radius (włącznie), bez duplikatów.
    Dla radius = 0 zwraca [center], dla radius = 1 centrum + 6 sąsiadów.

    Raises:
        ValueError: Jeśli radius < 0
    """
    if radius < 0:
        raise ValueError(f"Radius must be at least 0, got {radius}")
    return list(spiral(center, radius))


def centered_area(radius: int) -> List[CubeCoord]:
    """Wypełniony hexagon wokół (0, 0, 0)."""
    return area(CubeCoord.ZERO, radius)
