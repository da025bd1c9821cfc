"""
System współrzędnych hexagonalnych: Axial (q, r) i Cube (q, r, s).

Dwie reprezentacje tego samego punktu siatki:
- AxialCoord (q, r)    - wygodna dla ludzi, dwie osie
- CubeCoord (q, r, s)  - wygodna do matematyki, niezmiennik q + r + s = 0

Konwersja jest dokładna i odwracalna:
    axial -> cube:  s = -q - r
    cube -> axial:  odrzuć s

Obie klasy spełniają ten sam interfejs (protokół HexCoords), ale nie
dziedziczą po sobie. Funkcje generujące kształty (shapes.py) działają
na dowolnej z nich i zwracają współrzędne tego samego typu.

Układ sąsiadów (kolejność HEX_DIRECTIONS, zgodnie z zegarem):
    Indeks   (dq, dr)
    ─────────────────────
    0        ( 0, -1)
    1        (+1, -1)
    2        (+1,  0)
    3        ( 0, +1)
    4        (-1, +1)
    5        (-1,  0)

Odległość między hexami:
    distance = (|dq| + |dr| + |ds|) / 2

Przykład użycia:
    >>> a = AxialCoord(0, 0)
    >>> b = AxialCoord(2, 1)
    >>> a.distance(b)
    3
    >>> a.to_cube()
    CubeCoord(q=0, r=0, s=0)
    >>> CubeCoord(1, 0, 0)
    Traceback (most recent call last):
        ...
    InvalidCoordinate: Invalid cube coordinates: 1 + 0 + 0 != 0
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import List, Protocol, Sequence, Tuple, Type, TypeVar, Union

from .errors import InvalidCoordinate, RoundingFailure


# Kierunki sąsiadów w układzie axial
# Kolejność: zgodnie z zegarem, każdy kolejny sąsiaduje z poprzednim
HEX_DIRECTIONS: List[Tuple[int, int]] = [
    (0, -1),
    (+1, -1),
    (+1, 0),
    (0, +1),
    (-1, +1),
    (-1, 0),
]

C = TypeVar("C", bound="HexCoords")


class HexCoords(Protocol):
    """
    Wspólny interfejs typów współrzędnych.

    Implementują go AxialCoord i CubeCoord. Funkcje z shapes.py
    i pathfinding.py wymagają tylko tego interfejsu.
    """

    def to_cube(self) -> CubeCoord: ...

    def to_axial(self) -> AxialCoord: ...

    @classmethod
    def from_cube(cls: Type[C], cube: CubeCoord) -> C: ...

    def distance(self, other: C) -> int: ...

    def neighbor(self: C, direction: int) -> C: ...

    def neighbors(self: C) -> List[C]: ...


@dataclass(frozen=True, order=True)
class AxialCoord:
    """
    Współrzędna hexagonalna w systemie axial (q, r).

    Klasa jest niemutowalna (frozen=True) i uporządkowana po (q, r).
    Może być używana jako klucz w słowniku lub element zbioru.

    Attributes:
        q (int): Współrzędna kolumny
        r (int): Współrzędna wiersza

    Note:
        Trzecia współrzędna s jest wyliczana: s = -q - r
    """
    q: int
    r: int

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def s(self) -> int:
        """Trzecia współrzędna w systemie cube (q + r + s = 0)."""
        return -self.q - self.r

    @property
    def axial(self) -> Tuple[int, int]:
        """Współrzędne jako krotka (q, r)."""
        return (self.q, self.r)

    @property
    def cube(self) -> Tuple[int, int, int]:
        """Współrzędne jako krotka (q, r, s)."""
        return (self.q, self.r, self.s)

    def as_list(self) -> List[int]:
        """Lista [q, r] - format używany w YAML i API."""
        return [self.q, self.r]

    # ─────────────────────────────────────────────────────────────────────────
    # KONWERSJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_cube(self) -> CubeCoord:
        """Konwersja do CubeCoord (zawsze poprawna)."""
        return CubeCoord(self.q, self.r, self.s)

    def to_axial(self) -> AxialCoord:
        return self

    @classmethod
    def from_cube(cls, cube: CubeCoord) -> AxialCoord:
        """Tworzy AxialCoord z CubeCoord, odrzucając s."""
        return cls(cube.q, cube.r)

    # ─────────────────────────────────────────────────────────────────────────
    # ODLEGŁOŚĆ I SĄSIEDZI
    # ─────────────────────────────────────────────────────────────────────────

    def distance(self, other: AxialCoord) -> int:
        """
        Oblicza odległość między dwoma hexami (liczba kroków).

        Wzór (cube distance):
            distance = (|dq| + |dr| + |ds|) / 2

        Example:
            >>> AxialCoord(0, 0).distance(AxialCoord(2, 1))
            3
        """
        dq = abs(self.q - other.q)
        dr = abs(self.r - other.r)
        ds = abs(self.s - other.s)
        return (dq + dr + ds) // 2

    def neighbor(self, direction: int) -> AxialCoord:
        """
        Zwraca sąsiada w określonym kierunku.

        Args:
            direction: Indeks kierunku (0-5), patrz HEX_DIRECTIONS

        Raises:
            IndexError: Jeśli direction nie jest w zakresie 0-5
        """
        dq, dr = HEX_DIRECTIONS[direction]
        return AxialCoord(self.q + dq, self.r + dr)

    def neighbors(self) -> List[AxialCoord]:
        """Zwraca listę 6 sąsiednich hexów w kolejności HEX_DIRECTIONS."""
        return [AxialCoord(self.q + dq, self.r + dr) for dq, dr in HEX_DIRECTIONS]

    # ─────────────────────────────────────────────────────────────────────────
    # OPERATORY ARYTMETYCZNE
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: AxialCoord) -> AxialCoord:
        """Dodawanie współrzędnych."""
        return AxialCoord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: AxialCoord) -> AxialCoord:
        """Odejmowanie współrzędnych."""
        return AxialCoord(self.q - other.q, self.r - other.r)

    def __mul__(self, scalar: int) -> AxialCoord:
        """Mnożenie przez skalar."""
        return AxialCoord(self.q * scalar, self.r * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> AxialCoord:
        """Negacja (punkt przeciwny względem origin)."""
        return AxialCoord(-self.q, -self.r)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


@dataclass(frozen=True, order=True)
class CubeCoord:
    """
    Współrzędna hexagonalna w systemie cube (q, r, s).

    Niezmiennik q + r + s == 0 jest sprawdzany przy każdym tworzeniu.
    Klasa jest niemutowalna i uporządkowana po (q, r, s).

    Attributes:
        q (int): Pierwsza oś
        r (int): Druga oś
        s (int): Trzecia oś

    Raises:
        InvalidCoordinate: Jeśli q + r + s != 0
    """
    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if not CubeCoord.is_valid(self.q, self.r, self.s):
            raise InvalidCoordinate(self.q, self.r, self.s)

    # ─────────────────────────────────────────────────────────────────────────
    # WALIDACJA I ZAOKRĄGLANIE
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def is_valid(q: int, r: int, s: int) -> bool:
        """Sprawdza niezmiennik q + r + s == 0."""
        return q + r + s == 0

    @classmethod
    def round(cls, q: float, r: float, s: float) -> CubeCoord:
        """
        Zaokrągla współrzędne ułamkowe do najbliższego hexa.

        Algorytm:
        1. Zaokrąglij każdą oś do najbliższej liczby całkowitej
           (połówki od zera, tak jak w większości silników)
        2. Jeśli suma != 0, oś z NAJWIĘKSZYM błędem zaokrąglenia
           wylicz na nowo jako minus suma dwóch pozostałych
        3. Jeśli dalej niepoprawne - RoundingFailure

        Args:
            q, r, s: Współrzędne cube (float), zwykle z interpolacji

        Returns:
            CubeCoord: Najbliższy hex

        Raises:
            RoundingFailure: Gdy korekta nie dała poprawnych współrzędnych
        """
        try:
            rq = _round_half_away(q)
            rr = _round_half_away(r)
            rs = _round_half_away(s)
        except (ValueError, OverflowError):
            raise RoundingFailure((q, r, s), (q, r, s)) from None

        if not cls.is_valid(rq, rr, rs):
            dq = abs(rq - q)
            dr = abs(rr - r)
            ds = abs(rs - s)

            # Koryguj współrzędną z największym błędem
            if dq > dr and dq > ds:
                rq = -rr - rs
            elif dr > ds:
                rr = -rq - rs
            else:
                rs = -rq - rr

            if not cls.is_valid(rq, rr, rs):
                raise RoundingFailure((q, r, s), (rq, rr, rs))

        return cls(rq, rr, rs)

    def lerp(self, other: CubeCoord, t: float) -> CubeCoord:
        """
        Interpolacja liniowa do `other` z zaokrągleniem do hexa.

        Args:
            other: Punkt końcowy (t = 1.0)
            t: Parametr interpolacji z przedziału [0, 1]
        """
        return CubeCoord.round(
            self.q + (other.q - self.q) * t,
            self.r + (other.r - self.r) * t,
            self.s + (other.s - self.s) * t,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # KONWERSJA
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def cube(self) -> Tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def as_list(self) -> List[int]:
        """Lista [q, r, s] - format używany w YAML i API."""
        return [self.q, self.r, self.s]

    def to_cube(self) -> CubeCoord:
        return self

    def to_axial(self) -> AxialCoord:
        """Konwersja do AxialCoord (odrzuca s)."""
        return AxialCoord(self.q, self.r)

    @classmethod
    def from_cube(cls, cube: CubeCoord) -> CubeCoord:
        return cube

    # ─────────────────────────────────────────────────────────────────────────
    # ODLEGŁOŚĆ I SĄSIEDZI
    # ─────────────────────────────────────────────────────────────────────────

    def distance(self, other: CubeCoord) -> int:
        """Odległość (|dq| + |dr| + |ds|) / 2."""
        return (abs(self.q - other.q) + abs(self.r - other.r) + abs(self.s - other.s)) // 2

    def neighbor(self, direction: int) -> CubeCoord:
        """Sąsiad w kierunku `direction` (0-5, patrz HEX_DIRECTIONS)."""
        return self + CUBE_DIRECTIONS[direction]

    def neighbors(self) -> List[CubeCoord]:
        """Zwraca listę 6 sąsiednich hexów w kolejności HEX_DIRECTIONS."""
        return [self + d for d in CUBE_DIRECTIONS]

    # ─────────────────────────────────────────────────────────────────────────
    # OPERATORY ARYTMETYCZNE
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: CubeCoord) -> CubeCoord:
        return CubeCoord(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: CubeCoord) -> CubeCoord:
        return CubeCoord(self.q - other.q, self.r - other.r, self.s - other.s)

    def __mul__(self, scalar: int) -> CubeCoord:
        return CubeCoord(self.q * scalar, self.r * scalar, self.s * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> CubeCoord:
        return CubeCoord(-self.q, -self.r, -self.s)

    def __str__(self) -> str:
        return f"({self.q}, {self.r}, {self.s})"


# Stałe: zero i osie jednostkowe
AxialCoord.ZERO = AxialCoord(0, 0)
AxialCoord.Q = AxialCoord(1, 0)
AxialCoord.R = AxialCoord(0, 1)
AxialCoord.S = AxialCoord(-1, 1)

CubeCoord.ZERO = CubeCoord(0, 0, 0)
CubeCoord.Q = CubeCoord(0, -1, 1)
CubeCoord.R = CubeCoord(1, 0, -1)
CubeCoord.S = CubeCoord(-1, 1, 0)

# Te same kierunki co HEX_DIRECTIONS, w układzie cube
CUBE_DIRECTIONS: List[CubeCoord] = [CubeCoord(dq, dr, -dq - dr) for dq, dr in HEX_DIRECTIONS]


# ─────────────────────────────────────────────────────────────────────────────
# FUNKCJE POMOCNICZE
# ─────────────────────────────────────────────────────────────────────────────

def _round_half_away(value: float) -> int:
    """Zaokrąglenie do najbliższej liczby całkowitej, połówki od zera."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def axial_to_cube(coord: AxialCoord) -> CubeCoord:
    """Konwersja axial -> cube (s = -q - r)."""
    return CubeCoord(coord.q, coord.r, -coord.q - coord.r)


def cube_to_axial(coord: CubeCoord) -> AxialCoord:
    """Konwersja cube -> axial (odrzuca s)."""
    return AxialCoord(coord.q, coord.r)


def hex_from_cube(q: int, r: int, s: int) -> AxialCoord:
    """
    Tworzy AxialCoord z trzech składowych cube.

    Raises:
        InvalidCoordinate: Jeśli q + r + s != 0
    """
    return cube_to_axial(CubeCoord(q, r, s))


def distance(a: HexCoords, b: HexCoords) -> int:
    """
    Odległość między dwoma hexami, liczona w przestrzeni cube.

    Działa dla dowolnej pary typów współrzędnych.
    """
    return a.to_cube().distance(b.to_cube())


def coord_from_list(values: Sequence[int]) -> Union[AxialCoord, CubeCoord]:
    """
    Tworzy współrzędną z listy: [q, r] -> AxialCoord, [q, r, s] -> CubeCoord.

    Raises:
        ValueError: Zła liczba składowych
        InvalidCoordinate: Trzy składowe z sumą != 0
    """
    if len(values) == 2:
        return AxialCoord(int(values[0]), int(values[1]))
    if len(values) == 3:
        return CubeCoord(int(values[0]), int(values[1]), int(values[2]))
    raise ValueError(f"Coordinate needs 2 (axial) or 3 (cube) components, got {list(values)}")
