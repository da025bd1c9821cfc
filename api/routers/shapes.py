"""
Shapes router - geometria siatki: linie, pierścienie, obszary, sąsiedzi.

Współrzędne w żądaniach i odpowiedziach to listy:
[q, r] dla axial, [q, r, s] dla cube. Odpowiedź używa tego samego
układu co żądanie.
"""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Union

from hexmap.core.hex_coord import AxialCoord, CubeCoord, coord_from_list, distance
from hexmap.core.shapes import adjacent, area, line, ring


router = APIRouter()

Coord = Union[AxialCoord, CubeCoord]


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST MODELS
# ═══════════════════════════════════════════════════════════════════════════

class LineRequest(BaseModel):
    """Linia od a do b."""
    a: List[int]
    b: List[int]


class RadiusRequest(BaseModel):
    """Kształt wokół centrum (ring / area)."""
    center: List[int]
    radius: int = Field(ge=0)


# ═══════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════

def parse_coord(values: List[int]) -> Coord:
    """Lista -> współrzędna; zła lista -> 422."""
    try:
        return coord_from_list(values)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def dump_coords(coords: List[Coord]) -> List[List[int]]:
    return [c.as_list() for c in coords]


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════

@router.post("/line")
async def get_line(request: LineRequest) -> Dict[str, Any]:
    """
    Zwraca linię prostą od a do b (włącznie).

    Returns:
        Dict z listą hexów i długością
    """
    a = parse_coord(request.a)
    b = parse_coord(request.b)
    coords = line(a, b)
    return {"coords": dump_coords(coords), "count": len(coords)}


@router.post("/ring")
async def get_ring(request: RadiusRequest) -> Dict[str, Any]:
    """Zwraca pierścień o danym promieniu."""
    coords = ring(parse_coord(request.center), request.radius)
    return {"coords": dump_coords(coords), "count": len(coords)}


@router.post("/area")
async def get_area(request: RadiusRequest) -> Dict[str, Any]:
    """Zwraca wypełniony hexagon o danym promieniu."""
    coords = area(parse_coord(request.center), request.radius)
    return {"coords": dump_coords(coords), "count": len(coords)}


@router.get("/adjacent/{q}/{r}")
async def get_adjacent(q: int, r: int) -> Dict[str, Any]:
    """Zwraca 6 sąsiadów hexa axial (q, r)."""
    return {"coords": dump_coords(adjacent(AxialCoord(q, r)))}


@router.get("/distance")
async def get_distance(
    a: List[int] = Query(...),
    b: List[int] = Query(...),
) -> Dict[str, Any]:
    """
    Odległość między hexami.

    Example:
        GET /api/distance?a=0&a=0&b=2&b=1  ->  {"distance": 3}
    """
    return {"distance": distance(parse_coord(a), parse_coord(b))}
