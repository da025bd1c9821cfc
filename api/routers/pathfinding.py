"""
Pathfinding router - wyszukiwanie ścieżki na mapie ze scenariusza
lub z rozmieszczeń podanych w żądaniu.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from pathlib import Path

from hexmap.core.config_loader import ConfigLoader
from hexmap.core.hex_map import tile_cost
from hexmap.core.pathfinding import find_path, path_cost
from hexmap.events.event_logger import SearchLogger

from .shapes import dump_coords, parse_coord


router = APIRouter()

DATA_PATH = Path(__file__).parent.parent.parent / "data"
_loader = ConfigLoader(str(DATA_PATH))


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST MODELS
# ═══════════════════════════════════════════════════════════════════════════

class ShapeSpec(BaseModel):
    """Centrum i promień kształtu area / ring."""
    center: List[int]
    radius: int = Field(0, ge=0)


class Placement(BaseModel):
    """Kafelek rozmieszczony na kształcie (dokładnie jeden z: area/ring/line/coords)."""
    tile: str
    area: Optional[ShapeSpec] = None
    ring: Optional[ShapeSpec] = None
    line: Optional[List[List[int]]] = None
    coords: Optional[List[List[int]]] = None


class PathRequest(BaseModel):
    """
    Request do wyszukiwania ścieżki.

    Podaj `scenario` (start/destination można nadpisać) albo
    komplet: start, destination i placements.
    """
    scenario: Optional[str] = None
    start: Optional[List[int]] = None
    destination: Optional[List[int]] = None
    placements: List[Placement] = []
    trace: bool = False


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════

@router.get("/scenarios")
async def get_scenarios() -> List[Dict[str, Any]]:
    """Zwraca listę scenariuszy z data/scenarios.yaml."""
    result = []
    for scenario_id in _loader.get_scenario_ids():
        scenario = _loader.load_scenario(scenario_id)
        result.append({
            "id": scenario_id,
            "name": scenario["name"],
            "start": scenario.get("start"),
            "destination": scenario.get("destination"),
        })
    return result


@router.post("/path")
async def get_path(request: PathRequest) -> Dict[str, Any]:
    """
    Buduje mapę i szuka najtańszej ścieżki (koszt = koszt kafelka docelowego).

    Returns:
        Dict: found, path (bez startu), hops, cost i opcjonalnie trace
    """
    if request.scenario is not None:
        try:
            scenario = _loader.load_scenario(request.scenario)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Scenario '{request.scenario}' not found")
    else:
        scenario = {"id": None, "name": "inline", "placements": []}

    if request.start is not None:
        scenario["start"] = request.start
    if request.destination is not None:
        scenario["destination"] = request.destination
    if request.placements:
        scenario["placements"] = [p.model_dump(exclude_none=True) for p in request.placements]

    if scenario.get("start") is None or scenario.get("destination") is None:
        raise HTTPException(status_code=422, detail="Both start and destination are required")

    start = parse_coord(scenario["start"])
    destination = parse_coord(scenario["destination"])

    try:
        hex_map = _loader.build_map(scenario)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger = SearchLogger(label=scenario.get("id") or "inline") if request.trace else None
    path = find_path(hex_map, start, destination, tile_cost, logger=logger)

    response: Dict[str, Any] = {
        "scenario": scenario.get("id"),
        "start": start.as_list(),
        "destination": destination.as_list(),
        "found": path is not None,
        "path": dump_coords(path) if path is not None else None,
        "hops": len(path) if path is not None else None,
        "cost": round(path_cost(hex_map, start, path, tile_cost), 4) if path is not None else None,
        "tiles": len(hex_map),
    }
    if logger is not None:
        response["trace"] = logger.to_dict()

    return response
