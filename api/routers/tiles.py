"""
Tiles router - lista dostępnych typów kafelków.
"""

from fastapi import APIRouter, HTTPException
from typing import List, Dict, Any
from pathlib import Path

from hexmap.core.config_loader import ConfigLoader


router = APIRouter()

# Initialize config loader
DATA_PATH = Path(__file__).parent.parent.parent / "data"
_loader = ConfigLoader(str(DATA_PATH))


@router.get("/tiles")
async def get_tiles() -> List[Dict[str, Any]]:
    """
    Zwraca listę wszystkich typów kafelków.

    Returns:
        Lista kafelków z nazwą i kosztem wejścia.
    """
    return [
        {"id": tile_id, "name": data.get("name", tile_id), "cost": data.get("cost")}
        for tile_id, data in _loader.load_all_tiles().items()
    ]


@router.get("/tiles/{tile_id}")
async def get_tile(tile_id: str) -> Dict[str, Any]:
    """
    Zwraca pełną definicję kafelka (z uzupełnionymi defaults).

    Args:
        tile_id: ID kafelka
    """
    try:
        return _loader.load_tile(tile_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Tile '{tile_id}' not found")
