"""
FastAPI Backend dla hexmap.

Endpoints:
    GET  /api/health              - health check
    POST /api/line                - linia między dwoma hexami
    POST /api/ring                - pierścień
    POST /api/area                - wypełniony obszar
    GET  /api/adjacent/{q}/{r}    - sąsiedzi hexa
    GET  /api/distance            - odległość między hexami
    GET  /api/tiles               - lista typów kafelków
    GET  /api/tiles/{tile_id}     - szczegóły kafelka
    GET  /api/scenarios           - lista scenariuszy
    POST /api/path                - wyszukiwanie ścieżki
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import sys
from pathlib import Path

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexmap.core.errors import HexMapError
from api.routers import shapes, tiles, pathfinding


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown events."""
    print("hexmap API starting...")
    print("Open http://localhost:8000/docs in your browser")
    yield
    print("hexmap API shutting down...")


app = FastAPI(
    title="hexmap API",
    description="Hex grid shapes and pathfinding over sparse hex maps",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS - allow all origins (including file://)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(shapes.router, prefix="/api", tags=["Shapes"])
app.include_router(tiles.router, prefix="/api", tags=["Tiles"])
app.include_router(pathfinding.router, prefix="/api", tags=["Pathfinding"])


@app.exception_handler(HexMapError)
async def hexmap_error_handler(request: Request, exc: HexMapError) -> JSONResponse:
    """Błędy biblioteki (np. zła współrzędna cube) -> 422."""
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


@app.get("/api/health")
async def health():
    """API health check."""
    return {"status": "healthy"}
