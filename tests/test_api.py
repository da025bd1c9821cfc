"""
Testy dla FastAPI backendu.

Testuje endpointy geometrii, kafelków, scenariuszy i wyszukiwania
ścieżki przez TestClient (bez uruchamiania serwera).
"""

import pytest
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: HEALTH
# ═══════════════════════════════════════════════════════════════════════════

def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SHAPES
# ═══════════════════════════════════════════════════════════════════════════

def test_line_axial(client):
    response = client.post("/api/line", json={"a": [0, 0], "b": [3, 0]})
    assert response.status_code == 200
    assert response.json() == {"coords": [[0, 0], [1, 0], [2, 0], [3, 0]], "count": 4}


def test_line_cube(client):
    response = client.post("/api/line", json={"a": [-1, 0, 1], "b": [2, -1, -1]})
    assert response.json()["coords"] == [[-1, 0, 1], [0, 0, 0], [1, -1, 0], [2, -1, -1]]


def test_line_invalid_cube_is_422(client):
    response = client.post("/api/line", json={"a": [1, 1, 1], "b": [0, 0, 0]})
    assert response.status_code == 422


def test_line_wrong_component_count_is_422(client):
    response = client.post("/api/line", json={"a": [1, 2, 3, 4], "b": [0, 0]})
    assert response.status_code == 422


def test_ring(client):
    response = client.post("/api/ring", json={"center": [0, 0], "radius": 2})
    assert response.status_code == 200
    assert response.json()["count"] == 12


def test_area(client):
    response = client.post("/api/area", json={"center": [1, -1, 0], "radius": 2})
    data = response.json()
    assert data["count"] == 19
    assert all(len(c) == 3 for c in data["coords"])


def test_negative_radius_is_422(client):
    response = client.post("/api/area", json={"center": [0, 0], "radius": -1})
    assert response.status_code == 422


def test_adjacent(client):
    response = client.get("/api/adjacent/0/0")
    assert response.json()["coords"] == [[0, -1], [1, -1], [1, 0], [0, 1], [-1, 1], [-1, 0]]


def test_distance(client):
    response = client.get("/api/distance", params={"a": [0, 0], "b": [2, 1]})
    assert response.status_code == 200
    assert response.json() == {"distance": 3}


def test_distance_mixed_systems(client):
    response = client.get("/api/distance", params={"a": [0, 0, 0], "b": [2, 1]})
    assert response.json() == {"distance": 3}


# ═══════════════════════════════════════════════════════════════════════════
# TEST: TILES / SCENARIOS
# ═══════════════════════════════════════════════════════════════════════════

def test_tiles_list(client):
    response = client.get("/api/tiles")
    tiles = {t["id"]: t for t in response.json()}
    assert set(tiles) == {"plain", "road", "cheap", "forest", "expensive"}
    assert tiles["plain"]["cost"] == 0.05


def test_tile_detail(client):
    response = client.get("/api/tiles/forest")
    assert response.status_code == 200
    assert response.json()["cost"] == 1.5


def test_tile_not_found(client):
    assert client.get("/api/tiles/lava").status_code == 404


def test_scenarios_list(client):
    scenarios = {s["id"]: s for s in client.get("/api/scenarios").json()}
    assert set(scenarios) == {"neighbor", "detour", "island", "lake"}
    assert scenarios["detour"]["start"] == [-2, 0, 2]


# ═══════════════════════════════════════════════════════════════════════════
# TEST: PATH
# ═══════════════════════════════════════════════════════════════════════════

def test_path_scenario_detour(client):
    response = client.post("/api/path", json={"scenario": "detour"})
    assert response.status_code == 200
    data = response.json()
    assert data["found"] is True
    assert data["hops"] == 6
    assert data["cost"] == 3.0
    assert data["tiles"] == 10
    assert data["path"][-1] == [2, 0, -2]
    assert "trace" not in data


def test_path_scenario_island(client):
    data = client.post("/api/path", json={"scenario": "island"}).json()
    assert data["found"] is False
    assert data["path"] is None
    assert data["cost"] is None


def test_path_unknown_scenario(client):
    response = client.post("/api/path", json={"scenario": "atlantis"})
    assert response.status_code == 404


def test_path_inline_map(client):
    response = client.post("/api/path", json={
        "start": [0, 0],
        "destination": [2, 0],
        "placements": [{"tile": "cheap", "area": {"center": [0, 0], "radius": 2}}],
    })
    data = response.json()
    assert data["scenario"] is None
    assert data["path"] == [[1, 0], [2, 0]]
    assert data["cost"] == 1.0


def test_path_start_equals_destination(client):
    data = client.post("/api/path", json={"scenario": "neighbor", "destination": [0, 0]}).json()
    assert data["found"] is True
    assert data["path"] == []
    assert data["hops"] == 0
    assert data["cost"] == 0.0


def test_path_missing_endpoints_is_422(client):
    response = client.post("/api/path", json={
        "placements": [{"tile": "cheap", "coords": [[0, 0]]}],
    })
    assert response.status_code == 422


def test_path_unknown_tile_is_404(client):
    response = client.post("/api/path", json={
        "start": [0, 0],
        "destination": [1, 0],
        "placements": [{"tile": "lava", "coords": [[0, 0], [1, 0]]}],
    })
    assert response.status_code == 404


def test_path_placement_without_shape_is_422(client):
    response = client.post("/api/path", json={
        "start": [0, 0],
        "destination": [1, 0],
        "placements": [{"tile": "cheap"}],
    })
    assert response.status_code == 422


def test_path_with_trace(client):
    data = client.post("/api/path", json={"scenario": "neighbor", "trace": True}).json()
    trace = data["trace"]
    assert trace["metadata"]["label"] == "neighbor"
    assert trace["result"]["found"] is True
    assert trace["events"][0]["type"] == "SEARCH_START"


def test_path_area_without_center_is_422(client):
    """Źle zbudowany kształt to błąd żądania, nie brakujący zasób."""
    response = client.post("/api/path", json={
        "start": [0, 0],
        "destination": [1, 0],
        "placements": [{"tile": "cheap", "area": {"radius": 1}}],
    })
    assert response.status_code == 422


def test_path_ring_negative_radius_is_422(client):
    response = client.post("/api/path", json={
        "start": [0, 0],
        "destination": [1, 0],
        "placements": [{"tile": "cheap", "ring": {"center": [0, 0], "radius": -1}}],
    })
    assert response.status_code == 422


def test_path_inline_ring_placement(client):
    data = client.post("/api/path", json={
        "start": [0, -1],
        "destination": [0, 1],
        "placements": [{"tile": "cheap", "ring": {"center": [0, 0], "radius": 1}}],
    }).json()
    assert data["found"] is True
    assert data["hops"] == 3
