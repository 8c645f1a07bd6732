"""
Tests for the HTTP surface.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from py_pathgrid.api.main import app
from py_pathgrid.config import settings
from py_pathgrid.core.pathfinding import PathNotFoundError


class TestGridEndpoints:
    """Test grid generation endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_generate_grid(self):
        """Test generating and planning a grid."""
        response = self.client.post(
            "/grids/generate",
            json={"distance": 6, "border": 1, "hug_edge": False, "seed": "api_test"},
        )

        assert response.status_code == 200
        data = response.json()

        required_fields = ["start", "end", "rows", "columns", "costs", "path",
                           "path_cost", "start_edge", "end_edge", "cost_policy", "rendered"]
        for field in required_fields:
            assert field in data

        assert data["path"][0] == data["start"]
        assert data["path"][-1] == data["end"]
        assert len(data["costs"]) == data["rows"]
        assert all(len(row) == data["columns"] for row in data["costs"])
        assert data["start_edge"] in {"up", "down", "left", "right"}
        assert data["seed"] == "api_test"
        assert len(data["rendered"].split("\n")) == data["rows"]

    def test_generate_uses_defaults(self):
        response = self.client.post("/grids/generate", json={"seed": "defaults"})

        assert response.status_code == 200
        data = response.json()
        (sr, sc), (er, ec) = data["start"], data["end"]
        assert abs(sr - er) + abs(sc - ec) == settings.default_distance
        assert data["cost_policy"] == settings.cost_policy.value

    def test_generate_reproducible(self):
        body = {"distance": 10, "border": 2, "hug_edge": True, "seed": "repeat"}
        first = self.client.post("/grids/generate", json=body).json()
        second = self.client.post("/grids/generate", json=body).json()

        assert first["path"] == second["path"]
        assert first["costs"] == second["costs"]

    def test_generate_with_policy(self):
        response = self.client.post(
            "/grids/generate", json={"distance": 5, "seed": "p", "cost_policy": "shift"}
        )
        assert response.status_code == 200
        assert response.json()["cost_policy"] == "shift"

    @pytest.mark.parametrize("body", [
        {"distance": -1},
        {"border": -1},
        {"distance": settings.max_distance + 1},
        {"cost_policy": "bellman"},
    ])
    def test_generate_rejects_invalid(self, body):
        response = self.client.post("/grids/generate", json=body)
        assert response.status_code == 422


class TestPathEndpoints:
    """Test path solving on caller-supplied grids."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)
        self.zero_grid = [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]

    def test_solve_zero_grid(self):
        response = self.client.post(
            "/paths/solve", json={"start": [0, 0], "end": [2, 2], "costs": self.zero_grid}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["path"] == [[0, 0], [1, 0], [2, 0], [2, 1], [2, 2]]
        assert data["path_cost"] == 0.0
        assert data["start_edge"] == "up"
        assert data["end_edge"] == "down"

    def test_solve_out_of_bounds(self):
        response = self.client.post(
            "/paths/solve", json={"start": [0, 0], "end": [3, 3], "costs": self.zero_grid}
        )
        assert response.status_code == 400

    def test_solve_ragged_grid(self):
        response = self.client.post(
            "/paths/solve", json={"start": [0, 0], "end": [1, 0], "costs": [[0.0, 1.0], [0.0]]}
        )
        assert response.status_code == 400

    def test_solve_empty_grid(self):
        response = self.client.post(
            "/paths/solve", json={"start": [0, 0], "end": [0, 0], "costs": []}
        )
        assert response.status_code == 422

    @patch("py_pathgrid.api.main.search")
    def test_solve_search_failure(self, mock_search):
        """Test that an exhausted search maps to a server error."""
        mock_search.side_effect = PathNotFoundError("No path")

        response = self.client.post(
            "/paths/solve", json={"start": [0, 0], "end": [2, 2], "costs": self.zero_grid}
        )
        assert response.status_code == 500
