"""Tests for the text rendering of grids and paths."""

import numpy as np
from py_pathgrid.core.render import format_cost, render_grid, render_path


class TestRenderGrid:
    """Test grid rendering."""

    def test_format_cost_floors_scaled_value(self):
        assert format_cost(1.25) == "  125"
        assert format_cost(-0.75) == "  -75"
        assert format_cost(-0.005) == "   -1"
        assert format_cost(0.0) == "    0"

    def test_fixed_width_fields(self):
        grid = np.array([[0.5, -1.25], [2.0, 0.0]])
        text = render_grid(grid)

        assert text == "   50 -125\n  200    0"

    def test_custom_width(self):
        assert render_grid([[0.5]], cell_width=3) == " 50"

    def test_path_overlay(self):
        """Test that path cells and endpoints are marked."""
        grid = np.zeros((2, 3))
        grid[1, 0] = 0.5
        path = [(0, 0), (0, 1), (0, 2), (1, 2)]
        text = render_grid(grid, path, start=(0, 0), end=(1, 2))

        assert text.split("\n") == [
            "    S    *    *",
            "   50    0    E",
        ]

    def test_path_without_endpoints(self):
        text = render_grid(np.zeros((1, 2)), path=[(0, 0), (0, 1)])
        assert text == "    *    *"

    def test_no_trailing_newline(self):
        assert not render_grid(np.zeros((3, 3))).endswith("\n")


class TestRenderPath:
    def test_render_path(self):
        assert render_path([(0, 0), (0, 1)]) == "(0, 0) -> (0, 1)"
