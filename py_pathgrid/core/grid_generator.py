"""
Procedural cost grid generation.

Lays out a start and an end cell a fixed Manhattan distance apart inside a
bordered rectangle and fills every cell with a standard-normal terrain
cost. Costs can be negative; see ``pathfinding.CostPolicy`` for how the
search treats them.
"""

from typing import NamedTuple, Optional

import numpy as np
import structlog

from ..utils.random import resolve_rng
from .geometry import Point
from .sampler import sample_diagonal_split

logger = structlog.get_logger()


class GridConfig(NamedTuple):
    """Configuration for grid generation."""
    distance: int
    border: int
    hug_edge: bool = False


class GeneratedGrid(NamedTuple):
    """Result of one generation call, unpacks as ``(start, end, costs)``."""
    start: Point
    end: Point
    costs: np.ndarray

    @property
    def rows(self) -> int:
        return self.costs.shape[0]

    @property
    def columns(self) -> int:
        return self.costs.shape[1]


def layout_endpoints(
    distance: int,
    border: int,
    hug_edge: bool = False,
    rng: Optional[np.random.Generator] = None,
):
    """
    Place start and end cells and size the grid around them.

    The row swap happens after the extents are computed, so it only flips
    the path between running down-right and up-right. With ``hug_edge`` the
    longer axis (columns on a tie) loses its border margin on both sides.

    Args:
        distance: Manhattan distance between start and end
        border: Margin cells around the endpoints
        hug_edge: Remove the margin from the longer axis
        rng: Random generator

    Returns:
        Tuple ``(start, end, rows, columns)``
    """
    if distance < 0:
        raise ValueError(f"distance must be non-negative, got {distance}")
    if border < 0:
        raise ValueError(f"border must be non-negative, got {border}")

    rng = resolve_rng(rng)
    w, h = sample_diagonal_split(distance, rng)

    start_row, start_col = border, border
    end_row, end_col = w + border, h + border

    rows = end_row + border + 1
    columns = end_col + border + 1

    if rng.random() < 0.5:
        start_row, end_row = end_row, start_row

    if hug_edge:
        if rows > columns:
            start_row -= border
            end_row -= border
            rows -= 2 * border
        else:
            start_col -= border
            end_col -= border
            columns -= 2 * border

    return Point(start_row, start_col), Point(end_row, end_col), rows, columns


def generate_grid(
    distance: int,
    border: int,
    hug_edge: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> GeneratedGrid:
    """
    Generate a random cost grid with a start and an end cell.

    Args:
        distance: Manhattan distance between start and end
        border: Margin cells around the endpoints
        hug_edge: Remove the margin from the longer axis
        rng: Random generator; a fresh one is created when omitted

    Returns:
        GeneratedGrid with a read-only ``rows x columns`` float64 cost array
    """
    rng = resolve_rng(rng)
    start, end, rows, columns = layout_endpoints(distance, border, hug_edge, rng)

    costs = rng.standard_normal((rows, columns))
    costs[start.row, start.col] = 0.0
    costs[end.row, end.col] = 0.0
    costs.flags.writeable = False

    logger.debug(
        "Grid generated",
        rows=rows,
        columns=columns,
        start=tuple(start),
        end=tuple(end),
        hug_edge=hug_edge,
    )
    return GeneratedGrid(start, end, costs)


def generate_grid_from_config(
    config: GridConfig, rng: Optional[np.random.Generator] = None
) -> GeneratedGrid:
    """Generate a grid from a ``GridConfig``."""
    return generate_grid(config.distance, config.border, config.hug_edge, rng)
