"""
End-to-end grid planning: generate, search, classify the openings.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np
import structlog

from ..utils.random import create_rng
from .geometry import Direction, Point, classify_edge
from .grid_generator import generate_grid
from .pathfinding import CostPolicy, search

logger = structlog.get_logger()


@dataclass
class PlannedGrid:
    """A generated grid together with its planned path and exit edges."""
    start: Point
    end: Point
    costs: np.ndarray
    path: List[Point]
    path_cost: float
    start_edge: Direction
    end_edge: Direction
    cost_policy: CostPolicy
    seed: Optional[Union[int, str]] = None

    @property
    def rows(self) -> int:
        return self.costs.shape[0]

    @property
    def columns(self) -> int:
        return self.costs.shape[1]


def plan_grid(
    distance: int,
    border: int,
    hug_edge: bool = False,
    seed: Optional[Union[int, str]] = None,
    cost_policy: CostPolicy = CostPolicy.RAW,
    rng: Optional[np.random.Generator] = None,
) -> PlannedGrid:
    """
    Generate a grid, plan a path across it and orient both endpoints.

    Args:
        distance: Manhattan distance between start and end
        border: Margin cells around the endpoints
        hug_edge: Remove the margin from the longer axis
        seed: Seed for a new generator, ignored when ``rng`` is given
        cost_policy: How negative costs are treated by the search
        rng: Explicit random generator

    Returns:
        PlannedGrid
    """
    if rng is None:
        rng = create_rng(seed)
    cost_policy = CostPolicy(cost_policy)

    start, end, costs = generate_grid(distance, border, hug_edge, rng)
    rows, columns = costs.shape
    result = search(start, end, costs, cost_policy)

    # The path is the source of truth for where the openings sit
    start_edge = classify_edge(result.path[0], rows, columns)
    end_edge = classify_edge(result.path[-1], rows, columns)

    logger.info(
        "Grid planned",
        rows=rows,
        columns=columns,
        steps=len(result.path) - 1,
        path_cost=round(result.cost, 4),
        start_edge=start_edge.value,
        end_edge=end_edge.value,
        cost_policy=cost_policy.value,
    )
    return PlannedGrid(
        start=start,
        end=end,
        costs=costs,
        path=result.path,
        path_cost=result.cost,
        start_edge=start_edge,
        end_edge=end_edge,
        cost_policy=cost_policy,
        seed=seed,
    )
