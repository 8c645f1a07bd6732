"""
Minimum-cost path search over a cost grid.

Moving onto a cell costs that cell's weight, so the cost of a path is the
sum of its cells excluding the start. The frontier is a binary heap with
lazy deletion: a cell may be pushed several times and stale entries are
dropped when popped.

This is Dijkstra's algorithm, which is only exact for non-negative
weights. Generated grids contain negative costs, so ``CostPolicy.RAW``
gives a greedy, approximately shortest path. ``CLAMP`` and ``SHIFT``
make every weight non-negative and the result exact for those weights.
A true optimum over raw negative costs does not exist in general: two
adjacent negative cells already form a negative cycle.
"""

import heapq
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union

import numpy as np
import structlog

from .geometry import Point, in_bounds, neighbors4

logger = structlog.get_logger()


class PathNotFoundError(RuntimeError):
    """The frontier ran out before the end cell was reached."""


class CostPolicy(str, Enum):
    """How raw cell costs are turned into search weights."""

    RAW = "raw"
    CLAMP = "clamp"
    SHIFT = "shift"


@dataclass
class SearchResult:
    """Outcome of one search, kept for inspection."""
    path: List[Point]
    cost: float
    finalized: List[Point] = field(default_factory=list)
    pops: int = 0


def as_cost_array(grid: Union[np.ndarray, Sequence[Sequence[float]]]) -> np.ndarray:
    """
    Validate a cost grid and return it as a 2D float64 array.

    Raises:
        ValueError: If the grid is not a non-empty rectangle of finite numbers
    """
    try:
        costs = np.asarray(grid, dtype=np.float64)
    except ValueError as e:
        raise ValueError(f"Cost grid must be rectangular: {e}") from e

    if costs.ndim != 2:
        raise ValueError(f"Cost grid must be two-dimensional, got {costs.ndim} dimensions")
    if costs.shape[0] < 1 or costs.shape[1] < 1:
        raise ValueError(f"Cost grid must have at least one row and column, got {costs.shape}")
    if not np.all(np.isfinite(costs)):
        raise ValueError("Cost grid contains non-finite values")
    return costs


def search_weights(costs: np.ndarray, policy: CostPolicy = CostPolicy.RAW) -> np.ndarray:
    """Apply a cost policy to a validated cost array."""
    policy = CostPolicy(policy)
    if policy is CostPolicy.CLAMP:
        return np.maximum(costs, 0.0)
    if policy is CostPolicy.SHIFT:
        lowest = costs.min()
        return costs - lowest if lowest < 0 else costs
    return costs


def path_cost(path: Sequence[Tuple[int, int]], grid) -> float:
    """Sum of the costs of every cell on the path after the start."""
    costs = np.asarray(grid, dtype=np.float64)
    return float(sum(costs[row, col] for row, col in path[1:]))


def _reconstruct(predecessors: Dict[Point, Point], start: Point, end: Point) -> List[Point]:
    path = [end]
    current = end
    while current != start:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path


def search(
    start: Tuple[int, int],
    end: Tuple[int, int],
    grid,
    cost_policy: CostPolicy = CostPolicy.RAW,
) -> SearchResult:
    """
    Run the lazy-deletion search and keep its bookkeeping.

    Args:
        start: Start cell ``(row, col)``
        end: End cell ``(row, col)``
        grid: 2D cost array or nested sequence of floats
        cost_policy: Mapping from raw costs to search weights

    Returns:
        SearchResult whose cost is measured on the raw grid costs

    Raises:
        ValueError: If the grid is invalid or an endpoint is out of bounds
        PathNotFoundError: If the frontier empties before reaching ``end``
    """
    costs = as_cost_array(grid)
    rows, columns = costs.shape
    start, end = Point(*start), Point(*end)

    for name, point in (("start", start), ("end", end)):
        if not in_bounds(point, rows, columns):
            raise ValueError(f"{name} {tuple(point)} is outside the {rows}x{columns} grid")

    if start == end:
        return SearchResult(path=[start], cost=0.0, finalized=[start])

    weights = search_weights(costs, cost_policy)

    # (cumulative cost, insertion order, point, predecessor)
    frontier: List[Tuple[float, int, Point, Point]] = [(0.0, 0, start, start)]
    sequence = 1
    predecessors: Dict[Point, Point] = {}
    finalized: List[Point] = []
    pops = 0

    while frontier:
        current_cost, _, current, predecessor = heapq.heappop(frontier)
        pops += 1

        if current in predecessors:
            continue

        predecessors[current] = predecessor
        finalized.append(current)

        if current == end:
            break

        for neighbor in neighbors4(current, rows, columns):
            if neighbor in predecessors:
                continue
            total_cost = current_cost + weights[neighbor.row, neighbor.col]
            heapq.heappush(frontier, (total_cost, sequence, neighbor, current))
            sequence += 1
    else:
        logger.error("Frontier exhausted", start=tuple(start), end=tuple(end), pops=pops)
        raise PathNotFoundError(f"No path from {tuple(start)} to {tuple(end)}")

    path = _reconstruct(predecessors, start, end)
    cost = path_cost(path, costs)

    logger.debug(
        "Path found",
        start=tuple(start),
        end=tuple(end),
        steps=len(path) - 1,
        cost=cost,
        pops=pops,
        cost_policy=CostPolicy(cost_policy).value,
    )
    return SearchResult(path=path, cost=cost, finalized=finalized, pops=pops)


def find_path(
    start: Tuple[int, int],
    end: Tuple[int, int],
    grid,
    cost_policy: CostPolicy = CostPolicy.RAW,
) -> List[Point]:
    """
    Find a minimum-cost 4-connected path from ``start`` to ``end``.

    ``start == end`` yields the single-cell path ``[start]``.
    """
    return search(start, end, grid, cost_policy).path
