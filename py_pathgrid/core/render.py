"""Plain-text dump of a cost grid and an optional path."""

import math
from typing import Optional, Sequence, Tuple

import numpy as np


def format_cost(value: float, cell_width: int = 5) -> str:
    """Cost scaled by 100, floored, right-aligned in ``cell_width``."""
    return f"{math.floor(value * 100):>{cell_width}}"


def render_grid(
    costs,
    path: Optional[Sequence[Tuple[int, int]]] = None,
    start: Optional[Tuple[int, int]] = None,
    end: Optional[Tuple[int, int]] = None,
    cell_width: int = 5,
) -> str:
    """
    Render a cost grid one row per line.

    Path cells are drawn as ``*`` and the endpoints as ``S`` and ``E``,
    using the same field width as the numbers.
    """
    costs = np.asarray(costs, dtype=np.float64)
    marks = {}
    for cell in path or ():
        marks[tuple(cell)] = "*"
    if start is not None:
        marks[tuple(start)] = "S"
    if end is not None:
        marks[tuple(end)] = "E"

    lines = []
    for row, values in enumerate(costs):
        cells = []
        for col, value in enumerate(values):
            mark = marks.get((row, col))
            if mark is not None:
                cells.append(f"{mark:>{cell_width}}")
            else:
                cells.append(format_cost(float(value), cell_width))
        lines.append("".join(cells))
    return "\n".join(lines)


def render_path(path: Sequence[Tuple[int, int]]) -> str:
    """Render a path as ``(r, c) -> (r, c) -> ...``."""
    return " -> ".join(f"({row}, {col})" for row, col in path)
