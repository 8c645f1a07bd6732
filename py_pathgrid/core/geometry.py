"""
Grid geometry primitives.

Points are ``(row, col)`` cells, movement is 4-connected, and boundaries
are named with ``Direction``.
"""

from enum import Enum
from typing import Iterator, NamedTuple, Tuple


class Point(NamedTuple):
    """A single grid cell."""
    row: int
    col: int


class Direction(Enum):
    """Grid boundary relative to a point."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Order matters: it is both the neighbour enumeration order and the
# tie-break order of classify_edge.
DIRECTION_ORDER: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)

STEPS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def in_bounds(point: Tuple[int, int], rows: int, columns: int) -> bool:
    """Check whether a point lies inside a ``rows x columns`` grid."""
    row, col = point
    return 0 <= row < rows and 0 <= col < columns


def neighbors4(point: Point, rows: int, columns: int) -> Iterator[Point]:
    """Yield the in-bounds 4-connected neighbours of a point (up, down, left, right)."""
    for direction in DIRECTION_ORDER:
        d_row, d_col = STEPS[direction]
        row, col = point.row + d_row, point.col + d_col
        if 0 <= row < rows and 0 <= col < columns:
            yield Point(row, col)


def is_unit_step(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if ``a`` and ``b`` differ by one unit in exactly one coordinate."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def edge_distances(point: Tuple[int, int], rows: int, columns: int) -> Tuple[Tuple[Direction, int], ...]:
    """
    Distance from a point to each of the four grid boundaries.

    Up and Left are measured to index 0; Down and Right are measured to the
    extent itself (``rows - row``, ``columns - col``), not to the last index.
    """
    row, col = point
    return (
        (Direction.UP, row),
        (Direction.DOWN, rows - row),
        (Direction.LEFT, col),
        (Direction.RIGHT, columns - col),
    )


def classify_edge(point: Tuple[int, int], rows: int, columns: int) -> Direction:
    """
    Name the grid boundary closest to a point.

    Exact ties go to the direction listed first in Up, Down, Left, Right.

    Args:
        point: ``(row, col)`` cell
        rows: Grid row count
        columns: Grid column count

    Returns:
        Direction of the nearest boundary
    """
    # min() keeps the first of equal keys, which gives the tie-break order
    direction, _ = min(edge_distances(point, rows, columns), key=lambda item: item[1])
    return direction
