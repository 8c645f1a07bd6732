"""Random split of an integer diagonal into row and column offsets."""

from typing import Optional, Tuple

import numpy as np

from ..utils.random import resolve_rng


def sample_diagonal_split(
    distance: int, rng: Optional[np.random.Generator] = None
) -> Tuple[int, int]:
    """
    Pick a random point on the diagonal ``a + b == distance``.

    ``a`` is drawn uniformly from ``[0, distance]`` inclusive and
    ``b = distance - a``.

    Args:
        distance: Non-negative Manhattan span to split
        rng: Random generator; a fresh one is created when omitted

    Returns:
        Tuple ``(a, b)``
    """
    if distance < 0:
        raise ValueError(f"distance must be non-negative, got {distance}")

    rng = resolve_rng(rng)
    a = int(rng.integers(0, distance, endpoint=True))
    return a, distance - a
