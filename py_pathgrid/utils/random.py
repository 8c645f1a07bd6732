"""
Random number generation utilities.

Every generation call takes its own NumPy ``Generator`` so that runs are
reproducible from a seed and independent invocations never share state.
There is deliberately no module-level generator.
"""

import hashlib
from typing import Optional, Union

import numpy as np

SeedLike = Union[None, int, str, np.random.Generator]


def seed_to_int(seed: str) -> int:
    """
    Convert a seed string into a stable 64-bit integer.

    Args:
        seed: Seed string to use

    Returns:
        Non-negative integer derived from the SHA-256 digest of the seed
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little")


def create_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Create a random generator for one generation run.

    Args:
        seed: ``None`` for fresh entropy, an integer, a seed string, or an
            existing generator (returned unchanged)

    Returns:
        NumPy Generator instance
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if isinstance(seed, str):
        seed = seed_to_int(seed)
    if seed is not None and seed < 0:
        raise ValueError(f"Seed must be non-negative, got {seed}")
    return np.random.default_rng(seed)


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    """Return ``rng`` or a freshly seeded generator when it is missing."""
    if rng is None:
        return create_rng()
    return rng
