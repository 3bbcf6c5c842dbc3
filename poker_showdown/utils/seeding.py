"""Seeding utilities for reproducible deals.

Every random draw in the project goes through a NumPy Generator built here,
so a logged seed is enough to replay a deal.
"""

import random
from typing import Optional

import numpy as np

MAX_SEED = 2**32 - 1


def resolve_seed(seed: Optional[int] = None) -> int:
    """Return `seed`, or a fresh random one when None.

    Example:
        >>> resolve_seed(42)
        42
        >>> seed = resolve_seed()  # Random seed, but returned for logging
    """
    if seed is None:
        seed = random.randint(0, MAX_SEED)
    return seed


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build a NumPy Generator from `seed` (see resolve_seed)."""
    return np.random.default_rng(resolve_seed(seed))
