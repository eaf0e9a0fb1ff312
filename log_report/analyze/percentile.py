"""
Nearest-rank percentile of response sizes
"""

import math
from typing import Sequence

import numpy as np

PERCENTILE = 0.95


def percentile(sizes: Sequence[int], rank: float) -> float:
    """
    Nearest-rank percentile, no interpolation.

    The value at index ceil(rank * n) - 1 of the sorted sizes; 0 for no sizes.
    """
    if len(sizes) == 0:
        return 0.0
    ordered = np.sort(np.asarray(sizes, dtype=np.int64))
    index = math.ceil(rank * len(ordered)) - 1
    return float(ordered[max(index, 0)])


def percentile95(sizes: Sequence[int]) -> float:
    return percentile(sizes, PERCENTILE)
