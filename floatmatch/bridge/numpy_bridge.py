"""
NumPy bridge for comparison policies.

Applies a single policy element-wise to an array of candidates, keeping the
exact scalar semantics of ``match`` for every element.
"""

from typing import Any, Dict

import numpy as np

from ..policy import ComparisonPolicy


def match_array(policy: ComparisonPolicy, values: Any) -> np.ndarray:
    """
    Evaluate ``policy.match`` for every element of ``values``.

    Args:
        policy: Comparison policy to apply
        values: Array-like of candidates (any shape)

    Returns:
        Boolean array with the same shape as ``values``
    """
    arr = np.asarray(values, dtype=np.float64)
    out = np.zeros(arr.shape, dtype=bool)
    for index, value in np.ndenumerate(arr):
        out[index] = policy.match(value)
    return out


def count_matches(policy: ComparisonPolicy, values: Any) -> Dict[str, int]:
    """
    Count how many candidates a policy accepts.

    Returns:
        Dictionary with ``matched``, ``mismatched`` and ``total`` counts
    """
    mask = match_array(policy, values)
    matched = int(np.count_nonzero(mask))
    return {
        'matched': matched,
        'mismatched': int(mask.size) - matched,
        'total': int(mask.size),
    }
