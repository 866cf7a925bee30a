"""
ULP (unit in the last place) arithmetic.

The distance between two floats of the same width is the number of
representable values separating them. In general:

    * if nextafter(a, +inf) == b, then ulp_distance(a, b) == 1
    * if a == nextafter(b, +inf), then ulp_distance(a, b) == -1

As an exception, -0.0 and +0.0 are zero ULPs apart even though nextafter
moves between them in one step. This keeps ``a == b`` implying a distance of
zero, and ``ulp_distance(-x, x) == 2 * ulp_distance(0, x)``. Subnormals are
counted like any other representable value.
"""

import math
from typing import Union

import numpy as np

from .bitview import to_bits
from .float_width import FloatWidth, narrow

# Largest possible distance; also returned for NaN and infinities
INFINITE_DISTANCE = int(np.iinfo(np.int64).max)


def _steps_from_denorm_min(x: float, width: FloatWidth) -> int:
    """ULPs between x and the subnormal minimum of the same sign."""
    return to_bits(abs(x), width) - to_bits(width.denorm_min, width)


def ulp_distance(a: Union[float, np.floating], b: Union[float, np.floating],
                 width: FloatWidth = FloatWidth.DOUBLE) -> int:
    """
    Signed ULP distance from ``a`` to ``b``.

    Both inputs are narrowed to ``width`` first. The result is positive when
    ``a < b`` and antisymmetric: ``ulp_distance(a, b) == -ulp_distance(b, a)``.

    Args:
        a: Start value
        b: End value
        width: IEEE-754 layout that defines the ULP unit

    Returns:
        Number of representable steps from a to b, or INFINITE_DISTANCE if
        either input is NaN or infinite
    """
    a = narrow(a, width)
    b = narrow(b, width)
    if math.isnan(a) or math.isnan(b):
        return INFINITE_DISTANCE
    if math.isinf(a) or math.isinf(b):
        return INFINITE_DISTANCE

    sign = 1
    if a > b:
        a, b = b, a
        sign = -1
    # Covers -0.0 == +0.0
    if a == b:
        return 0

    if a == 0:
        # Bridge from zero to the subnormal minimum carrying b's sign
        distance = 1 + _steps_from_denorm_min(b, width)
    elif b == 0:
        distance = 1 + _steps_from_denorm_min(a, width)
    elif (a < 0) != (b < 0):
        # Crossing zero: both sides to their subnormal minimum, then the two
        # steps through the zero boundary
        distance = 2 + _steps_from_denorm_min(a, width) + _steps_from_denorm_min(b, width)
    elif a < 0:
        distance = to_bits(-a, width) - to_bits(-b, width)
    else:
        # Positive bit patterns increase monotonically with magnitude
        distance = to_bits(b, width) - to_bits(a, width)

    return sign * min(distance, INFINITE_DISTANCE)


def almost_equal_ulps(lhs: Union[float, np.floating], rhs: Union[float, np.floating],
                      max_ulps: int, width: FloatWidth = FloatWidth.DOUBLE) -> bool:
    """
    Check whether two values are at most ``max_ulps`` representable steps apart.

    NaN never compares equal. Infinities only equal themselves.
    """
    lhs = narrow(lhs, width)
    rhs = narrow(rhs, width)
    if math.isnan(lhs) or math.isnan(rhs):
        return False
    if not math.isfinite(lhs) or not math.isfinite(rhs):
        return lhs == rhs

    return abs(ulp_distance(lhs, rhs, width)) <= max_ulps


def step(start: Union[float, np.floating], direction: float, count: int,
         width: FloatWidth = FloatWidth.DOUBLE) -> float:
    """
    Advance ``start`` by ``count`` representable values toward ``direction``.

    Uses ``numpy.nextafter`` in the width's dtype so every step is exact.
    Once ``direction`` itself is reached further steps change nothing, so the
    walk stops there.

    Args:
        start: Value to step from (narrowed to ``width``)
        direction: Value to step toward, usually +inf or -inf
        count: Number of steps
        width: IEEE-754 layout to step in

    Returns:
        The value reached, as a Python float
    """
    if count < 0:
        raise ValueError(f"Step count must be non-negative, got {count}")
    dtype = width.numpy_dtype
    value = dtype(narrow(start, width))
    target = dtype(narrow(direction, width))
    if np.isnan(value) or np.isnan(target):
        return math.nan

    # nextafter raises the FP overflow/underflow flags at the range edges
    with np.errstate(over='ignore', under='ignore'):
        for _ in range(count):
            if value == target:
                break
            value = np.nextafter(value, target)
    return float(value)
