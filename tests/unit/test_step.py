"""Unit tests for stepping across representable values."""

import math

import numpy as np
import pytest

from floatmatch import FloatWidth, step

MAX = float(np.finfo(np.float64).max)


def test_zero_steps_is_identity():
    assert step(1.0, math.inf, 0) == 1.0
    assert step(-2.5, -math.inf, 0, FloatWidth.SINGLE) == -2.5


def test_single_step_each_direction():
    assert step(1.0, math.inf, 1) == 1.0 + 2.0 ** -52
    assert step(1.0, -math.inf, 1) == 1.0 - 2.0 ** -53


def test_steps_are_exact():
    x = 1.0
    for _ in range(10):
        x = float(np.nextafter(x, math.inf))
    assert step(1.0, math.inf, 10) == x


def test_stepping_across_zero():
    assert step(0.0, math.inf, 1) == 5e-324
    assert step(0.0, -math.inf, 1) == -5e-324
    assert step(-5e-324, math.inf, 2) == 5e-324


def test_single_width_steps():
    assert step(1.0, math.inf, 1, FloatWidth.SINGLE) == 1.0 + 2.0 ** -23
    assert step(1.0, -math.inf, 1, FloatWidth.SINGLE) == 1.0 - 2.0 ** -24


def test_stops_at_direction():
    assert step(MAX, math.inf, 1) == math.inf
    assert step(MAX, math.inf, 2 ** 64 - 1) == math.inf
    assert step(-MAX, -math.inf, 2 ** 64 - 1) == -math.inf
    assert step(1.0, 1.0, 2 ** 40) == 1.0


def test_nan_propagates():
    assert math.isnan(step(math.nan, math.inf, 3))
    assert math.isnan(step(1.0, math.nan, 3))


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        step(1.0, math.inf, -1)
