import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from floatmatch import (
    FloatWidth,
    RelativeMargin,
    UlpTolerance,
    AbsoluteMargin,
    step,
    ulp_distance,
)

finite_doubles = st.floats(allow_nan=False, allow_infinity=False, width=64)
finite_singles = st.floats(allow_nan=False, allow_infinity=False, width=32)


@given(finite_doubles)
def test_distance_to_self_is_zero(a: float):
    assert ulp_distance(a, a) == 0


@given(finite_doubles, finite_doubles)
def test_distance_is_antisymmetric(a: float, b: float):
    assert ulp_distance(a, b) == -ulp_distance(b, a)


@given(finite_singles, finite_singles)
def test_single_distance_is_antisymmetric(a: float, b: float):
    assert ulp_distance(a, b, FloatWidth.SINGLE) == -ulp_distance(b, a, FloatWidth.SINGLE)


@given(finite_doubles, finite_doubles)
def test_distance_sign_follows_order(a: float, b: float):
    d = ulp_distance(a, b)
    if a < b:
        assert d > 0
    elif a > b:
        assert d < 0
    else:
        assert d == 0


@pytest.mark.parametrize("width", list(FloatWidth))
@given(x=finite_singles, n=st.integers(min_value=0, max_value=64))
def test_distance_counts_steps(width: FloatWidth, x: float, n: int):
    start = step(x, 0.0, 0, width)
    assume(math.isfinite(start))
    end = step(start, math.inf, n, width)
    assume(math.isfinite(end))
    assert ulp_distance(start, end, width) == n


@given(finite_doubles, finite_doubles, st.integers(min_value=0, max_value=2 ** 64 - 1))
def test_ulp_match_is_symmetric(a: float, b: float, ulps: int):
    assert UlpTolerance(a, ulps).match(b) == UlpTolerance(b, ulps).match(a)


@given(st.floats(allow_nan=True, allow_infinity=True), st.integers(min_value=0, max_value=2 ** 64 - 1))
def test_nan_never_matches_ulps(x: float, ulps: int):
    assert not UlpTolerance(x, ulps).match(math.nan)
    assert not UlpTolerance(math.nan, ulps).match(x)


@given(st.floats(allow_nan=False), st.floats(min_value=0.0, allow_nan=False, allow_infinity=False))
def test_target_matches_itself_with_margin(target: float, margin: float):
    assert AbsoluteMargin(target, margin).match(target)


@given(finite_doubles, st.floats(min_value=0.0, max_value=0.99))
def test_target_matches_itself_relatively(target: float, epsilon: float):
    assert RelativeMargin(target, epsilon).match(target)


@given(finite_doubles, st.integers(min_value=0, max_value=32))
def test_bounds_are_accepted(target: float, ulps: int):
    policy = UlpTolerance(target, ulps)
    lower, upper = policy.bounds()
    assume(math.isfinite(lower) and math.isfinite(upper))
    assert policy.match(lower)
    assert policy.match(upper)
