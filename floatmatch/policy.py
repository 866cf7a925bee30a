"""
Approximate equality policies for floating-point values.

Each policy holds a target value and a validated tolerance. ``match`` decides
whether a candidate is close enough to the target, and ``describe`` explains
the decision in the wording reporters print verbatim:

    AbsoluteMargin   "is within <margin> of <target>"
    RelativeMargin   "and <target> are within <epsilon*100>% of each other"
    UlpTolerance     "is within <ulps> ULPs of <target> ([<lower>, <upper>])"

Policies are frozen values; share and reuse them freely.
"""

import logging
import math
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .core import (
    ComparisonParameterError,
    FloatWidth,
    almost_equal_ulps,
    format_decimal,
    format_general,
    format_scientific,
    margin_comparison,
    narrow,
    step,
)

logger = logging.getLogger(__name__)

Number = Union[float, int, np.floating]

# Largest ULP count any width accepts
MAX_ULPS = int(np.iinfo(np.uint64).max)


def _reject(message: str) -> None:
    logger.debug("Rejected comparison parameters: %s", message)
    raise ComparisonParameterError(message)


class ComparisonPolicy(ABC):
    """Common interface of all comparison policies."""

    target: float

    @abstractmethod
    def match(self, candidate: Number) -> bool:
        """Return True if ``candidate`` is approximately equal to the target."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description of what ``match`` accepts."""
        ...

    def __call__(self, candidate: Number) -> bool:
        return self.match(candidate)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class AbsoluteMargin(ComparisonPolicy):
    """
    Accepts candidates within a fixed absolute margin of the target.

    The check is ``candidate + margin >= target and target + margin >= candidate``,
    which stays correct for infinite targets or candidates.
    """
    target: float
    margin: float

    def __post_init__(self):
        object.__setattr__(self, "target", float(self.target))
        object.__setattr__(self, "margin", float(self.margin))
        if not self.margin >= 0:
            _reject(f"Invalid margin: {format_general(self.margin)}. Margin has to be non-negative.")

    def match(self, candidate: Number) -> bool:
        return margin_comparison(float(candidate), self.target, self.margin)

    def describe(self) -> str:
        return f"is within {format_decimal(self.margin)} of {format_decimal(self.target)}"


@dataclass(frozen=True)
class RelativeMargin(ComparisonPolicy):
    """
    Accepts candidates within ``epsilon`` times the larger magnitude.

    The effective margin is ``epsilon * max(|candidate|, |target|)``. If that
    product overflows to infinity the margin is clamped to 0, so comparing two
    enormous values falls back to exact equality instead of always matching.
    """
    target: float
    epsilon: float

    def __post_init__(self):
        object.__setattr__(self, "target", float(self.target))
        object.__setattr__(self, "epsilon", float(self.epsilon))
        if not self.epsilon >= 0.0:
            _reject("Relative comparison with epsilon <  0 does not make sense.")
        if not self.epsilon < 1.0:
            _reject("Relative comparison with epsilon >= 1 does not make sense.")

    def effective_margin(self, candidate: Number) -> float:
        """Absolute margin used when comparing ``candidate`` to the target."""
        candidate = float(candidate)
        rel_margin = self.epsilon * max(abs(candidate), abs(self.target))
        if math.isinf(rel_margin):
            logger.debug(
                "Relative margin overflowed for %r vs %r; comparing exactly",
                candidate, self.target,
            )
            return 0.0
        return rel_margin

    def match(self, candidate: Number) -> bool:
        candidate = float(candidate)
        return margin_comparison(candidate, self.target, self.effective_margin(candidate))

    def describe(self) -> str:
        return (
            f"and {format_general(self.target)} are within "
            f"{format_general(self.epsilon * 100.0)}% of each other"
        )


@dataclass(frozen=True)
class UlpTolerance(ComparisonPolicy):
    """
    Accepts candidates at most ``ulps`` representable values from the target.

    Both values are narrowed to ``width`` before comparing. NaN never matches
    and infinities only match themselves.

    ``bounds`` and ``describe`` walk the interval one ``nextafter`` step per
    ULP. ``match`` is constant time, but describing a policy costs about a
    second per million ULPs of tolerance. A SINGLE policy near the 2**32 - 1
    limit can take hours to describe.
    """
    target: float
    ulps: int
    width: FloatWidth = FloatWidth.DOUBLE

    def __post_init__(self):
        object.__setattr__(self, "target", float(self.target))
        object.__setattr__(self, "width", FloatWidth.from_name(self.width))
        object.__setattr__(self, "ulps", operator.index(self.ulps))
        if not 0 <= self.ulps <= MAX_ULPS:
            _reject(f"ULP count must fit an unsigned 64-bit integer, got {self.ulps}.")
        if self.ulps > self.width.max_ulps:
            _reject("Provided ULP is impossibly large for a float comparison.")

    def match(self, candidate: Number) -> bool:
        return almost_equal_ulps(candidate, self.target, self.ulps, self.width)

    def bounds(self) -> tuple[float, float]:
        """Inclusive interval of values this policy accepts."""
        lower = step(self.target, -math.inf, self.ulps, self.width)
        upper = step(self.target, math.inf, self.ulps, self.width)
        return lower, upper

    def describe(self) -> str:
        lower, upper = self.bounds()
        return (
            f"is within {self.ulps} ULPs of {format_scientific(self.target, self.width)} "
            f"([{format_scientific(lower, self.width)}, {format_scientific(upper, self.width)}])"
        )


def within_abs(target: Number, margin: Number) -> AbsoluteMargin:
    """Policy matching values within ``margin`` of ``target``."""
    return AbsoluteMargin(target, margin)


def within_rel(target: Number, epsilon: Optional[Number] = None,
               width: Union[FloatWidth, str] = FloatWidth.DOUBLE) -> RelativeMargin:
    """
    Policy matching values within a relative tolerance of ``target``.

    Args:
        target: Expected value
        epsilon: Relative tolerance in [0, 1). Defaults to 100 machine
            epsilons of ``width``.
        width: Width the target and epsilon are given in

    Returns:
        RelativeMargin policy
    """
    width = FloatWidth.from_name(width)
    if epsilon is None:
        epsilon = width.epsilon * 100
    return RelativeMargin(narrow(target, width), narrow(epsilon, width))


def within_ulp(target: Number, max_ulps: int,
               width: Union[FloatWidth, str] = FloatWidth.DOUBLE) -> UlpTolerance:
    """Policy matching values at most ``max_ulps`` steps from ``target``."""
    return UlpTolerance(target, max_ulps, FloatWidth.from_name(width))
