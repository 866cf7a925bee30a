# MIT License
# See LICENSE file in the project root for full license text.
"""
floatmatch: approximate equality for IEEE-754 floating-point values.

Three comparison policies decide whether a candidate is close enough to a
target, and explain each decision in plain text:

    within_abs(10.0, 0.05).match(10.04)       # absolute margin
    within_rel(100.0, 0.1).match(105.0)       # relative margin
    within_ulp(1.0, 2).match(1.0000000000000002)  # units in the last place

Signed zeros, NaN, infinities and subnormals follow exact IEEE-754 semantics.
"""

__version__ = "0.1.0"

from .core import (
    INFINITE_DISTANCE,
    ComparisonParameterError,
    FloatWidth,
    almost_equal_ulps,
    from_bits,
    margin_comparison,
    narrow,
    step,
    to_bits,
    ulp_distance,
)
from .policy import (
    AbsoluteMargin,
    ComparisonPolicy,
    RelativeMargin,
    UlpTolerance,
    within_abs,
    within_rel,
    within_ulp,
)
from .bridge import count_matches, match_array

__all__ = [
    # Version info
    "__version__",
    # Core
    "FloatWidth",
    "ComparisonParameterError",
    "INFINITE_DISTANCE",
    "narrow",
    "to_bits",
    "from_bits",
    "ulp_distance",
    "almost_equal_ulps",
    "step",
    "margin_comparison",
    # Policies
    "ComparisonPolicy",
    "AbsoluteMargin",
    "RelativeMargin",
    "UlpTolerance",
    "within_abs",
    "within_rel",
    "within_ulp",
    # Bridges
    "match_array",
    "count_matches",
]
