"""Core IEEE-754 helpers: widths, bit views, ULP distance and margins."""

from .float_width import FloatWidth, narrow
from .exceptions import ComparisonParameterError
from .bitview import to_bits, from_bits
from .ulp import (
    INFINITE_DISTANCE,
    ulp_distance,
    almost_equal_ulps,
    step,
)
from .margin import margin_comparison
from .formatting import format_decimal, format_general, format_scientific

__all__ = [
    # Types
    "FloatWidth",
    "ComparisonParameterError",

    # Width conversion
    "narrow",

    # Bit views
    "to_bits",
    "from_bits",

    # ULP arithmetic
    "INFINITE_DISTANCE",
    "ulp_distance",
    "almost_equal_ulps",
    "step",

    # Margins
    "margin_comparison",

    # Rendering
    "format_decimal",
    "format_general",
    "format_scientific",
]
