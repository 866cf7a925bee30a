"""
Number rendering for policy descriptions.

Descriptions are shown to users verbatim, so each rendering mode here has a
fixed, documented format.
"""

import math
from typing import Union

import numpy as np

from .float_width import FloatWidth, narrow

# Digits after the point for canonical decimal rendering of doubles
DECIMAL_PRECISION = 17


def format_decimal(value: Union[float, np.floating], precision: int = DECIMAL_PRECISION) -> str:
    """
    Canonical decimal text: fixed notation with trailing zeros trimmed.

    One digit is always kept after the point, so 10.0 renders as ``10.0``
    and 0.05 as ``0.05``. Specials render as ``nan``, ``inf`` and ``-inf``.
    """
    value = float(value)
    if math.isnan(value):
        return "nan"
    text = f"{value:.{precision}f}"
    if not math.isfinite(value):
        return text

    stripped = text.rstrip("0")
    if stripped.endswith("."):
        stripped += "0"
    return stripped


def format_general(value: Union[float, np.floating]) -> str:
    """General ``%g`` rendering with six significant digits."""
    return format(float(value), "g")


def format_scientific(value: Union[float, np.floating], width: FloatWidth = FloatWidth.DOUBLE) -> str:
    """
    Scientific notation with enough digits to round-trip a value of ``width``.

    Single-precision values carry an ``f`` suffix.
    """
    digits = width.max_digits10 - 1
    text = f"{narrow(value, width):.{digits}e}"
    if width is FloatWidth.SINGLE:
        text += "f"
    return text
