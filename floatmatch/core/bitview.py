"""
Bit-level views of IEEE-754 values.

A float is reinterpreted as the signed integer of the same width that has an
identical bit pattern. No value conversion takes place.
"""

from typing import Union

import numpy as np

from .float_width import FloatWidth, narrow


for _width in FloatWidth:
    assert np.dtype(_width.numpy_dtype).itemsize == np.dtype(_width.int_dtype).itemsize, (
        f"ULP comparison requires {_width.name} floats and integers of equal width"
    )
del _width


def to_bits(value: Union[float, np.floating], width: FloatWidth = FloatWidth.DOUBLE) -> int:
    """
    Reinterpret a float as a signed integer with the same bits.

    Args:
        value: Float to reinterpret (narrowed to ``width`` first)
        width: IEEE-754 layout to use

    Returns:
        Signed integer holding the bit pattern of ``value``
    """
    arr = np.array([narrow(value, width)], dtype=width.numpy_dtype)
    return int(arr.view(width.int_dtype)[0])


def from_bits(bits: int, width: FloatWidth = FloatWidth.DOUBLE) -> float:
    """Inverse of :func:`to_bits`."""
    arr = np.array([bits], dtype=width.int_dtype)
    return float(arr.view(width.numpy_dtype)[0])
