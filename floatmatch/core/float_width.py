"""
Floating-point width configuration for floatmatch.

This module describes the IEEE-754 layouts that govern bit reinterpretation,
ULP distance units, and the integer width used during comparison.
By default, float64 is used.
"""

import numpy as np
from typing import Type, Union
from enum import Enum


class FloatWidth(Enum):
    """Supported IEEE-754 widths."""
    SINGLE = np.float32
    DOUBLE = np.float64

    @classmethod
    def from_name(cls, name: Union["FloatWidth", str]) -> "FloatWidth":
        """
        Resolve a width from an enum member or a string.

        Args:
            name: FloatWidth or string ('float32', 'single', 'float64', 'double')

        Raises:
            ValueError: If the name is not a supported width
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            name_map = {
                'float32': cls.SINGLE,
                'single': cls.SINGLE,
                'float': cls.SINGLE,
                'float64': cls.DOUBLE,
                'double': cls.DOUBLE,
            }
            key = name.lower()
            if key in name_map:
                return name_map[key]
        raise ValueError(f"Unsupported float width: {name}")

    @property
    def numpy_dtype(self) -> Type[np.floating]:
        """Get the numpy float dtype for this width."""
        return self.value

    @property
    def int_dtype(self) -> Type[np.signedinteger]:
        """Get the signed integer dtype with the same width."""
        return np.int32 if self is FloatWidth.SINGLE else np.int64

    @property
    def bits(self) -> int:
        """Get the number of bits for this width."""
        return np.dtype(self.value).itemsize * 8

    @property
    def denorm_min(self) -> float:
        """Smallest positive (subnormal) value of this width."""
        return float(np.finfo(self.value).smallest_subnormal)

    @property
    def epsilon(self) -> float:
        """Machine epsilon for this width."""
        return float(np.finfo(self.value).eps)

    @property
    def max_digits10(self) -> int:
        """Significant decimal digits needed to round-trip any value."""
        return 9 if self is FloatWidth.SINGLE else 17

    @property
    def max_ulps(self) -> int:
        """Largest ULP tolerance that makes sense for this width."""
        if self is FloatWidth.SINGLE:
            return np.iinfo(np.uint32).max
        return np.iinfo(np.uint64).max


def narrow(value: Union[float, int, np.floating], width: FloatWidth = FloatWidth.DOUBLE) -> float:
    """
    Round a value to the given width and return it as a Python float.

    Finite doubles beyond the single-precision range become infinities.
    """
    with np.errstate(over='ignore'):
        return float(width.numpy_dtype(float(value)))
