"""Absolute margin comparison."""


def margin_comparison(lhs: float, rhs: float, margin: float) -> bool:
    """
    Equivalent to ``abs(lhs - rhs) <= margin`` without the subtraction.

    Adding the margin to each side keeps the check meaningful when either
    value is infinite, where ``inf - inf`` would give NaN.
    """
    return (lhs + margin >= rhs) and (rhs + margin >= lhs)
