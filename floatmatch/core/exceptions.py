"""Exceptions raised by floatmatch."""


class ComparisonParameterError(ValueError):
    """Raised when a comparison policy is built with invalid tolerance parameters."""
    pass
