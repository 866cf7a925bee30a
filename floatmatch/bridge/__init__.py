"""Bridges for applying comparison policies to numerical library containers."""

from .numpy_bridge import match_array, count_matches

__all__ = [
    "match_array",
    "count_matches",
]
