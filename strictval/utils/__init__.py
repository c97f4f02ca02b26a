"""
Helpers for reading nested input data.
"""

from .dot_array import dot_array_search, has_key

__all__ = [
    "dot_array_search",
    "has_key",
]
