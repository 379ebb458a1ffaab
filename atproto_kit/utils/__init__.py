"""
Utility helpers
"""

from .query_utils import cap_items, clamp_limit

__all__ = [
    "cap_items",
    "clamp_limit",
]
