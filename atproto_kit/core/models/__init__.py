"""
Core Models

Base classes shared by every lexicon model.
"""

from .base import LexiconModel

__all__ = [
    "LexiconModel",
]
