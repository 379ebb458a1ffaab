"""
Graph Domain Models

Models related to the social graph.
"""

from .followers import GetFollowersOutput

__all__ = [
    "GetFollowersOutput",
]
