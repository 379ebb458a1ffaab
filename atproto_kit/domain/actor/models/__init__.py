"""
Actor Domain Models

Models describing user accounts.
"""

from .profile import ProfileView

__all__ = [
    "ProfileView",
]
