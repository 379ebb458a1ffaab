"""
Authentication Module

Session snapshots used to authenticate XRPC calls.
"""

from .session import UserSession

__all__ = [
    "UserSession",
]
