"""
Server Domain Models

Models for com.atproto.server procedures.
"""

from .update_email import ServerUpdateEmail

__all__ = [
    "ServerUpdateEmail",
]
