"""
Bluesky Chat API Infrastructure
"""

from .client import ATProtoBlueskyChat, MAX_CONVERSATION_MEMBERS

__all__ = [
    "ATProtoBlueskyChat",
    "MAX_CONVERSATION_MEMBERS",
]
