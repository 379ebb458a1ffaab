"""
Conversation Domain Models

Models related to Bluesky chat conversations.
"""

from .conversation import (
    ChatProfileViewBasic,
    MessageViewSender,
    MessageView,
    DeletedMessageView,
    ConversationView,
    GetConversationOutput,
    GetConversationForMembersOutput,
)

__all__ = [
    "ChatProfileViewBasic",
    "MessageViewSender",
    "MessageView",
    "DeletedMessageView",
    "ConversationView",
    "GetConversationOutput",
    "GetConversationForMembersOutput",
]
