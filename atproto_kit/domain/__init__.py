"""
Lexicon Domain Models

Request and response shapes, grouped by lexicon namespace.
"""

from .actor.models import ProfileView
from .graph.models import GetFollowersOutput
from .server.models import ServerUpdateEmail
from .convo.models import (
    ChatProfileViewBasic,
    MessageViewSender,
    MessageView,
    DeletedMessageView,
    ConversationView,
    GetConversationOutput,
    GetConversationForMembersOutput,
)

__all__ = [
    "ProfileView",
    "GetFollowersOutput",
    "ServerUpdateEmail",
    "ChatProfileViewBasic",
    "MessageViewSender",
    "MessageView",
    "DeletedMessageView",
    "ConversationView",
    "GetConversationOutput",
    "GetConversationForMembersOutput",
]
