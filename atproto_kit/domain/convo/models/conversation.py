"""
Conversation Models

Views from chat.bsky.convo.defs and chat.bsky.actor.defs, and the outputs of
chat.bsky.convo.getConvo and chat.bsky.convo.getConvoForMembers.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any, Union

from pydantic import Field

from ....core.models import LexiconModel


class ChatProfileViewBasic(LexiconModel):
    """A conversation member (chat.bsky.actor.defs#profileViewBasic)."""

    did: str
    handle: str
    display_name: Optional[str] = None
    avatar: Optional[str] = None
    associated: Optional[Dict[str, Any]] = None
    viewer: Optional[Dict[str, Any]] = None
    labels: Optional[List[Dict[str, Any]]] = None
    chat_disabled: Optional[bool] = None


class MessageViewSender(LexiconModel):
    """The sender of a message."""

    did: str


class MessageView(LexiconModel):
    """A message in a conversation."""

    type: Optional[str] = Field(default=None, alias="$type")
    id: str
    rev: str
    text: str
    facets: Optional[List[Dict[str, Any]]] = None
    embed: Optional[Dict[str, Any]] = None
    sender: MessageViewSender
    sent_at: datetime


class DeletedMessageView(LexiconModel):
    """A message that has been deleted."""

    type: Optional[str] = Field(default=None, alias="$type")
    id: str
    rev: str
    sender: MessageViewSender
    sent_at: datetime


class ConversationView(LexiconModel):
    """Conversation metadata (chat.bsky.convo.defs#convoView)."""

    id: str
    rev: str
    members: List[ChatProfileViewBasic]
    # MessageView is tried first; a body without text falls through to DeletedMessageView
    last_message: Optional[Union[MessageView, DeletedMessageView]] = None
    muted: bool
    opened: Optional[bool] = None
    unread_count: int


class GetConversationOutput(LexiconModel):
    """Output of chat.bsky.convo.getConvo."""

    convo: ConversationView


class GetConversationForMembersOutput(LexiconModel):
    """Output of chat.bsky.convo.getConvoForMembers."""

    convo: ConversationView
