"""
Bluesky Chat API Client

Endpoints under the chat.bsky namespace. Every call is authenticated and
proxied to the chat service through the atproto-proxy header.
"""

import logging
from typing import Sequence

from ....domain.convo.models import (
    GetConversationOutput,
    GetConversationForMembersOutput,
)
from ....utils.query_utils import cap_items
from ..xrpc_client import XRPCClient

logger = logging.getLogger(__name__)

MAX_CONVERSATION_MEMBERS = 10


class ATProtoBlueskyChat(XRPCClient):
    """Client for chat.bsky.* lexicons."""

    async def get_conversation(self, convo_id: str) -> GetConversationOutput:
        """
        Retrieve a conversation.

        Based on the chat.bsky.convo.getConvo lexicon.

        Args:
            convo_id: ID of the conversation

        Returns:
            The conversation matching `convo_id`
        """
        return await self._query(
            "chat.bsky.convo.getConvo",
            params=[("convoId", convo_id)],
            output=GetConversationOutput,
            chat=True
        )

    async def get_conversation_for_members(
        self,
        members: Sequence[str]
    ) -> GetConversationForMembersOutput:
        """
        Retrieve a conversation based on its members.

        Based on the chat.bsky.convo.getConvoForMembers lexicon.
        Only the first 10 members are sent; the rest are discarded.

        Args:
            members: DIDs of the conversation members

        Returns:
            Conversation metadata: members, mute state, last message and
            unread count
        """
        capped = cap_items(members, MAX_CONVERSATION_MEMBERS)
        if len(capped) < len(members):
            logger.debug(
                f"Dropped {len(members) - len(capped)} member(s) over the "
                f"{MAX_CONVERSATION_MEMBERS}-member cap"
            )

        return await self._query(
            "chat.bsky.convo.getConvoForMembers",
            params=[("members", member) for member in capped],
            output=GetConversationForMembersOutput,
            chat=True
        )

    async def export_account_data(self) -> bytes:
        """
        Export the account's chat data.

        Based on the chat.bsky.actor.exportAccountData lexicon.

        Returns:
            The raw JSONL body
        """
        return await self._query(
            "chat.bsky.actor.exportAccountData",
            accept="application/jsonl",
            chat=True
        )
