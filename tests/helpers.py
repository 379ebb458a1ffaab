"""Constants and response bodies shared by the atproto_kit tests."""

from __future__ import annotations

SERVICE_ENDPOINT = "https://example.com"
ACCESS_TOKEN = "access-jwt"


def profile(did: str, handle: str) -> dict:
    """Minimal app.bsky.actor.defs#profileView body."""
    return {"did": did, "handle": handle}


def convo_body(member_dids: list[str]) -> dict:
    """A getConvo/getConvoForMembers response body."""
    return {
        "convo": {
            "id": "convo-1",
            "rev": "rev-1",
            "members": [
                {"did": did, "handle": f"{did.rsplit(':', 1)[-1]}.test"}
                for did in member_dids
            ],
            "lastMessage": {
                "$type": "chat.bsky.convo.defs#messageView",
                "id": "msg-1",
                "rev": "rev-1",
                "text": "hello",
                "sender": {"did": member_dids[0]},
                "sentAt": "2024-05-31T12:00:00.000Z",
            },
            "muted": False,
            "unreadCount": 2,
        }
    }
