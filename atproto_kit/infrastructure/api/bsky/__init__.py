"""
Bluesky API Infrastructure

Endpoint groups for app.bsky.* and com.atproto.* lexicons.
"""

from .client import ATProtoKit

__all__ = [
    "ATProtoKit",
]
