"""
ATProto Kit

Async client for AT Protocol (Bluesky) XRPC lexicons.
"""

__version__ = "0.1.0"

# Public API exports
from .core.config import Settings, ConfigLoader
from .core.exceptions import ATProtoError
from .infrastructure.api import (
    APIClientService,
    ATProtoKit,
    ATProtoBlueskyChat,
    UserSession,
)

__all__ = [
    "Settings",
    "ConfigLoader",
    "ATProtoError",
    "APIClientService",
    "ATProtoKit",
    "ATProtoBlueskyChat",
    "UserSession",
]
