"""
API Infrastructure

Request service, session snapshot and XRPC endpoint groups.
"""

from .base_client import APIClientService
from .xrpc_client import XRPCClient
from .auth import UserSession
from .bsky import ATProtoKit
from .chat import ATProtoBlueskyChat

__all__ = [
    # Request service
    "APIClientService",
    "XRPCClient",

    # Session
    "UserSession",

    # Endpoint groups
    "ATProtoKit",
    "ATProtoBlueskyChat",
]
