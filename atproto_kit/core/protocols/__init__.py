"""
Core Protocol Definitions

This module defines the interfaces that all implementations must follow.
"""

from .api_client_protocol import APIClientProtocol
from .session_protocol import SessionProtocol

__all__ = [
    "APIClientProtocol",
    "SessionProtocol",
]
