"""
Session Protocol Definition

Read-only view of the active session.
"""

from typing import Protocol, Optional, runtime_checkable


@runtime_checkable
class SessionProtocol(Protocol):
    """Protocol for session accessors."""

    @property
    def is_active(self) -> bool:
        """Whether the session can be used for authenticated calls."""
        ...

    @property
    def access_token(self) -> Optional[str]:
        """Bearer token for authenticated calls."""
        ...

    @property
    def service_endpoint(self) -> Optional[str]:
        """Base URL of the server handling this session's requests."""
        ...
