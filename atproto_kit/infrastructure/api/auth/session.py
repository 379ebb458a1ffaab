"""
User Session

Read-only snapshot of an authenticated session.

Sessions are created and refreshed outside this library (for example from a
com.atproto.server.createSession response) and handed to each client.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserSession(BaseModel):
    """Session snapshot implementing SessionProtocol."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True
    )

    handle: Optional[str] = None
    did: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    service_endpoint: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Check if the session can authenticate requests."""
        return self.access_token is not None

    def __repr__(self) -> str:
        """String representation without tokens."""
        return (
            f"<UserSession(handle={self.handle}, did={self.did}, "
            f"service_endpoint={self.service_endpoint}, active={self.is_active})>"
        )
