"""
Update Email Model

Input of com.atproto.server.updateEmail.
"""

from typing import Optional

from ....core.models import LexiconModel


class ServerUpdateEmail(LexiconModel):
    """Request body for updating an account's email."""

    email: str
    # Required (from com.atproto.server.requestEmailUpdate) once the email is confirmed
    token: Optional[str] = None
