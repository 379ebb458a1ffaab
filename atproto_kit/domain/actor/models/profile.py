"""
Actor Profile Models

Profile views returned by app.bsky.actor.defs.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any

from ....core.models import LexiconModel


class ProfileView(LexiconModel):
    """
    A view of a user account's profile.

    Based on the app.bsky.actor.defs#profileView lexicon.
    """

    did: str
    handle: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    avatar: Optional[str] = None
    associated: Optional[Dict[str, Any]] = None
    indexed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    viewer: Optional[Dict[str, Any]] = None
    labels: Optional[List[Dict[str, Any]]] = None
