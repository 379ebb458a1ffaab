"""
Follower Models

Output of app.bsky.graph.getFollowers.
"""

from typing import Optional, List

from pydantic import Field

from ....core.models import LexiconModel
from ...actor.models import ProfileView


class GetFollowersOutput(LexiconModel):
    """Accounts which follow a specified account (actor)."""

    subject: ProfileView
    cursor: Optional[str] = None  # Opaque; pass back verbatim for the next page
    followers: List[ProfileView] = Field(default_factory=list)
