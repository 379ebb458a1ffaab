"""
Bluesky API Client

Endpoints under the app.bsky and com.atproto namespaces.
"""

import logging
from typing import Optional

from ....domain.graph.models import GetFollowersOutput
from ....domain.server.models import ServerUpdateEmail
from ....utils.query_utils import clamp_limit
from ..xrpc_client import XRPCClient

logger = logging.getLogger(__name__)


class ATProtoKit(XRPCClient):
    """Client for app.bsky.* and com.atproto.* lexicons."""

    # Graph endpoints
    async def get_followers(
        self,
        actor: str,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        pds_url: Optional[str] = None
    ) -> GetFollowersOutput:
        """
        Enumerate accounts which follow a specified account (actor).

        Based on the app.bsky.graph.getFollowers lexicon.

        Args:
            actor: DID or handle of the account whose followers are listed
            limit: Page size, clamped to 1-100; omitted if None
            cursor: Cursor from a previous page; omitted if None
            pds_url: Public AppView/PDS URL. When given, the call is made
                without credentials; otherwise the session is used.

        Returns:
            The followers, the subject account, and an optional cursor

        Raises:
            MissingActiveSessionError: No pds_url and no active session
            EmptyServiceEndpointError: pds_url (or session endpoint) is empty
        """
        params = [("actor", actor)]

        final_limit = clamp_limit(limit)
        if final_limit is not None:
            params.append(("limit", str(final_limit)))

        if cursor is not None:
            params.append(("cursor", cursor))

        return await self._query(
            "app.bsky.graph.getFollowers",
            params=params,
            output=GetFollowersOutput,
            authenticated=pds_url is None,
            service_endpoint=pds_url
        )

    # Server endpoints
    async def update_email(
        self,
        email: str,
        token: Optional[str] = None
    ) -> None:
        """
        Update the account's email.

        Based on the com.atproto.server.updateEmail lexicon.

        Args:
            email: New email address
            token: Token from com.atproto.server.requestEmailUpdate; required
                by the server once the current email is confirmed
        """
        body = ServerUpdateEmail(email=email, token=token)
        await self._procedure("com.atproto.server.updateEmail", body=body)
        logger.info("Account email updated")
