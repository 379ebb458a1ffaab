"""
XRPC Client

Shared request flow for every endpoint group:
check the session, build the URL, build the request, send, decode.
"""

import logging
import re
from typing import Optional, Sequence, Tuple, Type, TypeVar, Union, Any

import httpx
from pydantic import BaseModel

from ...core.config import Settings
from ...core.exceptions import (
    MissingActiveSessionError,
    InvalidRequestURLError,
    EmptyServiceEndpointError,
)
from ...core.protocols import APIClientProtocol, SessionProtocol
from .base_client import APIClientService

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

QueryItems = Sequence[Tuple[str, str]]

# Registered names, IPv4 and bracket-less IPv6 as httpx reports them
HOST_PATTERN = re.compile(r"^[A-Za-z0-9._:-]+$")
MAX_PORT = 65535


class XRPCClient:
    """Base class for XRPC endpoint groups."""

    def __init__(
        self,
        session: Optional[SessionProtocol] = None,
        api_client: Optional[APIClientProtocol] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize XRPC client.

        Args:
            session: Active session; required for authenticated calls
            api_client: Request builder/sender; an APIClientService is created if omitted
            settings: Settings for the default APIClientService
        """
        self.session = session
        self.api_client = api_client or APIClientService(settings=settings)

    async def __aenter__(self):
        """Enter async context."""
        if isinstance(self.api_client, APIClientService):
            await self.api_client.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        if isinstance(self.api_client, APIClientService):
            await self.api_client.close()

    def _require_access_token(self) -> str:
        """Get the session's access token or fail before any I/O."""
        if self.session is None or not self.session.is_active:
            raise MissingActiveSessionError()
        return self.session.access_token

    def _resolve_service_endpoint(self, explicit: Optional[str] = None) -> str:
        """Pick the explicit endpoint, falling back to the session's."""
        endpoint = explicit
        if endpoint is None and self.session is not None:
            endpoint = self.session.service_endpoint

        if endpoint is None:
            raise InvalidRequestURLError("No service endpoint is available.")
        if endpoint == "":
            raise EmptyServiceEndpointError()
        return endpoint

    @staticmethod
    def _build_request_url(service_endpoint: str, nsid: str) -> httpx.URL:
        """
        Build `<service endpoint>/xrpc/<nsid>`.

        Raises:
            InvalidRequestURLError: The result is not an absolute http(s) URL
                with a valid host and port
        """
        raw_url = f"{service_endpoint.rstrip('/')}/xrpc/{nsid}"
        try:
            url = httpx.URL(raw_url)
        except httpx.InvalidURL as e:
            raise InvalidRequestURLError(url=raw_url, original_exception=e) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidRequestURLError(url=raw_url)

        host = url.raw_host.decode("ascii", errors="replace")
        if not HOST_PATTERN.match(host):
            raise InvalidRequestURLError(f"Invalid host: {url.host!r}", url=raw_url)

        if url.port is not None and not 0 <= url.port <= MAX_PORT:
            raise InvalidRequestURLError(f"Invalid port: {url.port}", url=raw_url)
        return url

    def _prepare(
        self,
        nsid: str,
        authenticated: bool,
        service_endpoint: Optional[str]
    ) -> Tuple[httpx.URL, Optional[str]]:
        """Run every pre-send check and return the URL and auth header."""
        authorization = None
        if authenticated:
            authorization = f"Bearer {self._require_access_token()}"

        endpoint = self._resolve_service_endpoint(service_endpoint)
        return self._build_request_url(endpoint, nsid), authorization

    async def _query(
        self,
        nsid: str,
        params: QueryItems = (),
        output: Optional[Type[T]] = None,
        accept: str = "application/json",
        authenticated: bool = True,
        service_endpoint: Optional[str] = None,
        chat: bool = False
    ) -> Union[T, bytes]:
        """
        Call an XRPC query (GET).

        Args:
            nsid: Lexicon name, e.g. "app.bsky.graph.getFollowers"
            params: Ordered query items
            output: Output model, or None for raw bytes
            accept: Accept header value
            authenticated: Attach the session's bearer token
            service_endpoint: Base URL overriding the session's endpoint
            chat: Route through the chat service proxy

        Returns:
            Decoded output or raw bytes
        """
        url, authorization = self._prepare(nsid, authenticated, service_endpoint)
        url = self.api_client.set_query_items(url, params)

        request = self.api_client.create_request(
            url,
            method="GET",
            accept_value=accept,
            content_type_value=None,
            authorization_value=authorization,
            is_related_to_bsky_chat=chat
        )
        logger.debug(f"Query {nsid}")

        if output is None:
            return await self.api_client.send_request(request)
        return await self.api_client.send_request(request, decode_to=output)

    async def _procedure(
        self,
        nsid: str,
        body: Optional[Any] = None,
        output: Optional[Type[T]] = None,
        authenticated: bool = True,
        service_endpoint: Optional[str] = None,
        chat: bool = False
    ) -> Union[T, bytes]:
        """
        Call an XRPC procedure (POST with a JSON body).

        Args:
            nsid: Lexicon name, e.g. "com.atproto.server.updateEmail"
            body: Input model or mapping
            output: Output model, or None for raw bytes
            authenticated: Attach the session's bearer token
            service_endpoint: Base URL overriding the session's endpoint
            chat: Route through the chat service proxy

        Returns:
            Decoded output or raw bytes
        """
        url, authorization = self._prepare(nsid, authenticated, service_endpoint)

        request = self.api_client.create_request(
            url,
            method="POST",
            accept_value="application/json",
            content_type_value="application/json" if body is not None else None,
            authorization_value=authorization,
            is_related_to_bsky_chat=chat,
            body=body
        )
        logger.debug(f"Procedure {nsid}")

        if output is None:
            return await self.api_client.send_request(request)
        return await self.api_client.send_request(request, decode_to=output)
