"""
API Client Protocol Definition

Defines the request-builder/sender capability used by endpoint methods.
"""

from typing import Protocol, Optional, Sequence, Tuple, Type, TypeVar, Union, Any, overload

import httpx
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class APIClientProtocol(Protocol):
    """Protocol for XRPC request builders/senders."""

    def set_query_items(
        self,
        url: Union[httpx.URL, str],
        items: Sequence[Tuple[str, str]]
    ) -> httpx.URL:
        """
        Append ordered query items to a URL.

        Args:
            url: Request URL
            items: (name, value) pairs; repeated names are kept in order

        Returns:
            URL with the query string set
        """
        ...

    def create_request(
        self,
        url: Union[httpx.URL, str],
        method: str = "GET",
        accept_value: Optional[str] = "application/json",
        content_type_value: Optional[str] = None,
        authorization_value: Optional[str] = None,
        is_related_to_bsky_chat: bool = False,
        body: Optional[Any] = None
    ) -> httpx.Request:
        """
        Build an HTTP request.

        Args:
            url: Request URL
            method: HTTP method
            accept_value: Accept header value
            content_type_value: Content-Type header value
            authorization_value: Authorization header value
            is_related_to_bsky_chat: Route the request through the chat proxy
            body: JSON body (model or mapping)

        Returns:
            Request ready to send
        """
        ...

    @overload
    async def send_request(self, request: httpx.Request) -> bytes: ...

    @overload
    async def send_request(self, request: httpx.Request, decode_to: Type[T]) -> T: ...

    async def send_request(
        self,
        request: httpx.Request,
        decode_to: Optional[Type[T]] = None
    ) -> Union[T, bytes]:
        """
        Send a request and decode the response.

        Args:
            request: Request built by create_request
            decode_to: Output model, or None for raw bytes

        Returns:
            Decoded model or raw response body
        """
        ...
