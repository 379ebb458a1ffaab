"""
API Client Service

Builds, sends and decodes XRPC requests over httpx.
"""

import logging
from typing import Optional, Dict, Any, Sequence, Tuple, Type, TypeVar, Union, Mapping
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ...core.config import Settings, ConfigLoader
from ...core.exceptions import ResponseDecodeError, error_for_status
from ...core.models import LexiconModel
from ...core.protocols import APIClientProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

ATPROTO_PROXY_HEADER = "atproto-proxy"


class APIClientService(APIClientProtocol):
    """Request builder/sender shared by every endpoint group."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize API client service.

        Args:
            settings: Library settings; loaded from the environment if omitted
            http_client: Existing httpx client to send through (not closed by us)
        """
        self.settings = settings or ConfigLoader.load_config()
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        """Enter async context."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        if not self._client:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.timeout)
            )
            self._owns_client = True
            logger.info("API client service initialized")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.info("API client service closed")

    @staticmethod
    def set_query_items(
        url: Union[httpx.URL, str],
        items: Sequence[Tuple[str, str]]
    ) -> httpx.URL:
        """
        Append ordered query items to a URL.

        Repeated names (e.g. `members=a&members=b`) are kept in input order.
        Values are percent-encoded except for ':', so DIDs stay readable.

        Args:
            url: Request URL
            items: (name, value) pairs

        Returns:
            URL with the query string set
        """
        url = httpx.URL(url)
        if not items:
            return url

        query = "&".join(
            f"{quote(str(name), safe='')}={quote(str(value), safe=':')}"
            for name, value in items
        )
        existing = url.query.decode("ascii")
        if existing:
            query = f"{existing}&{query}"

        return url.copy_with(query=query.encode("ascii"))

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
            is_related_to_bsky_chat: Route the request through the chat service proxy
            body: JSON body (lexicon model, pydantic model or mapping)

        Returns:
            Request ready to send
        """
        headers: Dict[str, str] = {"User-Agent": self.settings.user_agent}
        if accept_value:
            headers["Accept"] = accept_value
        if content_type_value:
            headers["Content-Type"] = content_type_value
        if authorization_value:
            headers["Authorization"] = authorization_value
        if is_related_to_bsky_chat:
            headers[ATPROTO_PROXY_HEADER] = self.settings.chat_proxy_did

        return httpx.Request(
            method=method,
            url=url,
            headers=headers,
            json=self._encode_body(body) if body is not None else None
        )

    @staticmethod
    def _encode_body(body: Any) -> Any:
        """Convert a request body into JSON-ready data."""
        if isinstance(body, LexiconModel):
            return body.to_payload()
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", by_alias=True, exclude_none=True)
        if isinstance(body, Mapping):
            return dict(body)
        return body

    async def send_request(
        self,
        request: httpx.Request,
        decode_to: Optional[Type[T]] = None
    ) -> Union[T, bytes]:
        """
        Send a request and decode the response.

        Args:
            request: Request built by create_request
            decode_to: Output model, or None to return the raw body

        Returns:
            Decoded model or raw response bytes

        Raises:
            APIError: Non-success status (subclass chosen by status code)
            ResponseDecodeError: Body does not match `decode_to`
            httpx.TransportError: Network failure
        """
        if not self._client:
            await self.initialize()

        logger.debug(f"{request.method} {request.url}")

        response = await self._client.send(request)
        self._raise_for_status(response)

        if decode_to is None:
            return response.content

        try:
            return decode_to.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                f"Failed to decode {request.url.path} as {decode_to.__name__}: "
                f"{e.error_count()} error(s)"
            )
            raise ResponseDecodeError(
                f"Response could not be decoded as {decode_to.__name__}",
                model=decode_to.__name__,
                original_exception=e
            ) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """Raise the matching APIError for a non-success response."""
        if response.is_success:
            return

        error_name: Optional[str] = None
        message = response.reason_phrase or f"HTTP {response.status_code}"

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            error_name = payload.get("error")
            message = payload.get("message") or error_name or message

        endpoint = response.request.url.path
        logger.warning(
            f"XRPC call to {endpoint} failed with {response.status_code}: "
            f"{error_name or ''} {message}".rstrip()
        )

        error_cls = error_for_status(response.status_code)
        raise error_cls(
            message,
            status_code=response.status_code,
            error=error_name,
            endpoint=endpoint,
            headers=dict(response.headers.items())
        )
