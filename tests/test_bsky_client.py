"""Unit tests for app.bsky / com.atproto endpoints."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import httpx
import pytest
from respx import MockRouter

from atproto_kit.core.exceptions import (
    EmptyServiceEndpointError,
    InvalidRequestURLError,
    MissingActiveSessionError,
)
from atproto_kit.infrastructure.api import APIClientService, ATProtoKit, UserSession

from .helpers import ACCESS_TOKEN, SERVICE_ENDPOINT, profile

FOLLOWERS_URL = f"{SERVICE_ENDPOINT}/xrpc/app.bsky.graph.getFollowers"
UPDATE_EMAIL_URL = f"{SERVICE_ENDPOINT}/xrpc/com.atproto.server.updateEmail"

FOLLOWERS_BODY = {
    "subject": profile("did:plc:abc", "abc.test"),
    "followers": [profile("did:plc:f1", "f1.test"), profile("did:plc:f2", "f2.test")],
    "cursor": "next-page",
}


@pytest.fixture
def kit(session: UserSession, api_client: APIClientService) -> ATProtoKit:
    """ATProtoKit bound to an active session."""
    return ATProtoKit(session=session, api_client=api_client)


@pytest.mark.asyncio
async def test_get_followers_clamps_limit_in_url(
    kit: ATProtoKit, respx_mock: MockRouter
) -> None:
    """Test the constructed URL for an over-limit request."""
    route = respx_mock.get(FOLLOWERS_URL).mock(
        return_value=httpx.Response(200, json=FOLLOWERS_BODY)
    )

    result = await kit.get_followers("did:plc:abc", limit=500)

    request = route.calls.last.request
    assert str(request.url) == f"{FOLLOWERS_URL}?actor=did:plc:abc&limit=100"
    assert request.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"
    assert request.headers["Accept"] == "application/json"
    assert "atproto-proxy" not in request.headers
    assert [f.did for f in result.followers] == ["did:plc:f1", "did:plc:f2"]
    assert result.cursor == "next-page"


@pytest.mark.asyncio
@pytest.mark.parametrize(("limit", "expected"), [(0, "1"), (-5, "1"), (42, "42")])
async def test_get_followers_limit_range(
    kit: ATProtoKit, respx_mock: MockRouter, limit: int, expected: str
) -> None:
    """Test limits below range are raised and in-range ones kept."""
    route = respx_mock.get(FOLLOWERS_URL).mock(
        return_value=httpx.Response(200, json=FOLLOWERS_BODY)
    )

    await kit.get_followers("did:plc:abc", limit=limit)

    assert route.calls.last.request.url.params["limit"] == expected


@pytest.mark.asyncio
async def test_get_followers_without_limit_or_cursor(
    kit: ATProtoKit, respx_mock: MockRouter
) -> None:
    """Test absent optional parameters are not sent."""
    route = respx_mock.get(FOLLOWERS_URL).mock(
        return_value=httpx.Response(200, json=FOLLOWERS_BODY)
    )

    await kit.get_followers("did:plc:abc")

    params = route.calls.last.request.url.params
    assert list(params.keys()) == ["actor"]


@pytest.mark.asyncio
async def test_get_followers_passes_cursor_verbatim(
    kit: ATProtoKit, respx_mock: MockRouter
) -> None:
    """Test the cursor is passed back unchanged, after the limit."""
    route = respx_mock.get(FOLLOWERS_URL).mock(
        return_value=httpx.Response(200, json=FOLLOWERS_BODY)
    )

    await kit.get_followers("abc.test", limit=25, cursor="3fzsr2ihdkc2y::bafyrei")

    params = route.calls.last.request.url.params
    assert list(params.multi_items()) == [
        ("actor", "abc.test"),
        ("limit", "25"),
        ("cursor", "3fzsr2ihdkc2y::bafyrei"),
    ]


@pytest.mark.asyncio
async def test_get_followers_public_pds_url(
    api_client: APIClientService, respx_mock: MockRouter
) -> None:
    """Test an explicit PDS URL makes an unauthenticated call without a session."""
    route = respx_mock.get("https://api.bsky.app/xrpc/app.bsky.graph.getFollowers").mock(
        return_value=httpx.Response(200, json=FOLLOWERS_BODY)
    )
    kit = ATProtoKit(api_client=api_client)

    result = await kit.get_followers("did:plc:abc", pds_url="https://api.bsky.app/")

    assert "Authorization" not in route.calls.last.request.headers
    assert result.subject.did == "did:plc:abc"


@pytest.mark.asyncio
async def test_get_followers_empty_pds_url(api_client: APIClientService) -> None:
    """Test an empty PDS URL fails before dispatch."""
    kit = ATProtoKit(api_client=api_client)

    with pytest.raises(EmptyServiceEndpointError):
        await kit.get_followers("did:plc:abc", pds_url="")


@pytest.mark.asyncio
async def test_get_followers_requires_session_without_pds_url() -> None:
    """Test a session without a token fails before a request is built."""
    api_client = MagicMock(spec=APIClientService)
    kit = ATProtoKit(
        session=UserSession(service_endpoint=SERVICE_ENDPOINT), api_client=api_client
    )

    with pytest.raises(MissingActiveSessionError):
        await kit.get_followers("did:plc:abc")

    api_client.create_request.assert_not_called()
    api_client.send_request.assert_not_called()


@pytest.mark.asyncio
async def test_get_followers_empty_session_endpoint() -> None:
    """Test an empty session endpoint is an invalid-URL failure."""
    api_client = MagicMock(spec=APIClientService)
    kit = ATProtoKit(
        session=UserSession(access_token=ACCESS_TOKEN, service_endpoint=""),
        api_client=api_client,
    )

    with pytest.raises(InvalidRequestURLError):
        await kit.get_followers("did:plc:abc")

    api_client.create_request.assert_not_called()


@pytest.mark.asyncio
async def test_get_followers_malformed_endpoint() -> None:
    """Test an endpoint that is not an absolute http(s) URL is rejected."""
    api_client = MagicMock(spec=APIClientService)
    kit = ATProtoKit(
        session=UserSession(access_token=ACCESS_TOKEN, service_endpoint="example.com"),
        api_client=api_client,
    )

    with pytest.raises(InvalidRequestURLError) as exc_info:
        await kit.get_followers("did:plc:abc")

    assert exc_info.value.url == "example.com/xrpc/app.bsky.graph.getFollowers"
    api_client.create_request.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "endpoint",
    [
        "https://exa mple.com",
        "https://example.com:99999",
        "https://",
        "ftp://example.com",
    ],
)
async def test_get_followers_invalid_host_or_port(endpoint: str) -> None:
    """Test bad hosts and out-of-range ports fail before a request is built."""
    api_client = MagicMock(spec=APIClientService)
    kit = ATProtoKit(
        session=UserSession(access_token=ACCESS_TOKEN, service_endpoint=endpoint),
        api_client=api_client,
    )

    with pytest.raises(InvalidRequestURLError):
        await kit.get_followers("did:plc:abc")

    api_client.create_request.assert_not_called()
    api_client.send_request.assert_not_called()


@pytest.mark.asyncio
async def test_update_email_posts_body(kit: ATProtoKit, respx_mock: MockRouter) -> None:
    """Test the email update is posted as JSON without an unset token."""
    route = respx_mock.post(UPDATE_EMAIL_URL).mock(return_value=httpx.Response(200))

    result = await kit.update_email("alice@example.com")

    request = route.calls.last.request
    assert result is None
    assert request.method == "POST"
    assert request.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"email": "alice@example.com"}


@pytest.mark.asyncio
async def test_update_email_with_token(kit: ATProtoKit, respx_mock: MockRouter) -> None:
    """Test the confirmation token is included when given."""
    route = respx_mock.post(UPDATE_EMAIL_URL).mock(return_value=httpx.Response(200))

    await kit.update_email("alice@example.com", token="ABCDE-12345")

    assert json.loads(route.calls.last.request.content) == {
        "email": "alice@example.com",
        "token": "ABCDE-12345",
    }


@pytest.mark.asyncio
async def test_update_email_requires_session(api_client: APIClientService) -> None:
    """Test procedures fail fast without a session."""
    kit = ATProtoKit(api_client=api_client)

    with pytest.raises(MissingActiveSessionError):
        await kit.update_email("alice@example.com")
