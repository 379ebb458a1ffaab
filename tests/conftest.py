"""Shared fixtures for atproto_kit tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest

from atproto_kit.core.config import ConfigLoader, Settings
from atproto_kit.infrastructure.api import APIClientService, UserSession

from .helpers import ACCESS_TOKEN, SERVICE_ENDPOINT


@pytest.fixture(autouse=True)
def reset_config_loader() -> Iterator[None]:
    """Keep loaded settings from leaking between tests."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only."""
    return Settings(_env_file=None)


@pytest.fixture
def session() -> UserSession:
    """An active session on the example service."""
    return UserSession(
        handle="alice.test",
        did="did:plc:alice",
        access_token=ACCESS_TOKEN,
        refresh_token="refresh-jwt",
        service_endpoint=SERVICE_ENDPOINT,
    )


@pytest.fixture
async def api_client(settings: Settings) -> AsyncIterator[APIClientService]:
    """API client service over a real httpx client for respx mocking."""
    async with httpx.AsyncClient() as http_client:
        yield APIClientService(settings=settings, http_client=http_client)
