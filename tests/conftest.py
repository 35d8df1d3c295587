"""Shared fixtures: a recording mock of the API behind httpx.MockTransport."""

from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from gw2api import Client, Language

TEST_TOKEN = "ABCDEF12-3456-7890-ABCD-EF1234567890"


class MockApi:
    """Routes requests by path and records every request it receives."""

    def __init__(self):
        self.routes: Dict[str, Tuple[int, bytes]] = {}
        self.failures: Dict[str, List[Exception]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        path: str,
        json: Any = None,
        status: int = 200,
        content: Optional[bytes] = None
    ) -> None:
        if content is None:
            content = httpx.Response(status, json=json).content
        self.routes[path] = (status, content)

    def fail(self, path: str, *errors: Exception) -> None:
        """Raise the given transport errors, one per request, before serving the route."""
        self.failures[path] = list(errors)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        pending = self.failures.get(path)
        if pending:
            raise pending.pop(0)

        if path not in self.routes:
            return httpx.Response(404, json={"text": "not found"})
        status, content = self.routes[path]
        return httpx.Response(
            status,
            content=content,
            headers={"Content-Type": "application/json"}
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def mock_api():
    api = MockApi()
    api.add("/v2/build", {"id": 115267})
    return api


@pytest_asyncio.fixture
async def client(mock_api):
    client = (
        Client.builder()
        .access_token(TEST_TOKEN)
        .transport(mock_api.transport)
        .build()
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def anonymous_client(mock_api):
    client = Client.builder().transport(mock_api.transport).build()
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def german_client(mock_api):
    client = (
        Client.builder()
        .language(Language.DE)
        .transport(mock_api.transport)
        .build()
    )
    yield client
    await client.aclose()


@pytest.fixture
def blocking_client(mock_api):
    client = (
        Client.builder()
        .access_token(TEST_TOKEN)
        .transport(mock_api.transport)
        .build_blocking()
    )
    yield client
    client.close()
