"""Shared fakes for asset uploader tests."""
from unittest.mock import AsyncMock, Mock

import pytest


class FakeStream:
    """Stand-in for an opened file stream."""

    def __init__(self, path: str):
        self.path = path
        self.closed = False

    def __aiter__(self):
        return self

    async def __anext__(self) -> bytes:
        raise StopAsyncIteration

    async def aclose(self) -> None:
        self.closed = True


class FakeClient:
    """Stand-in for HTTPAPIClient recording entry, exit and requests."""

    def __init__(self, token: str, request: AsyncMock):
        self.token = token
        self.request = request
        self.entered = False
        self.exited = False

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, *args):
        self.exited = True


class FakeClientFactory:
    def __init__(self):
        self.request = AsyncMock(return_value={})
        self.clients = []

    def __call__(self, token: str) -> FakeClient:
        client = FakeClient(token, self.request)
        self.clients.append(client)
        return client


@pytest.fixture
def client_factory():
    return FakeClientFactory()


@pytest.fixture
def filesystem():
    fs = Mock()
    fs.size = AsyncMock(return_value=1024)
    fs.open = AsyncMock(side_effect=FakeStream)
    return fs


@pytest.fixture
def reporter():
    return Mock()
