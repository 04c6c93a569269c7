from __future__ import annotations
from typing import Callable, List

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def call_count(self) -> int:
        return len(self.requests)


class TrackedStream(httpx.SyncByteStream):
    """Response body that can fail mid-read and records whether it was closed."""

    def __init__(self, chunks: List[bytes], fail: bool = False) -> None:
        self._chunks = chunks
        self._fail = fail
        self.closed = False

    def __iter__(self):
        for chunk in self._chunks:
            yield chunk
        if self._fail:
            raise httpx.ReadError("connection reset while reading body")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_client():
    clients: List[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield factory
    for client in clients:
        client.close()
