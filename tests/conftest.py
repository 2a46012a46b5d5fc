"""Pytest configuration and fixtures for firebase_rtdb.

Location tests run over tests.fakes.InMemoryTransport; HTTP tests use an
httpx.Client with httpx.MockTransport, optionally serving the same tree.
"""

from collections.abc import Callable, Iterator

import httpx
import pytest

from firebase_rtdb.core.config import get_settings
from firebase_rtdb.infrastructure.firebase.http_transport import SUFFIX, HTTPTransport
from firebase_rtdb.infrastructure.firebase.location import Location
from tests.fakes import BASE_URL, InMemoryTransport


@pytest.fixture
def fake_transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def root(fake_transport: InMemoryTransport) -> Location:
    """Root Location at BASE_URL with a default token, over the in-memory store."""
    return Location(BASE_URL, auth="default-token", transport=fake_transport)


@pytest.fixture
def http_transport_factory() -> Iterator[
    Callable[[Callable[[httpx.Request], httpx.Response]], HTTPTransport]
]:
    """Build an HTTPTransport whose httpx.Client answers with ``handler``."""
    clients: list[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HTTPTransport:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return HTTPTransport(http_client=client)

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def store_handler(fake_transport: InMemoryTransport) -> Callable[[httpx.Request], httpx.Response]:
    """httpx handler serving the in-memory tree over the REST URL scheme."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        assert path.endswith("/" + SUFFIX)
        path = path[: -len(SUFFIX)]
        content = fake_transport.handle(request.method, path, request.content or None)
        return httpx.Response(200, content=content)

    return handler


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Clear cached settings before and after a test that sets env vars.

    Runs in an empty directory so no stray .env file is read.
    """
    for name in ("FIREBASE_DATABASE_URL", "FIREBASE_AUTH_TOKEN", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
