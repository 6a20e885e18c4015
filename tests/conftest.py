"""Test configuration and fixtures."""

import gc
import json
import weakref
from uuid import UUID, uuid4

import httpx
import pytest
import structlog

from feedloader.http.base import HTTPClientFailure, HTTPClientSuccess, HTTPResponse
from feedloader.http.httpx_client import HttpxHTTPClient
from feedloader.loaders.remote import RemoteFeedLoader
from feedloader.models.feed import FeedItem


class HTTPClientSpy:
    """HTTPClient double that records requests and lets tests complete them."""

    def __init__(self):
        self.messages = []

    @property
    def requested_urls(self) -> list[str]:
        return [url for url, _ in self.messages]

    def get(self, url, completion):
        self.messages.append((url, completion))

    def complete_with_error(self, error: Exception, index: int = 0):
        self.messages[index][1](HTTPClientFailure(error))

    def complete_with_status_code(self, code: int, data: bytes, index: int = 0):
        response = HTTPResponse(status_code=code, url=self.requested_urls[index])
        self.messages[index][1](HTTPClientSuccess(data, response))


def make_item(
    id: UUID | None = None,
    description: str | None = None,
    location: str | None = None,
    image_url: str = "https://a-url.com/image.png",
) -> tuple[FeedItem, dict]:
    """Build a FeedItem and its wire JSON, omitting absent optional fields."""
    id = id or uuid4()
    item = FeedItem(id=id, description=description, location=location, image_url=image_url)
    payload = {
        "id": str(id),
        "description": description,
        "location": location,
        "image": image_url,
    }
    return item, {key: value for key, value in payload.items() if value is not None}


def make_items_json(items: list[dict]) -> bytes:
    return json.dumps({"items": items}).encode("utf-8")


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog events instead of printing them."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture
def track_for_memory_leaks():
    """Assert that every tracked instance is garbage once the test is done."""
    refs = []

    def track(instance):
        refs.append(weakref.ref(instance))

    yield track

    gc.collect()
    for ref in refs:
        assert ref() is None, "Instance should have been deallocated. Potential memory leak."


@pytest.fixture
def make_sut(track_for_memory_leaks):
    """Factory returning a RemoteFeedLoader wired to an HTTPClientSpy."""

    def factory(url: str = "https://a-url.com/feed") -> tuple[RemoteFeedLoader, HTTPClientSpy]:
        client = HTTPClientSpy()
        sut = RemoteFeedLoader(url=url, client=client)
        track_for_memory_leaks(sut)
        track_for_memory_leaks(client)
        return sut, client

    return factory


@pytest.fixture
async def make_http_client():
    """Factory for HttpxHTTPClient over httpx.MockTransport.

    Every client created by the factory is closed after the test.
    """
    clients = []

    def factory(handler) -> HttpxHTTPClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return HttpxHTTPClient(client=client)

    yield factory

    for client in clients:
        await client.aclose()


@pytest.fixture
def sample_items():
    """One item with only required fields and one fully populated."""
    return [
        make_item(image_url="https://a-url.com/first.png"),
        make_item(
            description="a description",
            location="a location",
            image_url="https://another-url.com/second.png",
        ),
    ]
