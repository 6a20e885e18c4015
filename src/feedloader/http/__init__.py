"""HTTP transport package."""

from feedloader.http.base import (
    HTTPClient,
    HTTPClientFailure,
    HTTPClientResult,
    HTTPClientSuccess,
    HTTPResponse,
)
from feedloader.http.httpx_client import HttpxHTTPClient, map_transport_outcome

__all__ = [
    "HTTPClient",
    "HTTPClientResult",
    "HTTPClientSuccess",
    "HTTPClientFailure",
    "HTTPResponse",
    "HttpxHTTPClient",
    "map_transport_outcome",
]
