"""Abstract HTTP client interface using Protocol."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias


@dataclass(frozen=True)
class HTTPResponse:
    """Transport-agnostic description of an HTTP response."""

    status_code: int
    url: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HTTPClientSuccess:
    """The server answered; carries the raw body and the response."""

    data: bytes
    response: HTTPResponse


@dataclass(frozen=True)
class HTTPClientFailure:
    """The request failed below the HTTP semantic layer."""

    error: Exception


HTTPClientResult: TypeAlias = HTTPClientSuccess | HTTPClientFailure


class HTTPClient(Protocol):
    """HTTP transport abstraction protocol.

    Implementations invoke ``completion`` at most once per call to ``get``.
    The completion may run on any execution context, so callers must not
    assume synchronous delivery. There is no way to cancel a request.
    """

    def get(self, url: str, completion: Callable[[HTTPClientResult], None]) -> None:
        """Issue a GET request for ``url``.

        Args:
            url: Absolute URL to fetch.
            completion: Callback receiving the transport result.
        """
        ...
