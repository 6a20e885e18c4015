"""HTTPClient implementation over httpx."""

import asyncio
from collections.abc import Callable

import httpx
import structlog

from feedloader.exceptions import ConnectivityError, UnexpectedRepresentationError
from feedloader.http.base import (
    HTTPClientFailure,
    HTTPClientResult,
    HTTPClientSuccess,
    HTTPResponse,
)
from feedloader.utils.http_client import create_http_client

logger = structlog.get_logger()


def map_transport_outcome(
    data: bytes | None,
    response: object | None,
    error: BaseException | None,
) -> HTTPClientResult:
    """Classify a raw transport outcome into an HTTPClientResult.

    An error wins over anything else. A missing body on an HTTP response
    is read as an empty body.

    Args:
        data: Response body, if any.
        response: Response object, if any. Only ``httpx.Response`` counts
            as an HTTP response.
        error: Exception raised while sending, if any.

    Returns:
        Exactly one of HTTPClientSuccess or HTTPClientFailure.
    """
    if error is not None:
        failure = ConnectivityError(f"Request failed: {error}")
        failure.__cause__ = error
        return HTTPClientFailure(failure)

    if not isinstance(response, httpx.Response):
        return HTTPClientFailure(UnexpectedRepresentationError())

    return HTTPClientSuccess(
        data=data if data is not None else b"",
        response=HTTPResponse(
            status_code=response.status_code,
            url=str(response.url),
            headers=dict(response.headers),
        ),
    )


class HttpxHTTPClient:
    """HTTPClient backed by an ``httpx.AsyncClient``.

    Each ``get`` runs as its own task on the running event loop and its
    completion is invoked from that task.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30,
        user_agent: str = "feedloader/1.0",
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the adapter.

        Args:
            client: Client to send requests with. When omitted one is created
                and closed by ``aclose``.
            timeout: Request timeout in seconds for a created client.
            user_agent: User-Agent header for a created client.
            follow_redirects: Whether a created client follows redirects.
            transport: Transport for a created client. Cannot be combined
                with ``client``; configure the injected client instead.

        Raises:
            ValueError: When both ``client`` and ``transport`` are given.
        """
        if client is not None and transport is not None:
            raise ValueError("Pass either client or transport, not both")

        self._owns_client = client is None
        if client is None:
            client = create_http_client(
                timeout=timeout,
                user_agent=user_agent,
                follow_redirects=follow_redirects,
                transport=transport,
            )
        self._client = client
        self._pending: set[asyncio.Task] = set()

    def get(self, url: str, completion: Callable[[HTTPClientResult], None]) -> None:
        """Schedule a GET request for ``url``.

        Returns immediately. ``completion`` is invoked once the request
        finishes or fails.

        Raises:
            RuntimeError: When called without a running event loop.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._perform(url, completion))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _perform(self, url: str, completion: Callable[[HTTPClientResult], None]) -> None:
        logger.debug("Sending request", url=url)

        data: bytes | None = None
        response: httpx.Response | None = None
        error: Exception | None = None
        try:
            response = await self._client.get(url)
            data = response.content
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            error = e

        result = map_transport_outcome(data, response, error)
        if isinstance(result, HTTPClientFailure):
            logger.warning("Request failed", url=url, error=str(result.error))
        else:
            logger.debug(
                "Response received",
                url=url,
                status_code=result.response.status_code,
                size=len(result.data),
            )

        completion(result)

    async def wait_pending(self) -> None:
        """Wait until every scheduled request has delivered its completion."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def aclose(self) -> None:
        """Close the underlying client if this adapter created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
