"""Feed loader backed by a remote HTTP endpoint."""

import weakref
from collections.abc import Callable

import structlog

from feedloader.exceptions import ConnectivityError, InvalidDataError
from feedloader.http.base import HTTPClient, HTTPClientFailure, HTTPClientResult
from feedloader.loaders.base import LoadFeedFailure, LoadFeedResult, LoadFeedSuccess
from feedloader.parsers.feed_items_mapper import map_feed_items

logger = structlog.get_logger()

OK_STATUS = 200


def _map_result(result: HTTPClientResult) -> LoadFeedResult:
    if isinstance(result, HTTPClientFailure):
        error = ConnectivityError(str(result.error) or "Connectivity failure")
        error.__cause__ = result.error
        return LoadFeedFailure(error)

    if result.response.status_code != OK_STATUS:
        return LoadFeedFailure(InvalidDataError(f"Unexpected status {result.response.status_code}"))

    try:
        return LoadFeedSuccess(map_feed_items(result.data))
    except InvalidDataError as e:
        return LoadFeedFailure(e)


class RemoteFeedLoader:
    """Loads feed items from a single URL through an HTTPClient.

    Every ``load`` issues one GET and reports exactly one result, unless
    the loader has been released by the time the response arrives.
    """

    def __init__(self, url: str, client: HTTPClient):
        """Initialize the loader. No request is made until ``load``.

        Args:
            url: Feed endpoint.
            client: Transport used for requests.
        """
        self._url = url
        self._client = client

    @property
    def url(self) -> str:
        """Feed endpoint."""
        return self._url

    def load(self, completion: Callable[[LoadFeedResult], None]) -> None:
        """Request the feed and report the result through ``completion``."""
        # The handler must not keep the loader alive
        loader_ref = weakref.ref(self)
        url = self._url

        def handle(result: HTTPClientResult) -> None:
            if loader_ref() is None:
                logger.debug("Loader released, dropping result", url=url)
                return

            load_result = _map_result(result)
            if isinstance(load_result, LoadFeedFailure):
                logger.warning(
                    "Feed load failed",
                    url=url,
                    error_type=type(load_result.error).__name__,
                    error=str(load_result.error),
                )
            else:
                logger.info("Feed loaded", url=url, count=len(load_result.items))
            completion(load_result)

        logger.debug("Loading feed", url=url)
        self._client.get(url, handle)
