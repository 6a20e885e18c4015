"""Abstract feed loader interface using Protocol."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from feedloader.exceptions import FeedLoaderError
from feedloader.models.feed import FeedItem


@dataclass(frozen=True)
class LoadFeedSuccess:
    """Feed loaded; items keep the order of the remote payload."""

    items: list[FeedItem]


@dataclass(frozen=True)
class LoadFeedFailure:
    """Feed could not be loaded.

    ``error`` is a ConnectivityError or an InvalidDataError.
    """

    error: FeedLoaderError


LoadFeedResult: TypeAlias = LoadFeedSuccess | LoadFeedFailure


class FeedLoader(Protocol):
    """Feed loader abstraction protocol."""

    def load(self, completion: Callable[[LoadFeedResult], None]) -> None:
        """Start loading the feed.

        Args:
            completion: Callback receiving the single terminal result.
        """
        ...


async def load_feed(loader: FeedLoader) -> list[FeedItem]:
    """Load a feed and wait for its result.

    Args:
        loader: Loader to run once.

    Returns:
        Loaded feed items.

    Raises:
        ConnectivityError: When the server could not be reached.
        InvalidDataError: When the response was unusable.
    """
    future: asyncio.Future[LoadFeedResult] = asyncio.get_running_loop().create_future()

    def complete(result: LoadFeedResult) -> None:
        if not future.done():
            future.set_result(result)

    loader.load(complete)
    result = await future

    if isinstance(result, LoadFeedFailure):
        raise result.error
    return result.items
