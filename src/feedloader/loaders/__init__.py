"""Loaders package."""

from feedloader.loaders.base import (
    FeedLoader,
    LoadFeedFailure,
    LoadFeedResult,
    LoadFeedSuccess,
    load_feed,
)
from feedloader.loaders.remote import RemoteFeedLoader

__all__ = [
    "FeedLoader",
    "LoadFeedResult",
    "LoadFeedSuccess",
    "LoadFeedFailure",
    "RemoteFeedLoader",
    "load_feed",
]
