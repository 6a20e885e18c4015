"""Parsers package."""

from feedloader.parsers.feed_items_mapper import (
    RemoteFeedItem,
    RemoteFeedPayload,
    map_feed_items,
)

__all__ = [
    "RemoteFeedItem",
    "RemoteFeedPayload",
    "map_feed_items",
]
