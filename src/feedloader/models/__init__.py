"""Models package."""

from feedloader.models.feed import FeedItem

__all__ = [
    "FeedItem",
]
