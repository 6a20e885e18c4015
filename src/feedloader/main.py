"""Command line entry point.

Loads the configured feed once and prints its items.
"""

import argparse
import asyncio
import json
import sys

import httpx

from feedloader.config.settings import settings
from feedloader.exceptions import FeedLoaderError
from feedloader.http.httpx_client import HttpxHTTPClient
from feedloader.loaders.base import load_feed
from feedloader.loaders.remote import RemoteFeedLoader
from feedloader.models.feed import FeedItem
from feedloader.utils.logger import configure_logging, get_logger


def format_item(item: FeedItem) -> str:
    """Render one item as a single tab-separated line."""
    return "\t".join(
        [
            str(item.id),
            str(item.image_url),
            item.description or "-",
            item.location or "-",
        ]
    )


async def run_once(
    url: str,
    timeout: float,
    as_json: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Load the feed at ``url`` and print it to stdout.

    Returns:
        Process exit code.
    """
    logger = get_logger("cli").bind(app=settings.app_name)

    async with HttpxHTTPClient(
        timeout=timeout,
        user_agent=settings.http_user_agent,
        follow_redirects=settings.http_follow_redirects,
        transport=transport,
    ) as client:
        loader = RemoteFeedLoader(url=url, client=client)
        try:
            items = await load_feed(loader)
        except FeedLoaderError as e:
            logger.error("Could not load feed", url=url, error_type=type(e).__name__, error=str(e))
            return 1
        finally:
            await client.wait_pending()

    if as_json:
        print(json.dumps([item.model_dump(mode="json") for item in items], indent=2))
    else:
        for item in items:
            print(format_item(item))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the loader."""
    parser = argparse.ArgumentParser(description="Load a remote feed and print its items")
    parser.add_argument(
        "--url",
        default=settings.feed_url,
        help="Feed URL (default: FEEDLOADER_FEED_URL)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.http_timeout,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print items as a JSON array",
    )
    args = parser.parse_args(argv)

    configure_logging(log_level=settings.log_level, json_format=settings.log_json)

    return asyncio.run(run_once(args.url, args.timeout, as_json=args.json))


if __name__ == "__main__":
    sys.exit(main())
