"""Price feed layer -- raw token quotes from the JSON price endpoint."""

from swapdesk.feed.client import PriceFeed
from swapdesk.feed.http_feed import HttpPriceFeed

__all__ = ["HttpPriceFeed", "PriceFeed"]
