"""HTTP price feed backed by httpx.

One GET per call, no retry or backoff: a failed fetch is surfaced to the
session, which treats it as terminal.
"""

import httpx
from pydantic import ValidationError

from swapdesk.config import FeedSettings
from swapdesk.exceptions import FeedUnavailable
from swapdesk.feed.client import PriceFeed
from swapdesk.feed.models import RAW_PRICE_LIST
from swapdesk.logging import get_logger
from swapdesk.models import TokenQuote

logger = get_logger(__name__)


class HttpPriceFeed(PriceFeed):
    """Fetches token prices from a fixed JSON endpoint.

    Args:
        settings: Endpoint URL and request timeout.
    """

    def __init__(self, settings: FeedSettings) -> None:
        self._url = settings.url
        self._client = httpx.AsyncClient(
            timeout=settings.timeout_seconds,
            headers={"Accept": "application/json"},
        )

    async def fetch(self) -> list[TokenQuote]:
        try:
            response = await self._client.get(self._url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise FeedUnavailable(
                f"Price feed returned HTTP {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise FeedUnavailable(
                f"Price feed unreachable: {type(e).__name__}"
            ) from e
        except ValueError as e:
            raise FeedUnavailable("Price feed returned invalid JSON") from e

        try:
            entries = RAW_PRICE_LIST.validate_python(payload)
        except ValidationError as e:
            raise FeedUnavailable(
                f"Price feed payload rejected ({e.error_count()} errors)"
            ) from e

        logger.info("price_feed_fetched", url=self._url, count=len(entries))
        return [entry.to_quote() for entry in entries]

    async def close(self) -> None:
        await self._client.aclose()
